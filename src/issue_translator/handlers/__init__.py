"""Handlers package."""

from issue_translator.handlers.comments import (
    translate_issue_comment,
    translate_review_comment,
)
from issue_translator.handlers.pull_request import translate_pull_request
from issue_translator.handlers.review import translate_review

__all__ = [
    "translate_issue_comment",
    "translate_pull_request",
    "translate_review",
    "translate_review_comment",
]
