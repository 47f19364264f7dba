"""Models package."""

from issue_translator.models.schemas import (
    HandlerResult,
    IssueCommentEvent,
    LanguagePair,
    PullRequestEvent,
    ReviewCommentEvent,
    ReviewEvent,
    TranslationMarker,
)

__all__ = [
    "HandlerResult",
    "IssueCommentEvent",
    "LanguagePair",
    "PullRequestEvent",
    "ReviewCommentEvent",
    "ReviewEvent",
    "TranslationMarker",
]
