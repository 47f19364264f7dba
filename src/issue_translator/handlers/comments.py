"""Handlers for issue comments and pull request review comments."""

import logging
from typing import Callable

from issue_translator.infrastructure.github_client import GitHubClient
from issue_translator.models.schemas import (
    HandlerResult,
    IssueCommentEvent,
    ReviewCommentEvent,
)
from issue_translator.services.annotation_formatter import AnnotationFormatter
from issue_translator.services.text_translator import TextTranslator

logger = logging.getLogger(__name__)


def _skip_reason(
    event: IssueCommentEvent, formatter: AnnotationFormatter
) -> str | None:
    if not event.handles_action:
        return f"unhandled action {event.action!r}"
    if event.from_bot:
        return "bot sender"
    if not event.body:
        return "empty body"
    if formatter.already_annotated(event.body, event.comment_id):
        return "already translated"
    return None


def _translate_comment(
    event_kind: str,
    event: IssueCommentEvent,
    translator: TextTranslator,
    formatter: AnnotationFormatter,
    update: Callable[..., dict],
) -> HandlerResult:
    reason = _skip_reason(event, formatter)
    if reason:
        logger.info("Skipping %s %d: %s", event_kind, event.comment_id, reason)
        return HandlerResult(
            event_kind=event_kind,
            target_id=event.comment_id,
            updated=False,
            skipped_reason=reason,
        )

    translated = translator.translate(event.body)
    update(
        owner=event.owner,
        repo=event.repo,
        comment_id=event.comment_id,
        body=formatter.format(event.body, translated, event.comment_id),
    )
    logger.info("Updated %s %d", event_kind, event.comment_id)

    return HandlerResult(
        event_kind=event_kind, target_id=event.comment_id, updated=True
    )


def translate_issue_comment(
    event: IssueCommentEvent,
    translator: TextTranslator,
    formatter: AnnotationFormatter,
    github_client: GitHubClient,
) -> HandlerResult:
    """Append a translation to an issue or PR conversation comment."""
    return _translate_comment(
        "issue_comment",
        event,
        translator,
        formatter,
        github_client.update_issue_comment,
    )


def translate_review_comment(
    event: ReviewCommentEvent,
    translator: TextTranslator,
    formatter: AnnotationFormatter,
    github_client: GitHubClient,
) -> HandlerResult:
    """Append a translation to a comment left on a pull request diff."""
    return _translate_comment(
        "pull_request_review_comment",
        event,
        translator,
        formatter,
        github_client.update_review_comment,
    )
