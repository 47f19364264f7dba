"""Handler for submitted pull request reviews."""

import logging

from issue_translator.infrastructure.github_client import GitHubClient
from issue_translator.models.schemas import HandlerResult, ReviewEvent
from issue_translator.services.annotation_formatter import AnnotationFormatter
from issue_translator.services.text_translator import TextTranslator

logger = logging.getLogger(__name__)

EVENT_KIND = "pull_request_review"


def translate_review(
    event: ReviewEvent,
    translator: TextTranslator,
    formatter: AnnotationFormatter,
    github_client: GitHubClient,
) -> HandlerResult:
    """Append a translation to a review's summary body.

    Reviews approved or rejected without a summary have an empty body and
    are left alone.
    """
    reason = None
    if not event.handles_action:
        reason = f"unhandled action {event.action!r}"
    elif event.from_bot:
        reason = "bot sender"
    elif not event.body:
        reason = "empty body"
    elif formatter.already_annotated(event.body, event.review_id):
        reason = "already translated"

    if reason:
        logger.info("Skipping review %d: %s", event.review_id, reason)
        return HandlerResult(
            event_kind=EVENT_KIND,
            target_id=event.review_id,
            updated=False,
            skipped_reason=reason,
        )

    translated = translator.translate(event.body)
    github_client.update_review(
        owner=event.owner,
        repo=event.repo,
        pull_number=event.pull_number,
        review_id=event.review_id,
        body=formatter.format(event.body, translated, event.review_id),
    )
    logger.info("Updated review %d on PR #%d", event.review_id, event.pull_number)

    return HandlerResult(event_kind=EVENT_KIND, target_id=event.review_id, updated=True)
