"""Handler for pull request opened/edited events."""

import logging

from issue_translator.infrastructure.github_client import GitHubClient
from issue_translator.models.schemas import HandlerResult, PullRequestEvent
from issue_translator.services.annotation_formatter import AnnotationFormatter
from issue_translator.services.text_translator import TextTranslator

logger = logging.getLogger(__name__)

EVENT_KIND = "pull_request"


def translate_pull_request(
    event: PullRequestEvent,
    translator: TextTranslator,
    formatter: AnnotationFormatter,
    github_client: GitHubClient,
) -> HandlerResult:
    """Append translations to a pull request's title and description.

    1. Translate the title unless it already has a translation separator
    2. Translate the body unless it already carries the marker for this PR
    3. Send both fields in a single update

    Args:
        event: Parsed pull request event.
        translator: Detects and translates text.
        formatter: Builds the annotated title/body.
        github_client: GitHub API wrapper used for the update.

    Returns:
        HandlerResult describing whether the pull request was updated.
    """
    reason = None
    if not event.handles_action:
        reason = f"unhandled action {event.action!r}"
    elif event.from_bot:
        reason = "bot sender"

    if reason:
        logger.info("Skipping PR #%d: %s", event.number, reason)
        return HandlerResult(
            event_kind=EVENT_KIND,
            target_id=event.number,
            updated=False,
            skipped_reason=reason,
        )

    title = event.title
    if title and not formatter.title_translated(title):
        title = formatter.format_title(title, translator.translate(title))

    body = event.body
    if body and not formatter.already_annotated(body, event.number):
        body = formatter.format(body, translator.translate(body), event.number)

    if title == event.title and body == event.body:
        logger.info("PR #%d is already translated, nothing to update", event.number)
        return HandlerResult(
            event_kind=EVENT_KIND,
            target_id=event.number,
            updated=False,
            skipped_reason="already translated",
        )

    github_client.update_pull_request(
        owner=event.owner,
        repo=event.repo,
        number=event.number,
        title=title,
        body=body,
    )
    logger.info("Updated PR #%d in %s/%s", event.number, event.owner, event.repo)

    return HandlerResult(event_kind=EVENT_KIND, target_id=event.number, updated=True)
