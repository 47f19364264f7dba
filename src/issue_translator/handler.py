"""Routes a GitHub event to the handler that translates it."""

import logging
from typing import Any, Callable

from issue_translator.exceptions import UnsupportedEventKind
from issue_translator.handlers import (
    translate_issue_comment,
    translate_pull_request,
    translate_review,
    translate_review_comment,
)
from issue_translator.infrastructure.github_client import GitHubClient
from issue_translator.models.schemas import (
    HandlerResult,
    IssueCommentEvent,
    PullRequestEvent,
    RepositoryEvent,
    ReviewCommentEvent,
    ReviewEvent,
)
from issue_translator.services.annotation_formatter import AnnotationFormatter
from issue_translator.services.text_translator import TextTranslator

logger = logging.getLogger(__name__)

Handler = Callable[..., HandlerResult]

# event name -> (event model, handler)
ROUTES: dict[str, tuple[type[RepositoryEvent], Handler]] = {
    "pull_request": (PullRequestEvent, translate_pull_request),
    "pull_request_target": (PullRequestEvent, translate_pull_request),
    "issue_comment": (IssueCommentEvent, translate_issue_comment),
    "pull_request_review_comment": (ReviewCommentEvent, translate_review_comment),
    "pull_request_review": (ReviewEvent, translate_review),
}


def route_event(event_name: str, payload: dict[str, Any]) -> tuple[Handler, RepositoryEvent]:
    """Pick the handler for an event and parse its payload.

    Raises:
        UnsupportedEventKind: event_name is not one of the handled events.
    """
    try:
        event_model, handler = ROUTES[event_name]
    except KeyError:
        raise UnsupportedEventKind(event_name) from None

    return handler, event_model.from_payload(payload)


def dispatch_event(
    event_name: str,
    payload: dict[str, Any],
    translator: TextTranslator,
    formatter: AnnotationFormatter,
    github_client: GitHubClient,
) -> HandlerResult:
    """Route an event and run its handler with the given collaborators."""
    handler, event = route_event(event_name, payload)
    logger.info("Handling %s event with %s", event_name, handler.__name__)

    return handler(
        event=event,
        translator=translator,
        formatter=formatter,
        github_client=github_client,
    )
