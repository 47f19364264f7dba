"""GitHub client wrapper for the githubkit library."""

import logging
from typing import Any, Callable

from githubkit import GitHub
from githubkit.exception import GitHubException, RequestFailed

from issue_translator.exceptions import UpdateFailure

logger = logging.getLogger(__name__)


class GitHubClient:
    """Handles GitHub API write operations."""

    def __init__(self, github: GitHub):
        """
        Initialize GitHub client wrapper.

        Args:
            github: Authenticated githubkit client.
        """
        self._github = github

    def update_pull_request(
        self,
        owner: str,
        repo: str,
        number: int,
        title: str | None = None,
        body: str | None = None,
    ) -> None:
        """Update the title and/or body of a pull request."""
        fields: dict[str, Any] = {}
        if title is not None:
            fields["title"] = title
        if body is not None:
            fields["body"] = body

        self._call(
            f"update PR #{number}",
            self._github.rest.pulls.update,
            owner,
            repo,
            number,
            **fields,
        )

    def update_issue_comment(
        self, owner: str, repo: str, comment_id: int, body: str
    ) -> None:
        """Replace the body of an issue (or pull request conversation) comment."""
        self._call(
            f"update issue comment {comment_id}",
            self._github.rest.issues.update_comment,
            owner,
            repo,
            comment_id,
            body=body,
        )

    def update_review_comment(
        self, owner: str, repo: str, comment_id: int, body: str
    ) -> None:
        """Replace the body of a pull request review (diff) comment."""
        self._call(
            f"update review comment {comment_id}",
            self._github.rest.pulls.update_review_comment,
            owner,
            repo,
            comment_id,
            body=body,
        )

    def update_review(
        self, owner: str, repo: str, pull_number: int, review_id: int, body: str
    ) -> None:
        """Replace the summary body of a submitted pull request review."""
        self._call(
            f"update review {review_id} on PR #{pull_number}",
            self._github.rest.pulls.update_review,
            owner,
            repo,
            pull_number,
            review_id,
            body=body,
        )

    def _call(self, description: str, method: Callable[..., Any], *args, **kwargs) -> None:
        try:
            method(*args, **kwargs)
        except RequestFailed as e:
            status_code = e.response.status_code
            logger.error("Failed to %s: HTTP %d", description, status_code)
            raise UpdateFailure(
                f"Failed to {description}: GitHub returned {status_code}"
            ) from e
        except GitHubException as e:
            logger.error("Failed to %s: %s", description, e)
            raise UpdateFailure(f"Failed to {description}: {e}") from e

        logger.info("GitHub: %s in %s/%s", description, args[0], args[1])
