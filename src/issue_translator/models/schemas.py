"""Pydantic models for GitHub events and translation markers."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

MARKER_PREFIX = "issue-translator"


def _repository(payload: dict) -> tuple[str, str]:
    repository = payload["repository"]
    return repository["owner"]["login"], repository["name"]


def _is_bot(payload: dict) -> bool:
    sender = payload.get("sender") or {}
    return sender.get("type") == "Bot"


class RepositoryEvent(BaseModel):
    """Fields shared by every event the action handles."""

    model_config = ConfigDict(frozen=True)

    # Webhook actions that mean new or edited user text
    HANDLED_ACTIONS: ClassVar[frozenset[str]] = frozenset()

    owner: str
    repo: str
    action: str = ""
    from_bot: bool = False

    @property
    def handles_action(self) -> bool:
        return self.action in self.HANDLED_ACTIONS


class PullRequestEvent(RepositoryEvent):
    """A pull request was opened or edited."""

    HANDLED_ACTIONS: ClassVar[frozenset[str]] = frozenset({"opened", "edited"})

    number: int
    title: str = ""
    body: str = ""

    @classmethod
    def from_payload(cls, payload: dict) -> "PullRequestEvent":
        owner, repo = _repository(payload)
        pull_request = payload["pull_request"]
        return cls(
            owner=owner,
            repo=repo,
            action=payload.get("action") or "",
            from_bot=_is_bot(payload),
            number=pull_request["number"],
            title=pull_request.get("title") or "",
            body=pull_request.get("body") or "",
        )


class IssueCommentEvent(RepositoryEvent):
    """A comment was posted on an issue or pull request conversation."""

    HANDLED_ACTIONS: ClassVar[frozenset[str]] = frozenset({"created", "edited"})

    comment_id: int
    body: str = ""

    @classmethod
    def from_payload(cls, payload: dict) -> "IssueCommentEvent":
        owner, repo = _repository(payload)
        comment = payload["comment"]
        return cls(
            owner=owner,
            repo=repo,
            action=payload.get("action") or "",
            from_bot=_is_bot(payload),
            comment_id=comment["id"],
            body=comment.get("body") or "",
        )


class ReviewCommentEvent(IssueCommentEvent):
    """A comment was posted on a pull request diff."""


class ReviewEvent(RepositoryEvent):
    """A pull request review was submitted."""

    HANDLED_ACTIONS: ClassVar[frozenset[str]] = frozenset({"submitted", "edited"})

    review_id: int
    pull_number: int
    body: str = ""

    @classmethod
    def from_payload(cls, payload: dict) -> "ReviewEvent":
        owner, repo = _repository(payload)
        review = payload["review"]
        return cls(
            owner=owner,
            repo=repo,
            action=payload.get("action") or "",
            from_bot=_is_bot(payload),
            review_id=review["id"],
            pull_number=payload["pull_request"]["number"],
            body=review.get("body") or "",
        )


class TranslationMarker(BaseModel):
    """Label appended above a translation, tagged with the object's id."""

    model_config = ConfigDict(frozen=True)

    id: int
    icon: str

    @property
    def token(self) -> str:
        """Hidden tag used to recognise text that was already translated."""
        return f"<!-- {MARKER_PREFIX}:{self.id} -->"

    @property
    def label(self) -> str:
        return f"{self.icon} *Translation*"

    @property
    def block(self) -> str:
        return f"{self.label} {self.token}"


class LanguagePair(BaseModel):
    """The two languages text is translated between."""

    model_config = ConfigDict(frozen=True)

    lang1: str
    lang2: str

    @field_validator("lang1", "lang2")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("language code must not be empty")
        return value

    @model_validator(mode="after")
    def _distinct(self) -> "LanguagePair":
        if primary_subtag(self.lang1) == primary_subtag(self.lang2):
            raise ValueError(
                f"language-1 and language-2 must differ, both are '{self.lang1}'"
            )
        return self


def primary_subtag(code: str) -> str:
    """Return the lower-cased primary language subtag ('en-US' -> 'en')."""
    return code.strip().replace("_", "-").split("-")[0].lower()


class HandlerResult(BaseModel):
    """Outcome of handling a single event."""

    event_kind: str
    target_id: int
    updated: bool
    skipped_reason: str | None = None
