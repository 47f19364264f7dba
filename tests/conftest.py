"""Shared fixtures: sample webhook payloads and a fake translation provider."""

from unittest.mock import MagicMock

import pytest

from issue_translator.infrastructure.github_client import GitHubClient
from issue_translator.models.schemas import LanguagePair
from issue_translator.services.annotation_formatter import AnnotationFormatter
from issue_translator.services.text_translator import TextTranslator

ICON = ":globe_with_meridians:"


def _repository() -> dict:
    return {"name": "sandbox", "owner": {"login": "octocat"}}


@pytest.fixture
def pull_request_payload() -> dict:
    return {
        "action": "opened",
        "pull_request": {"number": 7, "title": "Fix bug", "body": "Found an issue"},
        "repository": _repository(),
        "sender": {"login": "octocat", "type": "User"},
    }


@pytest.fixture
def issue_comment_payload() -> dict:
    return {
        "action": "created",
        "comment": {"id": 101, "body": "Looks good to me"},
        "issue": {"number": 7},
        "repository": _repository(),
        "sender": {"login": "octocat", "type": "User"},
    }


@pytest.fixture
def review_comment_payload() -> dict:
    return {
        "action": "created",
        "comment": {"id": 202, "body": "Rename this variable"},
        "pull_request": {"number": 7},
        "repository": _repository(),
        "sender": {"login": "octocat", "type": "User"},
    }


@pytest.fixture
def review_payload() -> dict:
    return {
        "action": "submitted",
        "review": {"id": 303, "body": "Please add tests", "state": "changes_requested"},
        "pull_request": {"number": 7},
        "repository": _repository(),
        "sender": {"login": "octocat", "type": "User"},
    }


@pytest.fixture
def provider() -> MagicMock:
    """Translation provider that detects English and tags translations."""
    mock_provider = MagicMock()
    mock_provider.detect_language.return_value = ["en"]
    mock_provider.translate.side_effect = lambda text, target: f"[{target}] {text}"
    return mock_provider


@pytest.fixture
def translator(provider) -> TextTranslator:
    return TextTranslator(provider, LanguagePair(lang1="en", lang2="ko"))


@pytest.fixture
def formatter() -> AnnotationFormatter:
    return AnnotationFormatter(ICON)


@pytest.fixture
def github_client() -> MagicMock:
    return MagicMock(spec=GitHubClient)
