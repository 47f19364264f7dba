"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from issue_translator.models.schemas import (
    IssueCommentEvent,
    LanguagePair,
    PullRequestEvent,
    ReviewCommentEvent,
    ReviewEvent,
    TranslationMarker,
    primary_subtag,
)


class TestEvents:
    """Tests for building events from webhook payloads."""

    def test_pull_request_from_payload(self, pull_request_payload):
        """Test PullRequestEvent picks up title, body and repository."""
        event = PullRequestEvent.from_payload(pull_request_payload)

        assert event.owner == "octocat"
        assert event.repo == "sandbox"
        assert event.number == 7
        assert event.title == "Fix bug"
        assert event.body == "Found an issue"
        assert event.from_bot is False
        assert event.action == "opened"
        assert event.handles_action is True

    def test_pull_request_null_body(self, pull_request_payload):
        """Test a PR opened without a description has an empty body."""
        pull_request_payload["pull_request"]["body"] = None

        event = PullRequestEvent.from_payload(pull_request_payload)

        assert event.body == ""

    def test_issue_comment_from_payload(self, issue_comment_payload):
        """Test IssueCommentEvent picks up comment id and body."""
        event = IssueCommentEvent.from_payload(issue_comment_payload)

        assert event.comment_id == 101
        assert event.body == "Looks good to me"

    def test_review_comment_from_payload(self, review_comment_payload):
        """Test ReviewCommentEvent builds its own type."""
        event = ReviewCommentEvent.from_payload(review_comment_payload)

        assert isinstance(event, ReviewCommentEvent)
        assert event.comment_id == 202

    def test_review_from_payload(self, review_payload):
        """Test ReviewEvent carries the owning pull request number."""
        event = ReviewEvent.from_payload(review_payload)

        assert event.review_id == 303
        assert event.pull_number == 7
        assert event.body == "Please add tests"

    def test_unhandled_action(self, issue_comment_payload):
        """Test a deleted comment is parsed but not handled."""
        issue_comment_payload["action"] = "deleted"

        event = IssueCommentEvent.from_payload(issue_comment_payload)

        assert event.action == "deleted"
        assert event.handles_action is False

    def test_missing_action_not_handled(self, review_payload):
        del review_payload["action"]

        assert ReviewEvent.from_payload(review_payload).handles_action is False

    def test_bot_sender(self, issue_comment_payload):
        """Test events sent by bot accounts are flagged."""
        issue_comment_payload["sender"] = {"login": "dependabot[bot]", "type": "Bot"}

        event = IssueCommentEvent.from_payload(issue_comment_payload)

        assert event.from_bot is True

    def test_events_are_immutable(self, issue_comment_payload):
        """Test events cannot be modified after parsing."""
        event = IssueCommentEvent.from_payload(issue_comment_payload)

        with pytest.raises(ValidationError):
            event.body = "changed"


class TestTranslationMarker:
    """Tests for TranslationMarker."""

    def test_token_embeds_id(self):
        marker = TranslationMarker(id=42, icon=":flag:")

        assert marker.token == "<!-- issue-translator:42 -->"

    def test_block_has_label_and_token(self):
        marker = TranslationMarker(id=42, icon=":flag:")

        assert marker.block == ":flag: *Translation* <!-- issue-translator:42 -->"


class TestLanguagePair:
    """Tests for LanguagePair validation."""

    def test_valid_pair(self):
        pair = LanguagePair(lang1="en", lang2="ko")

        assert pair.lang1 == "en"
        assert pair.lang2 == "ko"

    def test_same_language_rejected(self):
        with pytest.raises(ValidationError):
            LanguagePair(lang1="en", lang2="en-US")

    def test_empty_language_rejected(self):
        with pytest.raises(ValidationError):
            LanguagePair(lang1="", lang2="ko")

    @pytest.mark.parametrize(
        "code,expected",
        [("en", "en"), ("en-US", "en"), ("zh_TW", "zh"), (" KO ", "ko")],
    )
    def test_primary_subtag(self, code, expected):
        assert primary_subtag(code) == expected
