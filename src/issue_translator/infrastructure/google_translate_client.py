"""Google Cloud Translation (v2) client wrapper."""

import logging
from typing import Any

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError

from issue_translator.exceptions import TranslationFailure

logger = logging.getLogger(__name__)


class GoogleTranslateClient:
    """Handles language detection and translation requests."""

    def __init__(self, client: Any):
        """
        Initialize Google Translate client wrapper.

        Args:
            client: google.cloud.translate_v2.Client instance.
        """
        self._client = client

    def detect_language(self, text: str) -> list[str]:
        """
        Detect the language of a text.

        Returns:
            Candidate language codes, most confident first.
        """
        try:
            detections = self._client.detect_language(text)
        except (GoogleAPIError, GoogleAuthError) as e:
            logger.error("Failed to detect language: %s", e)
            raise TranslationFailure(f"Language detection failed: {e}") from e

        # A single string yields one dict, a list of strings a list of dicts
        if isinstance(detections, dict):
            detections = [detections]

        return [
            d["language"]
            for d in detections or []
            if d.get("language") and d["language"] != "und"
        ]

    def translate(self, text: str, target: str) -> str:
        """Translate plain text into the target language."""
        try:
            result = self._client.translate(
                text, target_language=target, format_="text"
            )
        except (GoogleAPIError, GoogleAuthError) as e:
            logger.error("Failed to translate into %s: %s", target, e)
            raise TranslationFailure(f"Translation into {target} failed: {e}") from e

        if isinstance(result, list):
            result = result[0] if result else {}
        if not isinstance(result, dict) or "translatedText" not in result:
            raise TranslationFailure(f"Unexpected translation response: {result!r}")

        return result["translatedText"]
