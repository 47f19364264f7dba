"""Language detection and translation between the configured pair."""

import logging
from typing import Protocol

from issue_translator.exceptions import TranslationFailure
from issue_translator.models.schemas import LanguagePair, primary_subtag

logger = logging.getLogger(__name__)


class TranslationProvider(Protocol):
    """What TextTranslator needs from a translation backend."""

    def detect_language(self, text: str) -> list[str] | str: ...

    def translate(self, text: str, target: str) -> str: ...


class TextTranslator:
    """Translates text into whichever configured language it is not in."""

    def __init__(self, provider: TranslationProvider, languages: LanguagePair):
        self._provider = provider
        self._languages = languages

    @property
    def languages(self) -> LanguagePair:
        return self._languages

    def target_language(self, text: str) -> str:
        """
        Pick the language to translate text into.

        Text detected as language-1 goes to language-2. Everything else,
        including a language outside the configured pair or an empty
        detection, goes to language-1.
        """
        lang1, lang2 = self._languages.lang1, self._languages.lang2

        detections = self._provider.detect_language(text)
        if isinstance(detections, str):
            detections = [detections]
        detections = list(detections or [])

        if not detections:
            logger.warning("No language detected, translating to %s", lang1)
            return lang1

        detected = primary_subtag(detections[0])
        logger.info("Detected language: %s", detections[0])

        if detected == primary_subtag(lang1):
            return lang2
        if detected != primary_subtag(lang2):
            logger.warning(
                "Detected language %s is neither %s nor %s, translating to %s",
                detections[0],
                lang1,
                lang2,
                lang1,
            )
        return lang1

    def translate(self, text: str) -> str:
        """Translate text, returning "" for empty input without calling the provider."""
        if not text:
            logger.debug("Empty text for translation")
            return ""

        target = self.target_language(text)
        translated = self._provider.translate(text, target)
        if translated is None:
            raise TranslationFailure(f"No translation returned for target {target}")

        logger.info("Translated %d chars into %s", len(text), target)
        return translated
