"""Appends translations to titles and bodies, and recognises its own output."""

from issue_translator.models.schemas import TranslationMarker

TITLE_SEPARATOR = "||"


class AnnotationFormatter:
    """Formats translated text underneath the original."""

    def __init__(self, icon: str):
        self._icon = icon

    def marker(self, target_id: int) -> TranslationMarker:
        return TranslationMarker(id=target_id, icon=self._icon)

    def already_annotated(self, body: str, target_id: int) -> bool:
        """True if body already carries the translation marker for target_id."""
        return self.marker(target_id).token in body

    def format(self, original: str, translated: str, target_id: int) -> str:
        """Original text, then the marker block, then the translation."""
        return f"{original}\n\n{self.marker(target_id).block}\n\n{translated}"

    @staticmethod
    def title_translated(title: str) -> bool:
        return TITLE_SEPARATOR in title

    @staticmethod
    def format_title(title: str, translated: str) -> str:
        # Titles are single-line, so the translation goes after a separator
        return f"{title} {TITLE_SEPARATOR} {translated}"
