from .annotation_formatter import TITLE_SEPARATOR, AnnotationFormatter
from .text_translator import TextTranslator, TranslationProvider

__all__ = [
    "TITLE_SEPARATOR",
    "AnnotationFormatter",
    "TextTranslator",
    "TranslationProvider",
]
