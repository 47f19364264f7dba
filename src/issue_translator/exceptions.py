"""Exceptions raised while translating repository events."""


class TranslatorError(Exception):
    """Base class for every error this action reports as a failed run."""


class ConfigurationError(TranslatorError):
    """Required input is missing or invalid."""


class UnsupportedEventKind(TranslatorError):
    """The triggering event is not one this action handles."""

    def __init__(self, event_name: str):
        self.event_name = event_name
        super().__init__(f"Unsupported trigger event: {event_name}")


class TranslationFailure(TranslatorError):
    """The translation provider failed or returned unusable data."""


class UpdateFailure(TranslatorError):
    """Writing the translated text back to GitHub failed."""
