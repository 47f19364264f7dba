"""Configuration management for the translation action.

Values come from the action inputs GitHub exposes as ``INPUT_<NAME>``
environment variables, falling back to plain environment variables (or a
local ``.env`` file) when running outside of Actions.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv
from pydantic import ValidationError

from issue_translator.exceptions import ConfigurationError
from issue_translator.models.schemas import LanguagePair

# Load .env if exists (local runs only, no-op on the runner)
load_dotenv()


def _get_input(name: str, fallback: str, default: str = "") -> str:
    """Get an action input, then the fallback env var, then the default."""
    value = os.getenv(f"INPUT_{name.upper()}", "").strip()
    if value:  # Actions passes unset inputs as empty strings
        return value
    return os.getenv(fallback, default).strip() or default


def _get_timeout() -> float:
    value = os.getenv("HTTP_TIMEOUT", "30")
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"HTTP_TIMEOUT must be a number, got {value!r}") from None


def log_level_from_env() -> str:
    """LOG_LEVEL, or DEBUG when the workflow is re-run with debug logging."""
    if os.getenv("RUNNER_DEBUG") == "1":
        return "DEBUG"
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    # getLevelName maps known names to their numeric level
    return level if isinstance(logging.getLevelName(level), int) else "INFO"


@dataclass
class Config:
    """Action configuration loaded from inputs and environment variables."""

    # GitHub
    repo_token: str = ""
    github_api_url: str = "https://api.github.com"

    # Google Cloud Translation
    google_project_id: str = ""
    google_credentials: str = ""  # service account key, JSON text

    # Translation
    language_1: str = "en"
    language_2: str = "ko"
    translation_emoji: str = ":globe_with_meridians:"

    # Runtime
    http_timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Build a config from the current environment."""
        return cls(
            repo_token=_get_input("repo-token", "GITHUB_TOKEN"),
            github_api_url=os.getenv("GITHUB_API_URL", cls.github_api_url),
            google_project_id=_get_input("google-project-id", "GOOGLE_PROJECT_ID"),
            google_credentials=_get_input("google-credentials", "GOOGLE_CREDENTIALS"),
            language_1=_get_input("language-1", "LANGUAGE_1", cls.language_1),
            language_2=_get_input("language-2", "LANGUAGE_2", cls.language_2),
            translation_emoji=_get_input(
                "translation-emoji", "TRANSLATION_EMOJI", cls.translation_emoji
            ),
            http_timeout=_get_timeout(),
            log_level=log_level_from_env(),
        )

    @property
    def languages(self) -> LanguagePair:
        """The configured language pair."""
        try:
            return LanguagePair(lang1=self.language_1, lang2=self.language_2)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid language configuration: {e}") from e

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.repo_token:
            raise ConfigurationError("repo-token input (or GITHUB_TOKEN) is required")

        if not self.google_credentials:
            raise ConfigurationError(
                "google-credentials input (or GOOGLE_CREDENTIALS) is required"
            )

        # Raises ConfigurationError for an empty or duplicated language
        _ = self.languages
