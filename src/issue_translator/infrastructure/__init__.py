"""Infrastructure package."""

from issue_translator.infrastructure.dependency_injection import DependenciesContainer
from issue_translator.infrastructure.github_client import GitHubClient
from issue_translator.infrastructure.google_translate_client import (
    GoogleTranslateClient,
)

__all__ = [
    "DependenciesContainer",
    "GitHubClient",
    "GoogleTranslateClient",
]
