"""Dependency injection container for the application."""

import json

from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer
from githubkit import GitHub
from google.auth.exceptions import GoogleAuthError
from google.cloud import translate_v2
from google.oauth2 import service_account

from issue_translator import __version__
from issue_translator.config import Config
from issue_translator.exceptions import ConfigurationError
from issue_translator.infrastructure.github_client import GitHubClient
from issue_translator.infrastructure.google_translate_client import (
    GoogleTranslateClient,
)


def _load_config() -> Config:
    """Read and validate configuration from the environment."""
    config = Config.from_env()
    config.validate()
    return config


def _create_github(config: Config) -> GitHub:
    """githubkit client authenticated with the repo token."""
    return GitHub(
        config.repo_token,
        base_url=config.github_api_url,
        user_agent=f"issue-translator/{__version__}",
        timeout=config.http_timeout,
    )


def _create_google_credentials(config: Config) -> service_account.Credentials:
    """Service account credentials from the google-credentials JSON input."""
    try:
        info = json.loads(config.google_credentials)
        credentials = service_account.Credentials.from_service_account_info(info)
    except (ValueError, GoogleAuthError) as e:
        raise ConfigurationError(f"Invalid google-credentials: {e}") from e

    if config.google_project_id:
        # Bill quota to the configured project rather than the key's owner
        credentials = credentials.with_quota_project(config.google_project_id)
    return credentials


def _create_text_translator(provider: GoogleTranslateClient, config: Config):
    """Factory for TextTranslator to avoid circular import."""
    from issue_translator.services.text_translator import TextTranslator

    return TextTranslator(provider, config.languages)


def _create_annotation_formatter(config: Config):
    """Factory for AnnotationFormatter to avoid circular import."""
    from issue_translator.services.annotation_formatter import AnnotationFormatter

    return AnnotationFormatter(config.translation_emoji)


class DependenciesContainer(DeclarativeContainer):
    """DI container for the application."""

    config = providers.Singleton(_load_config)

    # GitHub
    github = providers.Singleton(
        _create_github,
        config=config,
    )

    github_client = providers.Singleton(
        GitHubClient,
        github=github,
    )

    # Google Cloud Translation
    google_credentials = providers.Singleton(
        _create_google_credentials,
        config=config,
    )

    translate_sdk_client = providers.Singleton(
        translate_v2.Client,
        credentials=google_credentials,
    )

    translate_client = providers.Singleton(
        GoogleTranslateClient,
        client=translate_sdk_client,
    )

    # Services
    text_translator = providers.Singleton(
        _create_text_translator,
        provider=translate_client,
        config=config,
    )

    annotation_formatter = providers.Singleton(
        _create_annotation_formatter,
        config=config,
    )
