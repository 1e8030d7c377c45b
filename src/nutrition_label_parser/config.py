"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_label_parser.domain.terms import (
    SupportedLanguage,
    UnsupportedLanguageError,
    get_language_profile,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    default_language: str = SupportedLanguage.LATIN.value
    parser_debug: bool = False
    log_level: str = "INFO"
    log_overrides: dict[str, str] = {}
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_language(raw: str | None) -> SupportedLanguage:
    """Parse a configured language identifier."""
    if raw is None:
        return SupportedLanguage.LATIN
    cleaned = raw.strip().lower()
    if not cleaned:
        return SupportedLanguage.LATIN
    try:
        language = SupportedLanguage(cleaned)
    except ValueError as exc:
        raise UnsupportedLanguageError(raw) from exc
    get_language_profile(language)
    return language
