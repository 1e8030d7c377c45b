"""Label term dictionaries per language."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class SupportedLanguage(StrEnum):
    """Language profiles a caller may request."""

    LATIN = "latin"


class UnsupportedLanguageError(LookupError):
    """Raised when a caller requests a language without a registered profile."""

    def __init__(self, language: object) -> None:
        super().__init__(f"No label profile registered for language {language!r}")
        self.language = language


@dataclass(frozen=True)
class LanguageProfile:
    """Ordered label strings recognized for each nutrient concept.

    Order matters: extractors try labels first to last and stop at the first
    label that yields a value.
    """

    language: SupportedLanguage
    display_name: str
    calories: tuple[str, ...]
    protein: tuple[str, ...]
    carbs: tuple[str, ...]
    fats: tuple[str, ...]
    serving: tuple[str, ...]


LATIN_PROFILE = LanguageProfile(
    language=SupportedLanguage.LATIN,
    display_name="English",
    calories=("calories", "energy", "kcal", "cal"),
    protein=("protein", "proteins"),
    carbs=("carbohydrate", "carbohydrates", "carbs", "total carbohydrate"),
    fats=("fat", "fats", "total fat", "lipid"),
    serving=("serving size", "serving", "portion"),
)

LANGUAGE_PROFILES: Mapping[SupportedLanguage, LanguageProfile] = MappingProxyType(
    {profile.language: profile for profile in (LATIN_PROFILE,)}
)


def get_language_profile(language: SupportedLanguage | str) -> LanguageProfile:
    """Return the registered profile for a language identifier."""
    try:
        key = SupportedLanguage(language)
    except ValueError as exc:
        raise UnsupportedLanguageError(language) from exc
    profile = LANGUAGE_PROFILES.get(key)
    if profile is None:
        raise UnsupportedLanguageError(language)
    return profile
