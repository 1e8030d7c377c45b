"""Nutrition label parsing entry points."""

import logging
from dataclasses import dataclass

from nutrition_label_parser.domain.nutrition import (
    ConfidenceTier,
    NutritionFacts,
    ParseResult,
)
from nutrition_label_parser.domain.terms import SupportedLanguage, get_language_profile
from nutrition_label_parser.services.confidence import score_confidence
from nutrition_label_parser.services.extraction import (
    extract_calories,
    extract_macro,
    extract_serving_size,
)
from nutrition_label_parser.services.normalizer import normalize_text
from nutrition_label_parser.services.serving import (
    parse_reference_amount,
    parse_serving_quantity,
)

MANUAL_ENTRY_MESSAGE = (
    "Could not extract nutrition information. Please try again or enter manually."
)

_logger = logging.getLogger(__name__)


def parse_nutrition_label(
    raw_text: str, language: SupportedLanguage | str = SupportedLanguage.LATIN
) -> ParseResult:
    """Parse OCR text from a nutrition label into facts and a confidence tier.

    Never raises for any input text. An unregistered ``language`` raises
    ``UnsupportedLanguageError``.
    """
    profile = get_language_profile(language)
    normalized = normalize_text(raw_text)

    calories = extract_calories(normalized, profile.calories)
    protein = extract_macro(normalized, profile.protein)
    carbs = extract_macro(normalized, profile.carbs)
    fats = extract_macro(normalized, profile.fats)

    confidence, diagnostics = score_confidence(
        {
            "calories": calories is not None,
            "protein": protein is not None,
            "carbs": carbs is not None,
            "fats": fats is not None,
        }
    )

    if calories is None:
        return ParseResult(
            facts=None,
            confidence=ConfidenceTier.LOW,
            diagnostics=(MANUAL_ENTRY_MESSAGE,),
        )

    serving_size = extract_serving_size(raw_text, profile.serving)
    facts = NutritionFacts(
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fats,
        serving_size=serving_size,
        serving=parse_serving_quantity(serving_size),
        reference=parse_reference_amount(normalized, serving_size),
    )
    return ParseResult(facts=facts, confidence=confidence, diagnostics=diagnostics)


@dataclass
class LabelParserService:
    """Parser bound to a configured default language."""

    default_language: SupportedLanguage = SupportedLanguage.LATIN
    debug: bool = False

    def __post_init__(self) -> None:
        get_language_profile(self.default_language)

    def parse(
        self, raw_text: str, language: SupportedLanguage | str | None = None
    ) -> ParseResult:
        """Parse label text in the given language, or the default one."""
        resolved = language if language is not None else self.default_language
        result = parse_nutrition_label(raw_text, resolved)
        if self.debug:
            _logger.info(
                "Label parse: language=%s chars=%s confidence=%s facts=%s",
                resolved,
                len(raw_text),
                result.confidence,
                result.facts is not None,
            )
        return result
