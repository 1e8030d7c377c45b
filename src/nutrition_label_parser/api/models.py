"""Pydantic models for the label parsing API."""

from pydantic import BaseModel, ConfigDict, Field

from nutrition_label_parser.domain.nutrition import ConfidenceTier, ParseResult
from nutrition_label_parser.domain.terms import SupportedLanguage


class ParseLabelRequest(BaseModel):
    """Label text to parse."""

    text: str
    language: SupportedLanguage | None = None


class ScanLabelRequest(BaseModel):
    """Base64-encoded label photo to recognize and parse."""

    image_base64: str = Field(min_length=1)
    language: SupportedLanguage | None = None


class ServingQuantityModel(BaseModel):
    """Household serving amount."""

    model_config = ConfigDict(from_attributes=True)

    quantity: float
    unit: str


class ReferenceAmountModel(BaseModel):
    """Amount the printed values refer to."""

    model_config = ConfigDict(from_attributes=True)

    weight: float
    unit: str


class NutritionFactsModel(BaseModel):
    """Extracted values; ``None`` marks a nutrient that was not found."""

    model_config = ConfigDict(from_attributes=True)

    calories: int
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None
    serving_size: str | None = None
    serving: ServingQuantityModel | None = None
    reference: ReferenceAmountModel | None = None


class ParseLabelResponse(BaseModel):
    """Parse outcome returned to entry-form clients."""

    facts: NutritionFactsModel | None
    confidence: ConfidenceTier
    diagnostics: list[str]
    entry_values: dict[str, float] | None = None
    requires_review: bool

    @classmethod
    def from_result(cls, result: ParseResult) -> "ParseLabelResponse":
        """Build a response from a domain parse result."""
        facts = None
        entry_values = None
        if result.facts is not None:
            facts = NutritionFactsModel.model_validate(result.facts)
            entry_values = result.facts.entry_values()
        return cls(
            facts=facts,
            confidence=result.confidence,
            diagnostics=list(result.diagnostics),
            entry_values=entry_values,
            requires_review=result.confidence is not ConfidenceTier.HIGH,
        )


class LanguageModel(BaseModel):
    """Registered label language."""

    language: SupportedLanguage
    display_name: str
