"""Nutrition label domain models."""

from dataclasses import dataclass
from enum import StrEnum


class ConfidenceTier(StrEnum):
    """How trustworthy a parse is, by count of core nutrients found."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ServingQuantity:
    """Household serving amount, e.g. 1 cup."""

    quantity: float
    unit: str


@dataclass(frozen=True)
class ReferenceAmount:
    """Amount the printed values refer to, e.g. per 100 g."""

    weight: float
    unit: str


@dataclass(frozen=True)
class NutritionFacts:
    """Values extracted from a label.

    Macros keep ``None`` when they were not found so a confirmed zero stays
    distinguishable from a miss.
    """

    calories: int
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None
    serving_size: str | None = None
    serving: ServingQuantity | None = None
    reference: ReferenceAmount | None = None

    def entry_values(self) -> dict[str, float]:
        """Return the four core values for an entry form, misses as zero."""
        return {
            "calories": self.calories,
            "protein": self.protein_g or 0.0,
            "carbs": self.carbs_g or 0.0,
            "fats": self.fat_g or 0.0,
        }


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one label text."""

    facts: NutritionFacts | None
    confidence: ConfidenceTier
    diagnostics: tuple[str, ...] = ()
