"""Numeric value extraction from label text.

Each extractor walks an ordered tuple of matcher tiers and stops at the first
tier that yields an acceptable value. The numeric bounds are heuristics for
rejecting OCR noise such as years, phone numbers or barcode fragments.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

KCAL_UPPER_BOUND = 2000
LABELLED_CALORIES_UPPER_BOUND = 4000
BARE_MACRO_UPPER_BOUND = 1000

_KCAL_SUFFIX = re.compile(r"\s*kcal", re.IGNORECASE)
# Any non-digit run between a label and its number.
_FILLER = r"[^\d]*"
_DECIMAL = r"(\d+\.?\d*)"


@dataclass(frozen=True)
class MatcherTier:
    """A named regex shape whose first capture group is the value.

    ``template`` may contain a ``{label}`` placeholder that is filled with the
    escaped label. Bounds are exclusive.
    """

    name: str
    template: str
    lower_bound: float | None = None
    upper_bound: float | None = None
    skip_kcal_suffixed: bool = False

    def compile(self, label: str = "") -> re.Pattern[str]:
        """Build the pattern for a label."""
        return re.compile(self.template.format(label=re.escape(label)), re.IGNORECASE)

    def find(self, text: str, label: str = "") -> float | None:
        """Return the first in-bounds value the pattern captures in text."""
        for match in self.compile(label).finditer(text):
            if self.skip_kcal_suffixed and _KCAL_SUFFIX.match(text, match.end(1)):
                continue
            value = float(match.group(1))
            if self._in_bounds(value):
                return value
        return None

    def _in_bounds(self, value: float) -> bool:
        if self.lower_bound is not None and value <= self.lower_bound:
            return False
        return self.upper_bound is None or value < self.upper_bound


UNIT_ANCHORED_CALORIES = MatcherTier(
    name="unit_anchored",
    template=r"(\d+)\s*kcal",
    lower_bound=0,
    upper_bound=KCAL_UPPER_BOUND,
)

# Numbers carrying the kcal unit were already judged by the unit-anchored tier.
CALORIE_LABEL_TIERS: tuple[MatcherTier, ...] = (
    MatcherTier(
        name="label_then_number",
        template=r"{label}[:\s]+(\d+)(?!\d)",
        lower_bound=0,
        upper_bound=LABELLED_CALORIES_UPPER_BOUND,
        skip_kcal_suffixed=True,
    ),
    MatcherTier(
        name="number_then_label",
        template=r"(\d+)\s*{label}",
        lower_bound=0,
        upper_bound=LABELLED_CALORIES_UPPER_BOUND,
        skip_kcal_suffixed=True,
    ),
)

MACRO_TIERS: tuple[MatcherTier, ...] = (
    MatcherTier(
        name="explicit_gram_suffix",
        template=r"{label}" + _FILLER + _DECIMAL + r"\s*g",
    ),
    MatcherTier(
        name="reversed_gram_prefix",
        template=_DECIMAL + r"\s*g" + _FILLER + r"{label}",
    ),
    MatcherTier(
        name="bare_number",
        template=r"{label}[:\s]+" + _DECIMAL,
        upper_bound=BARE_MACRO_UPPER_BOUND,
    ),
)


def extract_calories(normalized_text: str, labels: Sequence[str]) -> int | None:
    """Find the energy value, preferring numbers printed with a kcal unit."""
    value = UNIT_ANCHORED_CALORIES.find(normalized_text)
    if value is not None:
        return int(value)
    for label in labels:
        for tier in CALORIE_LABEL_TIERS:
            value = tier.find(normalized_text, label)
            if value is not None:
                return int(value)
    return None


def extract_macro(normalized_text: str, labels: Sequence[str]) -> float | None:
    """Find a gram value for the first label that any macro tier matches."""
    for label in labels:
        for tier in MACRO_TIERS:
            value = tier.find(normalized_text, label)
            if value is not None:
                return value
    return None


def extract_serving_size(text: str, labels: Sequence[str]) -> str | None:
    """Return the rest of the line after the first serving label found."""
    for label in labels:
        pattern = re.compile(re.escape(label) + r"[: \t]+([^\r\n]+)", re.IGNORECASE)
        match = pattern.search(text)
        if match:
            description = match.group(1).strip()
            if description:
                return description
    return None
