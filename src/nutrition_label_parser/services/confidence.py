"""Confidence scoring for parsed labels."""

from collections.abc import Mapping

from nutrition_label_parser.domain.nutrition import ConfidenceTier

# Stable order for diagnostics, keyed to the display name of each nutrient.
CORE_NUTRIENTS: tuple[tuple[str, str], ...] = (
    ("calories", "calories"),
    ("protein", "protein"),
    ("carbs", "carbohydrates"),
    ("fats", "fats"),
)

INSUFFICIENT_DATA_MESSAGE = (
    "Could not extract enough nutrition information from the label"
)


def score_confidence(
    found: Mapping[str, bool],
) -> tuple[ConfidenceTier, tuple[str, ...]]:
    """Classify a parse by how many core nutrients were located.

    Only presence is considered; value plausibility is the extractors' job.
    """
    missing = [
        f"Could not find {display}"
        for key, display in CORE_NUTRIENTS
        if not found.get(key, False)
    ]
    found_count = len(CORE_NUTRIENTS) - len(missing)
    if found_count == len(CORE_NUTRIENTS):
        return ConfidenceTier.HIGH, ()
    if found_count >= 2:  # noqa: PLR2004
        return ConfidenceTier.MEDIUM, tuple(missing)
    return ConfidenceTier.LOW, (*missing, INSUFFICIENT_DATA_MESSAGE)
