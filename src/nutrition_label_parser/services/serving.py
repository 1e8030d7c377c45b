"""Serving quantity and reference amount parsing."""

import re

from nutrition_label_parser.domain.nutrition import ReferenceAmount, ServingQuantity

_AMOUNT = r"\d+\s*/\s*\d+|\d+(?:[.,]\d+)?"
_SERVING_QUANTITY = re.compile(
    rf"^(?P<amount>{_AMOUNT})\s*(?P<unit>[^\d\s(),]+)", re.IGNORECASE
)
_PER_AMOUNT = re.compile(
    r"\bper\s+(?P<weight>\d+(?:[.,]\d+)?)\s*(?P<unit>g|ml)\b", re.IGNORECASE
)
_PARENTHESISED_WEIGHT = re.compile(
    r"\(\s*(?P<weight>\d+(?:[.,]\d+)?)\s*(?P<unit>g|ml|oz)\s*\)", re.IGNORECASE
)


def parse_serving_quantity(description: str | None) -> ServingQuantity | None:
    """Split a serving description like ``1 cup (228g)`` into amount and unit."""
    if not description:
        return None
    match = _SERVING_QUANTITY.match(description.strip())
    if match is None:
        return None
    quantity = _parse_amount(match.group("amount"))
    if quantity is None or quantity <= 0:
        return None
    return ServingQuantity(quantity=quantity, unit=match.group("unit").lower())


def parse_reference_amount(
    normalized_text: str, serving_description: str | None = None
) -> ReferenceAmount | None:
    """Return the amount the printed values refer to.

    An explicit ``per 100 g`` phrase wins over the weight printed in
    parentheses after the serving description.
    """
    match = _PER_AMOUNT.search(normalized_text)
    if match is None and serving_description:
        match = _PARENTHESISED_WEIGHT.search(serving_description)
    if match is None:
        return None
    weight = _parse_amount(match.group("weight"))
    if weight is None or weight <= 0:
        return None
    return ReferenceAmount(weight=weight, unit=match.group("unit").lower())


def _parse_amount(raw: str) -> float | None:
    """Parse integers, decimals with either separator, and simple fractions."""
    cleaned = raw.replace(" ", "").replace(",", ".")
    if "/" in cleaned:
        numerator, denominator = cleaned.split("/", 1)
        if float(denominator) == 0:
            return None
        return float(numerator) / float(denominator)
    return float(cleaned)
