"""OCR text normalization."""

import re

_WHITESPACE = re.compile(r"\s+")


def normalize_text(raw_text: str) -> str:
    """Lowercase text and collapse every whitespace run into one space."""
    return _WHITESPACE.sub(" ", raw_text.lower())
