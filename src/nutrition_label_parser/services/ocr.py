"""OCR boundary: turn a label photo into text, then parse it."""

import base64
from dataclasses import dataclass
from typing import Protocol

from nutrition_label_parser.domain.nutrition import ParseResult
from nutrition_label_parser.domain.terms import SupportedLanguage, get_language_profile
from nutrition_label_parser.services.label_parser import LabelParserService

OCR_PROMPT = (
    "Transcribe all text printed on this nutrition label exactly as it appears. "
    "Keep the original line breaks, numbers and units. "
    "Do not summarize, translate or add anything. Label language: {language}."
)


class OcrError(RuntimeError):
    """Raised when an image cannot be turned into label text."""


class TextRecognizer(Protocol):
    """Interface for OCR providers."""

    async def recognize(self, *, image_data_url: str, prompt: str) -> str:
        """Return the text found in the image, line breaks preserved."""


@dataclass
class LabelScanService:
    """Runs OCR on a label photo and parses the recognized text."""

    recognizer: TextRecognizer
    parser: LabelParserService

    async def recognize_text(
        self, image_bytes: bytes, language: SupportedLanguage | str | None = None
    ) -> str:
        """Return raw OCR text for a label photo."""
        if not image_bytes:
            raise OcrError("Image is empty")
        resolved = language if language is not None else self.parser.default_language
        profile = get_language_profile(resolved)
        text = await self.recognizer.recognize(
            image_data_url=_to_data_url(image_bytes),
            prompt=OCR_PROMPT.format(language=profile.display_name),
        )
        if not text or not text.strip():
            raise OcrError("No text recognized in image")
        return text

    async def scan(
        self, image_bytes: bytes, language: SupportedLanguage | str | None = None
    ) -> ParseResult:
        """Recognize text in a label photo and parse it."""
        text = await self.recognize_text(image_bytes, language)
        return self.parser.parse(text, language)


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
