"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_label_parser.adapters.openai_text_recognizer import (
    OpenAITextRecognizer,
)
from nutrition_label_parser.config import Settings, parse_language
from nutrition_label_parser.services.label_parser import LabelParserService
from nutrition_label_parser.services.ocr import LabelScanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    label_parser: LabelParserService
    label_scan_service: LabelScanService | None
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    label_parser = LabelParserService(
        default_language=parse_language(resolved_settings.default_language),
        debug=resolved_settings.parser_debug,
    )
    recognizer: OpenAITextRecognizer | None = None
    label_scan_service: LabelScanService | None = None
    if resolved_settings.openai_api_key:
        recognizer = OpenAITextRecognizer.create(
            api_key=resolved_settings.openai_api_key,
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
        )
        label_scan_service = LabelScanService(
            recognizer=recognizer, parser=label_parser
        )

    async def close_resources() -> None:
        if recognizer is not None:
            await recognizer.close()

    return AppContainer(
        settings=resolved_settings,
        label_parser=label_parser,
        label_scan_service=label_scan_service,
        close_resources=close_resources,
    )
