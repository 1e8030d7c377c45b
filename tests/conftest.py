"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutrition_label_parser.config import Settings
from nutrition_label_parser.containers import AppContainer
from nutrition_label_parser.services.label_parser import LabelParserService
from nutrition_label_parser.services.ocr import LabelScanService, TextRecognizer

SAMPLE_LABEL = """Nutrition Facts
Serving Size 1 cup (228g)
Amount Per Serving
Calories 260
Total Fat 13g
Saturated Fat 5g
Trans Fat 0g
Cholesterol 30mg
Sodium 660mg
Total Carbohydrate 31g
Dietary Fiber 0g
Sugars 5g
Protein 5g"""


@dataclass
class FakeTextRecognizer(TextRecognizer):
    """Fake recognizer returning fixed text and recording calls."""

    text: str = SAMPLE_LABEL
    calls: list[dict[str, str]] = field(default_factory=list)

    async def recognize(self, *, image_data_url: str, prompt: str) -> str:
        self.calls.append({"image_data_url": image_data_url, "prompt": prompt})
        return self.text


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def recognizer() -> FakeTextRecognizer:
    return FakeTextRecognizer()


@pytest.fixture
def container(settings: Settings, recognizer: FakeTextRecognizer) -> AppContainer:
    label_parser = LabelParserService()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        label_parser=label_parser,
        label_scan_service=LabelScanService(recognizer=recognizer, parser=label_parser),
        close_resources=close_resources,
    )
