"""Tests for the label parsing API."""

import base64
import logging

from fastapi.testclient import TestClient

from nutrition_label_parser.api.app import create_app
from tests.conftest import FakeTextRecognizer


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_languages_lists_registered_profiles(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/languages")

    assert response.status_code == 200
    assert response.json() == [{"language": "latin", "display_name": "English"}]


def test_parse_returns_facts_and_entry_values(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/labels/parse",
        json={"text": "Calories 260\nProtein 5g\nTotal Carbohydrate 31g"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["confidence"] == "medium"
    assert data["diagnostics"] == ["Could not find fats"]
    assert data["facts"]["calories"] == 260
    assert data["facts"]["fat_g"] is None
    assert data["entry_values"]["fats"] == 0
    assert data["requires_review"] is True


def test_parse_without_calories_has_no_facts(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/labels/parse", json={"text": "Total Fat 13g\nProtein 5g", "language": "latin"}
    )

    data = response.json()
    assert data["facts"] is None
    assert data["entry_values"] is None
    assert data["confidence"] == "low"


def test_parse_rejects_unknown_language(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/labels/parse", json={"text": "Calories 10", "language": "klingon"}
    )

    assert response.status_code == 422


def test_scan_parses_recognized_text(container) -> None:
    client = TestClient(create_app(container))
    image = base64.b64encode(b"\xff\xd8\xffjpeg").decode()

    response = client.post("/labels/scan", json={"image_base64": image})

    assert response.status_code == 200
    data = response.json()
    assert data["confidence"] == "high"
    assert data["requires_review"] is False
    assert data["facts"]["serving"] == {"quantity": 1.0, "unit": "cup"}
    assert data["facts"]["reference"] == {"weight": 228.0, "unit": "g"}


def test_scan_rejects_invalid_base64(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/labels/scan", json={"image_base64": "not base64!"})

    assert response.status_code == 400


def test_scan_reports_ocr_failure(container, recognizer: FakeTextRecognizer) -> None:
    recognizer.text = ""
    client = TestClient(create_app(container))
    image = base64.b64encode(b"image").decode()

    response = client.post("/labels/scan", json={"image_base64": image})

    assert response.status_code == 502


def test_scan_unavailable_without_recognizer(container) -> None:
    container.label_scan_service = None
    client = TestClient(create_app(container))

    response = client.post("/labels/scan", json={"image_base64": "aW1hZ2U="})

    assert response.status_code == 503


def test_create_app_applies_configured_log_levels(container) -> None:
    container.settings.log_level = "WARNING"
    container.settings.log_overrides = {"api.app": "DEBUG"}
    module_logger = logging.getLogger("nutrition_label_parser.api.app")

    create_app(container)

    assert logging.getLogger("nutrition_label_parser").level == logging.WARNING
    assert module_logger.level == logging.DEBUG
    module_logger.setLevel(logging.NOTSET)
