"""FastAPI application factory."""

import base64
import binascii
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from nutrition_label_parser.api.models import (
    LanguageModel,
    ParseLabelRequest,
    ParseLabelResponse,
    ScanLabelRequest,
)
from nutrition_label_parser.app_logging import configure_logging
from nutrition_label_parser.containers import AppContainer
from nutrition_label_parser.domain.terms import LANGUAGE_PROFILES
from nutrition_label_parser.services.ocr import OcrError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(
        container.settings.log_level, container.settings.log_overrides
    )
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/languages")
    async def languages() -> list[LanguageModel]:
        """List languages with a registered label profile."""
        return [
            LanguageModel(language=profile.language, display_name=profile.display_name)
            for profile in LANGUAGE_PROFILES.values()
        ]

    @app.post("/labels/parse")
    async def parse_label(
        body: ParseLabelRequest, request: Request
    ) -> ParseLabelResponse:
        """Parse OCR text from a nutrition label."""
        state_container: AppContainer = request.app.state.container
        result = state_container.label_parser.parse(body.text, body.language)
        return ParseLabelResponse.from_result(result)

    @app.post("/labels/scan")
    async def scan_label(
        body: ScanLabelRequest, request: Request
    ) -> ParseLabelResponse:
        """Recognize a label photo and parse the recognized text."""
        state_container: AppContainer = request.app.state.container
        scan_service = state_container.label_scan_service
        if scan_service is None:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Label OCR is not configured.",
            )
        try:
            image_bytes = base64.b64decode(body.image_base64, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="image_base64 is not valid base64.",
            ) from exc
        try:
            result = await scan_service.scan(image_bytes, body.language)
        except OcrError as exc:
            logger.warning("Label OCR failed: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Could not read text from the image.",
            ) from exc
        return ParseLabelResponse.from_result(result)

    return app
