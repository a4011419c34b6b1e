"""Persistence relay endpoints reachable from any origin."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pydantic
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from brickpress.api.dependencies import get_container, resolve_caller
from brickpress.api.models import SaveGenerationPayload
from brickpress.domain.errors import BrickPressError
from brickpress.domain.generations import DEFAULT_IMAGE_MIME

if TYPE_CHECKING:
    from brickpress.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["relay"])

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}
PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def _json(content: dict[str, object], status_code: int = 200) -> JSONResponse:
    return JSONResponse(content, status_code=status_code, headers=CORS_HEADERS)


def _error(exc: BrickPressError) -> JSONResponse:
    return _json({"error": str(exc)}, status_code=exc.status_code)


@router.get("/get-upload-url")
async def get_upload_url(request: Request) -> JSONResponse:
    """Mint a direct upload URL."""
    container: AppContainer = get_container(request)
    try:
        url = container.relay_service.create_upload_url()
    except Exception:
        logger.exception("Failed to create upload URL")
        return _json({"error": "Failed to create upload URL"}, status_code=500)
    return _json({"url": url})


@router.post("/upload-file")
async def upload_file(request: Request) -> JSONResponse:
    """Store the raw request body as a blob."""
    container: AppContainer = get_container(request)
    content = await request.body()
    content_type = request.headers.get("content-type", "")
    mime_type = content_type.split(";", maxsplit=1)[0].strip() or DEFAULT_IMAGE_MIME
    try:
        storage_id = await container.relay_service.upload_file(content, mime_type)
    except BrickPressError as exc:
        logger.exception("Relay upload failed")
        return _error(exc)
    return _json({"storageId": storage_id})


@router.post("/save-generation")
async def save_generation(request: Request) -> JSONResponse:
    """Write a generation record for a stored blob."""
    container: AppContainer = get_container(request)
    try:
        payload = SaveGenerationPayload.model_validate(await request.json())
    except (ValueError, pydantic.ValidationError):
        return _json({"error": "Invalid JSON payload"}, status_code=400)
    owner = resolve_caller(request, payload.user_id)
    try:
        await container.relay_service.save_generation(
            name=payload.name,
            description=payload.description,
            theme=payload.theme,
            storage_id=payload.storage_id or "",
            owner=owner,
        )
    except BrickPressError as exc:
        logger.exception("Relay save failed")
        return _error(exc)
    return _json({"success": True})


async def _preflight() -> Response:
    return Response(status_code=204, headers=PREFLIGHT_HEADERS)


for _path in ("/get-upload-url", "/upload-file", "/save-generation"):
    router.add_api_route(
        _path, _preflight, methods=["OPTIONS"], include_in_schema=False
    )
