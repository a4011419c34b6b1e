"""Poster generation, manual save and gallery endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, File, Form, Query, Request, UploadFile
from fastapi.responses import JSONResponse

from brickpress.api.dependencies import get_container, resolve_caller
from brickpress.api.models import SaveCreationPayload  # noqa: TC001
from brickpress.api.serializers import serialize_gallery_item
from brickpress.domain.errors import BrickPressError, ValidationError
from brickpress.domain.generations import (
    DEFAULT_IMAGE_MIME,
    GenerationRequest,
    ImageUpload,
    parse_data_uri,
)
from brickpress.domain.themes import parse_model_type, parse_theme

if TYPE_CHECKING:
    from brickpress.containers import AppContainer
    from brickpress.domain.themes import Theme

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generate"])

DEBUG_THEME_LABEL = "Debug"


@router.post("/generate", response_model=None)
async def generate(  # noqa: PLR0913
    request: Request,
    image: UploadFile | None = File(default=None),
    name: str = Form(default=""),
    description: str = Form(default=""),
    theme: str | None = Form(default=None),
    model_type: str | None = Form(default=None, alias="modelType"),
    use_original_prompt: str = Form(default="false", alias="useOriginalPrompt"),
    user_id: str | None = Form(default=None, alias="userId"),
) -> dict[str, object] | JSONResponse:
    """Generate a poster from an uploaded photo."""
    container: AppContainer = get_container(request)
    upload = await _read_upload(image)
    use_original = use_original_prompt.strip().lower() == "true"
    try:
        parsed_theme = _parse_requested_theme(theme, use_original)
        parsed_model_type = parse_model_type(model_type)
    except ValueError as exc:
        raise ValidationError(f"Unknown theme or model type: {exc}") from exc

    generation_request = GenerationRequest(
        image=upload,
        name=name,
        description=description,
        theme=parsed_theme,
        use_original_prompt=use_original,
        owner=resolve_caller(request, user_id),
        model_type=parsed_model_type,
    )
    try:
        outcome = await container.generation_service.generate(generation_request)
    except BrickPressError:
        raise
    except Exception as exc:
        logger.exception("Error generating poster")
        return JSONResponse(
            {"error": _internal_error_message(container, exc)}, status_code=500
        )
    return {"success": True, "image": outcome.image.data_uri}


@router.post("/save-creation", response_model=None)
async def save_creation(
    payload: SaveCreationPayload, request: Request
) -> dict[str, object] | JSONResponse:
    """Archive an already generated poster."""
    container: AppContainer = get_container(request)
    owner = resolve_caller(request, payload.user_id)
    image = parse_data_uri(payload.image)
    logger.info("Manual save requested", extra={"user_id": owner.user_id})
    try:
        storage_id = await container.archive.upload_file(image.data, image.mime_type)
        await container.archive.save_generation(
            name=payload.name,
            description=payload.description,
            theme=payload.theme or DEBUG_THEME_LABEL,
            storage_id=storage_id,
            owner=owner,
        )
    except BrickPressError:
        raise
    except Exception as exc:
        logger.exception("Manual save failed")
        return JSONResponse({"error": str(exc)}, status_code=500)
    return {"success": True, "storageId": storage_id}


@router.get("/generations")
async def recent_generations(
    request: Request, limit: int | None = Query(default=None, ge=1, le=100)
) -> dict[str, object]:
    """Return the caller's most recent creations."""
    container: AppContainer = get_container(request)
    identity = resolve_caller(request)
    items = container.gallery_service.recent(
        identity, limit or container.settings.gallery_limit
    )
    return {"generations": [serialize_gallery_item(item) for item in items]}


async def _read_upload(image: UploadFile | None) -> ImageUpload | None:
    if image is None:
        return None
    content = await image.read()
    if not content:
        return None
    return ImageUpload(
        content=content,
        mime_type=image.content_type or DEFAULT_IMAGE_MIME,
        filename=image.filename,
    )


def _internal_error_message(container: AppContainer, exc: Exception) -> str:
    """Return the error text, with detail only in local environments."""
    if container.settings.environment == "local":
        return str(exc) or "Internal Server Error"
    return "Internal Server Error"


def _parse_requested_theme(raw: str | None, use_original: bool) -> Theme | None:
    """Parse the theme; an unknown value means no selection on the original path."""
    if not use_original:
        return parse_theme(raw)
    try:
        return parse_theme(raw)
    except ValueError:
        return None
