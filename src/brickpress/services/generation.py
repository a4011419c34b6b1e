"""Poster generation orchestration."""

import logging
from dataclasses import dataclass
from typing import Protocol

from brickpress.domain.errors import (
    ConfigurationError,
    GenerationError,
    ValidationError,
)
from brickpress.domain.generations import (
    GeneratedImage,
    GenerationOutcome,
    GenerationRequest,
    ImageUpload,
)
from brickpress.domain.identity import Identity
from brickpress.domain.themes import RANDOM_THEME_LABEL
from brickpress.services.prompts import POSTER_ASPECT_RATIO, build_prompt

logger = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = "Model generated a response but it contained no image data."


class ImageGenerator(Protocol):
    """Interface for an image model that renders posters."""

    async def generate(
        self, *, prompt: str, image: ImageUpload, aspect_ratio: str
    ) -> GeneratedImage | None:
        """Return the first generated image, or None when the model sent none."""


class GenerationArchive(Protocol):
    """Interface for storing generated posters."""

    async def upload_file(self, content: bytes, mime_type: str) -> str:
        """Store image bytes and return the storage id."""

    async def save_generation(  # noqa: PLR0913
        self,
        *,
        name: str,
        description: str,
        theme: str,
        storage_id: str,
        owner: Identity,
    ) -> None:
        """Persist a generation record that references ``storage_id``."""


@dataclass
class GenerationService:
    """Generate a poster, then archive it on a best-effort basis."""

    generator: ImageGenerator | None
    archive: GenerationArchive | None

    async def generate(self, request: GenerationRequest) -> GenerationOutcome:
        """Run the generate phase and, when it succeeds, the archive phase."""
        image = _validate(request)
        if self.generator is None:
            raise ConfigurationError("API Key not configured")

        prompt = build_prompt(
            request.theme,
            request.use_original_prompt,
            request.name,
            request.description,
            request.model_type,
        )
        logger.info(
            "Generating poster",
            extra={
                "theme": request.theme,
                "model_type": request.model_type,
                "use_original_prompt": request.use_original_prompt,
            },
        )
        try:
            generated = await self.generator.generate(
                prompt=prompt, image=image, aspect_ratio=POSTER_ASPECT_RATIO
            )
        except GenerationError:
            raise
        except Exception as exc:
            raise GenerationError(str(exc) or type(exc).__name__) from exc
        if generated is None:
            logger.warning("Image model returned no inline image")
            raise GenerationError(NO_IMAGE_MESSAGE)

        storage_id = await self._archive(request, generated)
        return GenerationOutcome(image=generated, storage_id=storage_id)

    async def _archive(
        self, request: GenerationRequest, generated: GeneratedImage
    ) -> str | None:
        """Store the poster; failures are logged and never raised."""
        if self.archive is None:
            logger.warning("No generation archive configured, skipping save")
            return None
        try:
            storage_id = await self.archive.upload_file(
                generated.data, generated.mime_type
            )
            await self.archive.save_generation(
                name=request.name,
                description=request.description,
                theme=request.theme or RANDOM_THEME_LABEL,
                storage_id=storage_id,
                owner=request.owner,
            )
        except Exception:
            logger.exception(
                "Failed to archive generated poster",
                extra={"user_id": request.owner.user_id},
            )
            return None
        logger.info("Generation archived", extra={"storage_id": storage_id})
        return storage_id


def _validate(request: GenerationRequest) -> ImageUpload:
    if request.image is None or not request.image.content:
        raise ValidationError("No image provided")
    if not request.use_original_prompt and request.theme is None:
        raise ValidationError("Theme selection required")
    return request.image
