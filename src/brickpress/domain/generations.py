"""Domain models for poster generation."""

import base64
import binascii
from dataclasses import dataclass
from datetime import datetime

from brickpress.domain.errors import ValidationError
from brickpress.domain.identity import Identity
from brickpress.domain.themes import ModelType, Theme

DEFAULT_IMAGE_MIME = "image/png"


@dataclass(frozen=True)
class ImageUpload:
    """Image supplied by the caller."""

    content: bytes
    mime_type: str = DEFAULT_IMAGE_MIME
    filename: str | None = None


@dataclass(frozen=True)
class GeneratedImage:
    """Image returned by the image model."""

    data: bytes
    mime_type: str = DEFAULT_IMAGE_MIME

    @property
    def data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("utf-8")
        return f"data:{self.mime_type};base64,{encoded}"


@dataclass(frozen=True)
class GenerationRequest:
    """Inputs for a single poster generation."""

    image: ImageUpload | None
    name: str
    description: str
    theme: Theme | None
    use_original_prompt: bool
    owner: Identity
    model_type: ModelType = ModelType.UNKNOWN


@dataclass(frozen=True)
class GenerationOutcome:
    """Result of a generation plus what happened to the archive copy."""

    image: GeneratedImage
    storage_id: str | None = None

    @property
    def archived(self) -> bool:
        return self.storage_id is not None


@dataclass(frozen=True)
class GenerationRecord:
    """Persisted metadata for one produced poster."""

    id: str
    name: str
    description: str
    theme: str
    storage_id: str
    owner: Identity
    created_at: datetime


@dataclass(frozen=True)
class GalleryItem:
    """Generation record joined with a resolved image URL."""

    record: GenerationRecord
    image_url: str | None


def parse_data_uri(value: str) -> GeneratedImage:
    """Decode a ``data:<mime>;base64,<payload>`` string."""
    header, sep, payload = value.partition(",")
    if not sep or not header.startswith("data:") or ";base64" not in header:
        raise ValidationError("Image must be a base64 data URI")
    mime_type = header[len("data:") :].split(";", maxsplit=1)[0] or DEFAULT_IMAGE_MIME
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError("Image data is not valid base64") from exc
    if not data:
        raise ValidationError("Image data is empty")
    return GeneratedImage(data=data, mime_type=mime_type)
