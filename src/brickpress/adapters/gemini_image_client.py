"""Gemini image generation client."""

from dataclasses import dataclass

from google import genai
from google.genai import types

from brickpress.domain.generations import (
    DEFAULT_IMAGE_MIME,
    GeneratedImage,
    ImageUpload,
)
from brickpress.services.generation import ImageGenerator


@dataclass
class GeminiImageClient(ImageGenerator):
    """Image generator backed by the Gemini ``generate_content`` API."""

    client: genai.Client
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "GeminiImageClient":
        """Create a Gemini image client."""
        return cls(client=genai.Client(api_key=api_key), model=model)

    async def generate(
        self, *, prompt: str, image: ImageUpload, aspect_ratio: str
    ) -> GeneratedImage | None:
        """Send the prompt and source photo, requesting an image-only reply."""
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=[
                types.Content(
                    role="user",
                    parts=[
                        types.Part.from_text(text=prompt),
                        types.Part.from_bytes(
                            data=image.content,
                            mime_type=image.mime_type or DEFAULT_IMAGE_MIME,
                        ),
                    ],
                )
            ],
            config=types.GenerateContentConfig(
                response_modalities=["IMAGE"],
                image_config=types.ImageConfig(aspect_ratio=aspect_ratio),
            ),
        )
        return first_inline_image(response)


def first_inline_image(response: object) -> GeneratedImage | None:
    """Return the first inline image part of the first candidate."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    for part in getattr(content, "parts", None) or []:
        inline_data = getattr(part, "inline_data", None)
        if inline_data is None:
            continue
        data = getattr(inline_data, "data", None)
        if not data:
            continue
        mime_type = getattr(inline_data, "mime_type", None) or DEFAULT_IMAGE_MIME
        return GeneratedImage(data=data, mime_type=mime_type)
    return None
