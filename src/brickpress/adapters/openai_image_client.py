"""OpenAI Images API client for poster generation."""

import base64
from dataclasses import dataclass

from openai import AsyncOpenAI

from brickpress.domain.generations import GeneratedImage, ImageUpload
from brickpress.services.generation import ImageGenerator

# Closest portrait size the Images API offers for a 3:4 request.
_PORTRAIT_SIZES = {"3:4": "1024x1536", "1:1": "1024x1024", "4:3": "1536x1024"}


@dataclass
class OpenAIImageClient(ImageGenerator):
    """Image generator backed by the OpenAI images edit endpoint."""

    client: AsyncOpenAI
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "OpenAIImageClient":
        """Create an OpenAI image client."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model)

    async def generate(
        self, *, prompt: str, image: ImageUpload, aspect_ratio: str
    ) -> GeneratedImage | None:
        """Render the poster from the source photo."""
        response = await self.client.images.edit(
            model=self.model,
            image=(image.filename or "source.png", image.content, image.mime_type),
            prompt=prompt,
            size=_PORTRAIT_SIZES.get(aspect_ratio, "auto"),
        )
        for item in response.data or []:
            if item.b64_json:
                return GeneratedImage(
                    data=base64.b64decode(item.b64_json), mime_type="image/png"
                )
        return None
