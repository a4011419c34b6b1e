"""HTTP client for the persistence relay."""

from dataclasses import dataclass

import httpx

from brickpress.domain.identity import Identity
from brickpress.services.generation import GenerationArchive


@dataclass
class HttpxRelayClient(GenerationArchive):
    """Archive generations through the relay's upload and save endpoints."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 30.0

    @classmethod
    def create(cls, base_url: str, timeout: float = 30.0) -> "HttpxRelayClient":
        """Create a relay client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def upload_file(self, content: bytes, mime_type: str) -> str:
        """POST raw bytes to /upload-file and return the storage id."""
        response = await self.http_client.post(
            f"{self.base_url}/upload-file",
            content=content,
            headers={"Content-Type": mime_type},
            timeout=self.timeout,
        )
        response.raise_for_status()
        storage_id = response.json().get("storageId")
        if not storage_id:
            raise RuntimeError("Relay upload returned no storageId")
        return storage_id

    async def save_generation(  # noqa: PLR0913
        self,
        *,
        name: str,
        description: str,
        theme: str,
        storage_id: str,
        owner: Identity,
    ) -> None:
        """POST the record metadata to /save-generation."""
        response = await self.http_client.post(
            f"{self.base_url}/save-generation",
            json={
                "name": name,
                "description": description,
                "theme": theme,
                "storageId": storage_id,
                "userId": owner.user_id,
            },
            timeout=self.timeout,
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
