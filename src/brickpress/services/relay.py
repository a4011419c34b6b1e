"""Persistence relay in front of blob storage and the generations table."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from brickpress.domain.errors import PersistenceError, ValidationError
from brickpress.domain.generations import GenerationRecord
from brickpress.domain.identity import Identity

logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    """Interface for binary image storage."""

    def store(self, content: bytes, mime_type: str) -> str:
        """Store bytes and return a new storage id."""

    def signed_url(self, storage_id: str, expires_in: int) -> str | None:
        """Return a time-limited download URL for a stored blob."""

    def create_upload_url(self) -> str:
        """Return a URL that accepts a direct upload of one blob."""


class GenerationRepository(Protocol):
    """Persistence interface for generation records."""

    def create_generation(  # noqa: PLR0913
        self,
        name: str,
        description: str,
        theme: str,
        storage_id: str,
        owner: Identity,
        created_at: datetime,
    ) -> GenerationRecord:
        """Insert a generation record and return it."""

    def list_for_owner(self, user_id: str, limit: int) -> list[GenerationRecord]:
        """Return the owner's records, newest first."""

    def list_recent(self, limit: int) -> list[GenerationRecord]:
        """Return records across all owners, newest first."""


@dataclass
class RelayService:
    """Upload blobs and write generation records on behalf of clients."""

    blob_store: BlobStore
    repository: GenerationRepository

    def create_upload_url(self) -> str:
        """Mint a direct upload URL."""
        return self.blob_store.create_upload_url()

    async def upload_file(self, content: bytes, mime_type: str) -> str:
        """Store a blob and return its storage id."""
        if not content:
            raise ValidationError("Empty upload")
        try:
            storage_id = self.blob_store.store(content, mime_type)
        except Exception as exc:
            raise PersistenceError(f"Failed to upload to storage: {exc}") from exc
        logger.info("Stored blob", extra={"storage_id": storage_id})
        return storage_id

    async def save_generation(  # noqa: PLR0913
        self,
        *,
        name: str,
        description: str,
        theme: str,
        storage_id: str,
        owner: Identity,
    ) -> GenerationRecord:
        """Write a generation record for an uploaded blob."""
        if not storage_id:
            raise ValidationError("storageId is required")
        logger.info(
            "Saving generation",
            extra={"user_id": owner.user_id or "anonymous"},
        )
        try:
            return self.repository.create_generation(
                name=name,
                description=description,
                theme=theme,
                storage_id=storage_id,
                owner=owner,
                created_at=datetime.now(tz=UTC),
            )
        except Exception as exc:
            raise PersistenceError("Failed to save generation record") from exc
