"""Recent creations for the signed-in user."""

import logging
from dataclasses import dataclass

from brickpress.domain.generations import GalleryItem, GenerationRecord
from brickpress.domain.identity import Anonymous, Identity
from brickpress.services.relay import BlobStore, GenerationRepository

logger = logging.getLogger(__name__)

DEFAULT_GALLERY_LIMIT = 20


@dataclass
class GalleryService:
    """Read recent generation records joined with image URLs."""

    repository: GenerationRepository
    blob_store: BlobStore
    url_ttl_seconds: int = 3600

    def recent(
        self, identity: Identity, limit: int = DEFAULT_GALLERY_LIMIT
    ) -> list[GalleryItem]:
        """Return the caller's newest records; empty when anonymous or on failure."""
        if isinstance(identity, Anonymous):
            return []
        try:
            records = self.repository.list_for_owner(identity.id, limit)
        except Exception:
            logger.exception("Gallery lookup failed", extra={"user_id": identity.id})
            return []
        records = sorted(records, key=lambda record: record.created_at, reverse=True)
        return [self._with_url(record) for record in records[:limit]]

    def all_recent(self, limit: int = DEFAULT_GALLERY_LIMIT) -> list[GalleryItem]:
        """Return the newest records across all owners."""
        records = self.repository.list_recent(limit)
        return [self._with_url(record) for record in records[:limit]]

    def _with_url(self, record: GenerationRecord) -> GalleryItem:
        try:
            url = self.blob_store.signed_url(record.storage_id, self.url_ttl_seconds)
        except Exception:
            logger.exception(
                "Failed to sign image URL", extra={"storage_id": record.storage_id}
            )
            url = None
        return GalleryItem(record=record, image_url=url)
