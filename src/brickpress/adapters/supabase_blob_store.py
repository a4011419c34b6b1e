"""Supabase Storage-backed blob store."""

import mimetypes
from dataclasses import dataclass
from uuid import uuid4

from supabase import Client

from brickpress.services.relay import BlobStore


@dataclass
class SupabaseBlobStore(BlobStore):
    """Store generated posters in a Supabase Storage bucket."""

    client: Client
    bucket: str

    def store(self, content: bytes, mime_type: str) -> str:
        """Upload bytes under a fresh object key and return the key."""
        storage_id = f"{uuid4()}{_extension(mime_type)}"
        self.client.storage.from_(self.bucket).upload(
            storage_id,
            content,
            {"content-type": mime_type},
        )
        return storage_id

    def signed_url(self, storage_id: str, expires_in: int) -> str | None:
        """Return a signed download URL for an object."""
        result = self.client.storage.from_(self.bucket).create_signed_url(
            storage_id, expires_in
        )
        return result.get("signedURL") or result.get("signedUrl")

    def create_upload_url(self) -> str:
        """Return a signed URL that accepts one direct upload."""
        result = self.client.storage.from_(self.bucket).create_signed_upload_url(
            str(uuid4())
        )
        url = result.get("signed_url") or result.get("signedUrl")
        if not url:
            raise RuntimeError("Supabase returned no signed upload URL")
        return url


def _extension(mime_type: str) -> str:
    if mime_type == "image/jpeg":
        return ".jpg"
    return mimetypes.guess_extension(mime_type) or ""
