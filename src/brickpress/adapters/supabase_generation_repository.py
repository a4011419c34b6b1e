"""Supabase-backed generation repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from brickpress.domain.generations import GenerationRecord
from brickpress.domain.identity import Identity, identity_from_user_id
from brickpress.services.relay import GenerationRepository

_COLUMNS = "id, name, description, theme, storage_id, user_id, created_at"


@dataclass
class SupabaseGenerationRepository(GenerationRepository):
    """Supabase implementation for generation records."""

    client: Client

    def create_generation(  # noqa: PLR0913
        self,
        name: str,
        description: str,
        theme: str,
        storage_id: str,
        owner: Identity,
        created_at: datetime,
    ) -> GenerationRecord:
        """Insert a generation row and return it."""
        response = (
            self.client.table("generations")
            .insert(
                {
                    "name": name,
                    "description": description,
                    "theme": theme,
                    "storage_id": storage_id,
                    "user_id": owner.user_id,
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create generation record")
        return _row_to_record(response.data[0])

    def list_for_owner(self, user_id: str, limit: int) -> list[GenerationRecord]:
        """Return a user's generations, newest first."""
        response = (
            self.client.table("generations")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_row_to_record(row) for row in response.data or []]

    def list_recent(self, limit: int) -> list[GenerationRecord]:
        """Return generations across all users, newest first."""
        response = (
            self.client.table("generations")
            .select(_COLUMNS)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_row_to_record(row) for row in response.data or []]


def _row_to_record(row: dict[str, object]) -> GenerationRecord:
    return GenerationRecord(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        description=str(row.get("description") or ""),
        theme=str(row.get("theme") or ""),
        storage_id=str(row["storage_id"]),
        owner=identity_from_user_id(row.get("user_id")),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
