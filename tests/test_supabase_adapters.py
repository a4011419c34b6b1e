"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from brickpress.adapters.supabase_blob_store import SupabaseBlobStore
from brickpress.adapters.supabase_generation_repository import (
    SupabaseGenerationRepository,
)
from brickpress.adapters.supabase_identity_provider import SupabaseIdentityProvider
from brickpress.domain.identity import ANONYMOUS, Authenticated


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_order: tuple[str, bool] | None = None
    last_limit: int | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = (column, desc)
        return self

    def limit(self, count: int) -> "FakeTable":
        self.last_limit = count
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeBucket:
    objects: dict[str, tuple[bytes, dict[str, str]]] = field(default_factory=dict)
    signed: dict[str, object] = field(
        default_factory=lambda: {"signedURL": "https://files.test/signed"}
    )
    upload_url: dict[str, object] = field(
        default_factory=lambda: {"signed_url": "https://files.test/upload"}
    )

    def upload(self, path: str, file: bytes, file_options: dict[str, str]) -> None:
        self.objects[path] = (file, file_options)

    def create_signed_url(self, path: str, expires_in: int) -> dict[str, object]:
        return self.signed

    def create_signed_upload_url(self, path: str) -> dict[str, object]:
        return self.upload_url


@dataclass
class FakeStorage:
    buckets: dict[str, FakeBucket] = field(default_factory=dict)

    def from_(self, bucket: str) -> FakeBucket:
        return self.buckets.setdefault(bucket, FakeBucket())


@dataclass
class FakeUser:
    id: str
    email: str | None = None
    user_metadata: dict[str, object] = field(default_factory=dict)


@dataclass
class FakeUserResponse:
    user: FakeUser | None


@dataclass
class FakeAuth:
    users: dict[str, FakeUser] = field(default_factory=dict)

    def get_user(self, jwt: str) -> FakeUserResponse:
        return FakeUserResponse(user=self.users.get(jwt))


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)
    storage: FakeStorage = field(default_factory=FakeStorage)
    auth: FakeAuth = field(default_factory=FakeAuth)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _row(**overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "id": "gen-1",
        "name": "Star Voyager",
        "description": "a red spaceship",
        "theme": "galactic-conquest",
        "storage_id": "blob-1.png",
        "user_id": "user-1",
        "created_at": "2026-01-01T12:00:00+00:00",
    }
    row.update(overrides)
    return row


def test_generation_repository_insert() -> None:
    client = FakeSupabaseClient()
    table = client.table("generations")
    table.queue("insert", [_row()])
    repository = SupabaseGenerationRepository(client)

    record = repository.create_generation(
        name="Star Voyager",
        description="a red spaceship",
        theme="galactic-conquest",
        storage_id="blob-1.png",
        owner=Authenticated(id="user-1"),
        created_at=datetime(2026, 1, 1, 12, tzinfo=UTC),
    )

    assert record.id == "gen-1"
    assert record.owner == Authenticated(id="user-1")
    assert record.created_at == datetime(2026, 1, 1, 12, tzinfo=UTC)
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["user_id"] == "user-1"
    assert table.last_payload["storage_id"] == "blob-1.png"


def test_generation_repository_insert_without_rows_fails() -> None:
    client = FakeSupabaseClient()
    repository = SupabaseGenerationRepository(client)

    with pytest.raises(RuntimeError):
        repository.create_generation(
            name="x",
            description="",
            theme="",
            storage_id="blob.png",
            owner=ANONYMOUS,
            created_at=datetime.now(tz=UTC),
        )
    payload = client.table("generations").last_payload
    assert isinstance(payload, dict)
    assert payload["user_id"] is None


def test_generation_repository_lists_owner_rows() -> None:
    client = FakeSupabaseClient()
    table = client.table("generations")
    table.queue("select", [_row(id="gen-2"), _row(id="gen-1", user_id=None)])
    repository = SupabaseGenerationRepository(client)

    records = repository.list_for_owner("user-1", 20)

    assert [record.id for record in records] == ["gen-2", "gen-1"]
    assert records[1].owner == ANONYMOUS
    assert table.last_filters == [("user_id", "user-1")]
    assert table.last_order == ("created_at", True)
    assert table.last_limit == 20


def test_generation_repository_lists_recent() -> None:
    client = FakeSupabaseClient()
    table = client.table("generations")
    table.queue("select", [_row()])
    repository = SupabaseGenerationRepository(client)

    records = repository.list_recent(5)

    assert len(records) == 1
    assert table.last_filters == []
    assert table.last_limit == 5


def test_blob_store_uploads_with_extension() -> None:
    client = FakeSupabaseClient()
    store = SupabaseBlobStore(client, "generations")

    storage_id = store.store(b"poster", "image/jpeg")

    bucket = client.storage.from_("generations")
    assert storage_id.endswith(".jpg")
    assert bucket.objects[storage_id] == (b"poster", {"content-type": "image/jpeg"})


def test_blob_store_signed_urls() -> None:
    client = FakeSupabaseClient()
    store = SupabaseBlobStore(client, "generations")

    assert store.signed_url("blob-1.png", 60) == "https://files.test/signed"
    assert store.create_upload_url() == "https://files.test/upload"

    client.storage.from_("generations").upload_url = {}
    with pytest.raises(RuntimeError):
        store.create_upload_url()


def test_identity_provider_resolves_user() -> None:
    client = FakeSupabaseClient()
    client.auth.users["token"] = FakeUser(
        id="user-1", email="ada@example.com", user_metadata={"name": "Ada"}
    )
    client.auth.users["plain"] = FakeUser(id="user-2", email="bo@example.com")
    provider = SupabaseIdentityProvider(client)

    assert provider.get_user("token") == Authenticated(id="user-1", display_name="Ada")
    assert provider.get_user("plain") == Authenticated(
        id="user-2", display_name="bo@example.com"
    )
    assert provider.get_user("missing") is None
