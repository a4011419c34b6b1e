"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

import pytest

from brickpress.config import Settings
from brickpress.containers import AppContainer
from brickpress.domain.generations import (
    GeneratedImage,
    GenerationRecord,
    ImageUpload,
)
from brickpress.domain.identity import Authenticated, Identity
from brickpress.services.gallery import GalleryService
from brickpress.services.generation import (
    GenerationArchive,
    GenerationService,
    ImageGenerator,
)
from brickpress.services.identity import IdentityProvider, IdentityService
from brickpress.services.orders import PrintShopService
from brickpress.services.relay import BlobStore, GenerationRepository, RelayService

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"poster-bytes"
PHOTO_BYTES = b"\xff\xd8\xff" + b"photo-bytes"
USER_TOKEN = "user-token"
USER_ID = "user-123"


@dataclass
class FakeImageGenerator(ImageGenerator):
    """Fake image model that records prompts."""

    result: GeneratedImage | None = field(
        default_factory=lambda: GeneratedImage(data=PNG_BYTES, mime_type="image/png")
    )
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate(
        self, *, prompt: str, image: ImageUpload, aspect_ratio: str
    ) -> GeneratedImage | None:
        self.calls.append(
            {"prompt": prompt, "image": image, "aspect_ratio": aspect_ratio}
        )
        if self.error is not None:
            raise self.error
        return self.result


@dataclass
class InMemoryBlobStore(BlobStore):
    """In-memory blob store for tests."""

    blobs: dict[str, tuple[bytes, str]] = field(default_factory=dict)
    fail_store: bool = False
    unsigned: set[str] = field(default_factory=set)

    def store(self, content: bytes, mime_type: str) -> str:
        if self.fail_store:
            raise RuntimeError("storage unavailable")
        storage_id = f"{uuid4()}.png"
        self.blobs[storage_id] = (content, mime_type)
        return storage_id

    def signed_url(self, storage_id: str, expires_in: int) -> str | None:
        if storage_id in self.unsigned:
            raise RuntimeError("cannot sign")
        return f"https://files.test/{storage_id}?ttl={expires_in}"

    def create_upload_url(self) -> str:
        return f"https://files.test/upload/{uuid4()}"


@dataclass
class InMemoryGenerationRepository(GenerationRepository):
    """In-memory generation repository for tests."""

    records: list[GenerationRecord] = field(default_factory=list)
    fail: bool = False

    def create_generation(  # noqa: PLR0913
        self,
        name: str,
        description: str,
        theme: str,
        storage_id: str,
        owner: Identity,
        created_at: datetime,
    ) -> GenerationRecord:
        if self.fail:
            raise RuntimeError("database unavailable")
        record = GenerationRecord(
            id=str(uuid4()),
            name=name,
            description=description,
            theme=theme,
            storage_id=storage_id,
            owner=owner,
            created_at=created_at,
        )
        self.records.append(record)
        return record

    def list_for_owner(self, user_id: str, limit: int) -> list[GenerationRecord]:
        if self.fail:
            raise RuntimeError("database unavailable")
        owned = [record for record in self.records if record.owner.user_id == user_id]
        return sorted(owned, key=lambda record: record.created_at, reverse=True)[
            :limit
        ]

    def list_recent(self, limit: int) -> list[GenerationRecord]:
        return sorted(self.records, key=lambda record: record.created_at, reverse=True)[
            :limit
        ]


@dataclass
class RecordingArchive(GenerationArchive):
    """Archive that records calls and can be told to fail."""

    uploads: list[tuple[bytes, str]] = field(default_factory=list)
    saved: list[dict[str, object]] = field(default_factory=list)
    fail_upload: bool = False
    fail_save: bool = False

    async def upload_file(self, content: bytes, mime_type: str) -> str:
        if self.fail_upload:
            raise RuntimeError("upload failed")
        self.uploads.append((content, mime_type))
        return f"storage-{len(self.uploads)}"

    async def save_generation(  # noqa: PLR0913
        self,
        *,
        name: str,
        description: str,
        theme: str,
        storage_id: str,
        owner: Identity,
    ) -> None:
        if self.fail_save:
            raise RuntimeError("save failed")
        self.saved.append(
            {
                "name": name,
                "description": description,
                "theme": theme,
                "storage_id": storage_id,
                "owner": owner,
            }
        )


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Identity provider with a fixed token table."""

    users: dict[str, Authenticated] = field(
        default_factory=lambda: {
            USER_TOKEN: Authenticated(id=USER_ID, display_name="Builder")
        }
    )
    error: Exception | None = None

    def get_user(self, access_token: str) -> Authenticated | None:
        if self.error is not None:
            raise self.error
        return self.users.get(access_token)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        admin_token="admin-token",
        google_api_key=None,
        openai_api_key=None,
        relay_url=None,
        environment="test",
    )


@pytest.fixture
def image_generator() -> FakeImageGenerator:
    return FakeImageGenerator()


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def generation_repository() -> InMemoryGenerationRepository:
    return InMemoryGenerationRepository()


@pytest.fixture
def relay_service(
    blob_store: InMemoryBlobStore,
    generation_repository: InMemoryGenerationRepository,
) -> RelayService:
    return RelayService(blob_store=blob_store, repository=generation_repository)


@pytest.fixture
def container(
    settings: Settings,
    image_generator: FakeImageGenerator,
    blob_store: InMemoryBlobStore,
    generation_repository: InMemoryGenerationRepository,
    relay_service: RelayService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        identity_service=IdentityService(FakeIdentityProvider()),
        relay_service=relay_service,
        archive=relay_service,
        generation_service=GenerationService(
            generator=image_generator, archive=relay_service
        ),
        gallery_service=GalleryService(
            repository=generation_repository, blob_store=blob_store
        ),
        print_shop_service=PrintShopService(),
        close_resources=close_resources,
    )
