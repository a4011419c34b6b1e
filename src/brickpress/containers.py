"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from brickpress.adapters.gemini_image_client import GeminiImageClient
from brickpress.adapters.openai_image_client import OpenAIImageClient
from brickpress.adapters.relay_client import HttpxRelayClient
from brickpress.adapters.supabase_blob_store import SupabaseBlobStore
from brickpress.adapters.supabase_generation_repository import (
    SupabaseGenerationRepository,
)
from brickpress.adapters.supabase_identity_provider import SupabaseIdentityProvider
from brickpress.config import Settings, normalize_base_url
from brickpress.services.gallery import GalleryService
from brickpress.services.generation import (
    GenerationArchive,
    GenerationService,
    ImageGenerator,
)
from brickpress.services.identity import IdentityService
from brickpress.services.orders import PrintShopService
from brickpress.services.relay import RelayService

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_service: IdentityService
    relay_service: RelayService
    archive: GenerationArchive
    generation_service: GenerationService
    gallery_service: GalleryService
    print_shop_service: PrintShopService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    blob_store = SupabaseBlobStore(supabase_client, resolved_settings.storage_bucket)
    generation_repository = SupabaseGenerationRepository(supabase_client)
    relay_service = RelayService(
        blob_store=blob_store, repository=generation_repository
    )

    relay_url = normalize_base_url(resolved_settings.relay_url)
    relay_client: HttpxRelayClient | None = None
    archive: GenerationArchive = relay_service
    if relay_url:
        relay_client = HttpxRelayClient.create(
            relay_url, timeout=resolved_settings.relay_timeout_seconds
        )
        archive = relay_client

    generation_service = GenerationService(
        generator=build_image_generator(resolved_settings),
        archive=archive,
    )
    gallery_service = GalleryService(
        repository=generation_repository,
        blob_store=blob_store,
        url_ttl_seconds=resolved_settings.signed_url_ttl_seconds,
    )

    async def close_resources() -> None:
        if relay_client is not None:
            await relay_client.close()

    return AppContainer(
        settings=resolved_settings,
        identity_service=IdentityService(SupabaseIdentityProvider(supabase_client)),
        relay_service=relay_service,
        archive=archive,
        generation_service=generation_service,
        gallery_service=gallery_service,
        print_shop_service=PrintShopService(),
        close_resources=close_resources,
    )


def build_image_generator(settings: Settings) -> ImageGenerator | None:
    """Create the configured image generator, or None without a credential."""
    if settings.image_provider == "openai":
        if not settings.openai_api_key:
            logger.warning("OPENAI_API_KEY is not set, generation is disabled")
            return None
        return OpenAIImageClient.create(
            settings.openai_api_key, settings.openai_image_model
        )
    if not settings.google_api_key:
        logger.warning("GOOGLE_API_KEY is not set, generation is disabled")
        return None
    return GeminiImageClient.create(settings.google_api_key, settings.gemini_model)
