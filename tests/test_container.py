"""Tests for container wiring."""

import asyncio

from brickpress.adapters.gemini_image_client import GeminiImageClient
from brickpress.adapters.openai_image_client import OpenAIImageClient
from brickpress.adapters.relay_client import HttpxRelayClient
from brickpress.containers import build_container, build_image_generator


def test_build_container_uses_in_process_relay(settings) -> None:
    container = build_container(settings)

    assert container.archive is container.relay_service
    assert container.generation_service.generator is None
    asyncio.run(container.close_resources())


def test_build_container_with_relay_url(settings) -> None:
    settings.relay_url = "https://relay.test/ "
    container = build_container(settings)

    assert isinstance(container.archive, HttpxRelayClient)
    assert container.archive.base_url == "https://relay.test"
    asyncio.run(container.close_resources())


def test_build_image_generator_selects_provider(settings) -> None:
    settings.google_api_key = "google-key"
    assert isinstance(build_image_generator(settings), GeminiImageClient)

    settings.image_provider = "openai"
    assert build_image_generator(settings) is None

    settings.openai_api_key = "openai-key"
    assert isinstance(build_image_generator(settings), OpenAIImageClient)
