"""ASGI entrypoint for the BrickPress API."""

from brickpress.api.app import create_app
from brickpress.containers import build_container

app = create_app(build_container())
