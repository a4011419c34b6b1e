"""Serverless entrypoint for the poster API and persistence relay."""

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from brickpress.api.asgi import app  # noqa: E402

__all__ = ["app"]
