"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from brickpress.api.admin import router as admin_router
from brickpress.api.generate import router as generate_router
from brickpress.api.relay import router as relay_router
from brickpress.api.shop import router as shop_router
from brickpress.api.ui import INDEX_HTML
from brickpress.app_logging import configure_logging
from brickpress.containers import AppContainer
from brickpress.domain.errors import BrickPressError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="BrickPress", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(BrickPressError)
    async def brickpress_error_handler(
        request: Request, exc: BrickPressError
    ) -> JSONResponse:
        logger.warning(
            "Request failed",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = validation_message(exc)
        logger.warning(
            "Invalid request",
            extra={"path": request.url.path, "error": message},
        )
        return JSONResponse({"error": message}, status_code=400)

    app.include_router(generate_router)
    app.include_router(relay_router)
    app.include_router(shop_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        """Minimal poster wizard page."""
        return HTMLResponse(INDEX_HTML)

    return app


def validation_message(exc: RequestValidationError) -> str:
    """Flatten FastAPI validation errors into one line."""
    parts = []
    for error in exc.errors():
        location = ".".join(
            str(item) for item in error.get("loc", ()) if item not in ("body", "query")
        )
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"
