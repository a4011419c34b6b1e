"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

from brickpress.api.serializers import serialize_gallery_item

if TYPE_CHECKING:
    from brickpress.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/generations", dependencies=[Depends(require_admin)])
async def list_generations(
    request: Request, limit: int = Query(default=50, ge=1, le=200)
) -> dict[str, object]:
    """Return the newest generations across all users."""
    container: AppContainer = request.app.state.container
    items = container.gallery_service.all_recent(limit)
    return {"generations": [serialize_gallery_item(item) for item in items]}
