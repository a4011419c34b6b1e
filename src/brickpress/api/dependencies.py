"""Shared request helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

from brickpress.domain.identity import Identity, identity_from_user_id

if TYPE_CHECKING:
    from brickpress.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the app."""
    return request.app.state.container


def bearer_token(request: Request) -> str | None:
    """Extract a bearer token from the Authorization header."""
    header = request.headers.get("authorization")
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def resolve_caller(request: Request, explicit_user_id: str | None = None) -> Identity:
    """Resolve the caller, preferring an explicitly supplied user id."""
    if explicit_user_id and explicit_user_id.strip():
        return identity_from_user_id(explicit_user_id)
    container = get_container(request)
    return container.identity_service.resolve(bearer_token(request))
