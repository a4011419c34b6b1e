"""Caller identity resolution."""

import logging
from dataclasses import dataclass
from typing import Protocol

from brickpress.domain.identity import ANONYMOUS, Authenticated, Identity

logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    """Interface to the external auth provider."""

    def get_user(self, access_token: str) -> Authenticated | None:
        """Return the user for a session token, or None when it is not valid."""


@dataclass
class IdentityService:
    """Resolve session tokens into identities, never raising."""

    provider: IdentityProvider

    def resolve(self, access_token: str | None) -> Identity:
        """Return the caller identity, falling back to anonymous."""
        if not access_token:
            return ANONYMOUS
        try:
            user = self.provider.get_user(access_token)
        except Exception:
            logger.warning("Auth lookup failed, treating caller as anonymous")
            return ANONYMOUS
        return user or ANONYMOUS
