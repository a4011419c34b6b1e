"""Supabase Auth-backed identity provider."""

from dataclasses import dataclass

from supabase import Client

from brickpress.domain.identity import Authenticated
from brickpress.services.identity import IdentityProvider


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Look up session tokens with Supabase Auth."""

    client: Client

    def get_user(self, access_token: str) -> Authenticated | None:
        """Return the user behind an access token."""
        response = self.client.auth.get_user(access_token)
        user = getattr(response, "user", None)
        if user is None:
            return None
        metadata = getattr(user, "user_metadata", None) or {}
        display_name = metadata.get("name") or getattr(user, "email", None)
        return Authenticated(id=str(user.id), display_name=display_name)
