"""Caller identity resolved at the HTTP boundary."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Anonymous:
    """Caller without a valid session."""

    @property
    def user_id(self) -> None:
        return None


@dataclass(frozen=True)
class Authenticated:
    """Caller with a session issued by the auth provider."""

    id: str
    display_name: str | None = None

    @property
    def user_id(self) -> str:
        return self.id


Identity = Anonymous | Authenticated

ANONYMOUS = Anonymous()


def identity_from_user_id(user_id: str | None) -> Identity:
    """Build an identity from a stored or caller-supplied user id."""
    if user_id is None or not str(user_id).strip():
        return ANONYMOUS
    return Authenticated(id=str(user_id).strip())
