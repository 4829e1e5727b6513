"""Authentication strategies.

Architecture:
    Requests are authenticated by an ``Authenticator`` that attaches
    credentials to the outgoing request headers. New strategies are added as
    new implementations of the protocol, not through inheritance.

Strategies:
    - Unauthenticated: public endpoints only, attaches nothing
    - BearerToken: OAuth access token sent as ``Authorization: Bearer``
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Protocol

from .exceptions import ConfigurationError


class Authenticator(Protocol):
    """Protocol for strategies that attach credentials to a request."""

    def attach_credentials(self, headers: MutableMapping[str, str]) -> None:
        """Add credentials to the outgoing request headers."""
        ...

    @property
    def access_token(self) -> str | None:
        """Token to pass as a query parameter where headers are unavailable."""
        ...


@dataclass(frozen=True)
class Unauthenticated:
    """The null strategy; only public endpoints will succeed."""

    def attach_credentials(self, headers: MutableMapping[str, str]) -> None:
        return None

    @property
    def access_token(self) -> str | None:
        return None


@dataclass(frozen=True)
class BearerToken:
    """Authenticate with an OAuth access token."""

    token: str

    def __post_init__(self) -> None:
        if not self.token or not self.token.strip():
            raise ConfigurationError("BearerToken requires a non-empty token")

    def attach_credentials(self, headers: MutableMapping[str, str]) -> None:
        headers["Authorization"] = f"Bearer {self.token}"

    @property
    def access_token(self) -> str | None:
        return self.token

    def __repr__(self) -> str:
        return "BearerToken(token='***')"
