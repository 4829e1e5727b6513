"""Client and transport configuration.

Configuration objects are plain dataclasses validated at construction, so a
misconfigured client fails when it is built rather than on its first request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

from .auth import Authenticator, BearerToken, Unauthenticated
from .exceptions import ConfigurationError

DEFAULT_USER_AGENT = "tusk-client/0.1"


@dataclass
class TransportConfig:
    """WebSocket connection settings."""

    ping_interval: float | None = 30
    ping_timeout: float | None = 10
    open_timeout: float | None = 10
    close_timeout: float | None = 10
    max_size: int | None = None  # bytes; None = websockets default
    max_queue: int | None = 1024  # number of messages queued; None = websockets default

    def __post_init__(self) -> None:
        for name in ("ping_interval", "ping_timeout", "open_timeout", "close_timeout"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")

    def connect_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``websockets`` connect calls."""
        kwargs: dict[str, Any] = {
            "ping_interval": self.ping_interval,
            "ping_timeout": self.ping_timeout,
            "open_timeout": self.open_timeout,
            "close_timeout": self.close_timeout,
        }
        # Only include size/queue if not None to keep library defaults
        if self.max_size is not None:
            kwargs["max_size"] = self.max_size
        if self.max_queue is not None:
            kwargs["max_queue"] = self.max_queue
        return kwargs


@dataclass
class ClientConfig:
    """Everything a client needs to talk to one instance.

    Args:
        base_url: Instance root, e.g. ``https://mastodon.social``
        access_token: OAuth token; ``None`` for public endpoints only
        timeout: Total HTTP timeout in seconds
        user_agent: Value of the User-Agent header
        transport: WebSocket settings for streaming
    """

    base_url: str
    access_token: str | None = None
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    transport: TransportConfig = field(default_factory=TransportConfig)

    def __post_init__(self) -> None:
        parts = urlsplit(self.base_url or "")
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(f"base_url must be an absolute http(s) URL, got {self.base_url!r}")
        self.base_url = self.base_url.rstrip("/")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        if self.access_token is not None and not self.access_token.strip():
            raise ConfigurationError("access_token must not be blank")

    def authenticator(self) -> Authenticator:
        """Strategy matching the configured credentials."""
        if self.access_token:
            return BearerToken(self.access_token)
        return Unauthenticated()

    def __repr__(self) -> str:
        token = "***" if self.access_token else None
        return (
            f"ClientConfig(base_url={self.base_url!r}, access_token={token!r}, "
            f"timeout={self.timeout!r}, user_agent={self.user_agent!r})"
        )
