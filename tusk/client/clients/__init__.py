"""High-level clients."""

from .client import AsyncClient, Client
from .routes import RouteMixin

__all__ = ["AsyncClient", "Client", "RouteMixin"]
