"""Paged and streaming routes shared by the blocking and asyncio clients.

The mixin only knows paths and item types; the concrete client supplies
``get_page`` and ``stream``. On ``Client`` every route returns a Page or an
EventReader; on ``AsyncClient`` the paged routes return awaitables of
AsyncPage and the streaming routes return AsyncEventReader.
"""

from __future__ import annotations

from typing import Any

from ..core.enums import StreamKind
from ..models import Account, Notification, Status


class RouteMixin:
    """Route table for Mastodon-compatible instances."""

    def get_page(self, path: str, item_type: Any, params: dict[str, Any] | None = None) -> Any:
        raise NotImplementedError

    def stream(self, kind: StreamKind, *, tag: str | None = None, list_id: str | None = None, **reader_kwargs: Any) -> Any:
        raise NotImplementedError

    # Paged routes

    def home_timeline(self, **params: Any) -> Any:
        """GET /api/v1/timelines/home"""
        return self.get_page("timelines/home", Status, params)

    def public_timeline(self, local: bool = False, **params: Any) -> Any:
        """GET /api/v1/timelines/public"""
        if local:
            params["local"] = "true"
        return self.get_page("timelines/public", Status, params)

    def hashtag_timeline(self, tag: str, **params: Any) -> Any:
        """GET /api/v1/timelines/tag/:hashtag"""
        return self.get_page(f"timelines/tag/{tag.lstrip('#')}", Status, params)

    def notifications(self, **params: Any) -> Any:
        """GET /api/v1/notifications"""
        return self.get_page("notifications", Notification, params)

    def favourites(self, **params: Any) -> Any:
        """GET /api/v1/favourites"""
        return self.get_page("favourites", Status, params)

    def bookmarks(self, **params: Any) -> Any:
        """GET /api/v1/bookmarks"""
        return self.get_page("bookmarks", Status, params)

    def blocks(self, **params: Any) -> Any:
        """GET /api/v1/blocks"""
        return self.get_page("blocks", Account, params)

    def mutes(self, **params: Any) -> Any:
        """GET /api/v1/mutes"""
        return self.get_page("mutes", Account, params)

    def follow_requests(self, **params: Any) -> Any:
        """GET /api/v1/follow_requests"""
        return self.get_page("follow_requests", Account, params)

    def domain_blocks(self, **params: Any) -> Any:
        """GET /api/v1/domain_blocks"""
        return self.get_page("domain_blocks", str, params)

    def account_statuses(self, account_id: str, **params: Any) -> Any:
        """GET /api/v1/accounts/:id/statuses"""
        return self.get_page(f"accounts/{account_id}/statuses", Status, params)

    def followers(self, account_id: str, **params: Any) -> Any:
        """GET /api/v1/accounts/:id/followers"""
        return self.get_page(f"accounts/{account_id}/followers", Account, params)

    def following(self, account_id: str, **params: Any) -> Any:
        """GET /api/v1/accounts/:id/following"""
        return self.get_page(f"accounts/{account_id}/following", Account, params)

    # Streaming routes

    def stream_user(self, **reader_kwargs: Any) -> Any:
        """Home timeline and notifications of the authenticated user."""
        return self.stream(StreamKind.USER, **reader_kwargs)

    def stream_public(self, **reader_kwargs: Any) -> Any:
        """All public statuses."""
        return self.stream(StreamKind.PUBLIC, **reader_kwargs)

    def stream_local(self, **reader_kwargs: Any) -> Any:
        """Public statuses from this instance only."""
        return self.stream(StreamKind.PUBLIC_LOCAL, **reader_kwargs)

    def stream_hashtag(self, tag: str, local: bool = False, **reader_kwargs: Any) -> Any:
        """Public statuses carrying a hashtag."""
        kind = StreamKind.HASHTAG_LOCAL if local else StreamKind.HASHTAG
        return self.stream(kind, tag=tag, **reader_kwargs)

    def stream_list(self, list_id: str, **reader_kwargs: Any) -> Any:
        """Statuses of the members of a list."""
        return self.stream(StreamKind.LIST, list_id=list_id, **reader_kwargs)

    def stream_direct(self, **reader_kwargs: Any) -> Any:
        """Direct messages."""
        return self.stream(StreamKind.DIRECT, **reader_kwargs)


def clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Drop None values; booleans become the lowercase strings the API expects."""
    if not params:
        return None
    cleaned: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        cleaned[key] = str(value).lower() if isinstance(value, bool) else value
    return cleaned or None
