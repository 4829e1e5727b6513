"""Client facades.

``Client`` is the blocking entry point (httpx + websockets.sync) and
``AsyncClient`` the asyncio one (aiohttp + websockets). Both attach
credentials through the configured Authenticator, build pages from route
responses and open streams as event readers.

Both implement the page sender protocol: ``send`` performs an authenticated
fetch and ``clone`` returns an independent client with the same
configuration, which owned pages use to outlive the client that created them.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..core.auth import Authenticator
from ..core.config import ClientConfig
from ..core.enums import StreamKind
from ..core.exceptions import FetchError
from ..runtime.rest import (
    AsyncPage,
    BlockingHTTPClient,
    FetchDescriptor,
    HTTPClient,
    Page,
    RawResponse,
)
from ..runtime.ws import AsyncEventReader, EventReader, build_stream_url
from ..runtime.ws.transport import async_websocket_lines, websocket_lines
from .routes import RouteMixin, clean_params

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1/"


class Client(RouteMixin):
    """Blocking client for one instance.

    Example:
        >>> config = ClientConfig("https://mastodon.social", access_token="...")
        >>> with Client(config) as client:
        ...     for status in client.home_timeline(limit=40).items_iter():
        ...         print(status.content)
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        http: Optional[BlockingHTTPClient] = None,
        authenticator: Optional[Authenticator] = None,
    ) -> None:
        self.config = config
        self._auth = authenticator or config.authenticator()
        self._http = http or BlockingHTTPClient(
            base_url=config.base_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        self._auth.attach_credentials(headers)
        return headers

    def send(self, descriptor: FetchDescriptor) -> RawResponse:
        """Perform an authenticated request for a page."""
        if self._closed:
            raise FetchError("Client is closed", url=descriptor.url)
        return self._http.request(descriptor.method.value, descriptor.url, headers=self._headers())

    def clone(self) -> Client:
        """Independent client with the same configuration and credentials."""
        return Client(self.config, authenticator=self._auth)

    def get_page(self, path: str, item_type: Any, params: dict[str, Any] | None = None) -> Page[Any]:
        """GET ``/api/v1/<path>`` and wrap the response in a Page."""
        if self._closed:
            raise FetchError("Client is closed", url=path)
        response = self._http.get(f"{API_PREFIX}{path}", params=clean_params(params), headers=self._headers())
        return Page.from_response(self, response, item_type)

    def stream(
        self,
        kind: StreamKind,
        *,
        tag: str | None = None,
        list_id: str | None = None,
        **reader_kwargs: Any,
    ) -> EventReader:
        """Open a WebSocket stream and return a reader over its events."""
        url = build_stream_url(
            self.config.base_url,
            kind,
            self._auth.access_token,
            tag=tag,
            list_id=list_id,
        )
        logger.debug(f"Opening {kind.value} stream over WebSocket")
        lines = websocket_lines(url, self.config.transport, self.config.user_agent)
        return EventReader(lines, **reader_kwargs)

    def stream_sse(
        self,
        kind: StreamKind,
        *,
        tag: str | None = None,
        list_id: str | None = None,
        **reader_kwargs: Any,
    ) -> EventReader:
        """Open a server-sent events stream over chunked HTTP."""
        url = build_stream_url(self.config.base_url, kind, tag=tag, list_id=list_id, websocket=False)
        headers = {"Accept": "text/event-stream"}
        self._auth.attach_credentials(headers)
        logger.debug(f"Opening {kind.value} stream over HTTP")
        return EventReader(self._http.stream_lines(url, headers=headers), **reader_kwargs)

    def close(self) -> None:
        """Close the HTTP client; borrowed pages can no longer fetch."""
        self._closed = True
        self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Client(base_url={self.config.base_url!r}, closed={self._closed})"


class AsyncClient(RouteMixin):
    """Asyncio client for one instance.

    Example:
        >>> async with AsyncClient(config) as client:
        ...     page = await client.home_timeline()
        ...     async for status in page.items_iter():
        ...         print(status.content)
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        http: Optional[HTTPClient] = None,
        authenticator: Optional[Authenticator] = None,
    ) -> None:
        self.config = config
        self._auth = authenticator or config.authenticator()
        self._http = http or HTTPClient(
            base_url=config.base_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        self._auth.attach_credentials(headers)
        return headers

    async def send(self, descriptor: FetchDescriptor) -> RawResponse:
        """Perform an authenticated request for a page."""
        if self._closed:
            raise FetchError("Client is closed", url=descriptor.url)
        return await self._http.request(descriptor.method.value, descriptor.url, headers=self._headers())

    def clone(self) -> AsyncClient:
        """Independent client with the same configuration and credentials."""
        return AsyncClient(self.config, authenticator=self._auth)

    async def get_page(
        self, path: str, item_type: Any, params: dict[str, Any] | None = None
    ) -> AsyncPage[Any]:
        """GET ``/api/v1/<path>`` and wrap the response in an AsyncPage."""
        if self._closed:
            raise FetchError("Client is closed", url=path)
        response = await self._http.get(
            f"{API_PREFIX}{path}", params=clean_params(params), headers=self._headers()
        )
        return AsyncPage.from_response(self, response, item_type)

    def stream(
        self,
        kind: StreamKind,
        *,
        tag: str | None = None,
        list_id: str | None = None,
        **reader_kwargs: Any,
    ) -> AsyncEventReader:
        """Open a WebSocket stream and return an async reader over its events.

        The connection is made on first iteration.
        """
        url = build_stream_url(
            self.config.base_url,
            kind,
            self._auth.access_token,
            tag=tag,
            list_id=list_id,
        )
        logger.debug(f"Opening {kind.value} stream over WebSocket")
        lines = async_websocket_lines(url, self.config.transport, self.config.user_agent)
        return AsyncEventReader(lines, **reader_kwargs)

    def stream_sse(
        self,
        kind: StreamKind,
        *,
        tag: str | None = None,
        list_id: str | None = None,
        **reader_kwargs: Any,
    ) -> AsyncEventReader:
        """Open a server-sent events stream over chunked HTTP."""
        url = build_stream_url(self.config.base_url, kind, tag=tag, list_id=list_id, websocket=False)
        headers = {"Accept": "text/event-stream"}
        self._auth.attach_credentials(headers)
        logger.debug(f"Opening {kind.value} stream over HTTP")
        return AsyncEventReader(self._http.stream_lines(url, headers=headers), **reader_kwargs)

    async def close(self) -> None:
        """Close the HTTP session."""
        self._closed = True
        await self._http.close()

    async def __aenter__(self) -> AsyncClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"AsyncClient(base_url={self.config.base_url!r}, closed={self._closed})"
