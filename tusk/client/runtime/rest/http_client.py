"""HTTP client helpers.

Two transports with the same surface: ``HTTPClient`` on aiohttp for asyncio
code and ``BlockingHTTPClient`` on httpx for the synchronous API. Both return
fully read ``RawResponse`` objects and stream chunked bodies line by line for
server-sent events. Neither retries; failures are wrapped in FetchError.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Iterable, Iterator, Mapping
from typing import Any, Optional

import aiohttp
import httpx

from ...core.config import DEFAULT_USER_AGENT
from ...core.exceptions import FetchError
from .decoding import raise_for_status
from .response import RawResponse

logger = logging.getLogger(__name__)


def _iter_lines(chunks: Iterable[str]) -> Iterator[str]:
    # Split decoded text on \n only. httpx's iter_lines uses str.splitlines,
    # which also breaks on U+2028 and U+0085 inside JSON payloads.
    pending = ""
    for chunk in chunks:
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            yield line.rstrip("\r")
    if pending:
        yield pending.rstrip("\r")


def _join(base_url: Optional[str], url: str) -> str:
    # If base_url is set and url is relative, combine them
    if base_url and not url.startswith("http"):
        return f"{base_url}{url}"
    return url


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.user_agent = user_agent
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
        return self._session

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    async def request(
        self,
        method: str,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RawResponse:
        """Perform a request and read the whole body."""
        url = _join(self.base_url, url)
        try:
            async with self.session.request(method, url, params=params, headers=headers) as response:
                body = await response.read()
                return RawResponse(
                    status=response.status,
                    url=str(response.url),
                    headers=dict(response.headers),
                    body=body,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.error(f"{method} {url} failed: {exc}")
            raise FetchError(f"{method} {url} failed: {exc}", url=url) from exc

    async def get(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RawResponse:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

    async def stream_lines(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> AsyncIterator[str]:
        """Yield the lines of a chunked response body as they arrive.

        The total timeout does not apply: an event stream never finishes.
        """
        url = _join(self.base_url, url)
        try:
            async with self.session.get(
                url,
                params=params,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=None, sock_connect=self.timeout.total),
            ) as response:
                if response.status >= 400:
                    raise_for_status(
                        RawResponse(
                            status=response.status,
                            url=str(response.url),
                            headers=dict(response.headers),
                            body=await response.read(),
                        )
                    )
                async for raw in response.content:
                    yield raw.decode("utf-8", errors="replace").rstrip("\r\n")
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.error(f"Stream {url} failed: {exc}")
            raise FetchError(f"Stream {url} failed: {exc}", url=url) from exc

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


class BlockingHTTPClient:
    """Synchronous HTTP client wrapper."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
            )
        return self._client

    @property
    def closed(self) -> bool:
        return self._client is None or self._client.is_closed

    def request(
        self,
        method: str,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RawResponse:
        """Perform a request and read the whole body."""
        url = _join(self.base_url, url)
        try:
            response = self.client.request(method, url, params=params, headers=headers)
        except httpx.HTTPError as exc:
            logger.error(f"{method} {url} failed: {exc}")
            raise FetchError(f"{method} {url} failed: {exc}", url=url) from exc
        return RawResponse(
            status=response.status_code,
            url=str(response.url),
            headers=dict(response.headers.items()),
            body=response.content,
        )

    def get(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RawResponse:
        """GET request."""
        return self.request("GET", url, params=params, headers=headers)

    def stream_lines(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Iterator[str]:
        """Yield the lines of a chunked response body as they arrive.

        Closing the generator closes the connection.
        """
        url = _join(self.base_url, url)
        timeout = httpx.Timeout(self.timeout, read=None)
        try:
            with self.client.stream("GET", url, params=params, headers=headers, timeout=timeout) as response:
                if response.status_code >= 400:
                    raise_for_status(
                        RawResponse(
                            status=response.status_code,
                            url=str(response.url),
                            headers=dict(response.headers.items()),
                            body=response.read(),
                        )
                    )
                yield from _iter_lines(response.iter_text())
        except httpx.HTTPError as exc:
            logger.error(f"Stream {url} failed: {exc}")
            raise FetchError(f"Stream {url} failed: {exc}", url=url) from exc

    def close(self) -> None:
        """Close the underlying client."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "BlockingHTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
