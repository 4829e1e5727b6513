"""WebSocket line sources.

Each received text message is split on line feeds (a trailing carriage
return is dropped) and followed by an empty line, so a message is always a
complete unit for the FrameAssembler whether it carries a JSON frame or
SSE-style lines.

A normal close ends the source; an abnormal close, a refused handshake or a
socket error is raised as FetchError.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Iterator

import websockets
from websockets.exceptions import ConnectionClosedOK, WebSocketException
from websockets.sync.client import connect as sync_connect

from ...core.config import DEFAULT_USER_AGENT, TransportConfig
from ...core.exceptions import FetchError

logger = logging.getLogger(__name__)


def _message_lines(message: str | bytes) -> Iterator[str]:
    text = message.decode("utf-8", errors="replace") if isinstance(message, bytes) else message
    # only \n ends a line; str.splitlines would also break on U+2028 and
    # U+0085, which JSON allows raw inside strings
    for line in text.split("\n"):
        yield line.rstrip("\r")
    yield ""


def _redact(url: str) -> str:
    head, sep, _query = url.partition("?")
    return f"{head}?..." if sep else head


def websocket_lines(
    url: str,
    config: TransportConfig | None = None,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Iterator[str]:
    """Connect with the blocking client and yield message lines.

    The connection is closed when the generator is closed or collected.
    """
    conf = config or TransportConfig()
    try:
        with sync_connect(url, user_agent_header=user_agent, **conf.connect_kwargs()) as ws:
            logger.debug(f"Connected to {_redact(url)}")
            for message in ws:
                yield from _message_lines(message)
    except ConnectionClosedOK:
        logger.debug(f"Stream {_redact(url)} closed by peer")
    except (WebSocketException, OSError, TimeoutError) as exc:
        logger.error(f"Stream {_redact(url)} failed: {exc}")
        raise FetchError(f"WebSocket stream failed: {exc}", url=_redact(url)) from exc


async def async_websocket_lines(
    url: str,
    config: TransportConfig | None = None,
    user_agent: str = DEFAULT_USER_AGENT,
) -> AsyncIterator[str]:
    """Connect with the asyncio client and yield message lines."""
    conf = config or TransportConfig()
    try:
        async with websockets.connect(url, user_agent_header=user_agent, **conf.connect_kwargs()) as ws:
            logger.debug(f"Connected to {_redact(url)}")
            async for message in ws:
                for line in _message_lines(message):
                    yield line
    except asyncio.CancelledError:
        raise
    except ConnectionClosedOK:
        logger.debug(f"Stream {_redact(url)} closed by peer")
    except (WebSocketException, OSError, TimeoutError) as exc:
        logger.error(f"Stream {_redact(url)} failed: {exc}")
        raise FetchError(f"WebSocket stream failed: {exc}", url=_redact(url)) from exc
