"""Streaming endpoint URLs."""

from __future__ import annotations

from urllib.parse import urlencode, urlsplit, urlunsplit

from ...core.enums import StreamKind
from ...core.exceptions import ConfigurationError

STREAMING_PATH = "/api/v1/streaming"

_WS_SCHEMES = {"http": "ws", "https": "wss", "ws": "ws", "wss": "wss"}


def to_websocket_url(url: str) -> str:
    """Translate ``http`` to ``ws`` and ``https`` to ``wss``."""
    parts = urlsplit(url)
    scheme = _WS_SCHEMES.get(parts.scheme)
    if scheme is None:
        raise ConfigurationError(f"Cannot stream over scheme {parts.scheme!r}: {url}")
    return urlunsplit(parts._replace(scheme=scheme))


def stream_params(
    kind: StreamKind,
    access_token: str | None = None,
    tag: str | None = None,
    list_id: str | None = None,
) -> dict[str, str]:
    """Query parameters selecting a stream.

    Raises:
        ConfigurationError: hashtag streams without a tag, list streams
            without a list id
    """
    params: dict[str, str] = {}
    if access_token:
        params["access_token"] = access_token
    params["stream"] = kind.value
    if kind.requires_tag:
        if not tag:
            raise ConfigurationError(f"Stream {kind.value!r} requires a tag")
        params["tag"] = tag.lstrip("#")
    if kind.requires_list:
        if not list_id:
            raise ConfigurationError("Stream 'list' requires a list id")
        params["list"] = list_id
    return params


def build_stream_url(
    base_url: str,
    kind: StreamKind,
    access_token: str | None = None,
    *,
    tag: str | None = None,
    list_id: str | None = None,
    websocket: bool = True,
) -> str:
    """URL of a streaming timeline.

    WebSocket connections use ``/api/v1/streaming`` with the stream picked by
    the ``stream`` parameter. Server-sent events use the per-stream path
    (``/api/v1/streaming/public/local``) over plain http(s).
    """
    params = stream_params(kind, access_token, tag=tag, list_id=list_id)
    base = base_url.rstrip("/")
    if websocket:
        return f"{to_websocket_url(base)}{STREAMING_PATH}?{urlencode(params)}"
    path = kind.value.replace(":", "/")
    params.pop("stream")
    query = f"?{urlencode(params)}" if params else ""
    return f"{base}{STREAMING_PATH}/{path}{query}"
