"""Tusk client - result traversal and streaming events for Mastodon-compatible APIs."""

from .clients import AsyncClient, Client
from .core import (
    ApiError,
    Authenticator,
    BearerToken,
    ClientConfig,
    ConfigurationError,
    DecodeError,
    EventType,
    FetchError,
    HttpMethod,
    LinkHeaderParseError,
    MalformedFrame,
    MissingData,
    StreamDecodeLimitError,
    StreamError,
    StreamKind,
    TransportConfig,
    TuskError,
    Unauthenticated,
    UnknownEvent,
)
from .models import Account, ApiErrorBody, Event, Notification, Status
from .runtime.rest import (
    AsyncItemsIterator,
    AsyncOwnedPage,
    AsyncPage,
    Cursor,
    FetchDescriptor,
    ItemsIterator,
    OwnedPage,
    Page,
    RawResponse,
    parse_link_header,
)
from .runtime.ws import (
    AsyncEventReader,
    EventDecoder,
    EventReader,
    Frame,
    FrameAssembler,
    OutcomeKind,
    ReadOutcome,
    build_stream_url,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "Client",
    "AsyncClient",
    # Configuration and auth
    "ClientConfig",
    "TransportConfig",
    "Authenticator",
    "BearerToken",
    "Unauthenticated",
    # Enums
    "EventType",
    "HttpMethod",
    "StreamKind",
    # Pagination
    "parse_link_header",
    "RawResponse",
    "FetchDescriptor",
    "Cursor",
    "Page",
    "OwnedPage",
    "AsyncPage",
    "AsyncOwnedPage",
    "ItemsIterator",
    "AsyncItemsIterator",
    # Streaming
    "Frame",
    "FrameAssembler",
    "EventDecoder",
    "EventReader",
    "AsyncEventReader",
    "OutcomeKind",
    "ReadOutcome",
    "build_stream_url",
    # Models
    "Account",
    "ApiErrorBody",
    "Event",
    "Notification",
    "Status",
    # Exceptions
    "TuskError",
    "ConfigurationError",
    "LinkHeaderParseError",
    "FetchError",
    "ApiError",
    "DecodeError",
    "StreamError",
    "MalformedFrame",
    "MissingData",
    "UnknownEvent",
    "StreamDecodeLimitError",
]
