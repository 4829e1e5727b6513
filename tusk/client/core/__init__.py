"""Core components."""

from .auth import Authenticator, BearerToken, Unauthenticated
from .config import ClientConfig, TransportConfig
from .enums import EventType, HttpMethod, StreamKind
from .exceptions import (
    ApiError,
    ConfigurationError,
    DecodeError,
    FetchError,
    LinkHeaderParseError,
    MalformedFrame,
    MissingData,
    StreamDecodeLimitError,
    StreamError,
    TuskError,
    UnknownEvent,
)

__all__ = [
    "Authenticator",
    "BearerToken",
    "Unauthenticated",
    "ClientConfig",
    "TransportConfig",
    "EventType",
    "HttpMethod",
    "StreamKind",
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
