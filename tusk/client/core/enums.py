"""Core enumerations shared by the REST and streaming layers."""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP methods a fetch descriptor may carry."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class StreamKind(str, Enum):
    """Streaming timelines exposed by ``/api/v1/streaming``.

    The value is the ``stream`` query parameter understood by the server.
    """

    USER = "user"
    PUBLIC = "public"
    PUBLIC_LOCAL = "public:local"
    HASHTAG = "hashtag"
    HASHTAG_LOCAL = "hashtag:local"
    LIST = "list"
    DIRECT = "direct"

    @property
    def requires_tag(self) -> bool:
        """Whether the stream needs a ``tag`` parameter."""
        return self in (StreamKind.HASHTAG, StreamKind.HASHTAG_LOCAL)

    @property
    def requires_list(self) -> bool:
        """Whether the stream needs a ``list`` parameter."""
        return self is StreamKind.LIST


class EventType(str, Enum):
    """Event names sent by the streaming API."""

    UPDATE = "update"
    NOTIFICATION = "notification"
    DELETE = "delete"
    FILTERS_CHANGED = "filters_changed"
