"""Custom exception hierarchy."""

from __future__ import annotations


class TuskError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(TuskError):
    """Invalid configuration or construction arguments."""

    pass


class LinkHeaderParseError(TuskError):
    """The Link header of a response could not be parsed.

    Raised for the whole header when a recognized relation (next/prev)
    carries a malformed URL, or when a link-value is not well formed. A URL
    is well formed when it is absolute: it has a scheme and a network
    location and contains no whitespace. The scheme itself is not checked.
    """

    def __init__(self, message: str, header: str | None = None) -> None:
        super().__init__(message)
        self.header = header


class FetchError(TuskError):
    """Transport failure or non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ApiError(FetchError):
    """Structured error returned by the API (``{"error": ..., "error_description": ...}``)."""

    def __init__(
        self,
        error: str | None,
        error_description: str | None = None,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        message = error_description or error or "Unknown API error"
        super().__init__(message, status_code=status_code, url=url)
        self.error = error
        self.error_description = error_description


class DecodeError(TuskError):
    """A JSON body or payload did not match the expected shape."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message)
        self.body = body


class StreamError(TuskError):
    """A streaming frame could not be turned into an event."""

    def __init__(self, message: str, event_name: str | None = None) -> None:
        super().__init__(message)
        self.event_name = event_name


class MalformedFrame(StreamError):
    """Buffered stream lines ended without forming an event frame.

    Covers data without an ``event:`` line, JSON objects that are not
    ``{"event": str, "payload": str}`` frames and other unrecognized text.
    """

    def __init__(self, data: str | None = None) -> None:
        detail = f": data={data[:80]!r}" if data else ""
        super().__init__(f"frame has no event name{detail}")
        self.data = data


class MissingData(StreamError):
    """The frame's event kind requires a payload but none was sent."""

    def __init__(self, event_name: str) -> None:
        super().__init__(f"event {event_name!r} requires a data payload", event_name=event_name)


class UnknownEvent(StreamError):
    """The frame carries an event name this client does not understand."""

    def __init__(self, event_name: str) -> None:
        super().__init__(f"unknown event {event_name!r}", event_name=event_name)


class StreamDecodeLimitError(StreamError):
    """Too many consecutive frames failed to decode."""

    def __init__(self, failures: int, last_error: TuskError) -> None:
        super().__init__(
            f"{failures} consecutive frames failed to decode; last error: {last_error}",
            event_name=getattr(last_error, "event_name", None),
        )
        self.failures = failures
        self.last_error = last_error
