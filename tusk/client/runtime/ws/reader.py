"""Event readers over live line streams.

Architecture:
    An EventReader pulls lines from a connected source (WebSocket messages or
    the lines of a chunked HTTP body), groups them with a FrameAssembler and
    decodes candidate frames with an EventDecoder. The stream has no natural
    end: iteration stops only when the source does.

Design Decisions:
    - Tri-state outcome: every candidate frame is ``DECODED``, ``SKIPPED``
      (comment or blank line with nothing buffered) or ``FAILED`` (anything
      buffered that does not decode, including frames without an event
      name); ``read_outcome`` exposes it directly
    - Failed frames are dropped from the buffer, so a bad frame can never be
      retried forever
    - Error policy: ``on_error="raise"`` surfaces the failure from
      ``__next__``; ``on_error="skip"`` logs it and keeps reading, giving up
      after ``max_consecutive_failures`` failures in a row
    - Scoped resources: closing the reader closes the source; nothing is read
      after close
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ...core.exceptions import (
    ConfigurationError,
    MalformedFrame,
    StreamDecodeLimitError,
    TuskError,
)
from ...models import Event
from .decoder import EventDecoder
from .frames import Frame, FrameAssembler

logger = logging.getLogger(__name__)

ERROR_POLICIES = ("raise", "skip")


class OutcomeKind(Enum):
    """What happened to one candidate frame."""

    DECODED = "decoded"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ReadOutcome:
    """Result of reading up to one candidate frame."""

    kind: OutcomeKind
    event: Optional[Event] = None
    error: Optional[TuskError] = None

    @classmethod
    def decoded(cls, event: Event) -> ReadOutcome:
        return cls(kind=OutcomeKind.DECODED, event=event)

    @classmethod
    def skipped(cls) -> ReadOutcome:
        return cls(kind=OutcomeKind.SKIPPED)

    @classmethod
    def failed(cls, error: TuskError) -> ReadOutcome:
        return cls(kind=OutcomeKind.FAILED, error=error)


class _ReaderCore:
    """Frame handling shared by the blocking and asyncio readers."""

    def __init__(
        self,
        decoder: Optional[EventDecoder],
        on_error: str,
        max_consecutive_failures: int,
    ) -> None:
        if on_error not in ERROR_POLICIES:
            raise ConfigurationError(f"on_error must be one of {ERROR_POLICIES}, got {on_error!r}")
        if max_consecutive_failures < 1:
            raise ConfigurationError("max_consecutive_failures must be at least 1")
        self._assembler = FrameAssembler()
        self._decoder = decoder or EventDecoder()
        self._on_error = on_error
        self._max_failures = max_consecutive_failures
        self._failures = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _feed(self, line: str) -> Optional[ReadOutcome]:
        """Feed one line; return an outcome if the line ended a candidate."""
        had_lines = self._assembler.pending > 0
        frame = self._assembler.feed(line)
        if frame is None:
            if not had_lines and (not line.rstrip("\r\n") or line.startswith(":")):
                return ReadOutcome.skipped()
            return None
        self._assembler.reset()
        return self._decode(frame)

    def _flush(self) -> Optional[ReadOutcome]:
        """Treat the end of the source as a frame terminator."""
        if self._assembler.pending == 0:
            return None
        return self._feed("")

    def _decode(self, frame: Frame) -> ReadOutcome:
        if frame.event_name is None:
            return ReadOutcome.failed(MalformedFrame(frame.data))
        try:
            event = self._decoder.decode(frame)
        except TuskError as exc:
            return ReadOutcome.failed(exc)
        logger.debug(f"Decoded {event.event_type.value} event")
        return ReadOutcome.decoded(event)

    def _settle(self, outcome: ReadOutcome) -> Optional[Event]:
        """Apply the error policy; return the event to yield, if any."""
        if outcome.kind is OutcomeKind.DECODED:
            self._failures = 0
            return outcome.event
        error = outcome.error
        if outcome.kind is OutcomeKind.SKIPPED or error is None:
            return None

        if self._on_error == "raise":
            logger.error(f"Stream frame failed to decode: {error}")
            raise error
        self._failures += 1
        logger.warning(f"Skipping malformed frame ({self._failures}/{self._max_failures}): {error}")
        if self._failures >= self._max_failures:
            raise StreamDecodeLimitError(self._failures, error)
        return None


class EventReader(_ReaderCore):
    """Blocking iterator of events over a line source.

    Args:
        lines: Iterable of text lines from a connected stream
        on_close: Called once when the reader is closed, to release the socket
        on_error: "raise" or "skip" for frames that fail to decode
        max_consecutive_failures: Bound for the "skip" policy
        decoder: Custom EventDecoder
    """

    def __init__(
        self,
        lines: Iterable[str],
        *,
        on_close: Optional[Callable[[], Any]] = None,
        on_error: str = "raise",
        max_consecutive_failures: int = 10,
        decoder: Optional[EventDecoder] = None,
    ) -> None:
        super().__init__(decoder, on_error, max_consecutive_failures)
        self._source = lines
        self._lines: Iterator[str] = iter(lines)
        self._on_close = on_close

    def read_outcome(self) -> Optional[ReadOutcome]:
        """Read lines until one candidate frame or skip is produced.

        Returns:
            The outcome, or None once the source is exhausted or closed.
        """
        while not self._closed:
            try:
                line = next(self._lines)
            except StopIteration:
                logger.debug("Stream source ended")
                outcome = self._flush()
                self.close()
                return outcome
            except Exception:
                self.close()
                raise
            outcome = self._feed(line)
            if outcome is not None:
                return outcome
        return None

    def __iter__(self) -> EventReader:
        return self

    def __next__(self) -> Event:
        while True:
            outcome = self.read_outcome()
            if outcome is None:
                raise StopIteration
            event = self._settle(outcome)
            if event is not None:
                return event

    def close(self) -> None:
        """Release the underlying stream. Idempotent."""
        if self._closed:
            return
        self._closed = True
        close = getattr(self._source, "close", None)
        if callable(close):
            close()
        if self._on_close is not None:
            self._on_close()

    def __enter__(self) -> EventReader:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncEventReader(_ReaderCore):
    """Asyncio iterator of events over an async line source."""

    def __init__(
        self,
        lines: AsyncIterable[str],
        *,
        on_close: Optional[Callable[[], Any]] = None,
        on_error: str = "raise",
        max_consecutive_failures: int = 10,
        decoder: Optional[EventDecoder] = None,
    ) -> None:
        super().__init__(decoder, on_error, max_consecutive_failures)
        self._source = lines
        self._lines: AsyncIterator[str] = lines.__aiter__()
        self._on_close = on_close

    async def read_outcome(self) -> Optional[ReadOutcome]:
        """Read lines until one candidate frame or skip is produced."""
        while not self._closed:
            try:
                line = await self._lines.__anext__()
            except StopAsyncIteration:
                logger.debug("Stream source ended")
                outcome = self._flush()
                await self.aclose()
                return outcome
            except Exception:
                await self.aclose()
                raise
            outcome = self._feed(line)
            if outcome is not None:
                return outcome
        return None

    def __aiter__(self) -> AsyncEventReader:
        return self

    async def __anext__(self) -> Event:
        while True:
            outcome = await self.read_outcome()
            if outcome is None:
                raise StopAsyncIteration
            event = self._settle(outcome)
            if event is not None:
                return event

    async def aclose(self) -> None:
        """Release the underlying stream. Idempotent."""
        if self._closed:
            return
        self._closed = True
        aclose = getattr(self._source, "aclose", None)
        if callable(aclose):
            await aclose()
        if self._on_close is not None:
            result = self._on_close()
            if hasattr(result, "__await__"):
                await result

    async def __aenter__(self) -> AsyncEventReader:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
