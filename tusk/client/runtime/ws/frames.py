"""Grouping of raw stream lines into event frames.

Two wire sub-formats are recognized:

- SSE style: ``event: <name>`` and ``data: <payload>`` lines, terminated by a
  blank line; lines starting with ``:`` are comments (heartbeats) and also
  terminate a pending frame.
- JSON style: a single line holding ``{"event": "<name>", "payload": "<str>"}``,
  complete on its own without a terminator.

The JSON style is detected by the first buffered line parsing as such an
object. No limit is put on how many lines a frame may accumulate; a peer that
never terminates a frame grows the buffer until the transport gives up.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

EVENT_PREFIX = "event:"
DATA_PREFIX = "data:"
COMMENT_PREFIX = ":"


@dataclass(frozen=True)
class Frame:
    """One logical stream message before decoding."""

    event_name: str | None = None
    data: str | None = None


def _parse_json_frame(line: str) -> Frame | None:
    try:
        obj = json.loads(line)
    except ValueError:
        return None
    if not isinstance(obj, dict) or not isinstance(obj.get("event"), str):
        return None
    payload = obj.get("payload")
    if payload is not None and not isinstance(payload, str):
        return None
    return Frame(event_name=obj["event"], data=payload)


def _parse_sse_frame(lines: list[str]) -> Frame:
    event_name: str | None = None
    data: str | None = None
    for line in lines:
        if line.startswith(EVENT_PREFIX):
            event_name = line[len(EVENT_PREFIX):].strip()
        elif line.startswith(DATA_PREFIX) and data is None:
            # only the first data line of a frame is honored
            data = line[len(DATA_PREFIX):].strip()
    return Frame(event_name=event_name, data=data)


class FrameAssembler:
    """Accumulate lines and emit candidate frames.

    ``feed`` returns a candidate whenever one may be complete. The caller
    decides whether it is (by decoding it) and calls ``reset`` once the
    buffered lines have been dealt with.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    @property
    def pending(self) -> int:
        """Number of buffered lines."""
        return len(self._lines)

    def feed(self, line: str) -> Frame | None:
        """Add one line; return a candidate frame or None."""
        line = line.rstrip("\r\n")
        if not line or line.startswith(COMMENT_PREFIX):
            if not self._lines:
                return None
            return _parse_sse_frame(self._lines)

        self._lines.append(line)
        if len(self._lines) == 1:
            return _parse_json_frame(line)
        return None

    def reset(self) -> None:
        """Drop the buffered lines."""
        self._lines.clear()
