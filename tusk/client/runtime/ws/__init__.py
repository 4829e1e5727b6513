"""Runtime streaming helpers."""

from .decoder import EventDecoder, decode_frame
from .frames import Frame, FrameAssembler
from .reader import AsyncEventReader, EventReader, OutcomeKind, ReadOutcome
from .transport import async_websocket_lines, websocket_lines
from .urls import build_stream_url, stream_params, to_websocket_url

__all__ = [
    "Frame",
    "FrameAssembler",
    "EventDecoder",
    "decode_frame",
    "EventReader",
    "AsyncEventReader",
    "OutcomeKind",
    "ReadOutcome",
    "websocket_lines",
    "async_websocket_lines",
    "build_stream_url",
    "stream_params",
    "to_websocket_url",
]
