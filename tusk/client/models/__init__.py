"""Data models for API entities and streaming events.

Architecture:
    This module exports the Pydantic v2 models the traversal and streaming
    layers decode into. All models are immutable (frozen=True) and accept
    unknown fields (extra="allow"), so newer server versions do not break
    decoding of the fields the library relies on.

Model Categories:
    - Entities: Account, Status, Notification
    - Errors: ApiErrorBody
    - Events: Event (tagged by EventType)
"""

from .account import Account
from .api_error import ApiErrorBody
from .events import Event
from .notification import Notification
from .status import Status

__all__ = [
    "Account",
    "ApiErrorBody",
    "Event",
    "Notification",
    "Status",
]
