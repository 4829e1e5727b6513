"""Event system for real-time streaming."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EventType
from .notification import Notification
from .status import Status


@dataclass(frozen=True)
class Event:
    """One decoded streaming event.

    A tagged union: ``event_type`` says which of the payload fields is set.

    - UPDATE: ``status``
    - NOTIFICATION: ``notification``
    - DELETE: ``status_id``
    - FILTERS_CHANGED: nothing
    """

    event_type: EventType
    status: Optional[Status] = None
    notification: Optional[Notification] = None
    status_id: Optional[str] = None

    @classmethod
    def update(cls, status: Status) -> Event:
        """Create a new-status event."""
        return cls(event_type=EventType.UPDATE, status=status)

    @classmethod
    def notification_received(cls, notification: Notification) -> Event:
        """Create a notification event."""
        return cls(event_type=EventType.NOTIFICATION, notification=notification)

    @classmethod
    def delete(cls, status_id: str) -> Event:
        """Create a status-deleted event."""
        return cls(event_type=EventType.DELETE, status_id=status_id)

    @classmethod
    def filters_changed(cls) -> Event:
        """Create a filters-changed event."""
        return cls(event_type=EventType.FILTERS_CHANGED)
