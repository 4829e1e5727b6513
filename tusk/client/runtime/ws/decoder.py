"""Mapping of frames onto typed events."""

from __future__ import annotations

from ...core.enums import EventType
from ...core.exceptions import MissingData, UnknownEvent
from ...models import Event, Notification, Status
from ..rest.decoding import decode_json
from .frames import Frame


class EventDecoder:
    """Turn a Frame into an Event.

    - update: data is a Status JSON document
    - notification: data is a Notification JSON document
    - delete: data is the id of the deleted status, used verbatim
    - filters_changed: no data needed

    Raises:
        MissingData: update/notification/delete without data
        UnknownEvent: any other event name
        DecodeError: malformed Status or Notification JSON
    """

    def decode(self, frame: Frame) -> Event:
        name = frame.event_name
        try:
            event_type = EventType(name)
        except ValueError:
            raise UnknownEvent(name if name is not None else "") from None

        if event_type is EventType.FILTERS_CHANGED:
            return Event.filters_changed()
        if not frame.data:
            raise MissingData(event_type.value)
        if event_type is EventType.UPDATE:
            return Event.update(decode_json(frame.data, Status))
        if event_type is EventType.NOTIFICATION:
            return Event.notification_received(decode_json(frame.data, Notification))
        return Event.delete(frame.data)


def decode_frame(frame: Frame) -> Event:
    """Decode one frame with the default decoder."""
    return EventDecoder().decode(frame)
