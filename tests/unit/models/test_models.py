"""Unit tests for API entity models."""

import pytest
from pydantic import ValidationError

from tusk.client.core import EventType
from tusk.client.models import Account, ApiErrorBody, Event, Notification, Status


class TestStatus:
    """Test Status model."""

    def test_parses_api_document(self, sample_status):
        """Test declared fields are typed and unknown ones are kept."""
        status = Status.model_validate(sample_status)
        assert status.id == "100"
        assert status.account.username == "alice"
        assert status.created_at.year == 2024
        assert status.favourites_count == 4
        assert status.model_extra["emojis"] == []

    def test_frozen(self, sample_status):
        """Test models are immutable."""
        status = Status.model_validate(sample_status)
        with pytest.raises(ValidationError):
            status.content = "changed"

    def test_reblog_nests(self, sample_status):
        """Test a reblog is itself a Status."""
        outer = dict(sample_status, id="101", reblog=sample_status)
        status = Status.model_validate(outer)
        assert isinstance(status.reblog, Status)
        assert status.reblog.id == "100"

    def test_missing_required_field(self, sample_status):
        """Test a status without an account is rejected."""
        broken = {k: v for k, v in sample_status.items() if k != "account"}
        with pytest.raises(ValidationError):
            Status.model_validate(broken)


class TestNotification:
    """Test Notification model."""

    def test_parses_api_document(self, sample_notification):
        notification = Notification.model_validate(sample_notification)
        assert notification.type == "favourite"
        assert isinstance(notification.account, Account)
        assert notification.status is not None
        assert notification.status.id == "100"


class TestApiErrorBody:
    """Test ApiErrorBody model."""

    def test_error_only(self):
        body = ApiErrorBody.model_validate({"error": "Record not found"})
        assert body.error == "Record not found"
        assert body.error_description is None

    def test_requires_some_field(self):
        """Test an arbitrary object is not mistaken for an error body."""
        with pytest.raises(ValidationError):
            ApiErrorBody.model_validate({"id": "1"})


class TestEvent:
    """Test Event constructors."""

    def test_delete(self):
        event = Event.delete("42")
        assert event.event_type == EventType.DELETE
        assert event.status_id == "42"
        assert event.status is None

    def test_filters_changed(self):
        event = Event.filters_changed()
        assert event.event_type == EventType.FILTERS_CHANGED
        assert event.status is None and event.notification is None and event.status_id is None
