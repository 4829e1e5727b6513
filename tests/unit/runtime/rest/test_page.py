"""Unit tests for cursor pagination.

Tests focus on cursor movement and on when network fetches happen.
"""

import pytest

from tusk.client.core import ConfigurationError, FetchError, LinkHeaderParseError
from tusk.client.models import Status
from tusk.client.runtime.rest import Cursor, FetchDescriptor, OwnedPage, Page

BASE = "https://example.social/api/v1/timelines/home"
PAGE2 = f"{BASE}?max_id=99"
PAGE3 = f"{BASE}?max_id=98"
NEWER = f"{BASE}?min_id=101"


def link(next_url=None, prev_url=None):
    parts = []
    if next_url:
        parts.append(f'<{next_url}>; rel="next"')
    if prev_url:
        parts.append(f'<{prev_url}>; rel="prev"')
    return ", ".join(parts)


class TestCursor:
    """Test Cursor construction."""

    def test_from_missing_header_is_terminal(self):
        cursor = Cursor.from_link_header(None)
        assert cursor.is_terminal
        assert cursor == Cursor()

    def test_from_header(self):
        cursor = Cursor.from_link_header(link(PAGE2, NEWER))
        assert cursor.next == FetchDescriptor(PAGE2)
        assert cursor.prev == FetchDescriptor(NEWER)
        assert not cursor.is_terminal


class TestPageFromResponse:
    """Test Page.from_response."""

    def test_no_link_header(self, fake_sender, response_factory, status_factory):
        """Test a response without Link gives a terminal page."""
        page = Page.from_response(fake_sender, response_factory([status_factory()]), Status)
        assert [s.id for s in page.initial_items] == ["100"]
        assert page.cursor.is_terminal
        assert not page.has_next and not page.has_prev

    def test_both_relations(self, fake_sender, response_factory):
        page = Page.from_response(fake_sender, response_factory([], link=link(PAGE2, NEWER)), Status)
        assert page.cursor.next.url == PAGE2
        assert page.cursor.prev.url == NEWER

    def test_malformed_link_header(self, fake_sender, response_factory):
        with pytest.raises(LinkHeaderParseError):
            Page.from_response(fake_sender, response_factory([], link='<bad>; rel="next"'), Status)

    def test_requires_sender(self):
        with pytest.raises(ConfigurationError):
            Page(None, [], Cursor(), Status)


class TestPageTraversal:
    """Test next_page/prev_page."""

    def test_terminal_page_makes_no_fetch(self, fake_sender, response_factory):
        """Test empty slots return None without touching the network."""
        page = Page.from_response(fake_sender, response_factory([]), Status)
        assert page.next_page() is None
        assert page.prev_page() is None
        assert fake_sender.fetch_count == 0

    def test_next_page_replaces_both_slots(self, fake_sender, response_factory, status_factory):
        """Test the new response's Link header is authoritative."""
        fake_sender.responses[PAGE2] = response_factory(
            [status_factory("99")], link=link(PAGE3, f"{BASE}?min_id=99")
        )
        page = Page.from_response(fake_sender, response_factory([], link=link(PAGE2, NEWER)), Status)

        items = page.next_page()

        assert [s.id for s in items] == ["99"]
        assert fake_sender.sent == [FetchDescriptor(PAGE2)]
        assert page.cursor.next.url == PAGE3
        assert page.cursor.prev.url == f"{BASE}?min_id=99"

    def test_response_without_link_clears_cursor(self, fake_sender, response_factory):
        fake_sender.responses[PAGE2] = response_factory([])
        page = Page.from_response(fake_sender, response_factory([], link=link(PAGE2, NEWER)), Status)
        assert page.next_page() == []
        assert page.cursor.is_terminal
        assert page.prev_page() is None
        assert fake_sender.fetch_count == 1

    def test_prev_page(self, fake_sender, response_factory, status_factory):
        fake_sender.responses[NEWER] = response_factory([status_factory("101")])
        page = Page.from_response(fake_sender, response_factory([], link=link(prev_url=NEWER)), Status)
        assert [s.id for s in page.prev_page()] == ["101"]

    def test_fetch_error_propagates(self, fake_sender, response_factory):
        """Test failures surface and the consumed slot is not retried."""
        fake_sender.responses[PAGE2] = FetchError("boom")
        page = Page.from_response(fake_sender, response_factory([], link=link(PAGE2)), Status)
        with pytest.raises(FetchError):
            page.next_page()
        assert page.next_page() is None
        assert fake_sender.fetch_count == 1


class TestOwnership:
    """Test borrowed and owned pages."""

    def test_into_owned_uses_clone(self, fake_sender, response_factory, status_factory):
        """Test the owned page fetches through an independent sender."""
        fake_sender.responses[PAGE2] = response_factory([status_factory("99")])
        page = Page.from_response(
            fake_sender, response_factory([status_factory()], link=link(PAGE2)), Status
        )

        owned = page.into_owned()

        assert isinstance(owned, OwnedPage)
        assert owned.initial_items == page.initial_items
        assert owned.cursor == page.cursor
        assert [s.id for s in owned.next_page()] == ["99"]
        assert fake_sender.fetch_count == 0
        assert fake_sender.clones[0].fetch_count == 1

    def test_owned_clone_shares_sender(self, fake_sender, response_factory):
        owned = Page.from_response(fake_sender, response_factory([]), Status).into_owned()
        twin = owned.clone()
        assert twin._sender is owned._sender
        assert twin.cursor == owned.cursor

    def test_owned_close_releases_clone(self, fake_sender, response_factory):
        """Test closing an owned page closes its cloned sender only."""
        owned = Page.from_response(fake_sender, response_factory([]), Status).into_owned()
        owned.close()
        assert fake_sender.clones[0].closed
        assert not fake_sender.closed

    def test_owned_context_manager(self, fake_sender, response_factory, status_factory):
        fake_sender.responses[PAGE2] = response_factory([status_factory("5")])
        page = Page.from_response(fake_sender, response_factory([], link=link(PAGE2)), Status)
        with page.into_owned() as owned:
            assert [s.id for s in owned.next_page()] == ["5"]
            assert not fake_sender.clones[0].closed
        assert fake_sender.clones[0].closed


class TestItemsIterFactory:
    """Test Page.items_iter."""

    def test_second_iterator_refused(self, fake_sender, response_factory):
        page = Page.from_response(fake_sender, response_factory([]), Status)
        page.items_iter()
        with pytest.raises(ConfigurationError):
            page.items_iter()
