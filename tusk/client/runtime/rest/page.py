"""Cursor-based pagination over Link headers.

Architecture:
    A route call returns one HTTP response. ``Page.from_response`` decodes its
    body into the first batch of items and derives a ``Cursor`` from its Link
    header. ``next_page``/``prev_page`` follow the cursor, and every fetched
    response replaces both cursor slots: the server's Link header is
    authoritative for both directions from the new position.

Design Decisions:
    - Sender protocol: a page only needs something that can perform an
      authenticated fetch, so tests and alternative transports plug in freely
    - Borrowed vs owned: ``Page`` holds the client that created it and lives
      as long as that client is open; ``into_owned()`` swaps in an
      independent clone of the sender so the page can be stored for later
      and closed with ``close()`` or a ``with`` block when done
    - No retries and no caching: failures surface at the call that caused
      them, and a page is not usable after one

See Also:
    - ItemsIterator: hides pagination behind a flat iterator
    - AsyncPage: the asyncio variant
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from ...core.enums import HttpMethod
from ...core.exceptions import ConfigurationError
from .decoding import deserialize
from .items import ItemsIterator
from .link_header import parse_link_header
from .response import RawResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FetchDescriptor:
    """Where to fetch a neighbouring page from."""

    url: str
    method: HttpMethod = HttpMethod.GET


@dataclass(frozen=True)
class Cursor:
    """Next/previous fetch descriptors derived from a Link header.

    Both slots being None is the terminal state, not an error.
    """

    next: FetchDescriptor | None = None
    prev: FetchDescriptor | None = None

    @classmethod
    def from_link_header(cls, value: str | None) -> Cursor:
        prev, next_ = parse_link_header(value)
        return cls(
            next=FetchDescriptor(next_) if next_ else None,
            prev=FetchDescriptor(prev) if prev else None,
        )

    @classmethod
    def from_response(cls, response: RawResponse) -> Cursor:
        return cls.from_link_header(response.link)

    @property
    def is_terminal(self) -> bool:
        return self.next is None and self.prev is None


class Sender(Protocol):
    """Anything that can perform an authenticated fetch."""

    def send(self, descriptor: FetchDescriptor) -> RawResponse:
        """Perform the request described by ``descriptor``."""
        ...

    def clone(self) -> Sender:
        """Independent handle usable after this one is closed."""
        ...

    def close(self) -> None:
        """Release the connection pool behind this handle."""
        ...


class _PageBase(Generic[T]):
    """Traversal shared by the borrowed and owned page forms."""

    def __init__(
        self,
        sender: Sender,
        initial_items: Sequence[T],
        cursor: Cursor,
        item_type: type[T] | Any,
    ) -> None:
        if sender is None:
            raise ConfigurationError("A page needs a sender to fetch further pages")
        self._sender = sender
        self.initial_items: list[T] = list(initial_items)
        self.cursor = cursor
        self.item_type = item_type
        self._iterating = False

    @property
    def has_next(self) -> bool:
        return self.cursor.next is not None

    @property
    def has_prev(self) -> bool:
        return self.cursor.prev is not None

    def next_page(self) -> list[T] | None:
        """Fetch the next page of results.

        Returns:
            The decoded items, or None when the server advertised no next page
            (no request is made in that case).
        """
        descriptor = self.cursor.next
        self.cursor = Cursor(next=None, prev=self.cursor.prev)
        return self._follow(descriptor)

    def prev_page(self) -> list[T] | None:
        """Fetch the previous page of results.

        Returns:
            The decoded items, or None when the server advertised no previous
            page (no request is made in that case).
        """
        descriptor = self.cursor.prev
        self.cursor = Cursor(next=self.cursor.next, prev=None)
        return self._follow(descriptor)

    def _follow(self, descriptor: FetchDescriptor | None) -> list[T] | None:
        if descriptor is None:
            return None
        logger.debug(f"Fetching page {descriptor.method.value} {descriptor.url}")
        response = self._sender.send(descriptor)
        self.cursor = Cursor.from_response(response)
        return deserialize(response, list[self.item_type])

    def items_iter(self) -> ItemsIterator[T]:
        """Iterate over every item of this page and all following pages.

        The page is consumed: a second call raises ConfigurationError.
        """
        if self._iterating:
            raise ConfigurationError("items_iter() already called on this page")
        self._iterating = True
        return ItemsIterator(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(items={len(self.initial_items)}, "
            f"next={self.has_next}, prev={self.has_prev})"
        )


class Page(_PageBase[T]):
    """One page of API results, tied to the client that fetched it."""

    @classmethod
    def from_response(
        cls,
        sender: Sender,
        response: RawResponse,
        item_type: type[T] | Any,
    ) -> Page[T]:
        """Build the first page of a traversal from a route response.

        Raises:
            LinkHeaderParseError: Malformed Link header
            ApiError, FetchError, DecodeError: See ``deserialize``
        """
        items = deserialize(response, list[item_type])
        cursor = Cursor.from_response(response)
        return cls(sender, items, cursor, item_type)

    def into_owned(self) -> OwnedPage[T]:
        """Detach this page from the creating client.

        The owned page keeps the items and cursor verbatim and fetches through
        ``sender.clone()``, so it can outlive the client.
        """
        return OwnedPage(self._sender.clone(), self.initial_items, self.cursor, self.item_type)


class OwnedPage(_PageBase[T]):
    """A page holding its own sender handle, suitable for long-lived storage."""

    def clone(self) -> OwnedPage[T]:
        """Copy of this page sharing the same sender handle.

        Closing either copy closes the handle for both.
        """
        return OwnedPage(self._sender, self.initial_items, self.cursor, self.item_type)

    def close(self) -> None:
        """Close the sender this page owns; further fetches fail."""
        logger.debug("Closing owned page sender")
        self._sender.close()

    def __enter__(self) -> OwnedPage[T]:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
