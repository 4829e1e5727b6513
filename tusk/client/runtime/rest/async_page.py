"""Asyncio variant of the page engine.

Same semantics as ``page.Page``; the network call is the only suspension
point and a page never has more than one fetch in flight. ``into_owned()``
gives an ``AsyncOwnedPage`` that holds a cloned client and must be released
with ``aclose()`` or ``async with``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any, Generic, Protocol, TypeVar

from ...core.exceptions import ConfigurationError
from .decoding import deserialize
from .items import AsyncItemsIterator
from .page import Cursor, FetchDescriptor
from .response import RawResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncSender(Protocol):
    """Anything that can perform an authenticated fetch asynchronously."""

    async def send(self, descriptor: FetchDescriptor) -> RawResponse:
        ...

    def clone(self) -> AsyncSender:
        ...

    async def close(self) -> None:
        ...


class _AsyncPageBase(Generic[T]):
    """Traversal shared by the borrowed and owned async page forms."""

    def __init__(
        self,
        sender: AsyncSender,
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
        self._lock = asyncio.Lock()

    @property
    def has_next(self) -> bool:
        return self.cursor.next is not None

    @property
    def has_prev(self) -> bool:
        return self.cursor.prev is not None

    async def next_page(self) -> list[T] | None:
        """Fetch the next page; None when there is none (no request made)."""
        async with self._lock:
            descriptor = self.cursor.next
            self.cursor = Cursor(next=None, prev=self.cursor.prev)
            return await self._follow(descriptor)

    async def prev_page(self) -> list[T] | None:
        """Fetch the previous page; None when there is none (no request made)."""
        async with self._lock:
            descriptor = self.cursor.prev
            self.cursor = Cursor(next=self.cursor.next, prev=None)
            return await self._follow(descriptor)

    async def _follow(self, descriptor: FetchDescriptor | None) -> list[T] | None:
        if descriptor is None:
            return None
        logger.debug(f"Fetching page {descriptor.method.value} {descriptor.url}")
        response = await self._sender.send(descriptor)
        self.cursor = Cursor.from_response(response)
        return deserialize(response, list[self.item_type])

    def items_iter(self) -> AsyncItemsIterator[T]:
        """Async-iterate over every item of this page and all following pages."""
        if self._iterating:
            raise ConfigurationError("items_iter() already called on this page")
        self._iterating = True
        return AsyncItemsIterator(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(items={len(self.initial_items)}, "
            f"next={self.has_next}, prev={self.has_prev})"
        )


class AsyncPage(_AsyncPageBase[T]):
    """One page of API results fetched with an asyncio client."""

    @classmethod
    def from_response(
        cls,
        sender: AsyncSender,
        response: RawResponse,
        item_type: type[T] | Any,
    ) -> AsyncPage[T]:
        items = deserialize(response, list[item_type])
        cursor = Cursor.from_response(response)
        return cls(sender, items, cursor, item_type)

    def into_owned(self) -> AsyncOwnedPage[T]:
        """Detach this page from the creating client onto ``sender.clone()``."""
        return AsyncOwnedPage(self._sender.clone(), self.initial_items, self.cursor, self.item_type)


class AsyncOwnedPage(_AsyncPageBase[T]):
    """An async page holding its own client; release it with ``aclose()``."""

    async def aclose(self) -> None:
        logger.debug("Closing owned page sender")
        await self._sender.close()

    async def __aenter__(self) -> AsyncOwnedPage[T]:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
