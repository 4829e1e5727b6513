"""Flat item iteration across pages."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .async_page import _AsyncPageBase
    from .page import _PageBase

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ItemsIterator(Generic[T]):
    """Yield every item of a page, then of each following page, lazily.

    Buffered items are returned without I/O. When the buffer runs dry the
    next page is fetched synchronously; empty pages that still advertise a
    next link are skipped. Once the server stops advertising a next page, or
    a fetch fails, the iterator is exhausted for good.
    """

    def __init__(self, page: _PageBase[T]) -> None:
        self._page = page
        self._buffer: deque[T] = deque(page.initial_items)
        self._done = False
        self._fetches = 0

    @property
    def pages_fetched(self) -> int:
        """Number of network fetches performed so far."""
        return self._fetches

    def __iter__(self) -> ItemsIterator[T]:
        return self

    def __next__(self) -> T:
        while not self._buffer:
            if self._done:
                raise StopIteration
            try:
                items = self._page.next_page()
            except Exception:
                self._done = True
                raise
            if items is None:
                logger.debug(f"Pagination finished after {self._fetches} fetches")
                self._done = True
                raise StopIteration
            self._fetches += 1
            if not items:
                logger.debug("Empty page with a next link, fetching further")
            self._buffer.extend(items)
        return self._buffer.popleft()


class AsyncItemsIterator(Generic[T]):
    """Asyncio counterpart of ItemsIterator.

    The only suspension point is the page fetch; page N+1 is requested only
    after every item of page N was yielded.
    """

    def __init__(self, page: _AsyncPageBase[T]) -> None:
        self._page = page
        self._buffer: deque[T] = deque(page.initial_items)
        self._done = False
        self._fetches = 0

    @property
    def pages_fetched(self) -> int:
        return self._fetches

    def __aiter__(self) -> AsyncItemsIterator[T]:
        return self

    async def __anext__(self) -> T:
        while not self._buffer:
            if self._done:
                raise StopAsyncIteration
            try:
                items = await self._page.next_page()
            except Exception:
                self._done = True
                raise
            if items is None:
                logger.debug(f"Pagination finished after {self._fetches} fetches")
                self._done = True
                raise StopAsyncIteration
            self._fetches += 1
            self._buffer.extend(items)
        return self._buffer.popleft()
