"""Lazy page streams over a "fetch page N" operation.

Architecture:
    ``PageSearchStream`` drives a page generator ``(PageIndex) -> awaitable
    list`` starting at page 1 and yields whole pages. ``SearchStream``
    wraps it and yields the individual items, one page buffered at a time.

    PageSearchStream states:

        ACTIVE --non-empty page--> ACTIVE     (page index advances by one)
        ACTIVE --empty page------> EXHAUSTED  (nothing yielded)
        ACTIVE --error-----------> ERRORED    (error raised once)
        EXHAUSTED / ERRORED -----> StopAsyncIteration, generator never called again

Design Decisions:
    - Eager start: the generator is called for page 1 in the constructor,
      its awaitable is awaited on the first advance
    - Strictly sequential: page N+1 is requested only after page N resolved
      non-empty, so one fetch at most is in flight per stream
    - Error latch: after a failure nothing is known about later pages, so
      the stream stops instead of guessing. Build a new stream to retry
    - Errors are raised out of ``__anext__``; ``async for`` therefore sees
      every page before the error, then the error, then nothing
    - Dropping a stream at any point closes the unawaited page coroutine,
      so ``break`` out of ``async for`` needs no ``aclose()``

Every paginated operation of ``DrukarniaClient`` goes through
``PageSearchStream``; there is no per-operation pagination loop.
"""

from __future__ import annotations

import inspect
from collections import deque
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, Generic, TypeVar

from ...core.primitives import FIRST_PAGE, PageIndex
from .telemetry import log_page_fetched, log_stream_errored, log_stream_exhausted

T = TypeVar("T")

PageGenerator = Callable[[PageIndex], Awaitable[list[T]]]


class StreamState(str, Enum):
    """Lifecycle of a ``PageSearchStream``."""

    ACTIVE = "active"
    EXHAUSTED = "exhausted"
    ERRORED = "errored"


async def _raise(error: Exception) -> Any:
    raise error


class PageSearchStream(Generic[T]):
    """Async iterator over result pages.

    Args:
        accessor: Object the generator fetches through, usually the API client.
            Held for the lifetime of the stream, never mutated by it.
        generator: Returns an awaitable resolving to the items of a page

    Example:
        >>> stream = client.search_article("Дія")
        >>> async for page in stream:
        ...     print(len(page))
    """

    def __init__(self, accessor: Any, generator: PageGenerator[T]) -> None:
        self._accessor = accessor
        self._generator = generator
        self._page = FIRST_PAGE
        self._state = StreamState.ACTIVE
        self._pending: Awaitable[list[T]] | None = self._start(FIRST_PAGE)

    @property
    def accessor(self) -> Any:
        return self._accessor

    @property
    def page(self) -> PageIndex:
        """Index of the page the stream will deliver next (or failed/ended on)."""
        return self._page

    @property
    def state(self) -> StreamState:
        return self._state

    def _start(self, page: PageIndex) -> Awaitable[list[T]]:
        # A generator that fails synchronously fails that page, not the caller
        try:
            return self._generator(page)
        except Exception as err:
            return _raise(err)

    def __aiter__(self) -> PageSearchStream[T]:
        return self

    async def __anext__(self) -> list[T]:
        if self._state is not StreamState.ACTIVE or self._pending is None:
            raise StopAsyncIteration

        pending, self._pending = self._pending, None
        try:
            items = await pending
        except Exception as err:
            self._state = StreamState.ERRORED
            log_stream_errored(
                page_index=self._page.value,
                error_type=type(err).__name__,
                error_message=str(err),
            )
            raise
        except BaseException:
            # Cancelled mid-fetch: the awaitable cannot be resumed
            self._state = StreamState.EXHAUSTED
            raise

        if not items:
            self._state = StreamState.EXHAUSTED
            log_stream_exhausted(page_index=self._page.value)
            raise StopAsyncIteration

        log_page_fetched(page_index=self._page.value, items=len(items))
        self._page = self._page.saturating_next()
        self._pending = self._start(self._page)
        return list(items)

    def _discard_pending(self) -> None:
        pending, self._pending = getattr(self, "_pending", None), None
        if inspect.iscoroutine(pending):
            pending.close()

    async def aclose(self) -> None:
        """Abandon the stream, discarding the pending page fetch."""
        self._discard_pending()
        if self._state is StreamState.ACTIVE:
            self._state = StreamState.EXHAUSTED

    def __del__(self) -> None:
        # A stream dropped after ``break`` still holds the next page's coroutine
        self._discard_pending()

    def flat(self) -> SearchStream[T]:
        """Return a stream over the individual items of this stream's pages."""
        return SearchStream(self)


class SearchStream(Generic[T]):
    """Async iterator over the items of a ``PageSearchStream``.

    Items keep their order within and across pages. An error from the
    underlying stream is raised as soon as the buffered items run out.
    """

    def __init__(self, pages: PageSearchStream[T]) -> None:
        self._pages = pages
        self._buffer: deque[T] = deque()

    @property
    def pages(self) -> PageSearchStream[T]:
        return self._pages

    def __aiter__(self) -> SearchStream[T]:
        return self

    async def __anext__(self) -> T:
        if not self._buffer:
            # Pages are never empty, StopAsyncIteration and errors pass through
            self._buffer.extend(await self._pages.__anext__())
        return self._buffer.popleft()

    async def aclose(self) -> None:
        self._buffer.clear()
        await self._pages.aclose()
