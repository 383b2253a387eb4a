"""Unit tests for SearchStream, the item-level view over result pages."""

from __future__ import annotations

import pytest

from typematrux.core import PageIndex
from typematrux.runtime.paging import PageSearchStream, SearchStream, StreamState


def scripted(pages: list[object]):
    """Generator returning each scripted page, raising scripted exceptions."""
    requested: list[int] = []

    async def fetch(page: PageIndex):
        requested.append(page.value)
        index = page.value - 1
        item = pages[index] if index < len(pages) else []
        if isinstance(item, Exception):
            raise item
        return item

    return fetch, requested


class TestSearchStream:
    """Test SearchStream flattening."""

    @pytest.mark.asyncio
    async def test_flattens_pages_in_order(self):
        """Test items keep their order within and across pages."""
        fetch, requested = scripted([["a", "b"], ["c"], []])
        stream = SearchStream(PageSearchStream(None, fetch))

        items = [item async for item in stream]

        assert items == ["a", "b", "c"]
        assert requested == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_error_after_buffered_items(self):
        """Test buffered items are delivered before the page error."""
        error = ConnectionError("page 2")
        fetch, requested = scripted([["a", "b"], error])
        stream = SearchStream(PageSearchStream(None, fetch))

        assert await stream.__anext__() == "a"
        assert await stream.__anext__() == "b"
        with pytest.raises(ConnectionError) as exc_info:
            await stream.__anext__()
        assert exc_info.value is error

        with pytest.raises(StopAsyncIteration):
            await stream.__anext__()
        assert requested == [1, 2]
        assert stream.pages.state is StreamState.ERRORED

    @pytest.mark.asyncio
    async def test_pulls_one_page_at_a_time(self):
        """Test the next page is awaited only once the buffer is drained."""
        fetch, requested = scripted([["a", "b"], ["c"], []])
        stream = SearchStream(PageSearchStream(None, fetch))

        await stream.__anext__()
        await stream.__anext__()
        assert requested == [1]

        assert await stream.__anext__() == "c"
        assert requested == [1, 2]

    @pytest.mark.asyncio
    async def test_empty_source(self):
        """Test an empty first page yields no items."""
        fetch, _ = scripted([])
        stream = PageSearchStream(None, fetch).flat()

        assert [item async for item in stream] == []

    @pytest.mark.asyncio
    async def test_flat_wraps_page_stream(self):
        """Test flat() exposes the page stream it was built from."""
        fetch, _ = scripted([["a"]])
        pages = PageSearchStream(None, fetch)
        stream = pages.flat()

        assert isinstance(stream, SearchStream)
        assert stream.pages is pages
        await stream.aclose()
        assert pages.state is StreamState.EXHAUSTED

    @pytest.mark.asyncio
    async def test_aclose_drops_buffer(self):
        """Test aclose() discards buffered items and ends the stream."""
        fetch, _ = scripted([["a", "b"], ["c"]])
        stream = SearchStream(PageSearchStream(None, fetch))
        await stream.__anext__()

        await stream.aclose()

        with pytest.raises(StopAsyncIteration):
            await stream.__anext__()
