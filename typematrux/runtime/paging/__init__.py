"""Pagination layer.

Turns a "fetch page N" coroutine into lazily produced pages
(``PageSearchStream``) or items (``SearchStream``), with uniform
termination and error-latching semantics for every paginated operation.
"""

from __future__ import annotations

from .streams import PageGenerator, PageSearchStream, SearchStream, StreamState

__all__ = [
    "PageGenerator",
    "PageSearchStream",
    "SearchStream",
    "StreamState",
]
