"""Primitive value types shared by requests, executors and streams.

Architecture:
    These are the leaf types of the library. ``BaseUrl`` is the validated
    root every request URL is built from, ``PageIndex`` numbers the pages of
    a paginated operation, and ``ResponseParts`` is the transport-independent
    snapshot of a response handed to ``Request.generate_response``.

Design Decisions:
    - yarl.URL: Already the URL type of aiohttp; percent-encodes path
      segments and query values, including non-ASCII input
    - Frozen dataclasses: Values never change after construction
    - Copy-on-join: ``BaseUrl.join`` returns a new URL, the base stays intact
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from yarl import URL

from .exceptions import CannotBeABase

# Largest page number that can be sent on the wire (unsigned 64-bit).
MAX_PAGE_INDEX = 2**64 - 1


class BaseUrl:
    """Absolute, hierarchical URL that API endpoints are appended to.

    A URL qualifies when it has a scheme and a path that segments can be
    appended to: either an authority (``https://host/``) or a path starting
    with "/" (``file:///srv/api/``). Opaque URLs such as ``mailto:x`` and
    relative references are rejected.
    """

    __slots__ = ("_url",)

    def __init__(self, url: URL) -> None:
        if not url.scheme or not (url.host or url.path.startswith("/")):
            raise CannotBeABase(str(url))
        self._url = url

    @classmethod
    def parse(cls, value: str | URL | BaseUrl) -> BaseUrl:
        """Build a base URL from a string or URL.

        Raises:
            CannotBeABase: If the URL is relative or has an opaque path
        """
        if isinstance(value, BaseUrl):
            return value
        if isinstance(value, str):
            try:
                value = URL(value)
            except ValueError as err:
                raise CannotBeABase(value) from err
        return cls(value)

    @property
    def url(self) -> URL:
        return self._url

    def join(
        self,
        segments: Iterable[str] = (),
        query: Iterable[tuple[str, str]] = (),
    ) -> URL:
        """Append path segments and query pairs, returning a new URL.

        Segments are appended in order and percent-encoded. Query pairs are
        appended after any query the base already carries; duplicate names
        are kept.

        Raises:
            ValueError: If a segment is empty, contains "/" or is "." or ".."
        """
        url = self._url
        # "/" drops the query, so collect the base pairs first
        pairs = list(url.query.items())
        for segment in segments:
            if not segment:
                raise ValueError("Path segment must not be empty")
            if "/" in segment:
                raise ValueError(f"Path segment must not contain '/': {segment!r}")
            # yarl resolves dot segments, which would leave the endpoint
            if segment in (".", ".."):
                raise ValueError(f"Path segment must not be a dot segment: {segment!r}")
            url = url / segment

        pairs.extend((str(name), str(value)) for name, value in query)
        if pairs:
            url = url.with_query(pairs)
        return url

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseUrl):
            return NotImplemented
        return self._url == other._url

    def __hash__(self) -> int:
        return hash(self._url)

    def __str__(self) -> str:
        return str(self._url)

    def __repr__(self) -> str:
        return f"BaseUrl({str(self._url)!r})"


@dataclass(frozen=True, order=True)
class PageIndex:
    """One-based index of a result page.

    Attributes:
        value: Page number, always between 1 and ``MAX_PAGE_INDEX``
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Page index must be an int, got {type(self.value).__name__}")
        if self.value < 1:
            raise ValueError(f"Page index must be positive, got {self.value}")
        if self.value > MAX_PAGE_INDEX:
            raise ValueError(f"Page index exceeds {MAX_PAGE_INDEX}")

    @classmethod
    def coerce(cls, value: PageIndex | int) -> PageIndex:
        if isinstance(value, PageIndex):
            return value
        return cls(value)

    def next(self) -> PageIndex:
        """Return the following page index.

        Raises:
            OverflowError: If this is already the last representable page.
                Reaching it means a pathological page count, not bad input.
        """
        if self.value >= MAX_PAGE_INDEX:
            raise OverflowError("Reached the limit for number of pages")
        return PageIndex(self.value + 1)

    def saturating_next(self) -> PageIndex:
        """Return the following page index, staying at the last one."""
        if self.value >= MAX_PAGE_INDEX:
            return self
        return PageIndex(self.value + 1)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


FIRST_PAGE = PageIndex(1)


@dataclass(frozen=True)
class ResponseParts:
    """Status code and text body of a completed HTTP exchange."""

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
