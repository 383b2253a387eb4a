"""Feed request."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from pydantic import TypeAdapter

from ..core.enums import HttpMethod
from ..core.primitives import FIRST_PAGE, PageIndex, ResponseParts
from ..models import FeedArticle
from .decoding import check_status, decode_json

_FEED = TypeAdapter(list[FeedArticle])


@dataclass(frozen=True)
class FeedPage:
    """GET ``/api/preferences/feed?page={page}``."""

    page: PageIndex = field(default=FIRST_PAGE)

    def __post_init__(self) -> None:
        object.__setattr__(self, "page", PageIndex.coerce(self.page))

    def endpoint(self) -> Iterable[str]:
        return ("api", "preferences", "feed")

    def method(self) -> HttpMethod:
        return HttpMethod.GET

    def query_params(self) -> Iterable[tuple[str, str]]:
        return (("page", str(self.page)),)

    def generate_response(self, parts: ResponseParts) -> list[FeedArticle]:
        check_status(parts)
        return decode_json(parts.body, _FEED)
