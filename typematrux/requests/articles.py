"""Article requests."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from pydantic import TypeAdapter

from ..core.enums import HttpMethod
from ..core.primitives import FIRST_PAGE, PageIndex, ResponseParts
from ..models import FullArticle, RecommendedArticle
from .decoding import check_not_found, decode_json

_FULL_ARTICLE = TypeAdapter(FullArticle)
_SEARCH_RESULTS = TypeAdapter(list[RecommendedArticle])


@dataclass(frozen=True)
class GetArticle:
    """GET ``/api/articles/{slug}``.

    Raises ``NotFoundError`` (wrapped) when the article does not exist.
    """

    slug: str

    def endpoint(self) -> Iterable[str]:
        return ("api", "articles", self.slug)

    def method(self) -> HttpMethod:
        return HttpMethod.GET

    def query_params(self) -> Iterable[tuple[str, str]]:
        return ()

    def generate_response(self, parts: ResponseParts) -> FullArticle:
        check_not_found(parts)
        return decode_json(parts.body, _FULL_ARTICLE)


@dataclass(frozen=True)
class SearchArticles:
    """GET ``/api/articles/search?name={title}&page={page}``."""

    title: str
    page: PageIndex = field(default=FIRST_PAGE)

    def __post_init__(self) -> None:
        object.__setattr__(self, "page", PageIndex.coerce(self.page))

    def endpoint(self) -> Iterable[str]:
        return ("api", "articles", "search")

    def method(self) -> HttpMethod:
        return HttpMethod.GET

    def query_params(self) -> Iterable[tuple[str, str]]:
        return (("name", self.title), ("page", str(self.page)))

    def generate_response(self, parts: ResponseParts) -> list[RecommendedArticle]:
        return decode_json(parts.body, _SEARCH_RESULTS)
