"""Tag requests."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import TypeAdapter

from ..core.enums import HttpMethod
from ..core.primitives import ResponseParts
from ..models import FullTag, PopularTag
from .decoding import check_not_found, decode_json

_POPULAR_TAGS = TypeAdapter(list[PopularTag])
_FULL_TAG = TypeAdapter(FullTag)


@dataclass(frozen=True)
class PopularTags:
    """GET ``/api/articles/tags/popular``."""

    def endpoint(self) -> Iterable[str]:
        return ("api", "articles", "tags", "popular")

    def method(self) -> HttpMethod:
        return HttpMethod.GET

    def query_params(self) -> Iterable[tuple[str, str]]:
        return ()

    def generate_response(self, parts: ResponseParts) -> list[PopularTag]:
        return decode_json(parts.body, _POPULAR_TAGS)


@dataclass(frozen=True)
class GetTag:
    """GET ``/api/articles/tags/{slug}?page=1``.

    Raises ``NotFoundError`` (wrapped) when the tag does not exist.
    """

    slug: str

    def endpoint(self) -> Iterable[str]:
        return ("api", "articles", "tags", self.slug)

    def method(self) -> HttpMethod:
        return HttpMethod.GET

    def query_params(self) -> Iterable[tuple[str, str]]:
        # The site answers 404 without it
        return (("page", "1"),)

    def generate_response(self, parts: ResponseParts) -> FullTag:
        check_not_found(parts)
        return decode_json(parts.body, _FULL_TAG)
