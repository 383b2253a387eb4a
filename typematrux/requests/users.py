"""User requests."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from pydantic import TypeAdapter

from ..core.enums import HttpMethod
from ..core.primitives import FIRST_PAGE, PageIndex, ResponseParts
from ..models import FollowerUser, FullUser, ShortUser
from .decoding import check_not_found, decode_json

_FULL_USER = TypeAdapter(FullUser)
_SHORT_USERS = TypeAdapter(list[ShortUser])
_FOLLOWERS = TypeAdapter(list[FollowerUser])


@dataclass(frozen=True)
class GetUser:
    """GET ``/api/users/profile/{name}``.

    Raises ``NotFoundError`` (wrapped) when the user does not exist.
    """

    name: str

    def endpoint(self) -> Iterable[str]:
        return ("api", "users", "profile", self.name)

    def method(self) -> HttpMethod:
        return HttpMethod.GET

    def query_params(self) -> Iterable[tuple[str, str]]:
        return ()

    def generate_response(self, parts: ResponseParts) -> FullUser:
        check_not_found(parts)
        return decode_json(parts.body, _FULL_USER)


@dataclass(frozen=True)
class SearchUsers:
    """GET ``/api/users/info?name={name}&page={page}&withRelationships={flag}``."""

    name: str
    page: PageIndex = field(default=FIRST_PAGE)
    with_relationships: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "page", PageIndex.coerce(self.page))

    def endpoint(self) -> Iterable[str]:
        return ("api", "users", "info")

    def method(self) -> HttpMethod:
        return HttpMethod.GET

    def query_params(self) -> Iterable[tuple[str, str]]:
        return (
            ("name", self.name),
            ("page", str(self.page)),
            ("withRelationships", "true" if self.with_relationships else "false"),
        )

    def generate_response(self, parts: ResponseParts) -> list[ShortUser]:
        return decode_json(parts.body, _SHORT_USERS)


@dataclass(frozen=True)
class GetFollowers:
    """GET ``/api/relationships/{user_id}/followers?page={page}``."""

    user_id: str
    page: PageIndex = field(default=FIRST_PAGE)

    def __post_init__(self) -> None:
        object.__setattr__(self, "page", PageIndex.coerce(self.page))

    def endpoint(self) -> Iterable[str]:
        return ("api", "relationships", self.user_id, "followers")

    def method(self) -> HttpMethod:
        return HttpMethod.GET

    def query_params(self) -> Iterable[tuple[str, str]]:
        return (("page", str(self.page)),)

    def generate_response(self, parts: ResponseParts) -> list[FollowerUser]:
        return decode_json(parts.body, _FOLLOWERS)
