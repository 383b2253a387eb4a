"""Comment requests."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import TypeAdapter

from ..config import NIL_ARTICLE_ID
from ..core.enums import HttpMethod
from ..core.primitives import ResponseParts
from ..models import ReplyComment
from .decoding import check_not_found, check_status, decode_json

_REPLIES = TypeAdapter(list[ReplyComment])


@dataclass(frozen=True)
class GetReplies:
    """GET ``/api/articles/{article_id}/comments/{comment_id}/replies``.

    The result does not depend on the article, so ``article_id`` defaults to
    the all-zero id. An unknown comment answers 401, reported as
    ``NotFoundError``.
    """

    comment_id: str
    article_id: str = NIL_ARTICLE_ID

    def endpoint(self) -> Iterable[str]:
        return ("api", "articles", self.article_id, "comments", self.comment_id, "replies")

    def method(self) -> HttpMethod:
        return HttpMethod.GET

    def query_params(self) -> Iterable[tuple[str, str]]:
        return ()

    def generate_response(self, parts: ResponseParts) -> list[ReplyComment]:
        check_not_found(parts, codes=(401,))
        check_status(parts)
        return decode_json(parts.body, _REPLIES)
