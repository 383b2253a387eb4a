"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from typing import Any

import pytest
from yarl import URL

from typematrux.core import BaseUrl, HttpMethod, ResponseParts
from typematrux.runtime.rest import RequestExecutor


class FakeExecutor(RequestExecutor):
    """Executor replaying scripted responses instead of touching the network.

    Each scripted item is either ``ResponseParts`` or an exception to raise.
    Every call is recorded as ``(url, method)``.
    """

    def __init__(self, base: BaseUrl, script: list[Any] | None = None) -> None:
        super().__init__(base)
        self.script = list(script or [])
        self.calls: list[tuple[URL, HttpMethod]] = []

    def queue(self, item: Any) -> None:
        self.script.append(item)

    async def send_inner(self, url: URL, method: HttpMethod) -> ResponseParts:
        self.calls.append((url, method))
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


def json_parts(payload: Any, status_code: int = 200) -> ResponseParts:
    return ResponseParts(status_code=status_code, body=json.dumps(payload))


@pytest.fixture
def base_url() -> BaseUrl:
    return BaseUrl.parse("https://drukarnia.com.ua/")


@pytest.fixture
def fake_executor(base_url: BaseUrl) -> FakeExecutor:
    return FakeExecutor(base_url)


@pytest.fixture
def parts_factory():
    """Build ``ResponseParts`` from a JSON-serializable payload."""
    return json_parts


@pytest.fixture
def records() -> dict[str, dict[str, Any]]:
    """Minimal valid JSON records as returned by the site."""
    user_id = "5f1a2b3c4d5e6f708192a3b4"
    tag_id = "6a1b2c3d4e5f60718293a4b5"
    article_id = "7b1c2d3e4f5061728394a5b6"
    relationships = {"isSubscribed": False, "isBlocked": False}
    comment_user = {
        "_id": user_id,
        "username": "writer",
        "name": "Письменник",
        "avatar": "https://cdn.example.com/a.png",
    }
    article_user = {
        **comment_user,
        "descriptionShort": "about",
        "followingNum": 3,
        "followersNum": 10,
        "readNum": 120,
        "createdAt": "2023-05-01T10:00:00.000Z",
        "socials": {"telegram": "https://t.me/writer", "site": "not a url"},
    }
    article_base = {
        "_id": article_id,
        "title": "Дія",
        "description": "Опис",
        "slug": "diia-abc",
        "mainTag": "Технології",
        "mainTagId": tag_id,
        "mainTagSlug": "tekhnologiyi",
        "readTime": 240,
        "createdAt": "2023-06-01T12:30:00.000Z",
        "isBookmarked": False,
    }
    return {
        "relationships": relationships,
        "comment_user": comment_user,
        "short_user": {**comment_user, "relationships": relationships},
        "follower": {
            "_id": user_id,
            "username": "writer",
            "name": "Письменник",
            "relationships": relationships,
        },
        "popular_tag": {
            "_id": tag_id,
            "name": "Технології",
            "slug": "tekhnologiyi",
            "mentionsNum": 42,
            "__v": 0,
        },
        "recommended_article": {
            **article_base,
            "owner": article_user,
            "tags": [tag_id],
            "sensitive": False,
            "likeNum": 5,
            "commentNum": 2,
        },
        "feed_article": {
            **article_base,
            "owner": comment_user,
            "tags": [{"_id": tag_id, "name": "Технології", "slug": "tekhnologiyi"}],
            "likeNum": 1,
            "commentNum": 0,
        },
        "full_article": {
            **article_base,
            "owner": article_user,
            "seoTitle": "Дія",
            "likeNum": 7,
            "commentNum": 0,
            "isLiked": 3,
            "relationships": relationships,
            "content": {"blocks": []},
        },
        "full_user": {
            "_id": user_id,
            "username": "writer",
            "name": "Письменник",
            "followingNum": 3,
            "followersNum": 10,
            "readNum": 120,
            "createdAt": "2023-05-01T10:00:00.000Z",
            "authorTags": [{"_id": tag_id, "name": "Технології", "slug": "tekhnologiyi"}],
            "relationships": relationships,
            "articles": [],
        },
        "full_tag": {
            "_id": tag_id,
            "name": "Технології",
            "slug": "tekhnologiyi",
            "mentionsNum": 42,
            "relationships": relationships,
            "articles": [],
        },
        "reply": {
            "_id": "8c1d2e3f405162738495a6b7",
            "comment": "<p>Дякую</p>",
            "owner": comment_user,
            "article": article_id,
            "hiddenByAuthor": False,
            "replyNum": 0,
            "likesNum": 1,
            "createdAt": "2023-06-02T08:00:00.000Z",
            "isLiked": False,
            "isBlocked": False,
            "replyToComment": "9d1e2f30415263748596a7b8",
            "replyToUser": user_id,
            "rootComment": "9d1e2f30415263748596a7b8",
            "rootCommentOwner": user_id,
        },
    }
