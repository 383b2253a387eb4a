"""Unit tests for concrete API requests.

Each request is checked for its endpoint, query and status handling.
"""

from __future__ import annotations

import pytest

from typematrux.config import NIL_ARTICLE_ID
from typematrux.core import (
    BadJsonError,
    HttpMethod,
    NotFoundError,
    PageIndex,
    Request,
    ResponseParts,
    UnexpectedStatusError,
)
from typematrux.models import (
    FeedArticle,
    FollowerUser,
    FullArticle,
    FullTag,
    FullUser,
    PopularTag,
    RecommendedArticle,
    ReplyComment,
    ShortUser,
)
from typematrux.requests import (
    FeedPage,
    GetArticle,
    GetFollowers,
    GetReplies,
    GetTag,
    GetUser,
    PopularTags,
    SearchArticles,
    SearchUsers,
)

ALL_REQUESTS = [
    PopularTags(),
    GetTag("tekhnologiyi"),
    GetUser("writer"),
    SearchUsers("writer"),
    GetFollowers("5f1a2b3c4d5e6f708192a3b4"),
    GetArticle("diia-abc"),
    SearchArticles("Дія"),
    GetReplies("9d1e2f30415263748596a7b8"),
    FeedPage(),
]


class TestRequestShapes:
    """Test endpoints, methods and queries."""

    @pytest.mark.parametrize("request_", ALL_REQUESTS, ids=lambda r: type(r).__name__)
    def test_is_get_request(self, request_):
        """Test every operation is a GET implementing the Request protocol."""
        assert isinstance(request_, Request)
        assert request_.method() is HttpMethod.GET

    @pytest.mark.parametrize(
        ("request_", "segments", "query"),
        [
            (PopularTags(), ("api", "articles", "tags", "popular"), ()),
            (GetTag("t"), ("api", "articles", "tags", "t"), (("page", "1"),)),
            (GetUser("u"), ("api", "users", "profile", "u"), ()),
            (GetArticle("s"), ("api", "articles", "s"), ()),
            (FeedPage(page=4), ("api", "preferences", "feed"), (("page", "4"),)),
            (
                GetFollowers("abc", page=2),
                ("api", "relationships", "abc", "followers"),
                (("page", "2"),),
            ),
            (
                SearchArticles("Дія", page=3),
                ("api", "articles", "search"),
                (("name", "Дія"), ("page", "3")),
            ),
        ],
    )
    def test_endpoint_and_query(self, request_, segments, query):
        """Test each request's path segments and query pairs."""
        assert tuple(request_.endpoint()) == segments
        assert tuple(request_.query_params()) == query

    def test_search_users_query(self):
        """Test SearchUsers sends name, page and relationship flag."""
        request = SearchUsers("Дія", page=2, with_relationships=True)

        assert tuple(request.endpoint()) == ("api", "users", "info")
        assert tuple(request.query_params()) == (
            ("name", "Дія"),
            ("page", "2"),
            ("withRelationships", "true"),
        )
        assert dict(SearchUsers("x").query_params())["withRelationships"] == "false"

    def test_replies_default_article(self):
        """Test GetReplies uses the all-zero article id by default."""
        request = GetReplies("c1")
        assert tuple(request.endpoint()) == (
            "api",
            "articles",
            NIL_ARTICLE_ID,
            "comments",
            "c1",
            "replies",
        )

    def test_page_coerced(self):
        """Test integer pages are turned into PageIndex."""
        request = SearchArticles("x", page=5)
        assert request.page == PageIndex(5)

    def test_invalid_page_rejected(self):
        """Test a zero page is refused at construction."""
        with pytest.raises(ValueError):
            FeedPage(page=0)

    def test_requests_are_immutable(self):
        """Test requests are frozen values."""
        request = GetUser("u")
        with pytest.raises(AttributeError):
            request.name = "other"  # type: ignore[misc]


class TestRequestDecoding:
    """Test generate_response for each request."""

    def test_popular_tags(self, parts_factory, records):
        result = PopularTags().generate_response(parts_factory([records["popular_tag"]]))
        assert isinstance(result[0], PopularTag)
        assert result[0].mentions_num == 42

    def test_search_users(self, parts_factory, records):
        result = SearchUsers("w").generate_response(parts_factory([records["short_user"]]))
        assert isinstance(result[0], ShortUser)
        assert result[0].relationships is not None

    def test_followers(self, parts_factory, records):
        result = GetFollowers("x").generate_response(parts_factory([records["follower"]]))
        assert isinstance(result[0], FollowerUser)

    def test_search_articles(self, parts_factory, records):
        result = SearchArticles("Дія").generate_response(
            parts_factory([records["recommended_article"]])
        )
        assert isinstance(result[0], RecommendedArticle)

    def test_feed(self, parts_factory, records):
        result = FeedPage().generate_response(parts_factory([records["feed_article"]]))
        assert isinstance(result[0], FeedArticle)

    def test_get_user(self, parts_factory, records):
        result = GetUser("writer").generate_response(parts_factory(records["full_user"]))
        assert isinstance(result, FullUser)

    def test_get_tag(self, parts_factory, records):
        result = GetTag("t").generate_response(parts_factory(records["full_tag"]))
        assert isinstance(result, FullTag)

    def test_get_article(self, parts_factory, records):
        result = GetArticle("s").generate_response(parts_factory(records["full_article"]))
        assert isinstance(result, FullArticle)
        assert result.is_liked is True

    def test_replies(self, parts_factory, records):
        result = GetReplies("c").generate_response(parts_factory([records["reply"]]))
        assert isinstance(result[0], ReplyComment)

    @pytest.mark.parametrize(
        "request_", [GetUser("u"), GetTag("t"), GetArticle("a")], ids=lambda r: type(r).__name__
    )
    def test_404_is_not_found(self, request_):
        """Test single-entity requests map 404 to NotFoundError."""
        with pytest.raises(NotFoundError):
            request_.generate_response(ResponseParts(404, "Not Found"))

    def test_replies_401_is_not_found(self):
        """Test an unknown comment (401) is NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            GetReplies("c").generate_response(ResponseParts(401, ""))
        assert exc_info.value.status_code == 401

    def test_replies_other_status(self):
        """Test other non-200 replies statuses are unexpected."""
        with pytest.raises(UnexpectedStatusError):
            GetReplies("c").generate_response(ResponseParts(500, "[]"))

    def test_feed_non_200(self):
        """Test the feed rejects non-200 answers."""
        with pytest.raises(UnexpectedStatusError):
            FeedPage().generate_response(ResponseParts(403, "[]"))

    def test_empty_page(self, parts_factory):
        """Test an empty result page decodes to an empty list."""
        assert SearchArticles("nothing").generate_response(parts_factory([])) == []

    def test_malformed_body(self):
        """Test garbage bodies are BadJsonError."""
        with pytest.raises(BadJsonError):
            PopularTags().generate_response(ResponseParts(200, "<html>"))
