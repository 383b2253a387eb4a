"""Ergonomic client facade for the Drukarnia API.

Architecture:
    ``DrukarniaClient`` pairs one ``RequestExecutor`` with the concrete
    requests of ``typematrux.requests``. Single-shot operations are thin
    ``executor.send`` calls; paginated operations expose both a ``*_page``
    coroutine and a stream built on ``PageSearchStream``.

Design Decisions:
    - Executor injection allows testing with a fake transport
    - Streams hold the client itself as their accessor and re-enter it
      through the ``*_page`` coroutines, so pagination logic exists once
    - Context manager closes the executor only if the client created it
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from ..core.primitives import FIRST_PAGE, BaseUrl, PageIndex
from ..models import (
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
from ..requests import (
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
from ..runtime.paging import PageSearchStream
from ..runtime.rest import AiohttpExecutor, RequestExecutor

logger = logging.getLogger(__name__)


class DrukarniaClient:
    """High-level access to the Drukarnia API.

    Every method raises ``ExecutionError`` when the transport fails and
    ``ResponseError`` when the response cannot be interpreted; a missing
    entity is a ``ResponseError`` wrapping ``NotFoundError``.

    Example:
        >>> async with DrukarniaClient() as client:
        ...     tags = await client.popular_tags()
        ...     async for article in client.search_article("Дія").flat():
        ...         print(article.title)
    """

    def __init__(
        self,
        executor: RequestExecutor | None = None,
        *,
        base_url: str | BaseUrl = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            executor: Executor to send requests with. When omitted an
                ``AiohttpExecutor`` for ``base_url`` is created and owned.
            base_url: Site root, ignored when ``executor`` is given
            timeout: Total request timeout in seconds for the owned executor
            headers: Extra headers for the owned executor

        Raises:
            CannotBeABase: If ``base_url`` cannot serve as a base
        """
        self._owns_executor = executor is None
        if executor is None:
            executor = AiohttpExecutor(BaseUrl.parse(base_url), timeout=timeout, headers=headers)
        self._executor = executor
        self._closed = False

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    @property
    def base_url(self) -> BaseUrl:
        return self._executor.base_url

    # Tags

    async def popular_tags(self) -> list[PopularTag]:
        """Retrieve currently popular tags."""
        return await self._executor.send(PopularTags())

    async def get_tag(self, slug: str) -> FullTag:
        """Fetch a tag by its slug."""
        return await self._executor.send(GetTag(slug))

    # Users

    async def get_user(self, name: str) -> FullUser:
        """Fetch a user profile by username."""
        return await self._executor.send(GetUser(name))

    async def search_user_page(
        self,
        name: str,
        page: PageIndex | int = FIRST_PAGE,
        *,
        with_relationships: bool = True,
    ) -> list[ShortUser]:
        """Fetch one page of users whose name matches ``name``."""
        request = SearchUsers(name, page=PageIndex.coerce(page), with_relationships=with_relationships)
        return await self._executor.send(request)

    def search_user(
        self, name: str, *, with_relationships: bool = True
    ) -> PageSearchStream[ShortUser]:
        """Stream pages of users whose name matches ``name``.

        The stream ends after the first error.
        """
        return PageSearchStream(
            self,
            lambda page: self.search_user_page(name, page, with_relationships=with_relationships),
        )

    async def get_followers_page(
        self, user_id: str, page: PageIndex | int = FIRST_PAGE
    ) -> list[FollowerUser]:
        """Fetch one page of followers of a user."""
        return await self._executor.send(GetFollowers(user_id, page=PageIndex.coerce(page)))

    def get_followers(self, user_id: str) -> PageSearchStream[FollowerUser]:
        """Stream pages of followers of a user. Ends after the first error."""
        return PageSearchStream(self, lambda page: self.get_followers_page(user_id, page))

    # Articles

    async def get_article(self, slug: str) -> FullArticle:
        """Fetch an article by its slug."""
        return await self._executor.send(GetArticle(slug))

    async def search_article_page(
        self, title: str, page: PageIndex | int = FIRST_PAGE
    ) -> list[RecommendedArticle]:
        """Fetch one page of articles whose title matches ``title``."""
        return await self._executor.send(SearchArticles(title, page=PageIndex.coerce(page)))

    def search_article(self, title: str) -> PageSearchStream[RecommendedArticle]:
        """Stream pages of articles whose title matches ``title``.

        The stream ends after the first error.
        """
        return PageSearchStream(self, lambda page: self.search_article_page(title, page))

    async def get_replies(self, comment_id: str) -> list[ReplyComment]:
        """Fetch replies to a comment."""
        return await self._executor.send(GetReplies(comment_id))

    async def feed_page(self, page: PageIndex | int = FIRST_PAGE) -> list[FeedArticle]:
        """Fetch one page of the main feed."""
        return await self._executor.send(FeedPage(page=PageIndex.coerce(page)))

    def feed(self) -> PageSearchStream[FeedArticle]:
        """Stream pages of the main feed. Ends after the first error."""
        return PageSearchStream(self, self.feed_page)

    # Lifecycle

    async def close(self) -> None:
        """Close the client and the executor it owns."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing DrukarniaClient")
        if self._owns_executor and isinstance(self._executor, AiohttpExecutor):
            await self._executor.close()

    async def __aenter__(self) -> DrukarniaClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
