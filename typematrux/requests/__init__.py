"""Concrete requests, one per API operation.

Each request is a frozen dataclass implementing ``typematrux.core.Request``:
endpoint segments, method, query pairs and response decoding. Send them
through any ``RequestExecutor``:

    >>> users = await executor.send(SearchUsers("Дія", page=2))
"""

from .articles import GetArticle, SearchArticles
from .comments import GetReplies
from .feed import FeedPage
from .tags import GetTag, PopularTags
from .users import GetFollowers, GetUser, SearchUsers

__all__ = [
    "FeedPage",
    "GetArticle",
    "GetFollowers",
    "GetReplies",
    "GetTag",
    "GetUser",
    "PopularTags",
    "SearchArticles",
    "SearchUsers",
]
