"""Data models for API records.

Architecture:
    Pydantic v2 models mirroring the JSON shapes returned by the site. They
    are structure only: decoding happens in ``typematrux.requests``, which
    wraps any validation failure into ``BadJsonError``.

Design Decisions:
    - Frozen models: records are snapshots of remote state
    - Aliases: Python names, camelCase/underscored JSON keys (``_id``)
    - Unknown fields ignored: new site fields do not break decoding
    - ``MaybeUrl``: invalid user-supplied links are kept, not rejected
"""

from .article import (
    AuthorArticle,
    FeedArticle,
    FullArticle,
    RecommendedArticle,
    SearchArticle,
    TagArticle,
)
from .comment import ArticleComment, ReplyComment
from .common import MaybeUrl, ObjectId, Record, Relationships
from .profile import FullTag, FullUser
from .tag import ArticleTag, PopularTag, UserTag
from .user import ArticleUser, CommentUser, FollowerUser, ShortUser

__all__ = [
    "ArticleComment",
    "ArticleTag",
    "ArticleUser",
    "AuthorArticle",
    "CommentUser",
    "FeedArticle",
    "FollowerUser",
    "FullArticle",
    "FullTag",
    "FullUser",
    "MaybeUrl",
    "ObjectId",
    "PopularTag",
    "RecommendedArticle",
    "Record",
    "Relationships",
    "ReplyComment",
    "SearchArticle",
    "ShortUser",
    "TagArticle",
    "UserTag",
]
