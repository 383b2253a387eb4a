"""Article records.

The site returns a different article shape per endpoint; each shape is its
own model rather than one model with everything optional.
"""

from datetime import datetime, timedelta
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from .comment import ArticleComment
from .common import MaybeUrl, ObjectId, Record, Relationships
from .tag import ArticleTag, UserTag
from .user import ArticleUser, CommentUser


def _flag_from_number(value: Any) -> Any:
    # "isLiked" of a full article is a like counter, not a boolean
    if isinstance(value, int) and not isinstance(value, bool):
        return value > 0
    return value


LikeFlag = Annotated[bool, BeforeValidator(_flag_from_number)]


class _ArticleBase(Record):
    id: ObjectId = Field(..., alias="_id")
    title: str
    description: str
    slug: str
    main_tag: str = Field(..., alias="mainTag")
    main_tag_id: ObjectId = Field(..., alias="mainTagId")
    main_tag_slug: str = Field(..., alias="mainTagSlug")
    read_time: timedelta = Field(..., alias="readTime")
    created_at: datetime = Field(..., alias="createdAt")
    is_bookmarked: bool = Field(..., alias="isBookmarked")


class SearchArticle(_ArticleBase):
    """Article listed on its author's profile page."""

    owner: ObjectId
    thumb_picture: MaybeUrl | None = Field(None, alias="thumbPicture")
    picture: MaybeUrl | None = None
    canonical: str | None = None


class AuthorArticle(SearchArticle):
    """Article listed under a full user profile."""

    tags: list[ObjectId] = Field(default_factory=list)
    like_num: int = Field(..., ge=0, alias="likeNum")
    comment_num: int = Field(..., ge=0, alias="commentNum")
    sensitive: bool = False


class RecommendedArticle(_ArticleBase):
    """Article found by a title search or recommended under another one."""

    owner: ArticleUser
    tags: list[ObjectId] = Field(default_factory=list)
    thumb_picture: MaybeUrl | None = Field(None, alias="thumbPicture")
    canonical: str | None = None
    sensitive: bool = False
    like_num: int = Field(..., ge=0, alias="likeNum")
    comment_num: int = Field(..., ge=0, alias="commentNum")


class TagArticle(RecommendedArticle):
    """Article listed on a tag page."""

    relationships: Relationships | None = None


class FeedArticle(_ArticleBase):
    """Article from the main feed."""

    owner: CommentUser
    tags: list[UserTag] = Field(default_factory=list)
    thumb_picture: MaybeUrl | None = Field(None, alias="thumbPicture")
    sensitive: bool = False
    like_num: int = Field(..., ge=0, alias="likeNum")
    comment_num: int = Field(..., ge=0, alias="commentNum")


class FullArticle(_ArticleBase):
    """Article page, with comments and recommendations.

    ``content`` is kept as the raw JSON document tree.
    """

    owner: ArticleUser
    seo_title: str | None = Field(None, alias="seoTitle")
    picture: MaybeUrl | None = None
    thumb_picture: MaybeUrl | None = Field(None, alias="thumbPicture")
    tags: list[ArticleTag] = Field(default_factory=list)
    ads: bool | None = None
    index: bool | None = None
    sensitive: bool = False
    canonical: str | None = None
    like_num: int = Field(..., ge=0, alias="likeNum")
    comment_num: int = Field(..., ge=0, alias="commentNum")
    is_liked: LikeFlag = Field(False, alias="isLiked")
    relationships: Relationships | None = None
    author_articles: list[SearchArticle] = Field(default_factory=list, alias="authorArticles")
    recommended_articles: list[RecommendedArticle] = Field(
        default_factory=list, alias="recommendedArticles"
    )
    comments: list[ArticleComment] = Field(default_factory=list)
    content: Any = None
