"""Full entity pages: user profile and tag page."""

from datetime import datetime

from pydantic import Field

from .article import AuthorArticle, TagArticle
from .common import MaybeUrl, ObjectId, Record, Relationships
from .tag import PopularTag, UserTag


class FullUser(Record):
    """User profile page."""

    id: ObjectId = Field(..., alias="_id")
    username: str
    name: str
    avatar: MaybeUrl | None = None
    short_description: str | None = Field(None, alias="descriptionShort")
    description: str | None = None
    following_num: int = Field(..., ge=0, alias="followingNum")
    followers_num: int = Field(..., ge=0, alias="followersNum")
    read_num: int = Field(..., ge=0, alias="readNum")
    author_tags: list[UserTag] = Field(default_factory=list, alias="authorTags")
    created_at: datetime = Field(..., alias="createdAt")
    socials: dict[str, MaybeUrl] = Field(default_factory=dict)
    donate_url: MaybeUrl | None = Field(None, alias="donateUrl")
    relationships: Relationships | None = None
    articles: list[AuthorArticle] = Field(default_factory=list)


class FullTag(PopularTag):
    """Tag page with its first page of articles."""

    relationships: Relationships | None = None
    articles: list[TagArticle] = Field(default_factory=list)
