"""User records embedded in other responses."""

from datetime import datetime

from pydantic import Field

from .common import MaybeUrl, ObjectId, Record, Relationships


class CommentUser(Record):
    """Owner of a comment or feed article."""

    id: ObjectId = Field(..., alias="_id")
    username: str
    name: str
    avatar: MaybeUrl | None = None


class ShortUser(CommentUser):
    """User found by a name search.

    ``relationships`` is only present when requested.
    """

    relationships: Relationships | None = None


class FollowerUser(Record):
    """Follower of a user. Deleted accounts come back without id or names."""

    id: ObjectId | None = Field(None, alias="_id")
    username: str | None = None
    name: str | None = None
    avatar: MaybeUrl | None = None
    short_description: str | None = Field(None, alias="descriptionShort")
    relationships: Relationships


class ArticleUser(Record):
    """Author of an article."""

    id: ObjectId = Field(..., alias="_id")
    username: str
    name: str
    avatar: MaybeUrl | None = None
    short_description: str | None = Field(None, alias="descriptionShort")
    following_num: int = Field(..., ge=0, alias="followingNum")
    followers_num: int = Field(..., ge=0, alias="followersNum")
    read_num: int = Field(..., ge=0, alias="readNum")
    created_at: datetime = Field(..., alias="createdAt")
    socials: dict[str, MaybeUrl] = Field(default_factory=dict)
    donate_url: MaybeUrl | None = Field(None, alias="donateUrl")
