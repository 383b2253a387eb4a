"""Comment records."""

from datetime import datetime

from pydantic import Field

from .common import ObjectId, Record
from .user import CommentUser


class ArticleComment(Record):
    """Top-level comment of an article. ``comment`` is an HTML fragment."""

    id: ObjectId = Field(..., alias="_id")
    comment: str
    owner: CommentUser | None = None
    article: ObjectId
    hidden_by_author: bool = Field(..., alias="hiddenByAuthor")
    reply_num: int = Field(..., ge=0, alias="replyNum")
    likes_num: int = Field(..., ge=0, alias="likesNum")
    created_at: datetime = Field(..., alias="createdAt")
    is_liked: bool = Field(..., alias="isLiked")
    is_blocked: bool = Field(..., alias="isBlocked")


class ReplyComment(ArticleComment):
    """Reply to a comment."""

    owner: CommentUser
    reply_to_comment: ObjectId = Field(..., alias="replyToComment")
    reply_to_user: ObjectId = Field(..., alias="replyToUser")
    root_comment: ObjectId = Field(..., alias="rootComment")
    root_comment_owner: ObjectId = Field(..., alias="rootCommentOwner")
