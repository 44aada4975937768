"""Pydantic schemas for tweets and admin replies."""
from datetime import datetime

from pydantic import BaseModel, Field

from folio.schemas.comment import CommentIn, CommentOut


class TweetCreate(BaseModel):
    content: str = ""
    author: str = ""
    handle: str = ""
    email: str | None = None
    is_admin: bool = Field(False, alias="isAdmin")
    avatar_image: str | None = Field(None, alias="avatarImage")
    image_url: str | None = Field(None, alias="imageUrl")
    file_url: str | None = Field(None, alias="fileUrl")
    file_type: str | None = Field(None, alias="fileType")
    file_name: str | None = Field(None, alias="fileName")

    model_config = {"populate_by_name": True}


class TweetUpdate(BaseModel):
    """PUT body: replace likes/comments, or post an admin reply."""

    tweet_id: str = Field("", alias="tweetId")
    is_admin: bool = Field(False, alias="isAdmin")
    is_admin_reply: bool = Field(False, alias="isAdminReply")
    comment_index: int | None = Field(None, alias="commentIndex")
    comment_id: str | None = Field(None, alias="commentId", max_length=64)
    reply_id: str | None = Field(None, alias="replyId", max_length=64)
    likes: int | None = None
    comments: list[CommentIn] | None = None

    model_config = {"populate_by_name": True}


class TweetEdit(BaseModel):
    tweet_id: str = Field("", alias="tweetId")
    content: str = ""
    is_admin: bool = Field(False, alias="isAdmin")

    model_config = {"populate_by_name": True}


class TweetDelete(BaseModel):
    tweet_id: str = Field("", alias="tweetId")
    is_admin: bool = Field(False, alias="isAdmin")

    model_config = {"populate_by_name": True}


class LikeRequest(BaseModel):
    action: str = "like"


class TweetResponse(BaseModel):
    id: str
    author: str
    handle: str
    avatar: str
    avatar_image: str | None = None
    content: str
    image: str | None = None
    file_type: str | None = None
    file_name: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    edited: bool = False
    likes: int = 0
    comments: list[CommentOut] = []
    retweets: int = 0
    replies: int = 0
    is_admin: bool = False  # verified badge

    model_config = {"from_attributes": True}


class TweetListResponse(BaseModel):
    success: bool = True
    tweets: list[TweetResponse]
    total: int
    limit: int
    offset: int


class TweetEnvelope(BaseModel):
    success: bool = True
    tweet: TweetResponse


class TweetDetailResponse(TweetEnvelope):
    is_admin: bool = False


class AdminReplyResponse(BaseModel):
    id: str
    user_tweet_id: str
    comment_index: int | None = None
    comment_id: str | None = None
    reply_id: str | None = None
    author: str
    content: str
    timestamp: datetime

    model_config = {"from_attributes": True}


class AdminReplyEnvelope(BaseModel):
    success: bool = True
    admin_reply: AdminReplyResponse


class TweetUpdateResponse(BaseModel):
    success: bool = True
    likes: int | None = None
    comments: list[CommentOut] | None = None


class LikeResponse(BaseModel):
    success: bool = True
    likes: int
    action: str
