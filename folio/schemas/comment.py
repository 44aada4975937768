"""Pydantic schemas for comments and nested replies."""
from pydantic import BaseModel, Field


class CommentIn(BaseModel):
    """A comment as sent by the client. Ids are assigned when missing."""

    id: str | None = None
    author: str = ""
    content: str = ""
    timestamp: str | None = None
    avatar_image: str | None = Field(None, alias="avatarImage")
    is_admin: bool = Field(False, alias="isAdmin")
    replies: list["CommentIn"] | None = None

    model_config = {"populate_by_name": True}


class CommentOut(BaseModel):
    id: str | None = None
    author: str
    content: str
    timestamp: str | None = None
    avatar_image: str | None = None
    is_admin: bool = False
    replies: list["CommentOut"] | None = None
