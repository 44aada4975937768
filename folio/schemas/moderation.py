"""Pydantic schemas for moderation endpoints."""
from datetime import datetime

from pydantic import BaseModel, Field


class ModerationRequest(BaseModel):
    admin_key: str | None = Field(None, alias="adminKey")

    model_config = {"populate_by_name": True}


class SweepResponse(BaseModel):
    success: bool = True
    message: str
    deleted_count: int
    deleted_tweets: list[str]


class FlaggedTweet(BaseModel):
    id: str
    author: str
    handle: str
    content: str  # preview, first 100 chars
    created_at: datetime | None = None
    reason: str


class ModerationStatusResponse(BaseModel):
    total_tweets: int
    flagged_count: int
    flagged_tweets: list[FlaggedTweet]
