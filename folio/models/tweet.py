"""Tweet models: admin-authored and user-authored posts (structurally identical)."""
from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from folio.db.session import Base

# JSONB on PostgreSQL, plain JSON elsewhere (tests run on SQLite)
JSONType = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TweetColumns:
    id = Column(String(64), primary_key=True)  # admin-<ms> / user-<ms>
    author = Column(String(100), nullable=False)
    handle = Column(String(50), nullable=False)
    avatar = Column(String(20), nullable=False, default="user")
    avatar_image = Column(Text, nullable=True)  # data:image/... only
    content = Column(Text, nullable=False)
    image = Column(Text, nullable=True)
    file_type = Column(String(50), nullable=True)
    file_name = Column(String(255), nullable=True)
    likes = Column(Integer, nullable=False, default=0)
    comments = Column(JSONType, nullable=False, default=list)  # nested Comment dicts
    retweets = Column(Integer, nullable=False, default=0)
    replies = Column(Integer, nullable=False, default=0)
    edited = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=True)


class AdminTweet(TweetColumns, Base):
    __tablename__ = "admin_tweets"


class UserTweet(TweetColumns, Base):
    __tablename__ = "user_tweets"

    admin_replies = relationship(
        "AdminReply",
        back_populates="user_tweet",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
