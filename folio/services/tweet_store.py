"""Tweet persistence.

``TweetStore`` is the interface the services depend on; ``SqlTweetStore`` is
the implementation over an ``AsyncSession`` (per-row inserts, updates and
deletes, no whole-collection rewrites).
"""
import logging
import secrets
import string
import time
from contextlib import contextmanager
from typing import Protocol

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.errors import StorageUnavailable
from folio.models.admin_reply import AdminReply
from folio.models.tweet import AdminTweet, UserTweet

logger = logging.getLogger("folio.store")

ADMIN_ID_PREFIX = "admin-"
USER_ID_PREFIX = "user-"

_ID_ALPHABET = string.ascii_lowercase + string.digits


def make_id(prefix: str, suffix_length: int = 6) -> str:
    """``<prefix>-<epoch ms>-<random>``; the suffix keeps same-millisecond writes unique."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(suffix_length))
    return f"{prefix}-{int(time.time() * 1000)}-{suffix}"


def is_admin_tweet_id(tweet_id: str) -> bool:
    return tweet_id.startswith(ADMIN_ID_PREFIX)


class TweetStore(Protocol):
    """Three collections: admin tweets, user tweets, admin replies."""

    async def list_admin_tweets(self) -> list[AdminTweet]:
        ...

    async def list_user_tweets(self) -> list[UserTweet]:
        ...

    async def list_admin_replies(self, user_tweet_id: str | None = None) -> list[AdminReply]:
        ...

    async def get_admin_tweet(self, tweet_id: str) -> AdminTweet | None:
        ...

    async def get_user_tweet(self, tweet_id: str) -> UserTweet | None:
        ...

    async def add_tweet(self, tweet: AdminTweet | UserTweet) -> None:
        ...

    async def save(self, tweet: AdminTweet | UserTweet) -> None:
        ...

    async def delete_admin_tweet(self, tweet_id: str) -> bool:
        ...

    async def delete_user_tweet(self, tweet_id: str) -> bool:
        ...

    async def add_admin_reply(self, reply: AdminReply) -> None:
        ...

    async def commit(self) -> None:
        ...


@contextmanager
def _storage_errors(action: str):
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception("[Store] %s failed", action)
        raise StorageUnavailable(f"Failed to {action}") from e


class SqlTweetStore:
    """TweetStore backed by SQLAlchemy. The caller owns commit/rollback."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_admin_tweets(self) -> list[AdminTweet]:
        with _storage_errors("load admin tweets"):
            result = await self.db.execute(select(AdminTweet).order_by(AdminTweet.created_at))
            return list(result.scalars().all())

    async def list_user_tweets(self) -> list[UserTweet]:
        with _storage_errors("load user tweets"):
            result = await self.db.execute(select(UserTweet).order_by(UserTweet.created_at))
            return list(result.scalars().all())

    async def list_admin_replies(self, user_tweet_id: str | None = None) -> list[AdminReply]:
        q = select(AdminReply).order_by(AdminReply.timestamp)
        if user_tweet_id is not None:
            q = q.where(AdminReply.user_tweet_id == user_tweet_id)
        with _storage_errors("load admin replies"):
            result = await self.db.execute(q)
            return list(result.scalars().all())

    async def get_admin_tweet(self, tweet_id: str) -> AdminTweet | None:
        with _storage_errors("load admin tweet"):
            return await self.db.get(AdminTweet, tweet_id)

    async def get_user_tweet(self, tweet_id: str) -> UserTweet | None:
        with _storage_errors("load user tweet"):
            return await self.db.get(UserTweet, tweet_id)

    async def add_tweet(self, tweet: AdminTweet | UserTweet) -> None:
        with _storage_errors("add tweet"):
            self.db.add(tweet)
            await self.db.flush()
            await self.db.refresh(tweet)

    async def save(self, tweet: AdminTweet | UserTweet) -> None:
        with _storage_errors("update tweet"):
            await self.db.flush()
            await self.db.refresh(tweet)

    async def delete_admin_tweet(self, tweet_id: str) -> bool:
        with _storage_errors("delete admin tweet"):
            result = await self.db.execute(delete(AdminTweet).where(AdminTweet.id == tweet_id))
            await self.db.flush()
            return (result.rowcount or 0) > 0

    async def delete_user_tweet(self, tweet_id: str) -> bool:
        with _storage_errors("delete user tweet"):
            # Explicit cascade: not every backend enforces ON DELETE CASCADE
            await self.db.execute(delete(AdminReply).where(AdminReply.user_tweet_id == tweet_id))
            result = await self.db.execute(delete(UserTweet).where(UserTweet.id == tweet_id))
            await self.db.flush()
            return (result.rowcount or 0) > 0

    async def add_admin_reply(self, reply: AdminReply) -> None:
        with _storage_errors("add admin reply"):
            self.db.add(reply)
            await self.db.flush()
            await self.db.refresh(reply)

    async def commit(self) -> None:
        with _storage_errors("commit"):
            await self.db.commit()
