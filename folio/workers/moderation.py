"""Celery task for the periodic moderation sweep."""
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from folio.core.celery_app import celery_app
from folio.core.config import settings
from folio.services.moderation import moderate_all_tweets
from folio.services.tweet_store import SqlTweetStore

logger = logging.getLogger("folio.moderation")


async def run_sweep() -> dict:
    # Every task run has its own event loop; connections must not outlive it
    engine = create_async_engine(settings.DATABASE_URL, poolclass=NullPool)
    try:
        async with AsyncSession(engine, expire_on_commit=False, autoflush=False) as db:
            result = await moderate_all_tweets(SqlTweetStore(db))
    finally:
        await engine.dispose()
    return {"deleted_count": result.deleted_count, "deleted_tweets": result.deleted_tweets}


@celery_app.task
def moderation_sweep() -> dict:
    logger.info("[Moderation] Scheduled sweep starting")
    return asyncio.run(run_sweep())
