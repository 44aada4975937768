import asyncio
import sys
import os

# Add project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from folio.db.session import async_session_maker
from folio.services.moderation import moderate_all_tweets
from folio.services.tweet_store import SqlTweetStore


async def run_moderation():
    async with async_session_maker() as session:
        result = await moderate_all_tweets(SqlTweetStore(session))
        print(f"Deleted {result.deleted_count} tweets with inappropriate content.")
        for tweet_id in result.deleted_tweets:
            print(f"  - {tweet_id}")


if __name__ == "__main__":
    asyncio.run(run_moderation())
