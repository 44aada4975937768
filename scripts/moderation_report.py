import asyncio
import sys
import os

# Add project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from folio.db.session import async_session_maker
from folio.services.moderation import get_moderation_status
from folio.services.tweet_store import SqlTweetStore


async def moderation_report():
    async with async_session_maker() as session:
        status = await get_moderation_status(SqlTweetStore(session))
        print(f"Total tweets: {status.total_tweets}")
        print(f"Flagged: {status.flagged_count}")

        if status.flagged_tweets:
            print("\nFlagged tweets:")
            for tweet in status.flagged_tweets:
                print(f"  - {tweet.id} @{tweet.handle}: {tweet.content}")
        else:
            print("\nNothing to moderate.")


if __name__ == "__main__":
    asyncio.run(moderation_report())
