"""Retroactive moderation of stored tweets.

Only the prohibited-word test is applied here (content + author + handle);
spam and length rules are enforced at write time and are not re-run.
"""
import logging
from dataclasses import dataclass, field

from folio.models.tweet import AdminTweet, UserTweet
from folio.schemas.moderation import FlaggedTweet, ModerationStatusResponse
from folio.services.bad_words import contains_bad_words
from folio.services.tweet_store import TweetStore, is_admin_tweet_id

logger = logging.getLogger("folio.moderation")

FLAG_REASON = "Contains inappropriate words"
PREVIEW_LENGTH = 100


@dataclass
class SweepResult:
    deleted_count: int = 0
    deleted_tweets: list[str] = field(default_factory=list)


def is_flagged(tweet: AdminTweet | UserTweet) -> bool:
    return contains_bad_words(f"{tweet.content} {tweet.author} {tweet.handle}")


def content_preview(content: str) -> str:
    if len(content) > PREVIEW_LENGTH:
        return content[:PREVIEW_LENGTH] + "..."
    return content


async def _all_tweets(store: TweetStore) -> list[AdminTweet | UserTweet]:
    admin_tweets = await store.list_admin_tweets()
    user_tweets = await store.list_user_tweets()
    return [*admin_tweets, *user_tweets]


async def _delete(store: TweetStore, tweet_id: str) -> bool:
    if is_admin_tweet_id(tweet_id):
        return await store.delete_admin_tweet(tweet_id)
    # Admin replies to this tweet go with it
    return await store.delete_user_tweet(tweet_id)


async def moderate_all_tweets(store: TweetStore) -> SweepResult:
    """Delete every stored tweet that fails the prohibited-word check.

    Not transactional as a whole: each delete is committed on its own, so
    tweets removed before a failure stay removed.
    """
    result = SweepResult()
    for tweet in await _all_tweets(store):
        if not is_flagged(tweet):
            continue
        tweet_id = tweet.id
        if await _delete(store, tweet_id):
            await store.commit()
            result.deleted_count += 1
            result.deleted_tweets.append(tweet_id)
            logger.info("[Moderation] Deleted tweet %s for inappropriate content", tweet_id)

    logger.info("[Moderation] Sweep completed: deleted %d tweets", result.deleted_count)
    return result


async def moderate_tweet(store: TweetStore, tweet_id: str) -> tuple[bool, str | None]:
    """Moderate a single tweet. Returns (deleted, reason)."""
    tweet = await store.get_admin_tweet(tweet_id) or await store.get_user_tweet(tweet_id)
    if tweet is None:
        return False, "Tweet not found"
    if not is_flagged(tweet):
        return False, None
    await _delete(store, tweet.id)
    await store.commit()
    logger.info("[Moderation] Moderated and deleted tweet %s", tweet_id)
    return True, FLAG_REASON


async def get_moderation_status(store: TweetStore) -> ModerationStatusResponse:
    """Same scan as the sweep, without deleting anything."""
    tweets = await _all_tweets(store)
    flagged = [
        FlaggedTweet(
            id=t.id,
            author=t.author,
            handle=t.handle,
            content=content_preview(t.content),
            created_at=t.created_at,
            reason=FLAG_REASON,
        )
        for t in tweets
        if is_flagged(t)
    ]
    return ModerationStatusResponse(
        total_tweets=len(tweets),
        flagged_count=len(flagged),
        flagged_tweets=flagged,
    )
