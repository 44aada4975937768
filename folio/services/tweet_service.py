"""Tweet business logic: Gate -> Store on writes, Store -> Composer on reads."""
import logging
from datetime import datetime, timedelta, timezone

from folio.core.config import settings
from folio.core.errors import Forbidden, InvalidContent, NotFound, Unauthorized, ValidationCode
from folio.models.admin_reply import AdminReply
from folio.models.tweet import AdminTweet, UserTweet, utcnow
from folio.schemas.comment import CommentIn
from folio.schemas.tweet import TweetCreate, TweetDelete, TweetEdit, TweetResponse, TweetUpdate
from folio.services.thread_composer import compose_comments
from folio.services.tweet_store import TweetStore, is_admin_tweet_id, make_id
from folio.services.validation import (
    ValidationResult,
    sanitize_image_url,
    sanitize_input,
    validate_comment_content,
    validate_display_name,
    validate_email_format,
    validate_handle,
    validate_tweet_content,
)

logger = logging.getLogger("folio.tweets")


def _raise_if_invalid(result: ValidationResult) -> None:
    if not result.valid:
        raise InvalidContent(result.error, result.code)


def clamp_pagination(limit: int | None, offset: int | None) -> tuple[int, int]:
    limit = settings.DEFAULT_FETCH_LIMIT if limit is None else min(max(limit, 1), settings.MAX_FETCH_LIMIT)
    offset = 0 if offset is None else max(offset, 0)
    return limit, offset


def _created_key(tweet) -> datetime:
    created = tweet.created_at or utcnow()
    return created if created.tzinfo else created.replace(tzinfo=timezone.utc)


def tweet_to_response(tweet: AdminTweet | UserTweet, comments: list[dict] | None = None) -> TweetResponse:
    return TweetResponse(
        id=tweet.id,
        author=tweet.author,
        handle=tweet.handle,
        avatar=tweet.avatar,
        avatar_image=tweet.avatar_image,
        content=tweet.content,
        image=tweet.image,
        file_type=tweet.file_type,
        file_name=tweet.file_name,
        created_at=_created_key(tweet),
        updated_at=tweet.updated_at,
        edited=bool(tweet.edited),
        likes=tweet.likes or 0,
        comments=(tweet.comments or []) if comments is None else comments,
        retweets=tweet.retweets or 0,
        replies=tweet.replies or 0,
        is_admin=isinstance(tweet, AdminTweet),
    )


def compose_tweet(tweet: AdminTweet | UserTweet, admin_replies: list[AdminReply]) -> TweetResponse:
    """Single entry point used by both read paths."""
    if isinstance(tweet, AdminTweet):
        return tweet_to_response(tweet)
    return tweet_to_response(tweet, compose_comments(tweet.id, tweet.comments, admin_replies))


async def list_tweets(store: TweetStore, limit: int | None = None, offset: int | None = None) -> tuple[list[TweetResponse], int, int, int]:
    limit, offset = clamp_pagination(limit, offset)
    admin_tweets = await store.list_admin_tweets()
    user_tweets = await store.list_user_tweets()
    admin_replies = await store.list_admin_replies()

    all_tweets = sorted([*admin_tweets, *user_tweets], key=_created_key, reverse=True)
    page = all_tweets[offset:offset + limit]
    logger.info(
        "[Tweets] Fetched %d tweets (%d admin + %d user)",
        len(page), len(admin_tweets), len(user_tweets),
    )
    return [compose_tweet(t, admin_replies) for t in page], len(all_tweets), limit, offset


async def find_tweet(store: TweetStore, tweet_id: str) -> AdminTweet | UserTweet | None:
    tweet = await store.get_admin_tweet(tweet_id)
    if tweet is None:
        tweet = await store.get_user_tweet(tweet_id)
    return tweet


async def get_tweet_detail(store: TweetStore, tweet_id: str) -> TweetResponse:
    tweet_id = sanitize_input(tweet_id)
    if not tweet_id:
        raise InvalidContent("Invalid tweet ID")
    tweet = await find_tweet(store, tweet_id)
    if tweet is None:
        raise NotFound()
    replies = [] if isinstance(tweet, AdminTweet) else await store.list_admin_replies(tweet.id)
    return compose_tweet(tweet, replies)


async def create_tweet(store: TweetStore, data: TweetCreate, *, admin_session: bool) -> TweetResponse:
    content = sanitize_input(data.content)
    author = sanitize_input(data.author)
    handle = sanitize_input(data.handle).lstrip("@")
    email = sanitize_input(data.email or "")
    image = sanitize_image_url(data.image_url or data.file_url)
    file_type = sanitize_input(data.file_type or "") or ("image" if image else None)
    file_name = sanitize_input(data.file_name or "") or None

    if data.is_admin:
        if not admin_session:
            raise Unauthorized()
        author = settings.ADMIN_NAME
        handle = settings.ADMIN_HANDLE.lstrip("@")

    _raise_if_invalid(validate_tweet_content(content, author=author, handle=handle))
    if email:
        _raise_if_invalid(validate_email_format(email))

    if data.is_admin:
        tweet = AdminTweet(
            id=make_id("admin"),
            author=author,
            handle=handle,
            avatar="admin",
            content=content,
            image=image,
            file_type=file_type,
            file_name=file_name,
            likes=0,
            comments=[],
        )
    else:
        _raise_if_invalid(validate_display_name(author))
        _raise_if_invalid(validate_handle(handle))
        avatar_image = data.avatar_image if data.avatar_image and data.avatar_image.startswith("data:image/") else None
        tweet = UserTweet(
            id=make_id("user"),
            author=author,
            handle=handle,
            avatar="user",
            avatar_image=avatar_image,
            content=content,
            image=image,
            likes=0,
            comments=[],
        )

    await store.add_tweet(tweet)
    logger.info("[Tweets] Created %s by @%s", tweet.id, tweet.handle)
    return tweet_to_response(tweet)


def sanitize_comment(comment: CommentIn) -> dict:
    """Sanitize a client comment tree, giving every node a stable id."""
    sanitized = {
        "id": sanitize_input(comment.id or "") or make_id("c"),
        "author": sanitize_input(comment.author),
        "content": sanitize_input(comment.content),
        "timestamp": comment.timestamp or utcnow().isoformat(),
    }
    if comment.avatar_image:
        sanitized["avatar_image"] = sanitize_image_url(comment.avatar_image)
    if comment.is_admin:
        sanitized["is_admin"] = True
    if comment.replies is not None:
        sanitized["replies"] = [sanitize_comment(r) for r in comment.replies]
    return sanitized


def validate_comment_tree(comment: dict) -> ValidationResult:
    result = validate_comment_content(comment["content"], author=comment["author"])
    if not result.valid:
        return result
    for reply in comment.get("replies") or []:
        result = validate_comment_tree(reply)
        if not result.valid:
            return result
    return ValidationResult.ok()


def _strip_admin_entries(comments: list[dict]) -> list[dict]:
    """Composed admin replies echoed back by clients are not stored twice."""
    kept = []
    for comment in comments:
        if comment.get("is_admin"):
            continue
        if comment.get("replies"):
            comment["replies"] = _strip_admin_entries(comment["replies"])
        kept.append(comment)
    return kept


def prepare_comments(comments: list[CommentIn]) -> list[dict]:
    prepared = [sanitize_comment(c) for c in comments]
    for comment in prepared:
        result = validate_comment_tree(comment)
        if not result.valid:
            raise InvalidContent(result.error or "Invalid comment content", result.code)
    return prepared


async def add_admin_reply(store: TweetStore, data: TweetUpdate, prepared: list[dict]) -> AdminReply:
    """Persist the last comment of ``prepared`` as an admin reply to a user tweet.

    A positional ``comment_index`` is resolved to the comment's stable id here
    so later edits to the comment list cannot retarget the reply.
    """
    tweet_id = sanitize_input(data.tweet_id)
    tweet = await store.get_user_tweet(tweet_id)
    if tweet is None:
        raise NotFound()

    comment_id = sanitize_input(data.comment_id or "") or None
    comment_index = data.comment_index
    stored = tweet.comments or []
    if comment_id:
        position = next((i for i, c in enumerate(stored) if c.get("id") == comment_id), None)
        if position is None:
            raise NotFound("Comment not found")
        comment_index = position
    elif comment_index is not None:
        if not 0 <= comment_index < len(stored):
            raise NotFound("Comment not found")
        comment_id = stored[comment_index].get("id")

    payload = prepared[-1]
    if payload["author"]:
        _raise_if_invalid(validate_display_name(payload["author"]))
    reply = AdminReply(
        id=make_id("reply"),
        user_tweet_id=tweet.id,
        comment_index=comment_index,
        comment_id=comment_id,
        reply_id=sanitize_input(data.reply_id or "") or None,
        author=payload["author"] or settings.ADMIN_NAME,
        content=payload["content"],
        timestamp=utcnow(),
    )
    await store.add_admin_reply(reply)
    logger.info("[Tweets] Admin reply %s on %s (comment=%s)", reply.id, tweet.id, comment_id)
    return reply


async def update_tweet(store: TweetStore, data: TweetUpdate) -> tuple[int | None, list[dict] | None]:
    """Replace likes and/or the comment list on a tweet (PUT without isAdminReply)."""
    tweet_id = sanitize_input(data.tweet_id)
    comments = _strip_admin_entries(prepare_comments(data.comments)) if data.comments is not None else None
    likes = max(0, data.likes) if data.likes is not None else None

    tweet = await store.get_admin_tweet(tweet_id) if data.is_admin else await store.get_user_tweet(tweet_id)
    if tweet is None:
        raise NotFound()
    if likes is not None:
        tweet.likes = likes
    if comments is not None:
        tweet.comments = comments
    tweet.updated_at = utcnow()
    await store.save(tweet)
    return likes, comments


def _within_edit_window(tweet: AdminTweet | UserTweet, now: datetime | None = None) -> bool:
    now = now or utcnow()
    return now - _created_key(tweet) <= timedelta(minutes=settings.EDIT_WINDOW_MINUTES)


async def edit_tweet(store: TweetStore, data: TweetEdit, *, admin_session: bool) -> TweetResponse:
    tweet_id = sanitize_input(data.tweet_id)
    content = sanitize_input(data.content)
    if not content:
        raise InvalidContent("Tweet content is required", ValidationCode.EMPTY_CONTENT)

    if data.is_admin:
        if not admin_session:
            raise Unauthorized()
        tweet = await store.get_admin_tweet(tweet_id)
    else:
        tweet = await store.get_user_tweet(tweet_id)
    if tweet is None:
        raise NotFound()

    if not _within_edit_window(tweet):
        raise Forbidden("Tweet can only be edited within 1 hour of creation")

    _raise_if_invalid(validate_tweet_content(content, author=tweet.author, handle=tweet.handle))

    tweet.content = content
    tweet.updated_at = utcnow()
    tweet.edited = True
    await store.save(tweet)
    logger.info("[Tweets] Edited %s", tweet.id)
    replies = [] if isinstance(tweet, AdminTweet) else await store.list_admin_replies(tweet.id)
    return compose_tweet(tweet, replies)


async def delete_tweet(store: TweetStore, data: TweetDelete, *, admin_session: bool) -> None:
    tweet_id = sanitize_input(data.tweet_id)
    if data.is_admin or is_admin_tweet_id(tweet_id):
        if not admin_session:
            raise Unauthorized()
        deleted = await store.delete_admin_tweet(tweet_id)
    else:
        deleted = await store.delete_user_tweet(tweet_id)
    if not deleted:
        raise NotFound()
    logger.info("[Tweets] Deleted %s", tweet_id)


async def toggle_like(store: TweetStore, tweet_id: str, action: str) -> tuple[int, str]:
    tweet_id = sanitize_input(tweet_id)
    if not tweet_id:
        raise InvalidContent("Invalid tweet ID")
    action = "unlike" if action == "unlike" else "like"
    tweet = await find_tweet(store, tweet_id)
    if tweet is None:
        raise NotFound()
    current = tweet.likes or 0
    tweet.likes = current + 1 if action == "like" else max(0, current - 1)
    await store.save(tweet)
    return tweet.likes, action
