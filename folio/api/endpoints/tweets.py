"""Tweets: list, create, update, admin replies, edit, delete, like."""
from fastapi import APIRouter, Depends, Query

from folio.api.deps import get_admin_session, get_store, require_admin_session
from folio.core.errors import InvalidContent
from folio.schemas.tweet import (
    AdminReplyEnvelope,
    AdminReplyResponse,
    LikeRequest,
    LikeResponse,
    TweetCreate,
    TweetDelete,
    TweetDetailResponse,
    TweetEdit,
    TweetEnvelope,
    TweetListResponse,
    TweetUpdate,
    TweetUpdateResponse,
)
from folio.services import tweet_service
from folio.services.tweet_store import TweetStore

router = APIRouter(prefix="/tweets", tags=["tweets"])


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@router.get("", response_model=TweetListResponse)
async def list_tweets(
    limit: str | None = Query(None),
    offset: str | None = Query(None),
    store: TweetStore = Depends(get_store),
):
    tweets, total, limit_, offset_ = await tweet_service.list_tweets(store, _parse_int(limit), _parse_int(offset))
    return TweetListResponse(tweets=tweets, total=total, limit=limit_, offset=offset_)


@router.post("", response_model=TweetEnvelope)
async def create_tweet(
    data: TweetCreate,
    admin_session: bool = Depends(get_admin_session),
    store: TweetStore = Depends(get_store),
):
    tweet = await tweet_service.create_tweet(store, data, admin_session=admin_session)
    await store.commit()
    return TweetEnvelope(tweet=tweet)


@router.put("")
async def update_tweet(
    data: TweetUpdate,
    admin_session: bool = Depends(get_admin_session),
    store: TweetStore = Depends(get_store),
):
    if not data.tweet_id:
        raise InvalidContent("Tweet ID is required")

    if data.is_admin_reply and not data.is_admin and data.comments:
        require_admin_session(admin_session)
        prepared = tweet_service.prepare_comments(data.comments)
        reply = await tweet_service.add_admin_reply(store, data, prepared)
        await store.commit()
        return AdminReplyEnvelope(admin_reply=AdminReplyResponse.model_validate(reply))

    likes, comments = await tweet_service.update_tweet(store, data)
    await store.commit()
    return TweetUpdateResponse(likes=likes, comments=comments)


@router.patch("", response_model=TweetEnvelope)
async def edit_tweet(
    data: TweetEdit,
    admin_session: bool = Depends(get_admin_session),
    store: TweetStore = Depends(get_store),
):
    if not data.tweet_id:
        raise InvalidContent("Tweet ID is required")
    tweet = await tweet_service.edit_tweet(store, data, admin_session=admin_session)
    await store.commit()
    return TweetEnvelope(tweet=tweet)


@router.delete("")
async def delete_tweet(
    data: TweetDelete,
    admin_session: bool = Depends(get_admin_session),
    store: TweetStore = Depends(get_store),
):
    if not data.tweet_id:
        raise InvalidContent("Tweet ID is required")
    await tweet_service.delete_tweet(store, data, admin_session=admin_session)
    await store.commit()
    return {"success": True}


@router.get("/{tweet_id}", response_model=TweetDetailResponse)
async def get_tweet(
    tweet_id: str,
    store: TweetStore = Depends(get_store),
):
    tweet = await tweet_service.get_tweet_detail(store, tweet_id)
    return TweetDetailResponse(tweet=tweet, is_admin=tweet.is_admin)


@router.post("/{tweet_id}/like", response_model=LikeResponse)
async def like_tweet(
    tweet_id: str,
    data: LikeRequest | None = None,
    store: TweetStore = Depends(get_store),
):
    likes, action = await tweet_service.toggle_like(store, tweet_id, data.action if data else "like")
    await store.commit()
    return LikeResponse(likes=likes, action=action)
