"""Moderation sweep and audit endpoints.

``/moderation`` is for the admin (key in the body for POST, ``X-Admin-Key``
header for GET); ``/auto-moderate`` is for cron jobs and webhooks
(``Authorization: Bearer <INTERNAL_API_KEY>``).
"""
from fastapi import APIRouter, Depends

from folio.api.deps import (
    check_shared_secret,
    get_store,
    require_internal_api_key,
    require_moderation_key_header,
)
from folio.core.config import settings
from folio.schemas.moderation import ModerationRequest, ModerationStatusResponse, SweepResponse
from folio.services.moderation import get_moderation_status, moderate_all_tweets
from folio.services.tweet_store import TweetStore

router = APIRouter(tags=["moderation"])


def _sweep_response(deleted_count: int, deleted_tweets: list[str], label: str) -> SweepResponse:
    return SweepResponse(
        message=f"{label} completed. Deleted {deleted_count} tweets with inappropriate content.",
        deleted_count=deleted_count,
        deleted_tweets=deleted_tweets,
    )


@router.post("/moderation", response_model=SweepResponse)
async def run_moderation(
    data: ModerationRequest,
    store: TweetStore = Depends(get_store),
):
    check_shared_secret(data.admin_key, settings.MODERATION_ADMIN_KEY)
    result = await moderate_all_tweets(store)
    return _sweep_response(result.deleted_count, result.deleted_tweets, "Content moderation")


@router.get(
    "/moderation",
    response_model=ModerationStatusResponse,
    dependencies=[Depends(require_moderation_key_header)],
)
async def moderation_status(store: TweetStore = Depends(get_store)):
    return await get_moderation_status(store)


@router.post(
    "/auto-moderate",
    response_model=SweepResponse,
    dependencies=[Depends(require_internal_api_key)],
)
async def auto_moderate(store: TweetStore = Depends(get_store)):
    result = await moderate_all_tweets(store)
    return _sweep_response(result.deleted_count, result.deleted_tweets, "Auto-moderation")


@router.get(
    "/auto-moderate",
    response_model=ModerationStatusResponse,
    dependencies=[Depends(require_internal_api_key)],
)
async def auto_moderation_status(store: TweetStore = Depends(get_store)):
    return await get_moderation_status(store)
