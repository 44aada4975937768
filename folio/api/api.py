"""API router aggregation."""
from fastapi import APIRouter

from folio.api.endpoints import admin, moderation, newsletter, tweets

api_router = APIRouter()
api_router.include_router(tweets.router)
api_router.include_router(moderation.router)
api_router.include_router(admin.router)
api_router.include_router(newsletter.router)
