"""API dependencies: db session, tweet store, admin session, shared secrets."""
import secrets

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.config import settings
from folio.core.errors import Unauthorized
from folio.core.security import verify_admin_session_token
from folio.db.session import get_db
from folio.services.tweet_store import SqlTweetStore, TweetStore


async def get_store(db: AsyncSession = Depends(get_db)) -> TweetStore:
    return SqlTweetStore(db)


def get_admin_session(request: Request) -> bool:
    """True when the request carries a valid admin session cookie."""
    return verify_admin_session_token(request.cookies.get(settings.ADMIN_SESSION_COOKIE))


def require_admin_session(is_admin: bool = Depends(get_admin_session)) -> bool:
    if not is_admin:
        raise Unauthorized()
    return True


def check_shared_secret(provided: str | None, expected: str) -> None:
    # An unset secret locks the endpoint instead of opening it
    if not expected or not provided or not secrets.compare_digest(provided, expected):
        raise Unauthorized()


def require_moderation_key_header(x_admin_key: str | None = Header(default=None)) -> None:
    check_shared_secret(x_admin_key, settings.MODERATION_ADMIN_KEY)


def require_internal_api_key(authorization: str | None = Header(default=None)) -> None:
    token = None
    if authorization and authorization.startswith("Bearer "):
        token = authorization[len("Bearer "):]
    check_shared_secret(token, settings.INTERNAL_API_KEY)
