"""Admin session: login, logout, me."""
import logging

from fastapi import APIRouter, Depends, Response

from folio.api.deps import get_admin_session
from folio.core.config import settings
from folio.core.errors import Unauthorized
from folio.core.security import create_admin_session_token, verify_password
from folio.schemas.admin import AdminLoginRequest, AdminLoginResponse, AdminMeResponse

logger = logging.getLogger("folio.admin")

router = APIRouter(prefix="/admin", tags=["admin"])


def _set_session_cookie(response: Response, token: str, max_age: int) -> None:
    response.set_cookie(
        settings.ADMIN_SESSION_COOKIE,
        token,
        max_age=max_age,
        httponly=True,
        samesite="lax",
        secure=not settings.DEBUG,
        path="/",
    )


@router.post("/login", response_model=AdminLoginResponse)
async def login(data: AdminLoginRequest, response: Response):
    if not verify_password(data.password, settings.ADMIN_PASSWORD_HASH):
        logger.warning("[Admin] Login failed")
        raise Unauthorized("Invalid password")
    token = create_admin_session_token()
    _set_session_cookie(response, token, settings.ADMIN_SESSION_DAYS * 24 * 60 * 60)
    logger.info("[Admin] Login success")
    return AdminLoginResponse()


@router.post("/logout", response_model=AdminLoginResponse)
async def logout(response: Response):
    _set_session_cookie(response, "", 0)
    return AdminLoginResponse()


@router.get("/me", response_model=AdminMeResponse)
async def me(is_admin: bool = Depends(get_admin_session)):
    return AdminMeResponse(logged_in=is_admin)
