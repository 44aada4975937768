"""Admin session utilities: password hashing and JWT session tokens."""
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from folio.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ADMIN_SUBJECT = "admin"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Malformed hash in configuration
        return False


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_admin_session_token(max_age: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (max_age or timedelta(days=settings.ADMIN_SESSION_DAYS))
    to_encode = {"sub": ADMIN_SUBJECT, "exp": expire, "type": "admin_session"}
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict | None:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        return payload
    except JWTError:
        return None


def verify_admin_session_token(token: str | None) -> bool:
    """True when the token is a valid, unexpired admin session."""
    if not token:
        return False
    payload = decode_token(token)
    if not payload:
        return False
    return payload.get("type") == "admin_session" and payload.get("sub") == ADMIN_SUBJECT
