"""Newsletter subscribe/unsubscribe logic."""
import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.errors import BadRequest, Conflict, NotFound
from folio.models.newsletter import NewsletterSubscriber
from folio.services.validation import validate_email_format

logger = logging.getLogger("folio.newsletter")


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def parse_token(token: str) -> uuid.UUID:
    try:
        return uuid.UUID(str(token))
    except ValueError as e:
        raise BadRequest("Invalid unsubscribe link.") from e


def queue_email(task, *args) -> None:
    """Hand a mail task to Celery. Mail is best effort: failures are logged only."""
    try:
        task.delay(*args)
    except Exception:
        logger.exception("[Newsletter] Could not queue %s", task.name)


async def get_subscriber(db: AsyncSession, email: str) -> NewsletterSubscriber | None:
    result = await db.execute(select(NewsletterSubscriber).where(NewsletterSubscriber.email == email))
    return result.scalar_one_or_none()


async def subscribe(db: AsyncSession, email: str) -> NewsletterSubscriber:
    normalized = normalize_email(email)
    if not validate_email_format(normalized).valid:
        raise BadRequest("Please enter a valid email address")

    subscriber = await get_subscriber(db, normalized)
    if subscriber and subscriber.is_active:
        raise Conflict("This email is already subscribed")
    if subscriber:
        subscriber.is_active = True
        subscriber.unsubscribe_token = uuid.uuid4()
    else:
        subscriber = NewsletterSubscriber(email=normalized, is_active=True, unsubscribe_token=uuid.uuid4())
        db.add(subscriber)
    await db.flush()
    await db.refresh(subscriber)
    logger.info("[Newsletter] Subscribed %s", normalized)
    return subscriber


async def unsubscribe(db: AsyncSession, email: str, token: str) -> NewsletterSubscriber:
    normalized = normalize_email(email)
    if not normalized or not token:
        raise BadRequest("Token and email are required.")
    token_uuid = parse_token(token)

    result = await db.execute(
        select(NewsletterSubscriber).where(
            NewsletterSubscriber.email == normalized,
            NewsletterSubscriber.unsubscribe_token == token_uuid,
            NewsletterSubscriber.is_active.is_(True),
        )
    )
    subscriber = result.scalar_one_or_none()
    if not subscriber:
        raise NotFound("Subscription not found or already unsubscribed.")
    subscriber.is_active = False
    await db.flush()
    logger.info("[Newsletter] Unsubscribed %s", normalized)
    return subscriber
