"""Newsletter subscribe/unsubscribe."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from folio.db.session import get_db
from folio.schemas.newsletter import NewsletterResponse, SubscribeRequest, UnsubscribeRequest
from folio.services import newsletter_service
from folio.workers.mail import send_unsubscribe_email, send_welcome_email

router = APIRouter(prefix="/newsletter", tags=["newsletter"])


@router.post("/subscribe", response_model=NewsletterResponse)
async def subscribe(data: SubscribeRequest, db: AsyncSession = Depends(get_db)):
    subscriber = await newsletter_service.subscribe(db, data.email)
    await db.commit()
    newsletter_service.queue_email(send_welcome_email, subscriber.email, str(subscriber.unsubscribe_token))
    return NewsletterResponse(message="Successfully subscribed!")


@router.post("/unsubscribe", response_model=NewsletterResponse)
async def unsubscribe(data: UnsubscribeRequest, db: AsyncSession = Depends(get_db)):
    subscriber = await newsletter_service.unsubscribe(db, data.email, data.token)
    await db.commit()
    newsletter_service.queue_email(send_unsubscribe_email, subscriber.email)
    return NewsletterResponse(message="Successfully unsubscribed.")
