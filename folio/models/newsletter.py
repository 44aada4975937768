"""Newsletter subscriber model."""
import uuid

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.dialects.postgresql import UUID as PG_UUID

from folio.db.session import Base
from folio.models.tweet import utcnow


class NewsletterSubscriber(Base):
    __tablename__ = "newsletter_subscribers"

    id = Column(PG_UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False, index=True)  # lower-cased
    is_active = Column(Boolean, nullable=False, default=True)
    unsubscribe_token = Column(PG_UUID(as_uuid=True), nullable=False, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), default=utcnow)
