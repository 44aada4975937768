"""SQLAlchemy declarative base and model imports for Alembic."""
from folio.db.session import Base  # noqa: F401
from folio.models.tweet import AdminTweet, UserTweet  # noqa: F401
from folio.models.admin_reply import AdminReply  # noqa: F401
from folio.models.newsletter import NewsletterSubscriber  # noqa: F401

__all__ = ["Base", "AdminTweet", "UserTweet", "AdminReply", "NewsletterSubscriber"]
