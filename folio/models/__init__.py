from folio.models.tweet import AdminTweet, UserTweet
from folio.models.admin_reply import AdminReply
from folio.models.newsletter import NewsletterSubscriber

__all__ = ["AdminTweet", "UserTweet", "AdminReply", "NewsletterSubscriber"]
