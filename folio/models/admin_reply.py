"""Admin replies: stored apart from the target tweet and merged at read time."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from folio.db.session import Base
from folio.models.tweet import utcnow


class AdminReply(Base):
    __tablename__ = "admin_replies"

    id = Column(String(64), primary_key=True)  # reply-<ms>-<rand>
    user_tweet_id = Column(String(64), ForeignKey("user_tweets.id", ondelete="CASCADE"), nullable=False, index=True)
    comment_index = Column(Integer, nullable=True)  # None = reply to the tweet itself
    comment_id = Column(String(64), nullable=True)  # stable id of the targeted comment
    reply_id = Column(String(64), nullable=True)  # nested reply to splice after
    author = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    user_tweet = relationship("UserTweet", back_populates="admin_replies")
