"""Initial schema: admin_tweets, user_tweets, admin_replies, newsletter_subscribers.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _tweet_columns() -> list:
    return [
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("author", sa.String(100), nullable=False),
        sa.Column("handle", sa.String(50), nullable=False),
        sa.Column("avatar", sa.String(20), nullable=False, server_default="user"),
        sa.Column("avatar_image", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("file_type", sa.String(50), nullable=True),
        sa.Column("file_name", sa.String(255), nullable=True),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments", postgresql.JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("retweets", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("replies", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("edited", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    ]


def upgrade() -> None:
    op.create_table("admin_tweets", *_tweet_columns())
    op.create_index("ix_admin_tweets_created_at", "admin_tweets", ["created_at"], unique=False)

    op.create_table("user_tweets", *_tweet_columns())
    op.create_index("ix_user_tweets_created_at", "user_tweets", ["created_at"], unique=False)

    op.create_table(
        "admin_replies",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("user_tweet_id", sa.String(64), nullable=False),
        sa.Column("comment_index", sa.Integer(), nullable=True),
        sa.Column("comment_id", sa.String(64), nullable=True),
        sa.Column("reply_id", sa.String(64), nullable=True),
        sa.Column("author", sa.String(100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_tweet_id"], ["user_tweets.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_admin_replies_user_tweet_id", "admin_replies", ["user_tweet_id"], unique=False)

    op.create_table(
        "newsletter_subscribers",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("unsubscribe_token", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_newsletter_subscribers_email", "newsletter_subscribers", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_newsletter_subscribers_email", table_name="newsletter_subscribers")
    op.drop_table("newsletter_subscribers")
    op.drop_index("ix_admin_replies_user_tweet_id", table_name="admin_replies")
    op.drop_table("admin_replies")
    op.drop_index("ix_user_tweets_created_at", table_name="user_tweets")
    op.drop_table("user_tweets")
    op.drop_index("ix_admin_tweets_created_at", table_name="admin_tweets")
    op.drop_table("admin_tweets")
