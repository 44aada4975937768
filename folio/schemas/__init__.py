from folio.schemas.comment import CommentIn, CommentOut
from folio.schemas.tweet import (
    TweetCreate,
    TweetUpdate,
    TweetEdit,
    TweetDelete,
    TweetResponse,
    TweetListResponse,
)
from folio.schemas.moderation import ModerationStatusResponse, SweepResponse
