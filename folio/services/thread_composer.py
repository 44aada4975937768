"""Merge admin replies into a user tweet's comment tree at read time.

Admin replies live in their own table. Every read rebuilds the conversation
from the stored comments plus the replies that target the tweet; neither
input is modified.

Targeting, most specific first:
- ``comment_id`` set: the top-level comment with that stable id;
- else ``comment_index`` set: the comment at that position;
- neither: the tweet itself (appended after all comment-targeted replies).

With ``reply_id`` the new entry goes right after that nested reply.
Replies whose target cannot be resolved are dropped.
"""
import copy
from datetime import datetime, timezone

from folio.models.admin_reply import AdminReply

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _as_utc(value: datetime | None) -> datetime:
    if value is None:
        return _EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _timestamp_str(value) -> str | None:
    if isinstance(value, datetime):
        return _as_utc(value).isoformat()
    return value


def admin_reply_entry(reply: AdminReply) -> dict:
    return {
        "id": reply.id,
        "author": reply.author,
        "content": reply.content,
        "timestamp": _timestamp_str(reply.timestamp),
        "is_admin": True,
    }


def resolve_target(reply: AdminReply, comments: list[dict]) -> int | None:
    """Position of the targeted top-level comment, or None if unresolvable."""
    if reply.comment_id:
        for position, comment in enumerate(comments):
            if comment.get("id") == reply.comment_id:
                return position
        return None
    index = reply.comment_index
    if index is None or index < 0 or index >= len(comments):
        return None
    return index


def _is_post_level(reply: AdminReply) -> bool:
    return not reply.comment_id and reply.comment_index is None


def compose_comments(tweet_id: str, stored_comments: list[dict] | None, admin_replies: list[AdminReply]) -> list[dict]:
    comments = copy.deepcopy(stored_comments or [])
    relevant = [r for r in admin_replies if r.user_tweet_id == tweet_id]
    if not relevant:
        return comments

    post_level = []
    targeted = []
    for reply in relevant:
        if _is_post_level(reply):
            post_level.append(reply)
            continue
        position = resolve_target(reply, comments)
        if position is None:
            continue
        targeted.append((position, reply))

    # Stable sort: position, then timestamp, then stored order
    targeted.sort(key=lambda item: (item[0], _as_utc(item[1].timestamp)))
    post_level.sort(key=lambda r: _as_utc(r.timestamp))

    # (position, reply_id) -> last entry spliced after that nested reply
    spliced_after: dict[tuple[int, str], dict] = {}

    for position, reply in targeted:
        comment = comments[position]
        replies = comment.get("replies")
        if not isinstance(replies, list):
            replies = []
            comment["replies"] = replies
        entry = admin_reply_entry(reply)

        if reply.reply_id:
            key = (position, reply.reply_id)
            anchor = spliced_after.get(key)
            insert_at = None
            if anchor is not None:
                insert_at = next((i + 1 for i, r in enumerate(replies) if r is anchor), None)
            if insert_at is None:
                insert_at = next(
                    (i + 1 for i, r in enumerate(replies) if isinstance(r, dict) and r.get("id") == reply.reply_id),
                    None,
                )
            if insert_at is None:
                replies.append(entry)
            else:
                replies.insert(insert_at, entry)
                spliced_after[key] = entry
        else:
            replies.append(entry)

    for reply in post_level:
        comments.append(admin_reply_entry(reply))

    return comments
