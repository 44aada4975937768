from datetime import datetime, timedelta, timezone

from folio.models.admin_reply import AdminReply
from folio.services.thread_composer import compose_comments, resolve_target

TWEET_ID = "user-1700000000000-abc123"
T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_reply(reply_id, *, comment_index=None, comment_id=None, nested=None, minutes=0, tweet_id=TWEET_ID):
    return AdminReply(
        id=reply_id,
        user_tweet_id=tweet_id,
        comment_index=comment_index,
        comment_id=comment_id,
        reply_id=nested,
        author="Younes SEDKI",
        content=f"admin says {reply_id}",
        timestamp=T0 + timedelta(minutes=minutes),
    )


def stored_comments():
    return [
        {"id": "c-0", "author": "Ana", "content": "First!", "timestamp": "2026-01-01T10:00:00+00:00"},
        {
            "id": "c-1",
            "author": "Ben",
            "content": "Nice",
            "timestamp": "2026-01-01T11:00:00+00:00",
            "replies": [
                {"id": "r-1", "author": "Cleo", "content": "Agreed"},
                {"id": "r-2", "author": "Dan", "content": "Same"},
            ],
        },
    ]


def ids(entries):
    return [e["id"] for e in entries]


def test_no_replies_returns_copy():
    comments = stored_comments()
    composed = compose_comments(TWEET_ID, comments, [])
    assert composed == comments
    assert composed is not comments


def test_reply_to_comment_index_appends_to_that_comment():
    comments = stored_comments()
    composed = compose_comments(TWEET_ID, comments, [make_reply("reply-a", comment_index=0)])

    assert ids(composed[0]["replies"]) == ["reply-a"]
    entry = composed[0]["replies"][0]
    assert entry["is_admin"] is True
    assert entry["author"] == "Younes SEDKI"
    assert entry["timestamp"] == T0.isoformat()
    assert composed[1] == comments[1]


def test_inputs_are_not_mutated():
    comments = stored_comments()
    before = stored_comments()
    compose_comments(TWEET_ID, comments, [make_reply("reply-a", comment_index=1, nested="r-1")])
    assert comments == before


def test_post_level_reply_goes_last():
    replies = [
        make_reply("reply-post", minutes=0),
        make_reply("reply-c1", comment_index=1, minutes=5),
    ]
    composed = compose_comments(TWEET_ID, stored_comments(), replies)

    assert ids(composed) == ["c-0", "c-1", "reply-post"]
    assert composed[-1]["is_admin"] is True
    assert ids(composed[1]["replies"]) == ["r-1", "r-2", "reply-c1"]


def test_post_level_replies_in_timestamp_order():
    replies = [make_reply("reply-late", minutes=10), make_reply("reply-early", minutes=1)]
    composed = compose_comments(TWEET_ID, stored_comments(), replies)
    assert ids(composed)[-2:] == ["reply-early", "reply-late"]


def test_out_of_bounds_index_is_dropped():
    comments = stored_comments()
    composed = compose_comments(TWEET_ID, comments, [make_reply("reply-x", comment_index=5)])
    assert composed == comments


def test_negative_index_is_dropped():
    comments = stored_comments()
    assert compose_comments(TWEET_ID, comments, [make_reply("reply-x", comment_index=-1)]) == comments


def test_unknown_comment_id_is_dropped():
    comments = stored_comments()
    composed = compose_comments(TWEET_ID, comments, [make_reply("reply-x", comment_id="c-gone", comment_index=0)])
    assert composed == comments


def test_comment_id_survives_removed_comments():
    # c-0 was deleted after the reply was written; index 1 is now stale
    comments = [c for c in stored_comments() if c["id"] != "c-0"]
    reply = make_reply("reply-a", comment_index=1, comment_id="c-1")
    composed = compose_comments(TWEET_ID, comments, [reply])
    assert ids(composed[0]["replies"]) == ["r-1", "r-2", "reply-a"]


def test_nested_reply_is_spliced_after_target():
    composed = compose_comments(
        TWEET_ID, stored_comments(), [make_reply("reply-a", comment_index=1, nested="r-1")]
    )
    assert ids(composed[1]["replies"]) == ["r-1", "reply-a", "r-2"]


def test_multiple_replies_to_same_nested_reply_keep_timestamp_order():
    replies = [
        make_reply("reply-second", comment_id="c-1", nested="r-1", minutes=10),
        make_reply("reply-first", comment_id="c-1", nested="r-1", minutes=1),
    ]
    composed = compose_comments(TWEET_ID, stored_comments(), replies)
    assert ids(composed[1]["replies"]) == ["r-1", "reply-first", "reply-second", "r-2"]


def test_unknown_nested_reply_appends():
    composed = compose_comments(
        TWEET_ID, stored_comments(), [make_reply("reply-a", comment_index=1, nested="r-missing")]
    )
    assert ids(composed[1]["replies"]) == ["r-1", "r-2", "reply-a"]


def test_same_timestamp_keeps_stored_order():
    replies = [
        make_reply("reply-1", comment_index=0),
        make_reply("reply-2", comment_index=0),
        make_reply("reply-3", comment_index=0),
    ]
    composed = compose_comments(TWEET_ID, stored_comments(), replies)
    assert ids(composed[0]["replies"]) == ["reply-1", "reply-2", "reply-3"]


def test_replies_for_other_tweets_are_ignored():
    comments = stored_comments()
    other = make_reply("reply-other", comment_index=0, tweet_id="user-other")
    assert compose_comments(TWEET_ID, comments, [other]) == comments


def test_naive_timestamps_sort_as_utc():
    naive = make_reply("reply-naive", comment_index=0, minutes=5)
    naive.timestamp = naive.timestamp.replace(tzinfo=None)
    aware = make_reply("reply-aware", comment_index=0, minutes=1)
    composed = compose_comments(TWEET_ID, stored_comments(), [naive, aware])
    assert ids(composed[0]["replies"]) == ["reply-aware", "reply-naive"]


def test_resolve_target_prefers_comment_id():
    comments = stored_comments()
    assert resolve_target(make_reply("r", comment_index=0, comment_id="c-1"), comments) == 1
    assert resolve_target(make_reply("r", comment_index=1), comments) == 1
    assert resolve_target(make_reply("r"), comments) is None
