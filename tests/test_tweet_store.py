import re

from folio.models.tweet import AdminTweet, UserTweet
from folio.services.tweet_store import is_admin_tweet_id, make_id


def test_make_id_format_and_uniqueness():
    ids = {make_id("user") for _ in range(200)}
    assert len(ids) == 200
    assert all(re.fullmatch(r"user-\d{13}-[a-z0-9]{6}", i) for i in ids)


def test_is_admin_tweet_id():
    assert is_admin_tweet_id(make_id("admin"))
    assert not is_admin_tweet_id(make_id("user"))


async def test_add_get_save(db, store):
    tweet = UserTweet(id="user-1", author="Clean User", handle="clean", content="Hello world")
    await store.add_tweet(tweet)
    await store.commit()

    loaded = await store.get_user_tweet("user-1")
    assert loaded.likes == 0
    assert loaded.comments == []
    assert loaded.edited is False
    assert await store.get_admin_tweet("user-1") is None

    loaded.likes = 4
    await store.save(loaded)
    await store.commit()
    assert (await store.get_user_tweet("user-1")).likes == 4


async def test_delete_reports_missing_rows(db, store):
    await store.add_tweet(AdminTweet(id="admin-1", author="Younes SEDKI", handle="younes_dev", content="Hi"))
    assert await store.delete_admin_tweet("admin-1") is True
    assert await store.delete_admin_tweet("admin-1") is False
    assert await store.delete_user_tweet("user-404") is False
