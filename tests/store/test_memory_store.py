"""Tests for the in-memory store client."""

import pytest

from linkshare.store.memory import InMemoryStore


def test_incr_is_strictly_increasing(store: InMemoryStore) -> None:
    assert [store.incr("article:") for _ in range(3)] == [1, 2, 3]


def test_sadd_reports_new_members_only(store: InMemoryStore) -> None:
    assert store.sadd("voted:1", "alice") == 1
    assert store.sadd("voted:1", "alice") == 0
    assert store.sadd("voted:1", "alice", "bob") == 1
    assert store.sismember("voted:1", "bob")


def test_srem_deletes_empty_set(store: InMemoryStore) -> None:
    store.sadd("group:tech", "article:1")
    assert store.srem("group:tech", "article:1") == 1
    assert store.exists("group:tech") == 0


def test_hash_values_come_back_as_strings(store: InMemoryStore) -> None:
    store.hset("article:1", {"title": "A", "votes": 1})
    assert store.hincrby("article:1", "votes", 1) == 2
    assert store.hgetall("article:1") == {"title": "A", "votes": "2"}
    assert store.hgetall("article:404") == {}


def test_zrevrange_orders_by_descending_score(store: InMemoryStore) -> None:
    store.zadd("score:", {"article:1": 10, "article:2": 30, "article:3": 20})
    assert store.zrevrange("score:", 0, -1) == ["article:2", "article:3", "article:1"]
    assert store.zrevrange("score:", 1, 1) == ["article:3"]
    assert store.zrevrange("score:", 5, 10) == []
    assert store.zrevrange("missing", 0, -1) == []


def test_zrevrange_breaks_ties_by_member_descending(store: InMemoryStore) -> None:
    store.zadd("time:", {"article:1": 5, "article:2": 5})
    assert store.zrevrange("time:", 0, -1) == ["article:2", "article:1"]


def test_zincrby_and_zscore(store: InMemoryStore) -> None:
    assert store.zscore("score:", "article:1") is None
    store.zadd("score:", {"article:1": 100})
    assert store.zincrby("score:", 432, "article:1") == 532.0
    assert store.zscore("score:", "article:1") == 532.0


def test_expire_drops_key_after_deadline(store: InMemoryStore, clock) -> None:
    store.sadd("voted:1", "alice")
    assert store.expire("voted:1", 60) is True
    clock.advance(59)
    assert store.exists("voted:1") == 1
    clock.advance(1)
    assert store.exists("voted:1") == 0
    assert store.expire("voted:1", 60) is False


def test_zinterstore_max_keeps_ranking_scores(store: InMemoryStore) -> None:
    store.sadd("group:tech", "article:1", "article:3", "article:9")
    store.zadd("score:", {"article:1": 500.0, "article:2": 700.0, "article:3": 600.0})

    assert store.zinterstore("score:tech", ["group:tech", "score:"], aggregate="MAX") == 2
    assert store.zrevrange("score:tech", 0, -1) == ["article:3", "article:1"]
    assert store.zscore("score:tech", "article:1") == 500.0


def test_zinterstore_overwrites_destination_and_clears_expiry(store: InMemoryStore, clock) -> None:
    store.zadd("score:tech", {"stale": 1.0})
    store.expire("score:tech", 10)
    store.sadd("group:tech", "article:1")
    store.zadd("score:", {"article:1": 5.0})

    store.zinterstore("score:tech", ["group:tech", "score:"])
    clock.advance(20)
    assert store.zrevrange("score:tech", 0, -1) == ["article:1"]


def test_wrong_type_raises(store: InMemoryStore) -> None:
    store.sadd("group:tech", "article:1")
    with pytest.raises(TypeError):
        store.hgetall("group:tech")


def test_pipeline_queues_until_execute(store: InMemoryStore) -> None:
    pipe = store.pipeline()
    pipe.sadd("voted:1", "alice").expire("voted:1", 60)
    pipe.zadd("time:", {"article:1": 100})
    assert store.exists("voted:1") == 0

    assert pipe.execute() == [1, True, 1]
    assert store.sismember("voted:1", "alice")
