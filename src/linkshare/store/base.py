"""Store client interface consumed by the ranking services.

The services only need a narrow slice of a Redis-like store: counters, sets,
hashes, sorted sets, expiry and a set/sorted-set intersection. Every command
is funnelled through ``_dispatch`` so that a concrete client can either run
it immediately or queue it on a pipeline.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any, Literal

Aggregate = Literal["SUM", "MIN", "MAX"]


class StoreCommands(ABC):
    """Command surface shared by store clients and their pipelines.

    On a client each method returns the command's result. On a pipeline each
    method returns the pipeline, and the results come back from ``execute``.
    """

    @abstractmethod
    def _dispatch(self, command: str, *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError

    # Counters and keys
    def incr(self, key: str, amount: int = 1) -> Any:
        """Atomically increment an integer counter and return the new value."""
        return self._dispatch("incr", key, amount)

    def exists(self, *keys: str) -> Any:
        """Return how many of ``keys`` currently exist."""
        return self._dispatch("exists", *keys)

    def expire(self, key: str, seconds: int) -> Any:
        """Set a time-to-live on ``key``; returns False if the key is absent."""
        return self._dispatch("expire", key, seconds)

    # Sets
    def sadd(self, key: str, *members: str) -> Any:
        """Add members to a set and return how many were newly added."""
        return self._dispatch("sadd", key, *members)

    def srem(self, key: str, *members: str) -> Any:
        return self._dispatch("srem", key, *members)

    def sismember(self, key: str, member: str) -> Any:
        return self._dispatch("sismember", key, member)

    # Hashes
    def hset(self, key: str, mapping: Mapping[str, Any]) -> Any:
        """Create or overwrite the named fields of a hash."""
        return self._dispatch("hset", key, mapping=dict(mapping))

    def hgetall(self, key: str) -> Any:
        """Return every field of a hash; an absent key reads as ``{}``."""
        return self._dispatch("hgetall", key)

    def hincrby(self, key: str, field: str, amount: int = 1) -> Any:
        return self._dispatch("hincrby", key, field, amount)

    # Sorted sets
    def zadd(self, key: str, mapping: Mapping[str, float]) -> Any:
        return self._dispatch("zadd", key, dict(mapping))

    def zincrby(self, key: str, amount: float, member: str) -> Any:
        return self._dispatch("zincrby", key, amount, member)

    def zscore(self, key: str, member: str) -> Any:
        """Return a member's score, or None when either is absent."""
        return self._dispatch("zscore", key, member)

    def zrevrange(self, key: str, start: int, end: int) -> Any:
        """Return members ranked ``start..end`` (inclusive) by descending score."""
        return self._dispatch("zrevrange", key, start, end)

    def zinterstore(
        self,
        dest: str,
        keys: Sequence[str] | Iterable[str],
        aggregate: Aggregate = "MAX",
    ) -> Any:
        """Intersect sets/sorted sets into a new sorted set at ``dest``.

        Plain set members count with a score of 1. Scores of common members
        are combined with ``aggregate``. Returns the size of the result.
        """
        return self._dispatch("zinterstore", dest, list(keys), aggregate=aggregate)


class StorePipeline(StoreCommands):
    """Queued batch of commands sent to the store in one round trip."""

    @abstractmethod
    def execute(self) -> list[Any]:
        raise NotImplementedError


class StoreClient(StoreCommands):
    """Connection to the backing store."""

    @abstractmethod
    def pipeline(self, transaction: bool = True) -> StorePipeline:
        """Return a new pipeline; ``transaction`` wraps it in MULTI/EXEC."""
        raise NotImplementedError

    @abstractmethod
    def ping(self) -> bool:
        raise NotImplementedError


@contextmanager
def batched(store: StoreClient, pipe: StorePipeline | None = None) -> Iterator[StorePipeline]:
    """Yield ``pipe`` when the caller is already batching, else a fresh pipeline.

    A fresh pipeline is executed when the block exits without an error.
    """
    if pipe is not None:
        yield pipe
        return
    own = store.pipeline()
    yield own
    own.execute()
