"""In-process store client with Redis command semantics.

Used by the test-suite and by single-process deployments that set
``LINKSHARE_STORE_BACKEND=memory``. Every command and every pipeline runs
under one lock, so ``sadd`` is as atomic here as it is in Redis.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from threading import Lock
from typing import Any

from linkshare.store.base import StoreClient, StorePipeline

_WRONGTYPE = "WRONGTYPE Operation against a key holding the wrong kind of value"


class InMemoryPipeline(StorePipeline):
    """Queues commands and applies them together under the store lock."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._queue: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    def _dispatch(self, command: str, *args: Any, **kwargs: Any) -> InMemoryPipeline:
        self._queue.append((command, args, kwargs))
        return self

    def execute(self) -> list[Any]:
        queued, self._queue = self._queue, []
        with self._store._lock:
            return [self._store._apply(command, args, kwargs) for command, args, kwargs in queued]


class InMemoryStore(StoreClient):
    """Dictionary-backed store with key expiry against an injectable clock."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._lock = Lock()
        self._data: dict[str, Any] = {}
        self._expiry: dict[str, float] = {}

    def _dispatch(self, command: str, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            return self._apply(command, args, kwargs)

    def _apply(self, command: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return getattr(self, f"_cmd_{command}")(*args, **kwargs)

    def pipeline(self, transaction: bool = True) -> InMemoryPipeline:
        return InMemoryPipeline(self)

    def ping(self) -> bool:
        return True

    # --- key helpers ---------------------------------------------------------------
    def _live(self, key: str) -> Any:
        expires_at = self._expiry.get(key)
        if expires_at is not None and expires_at <= self._clock():
            self._data.pop(key, None)
            self._expiry.pop(key, None)
        return self._data.get(key)

    def _typed(self, key: str, kind: type) -> Any:
        value = self._live(key)
        if value is not None and type(value) is not kind:
            raise TypeError(_WRONGTYPE)
        return value

    def _delete(self, key: str) -> None:
        self._data.pop(key, None)
        self._expiry.pop(key, None)

    # --- counters and keys ---------------------------------------------------------
    def _cmd_incr(self, key: str, amount: int = 1) -> int:
        value = self._typed(key, int) or 0
        value += int(amount)
        self._data[key] = value
        return value

    def _cmd_exists(self, *keys: str) -> int:
        return sum(1 for key in keys if self._live(key) is not None)

    def _cmd_expire(self, key: str, seconds: int) -> bool:
        if self._live(key) is None:
            return False
        if seconds <= 0:
            self._delete(key)
        else:
            self._expiry[key] = self._clock() + seconds
        return True

    # --- sets ------------------------------------------------------------------------
    def _cmd_sadd(self, key: str, *members: str) -> int:
        current = self._typed(key, set)
        if current is None:
            current = self._data[key] = set()
        before = len(current)
        current.update(str(member) for member in members)
        return len(current) - before

    def _cmd_srem(self, key: str, *members: str) -> int:
        current = self._typed(key, set)
        if current is None:
            return 0
        removed = 0
        for member in members:
            if str(member) in current:
                current.discard(str(member))
                removed += 1
        if not current:
            self._delete(key)
        return removed

    def _cmd_sismember(self, key: str, member: str) -> bool:
        current = self._typed(key, set)
        return current is not None and str(member) in current

    # --- hashes ----------------------------------------------------------------------
    def _cmd_hset(self, key: str, mapping: dict[str, Any]) -> int:
        current = self._typed(key, dict)
        if current is None:
            current = self._data[key] = {}
        added = sum(1 for field in mapping if field not in current)
        current.update({field: str(value) for field, value in mapping.items()})
        return added

    def _cmd_hgetall(self, key: str) -> dict[str, str]:
        return dict(self._typed(key, dict) or {})

    def _cmd_hincrby(self, key: str, field: str, amount: int = 1) -> int:
        current = self._typed(key, dict)
        if current is None:
            current = self._data[key] = {}
        value = int(current.get(field, 0)) + int(amount)
        current[field] = str(value)
        return value

    # --- sorted sets -----------------------------------------------------------------
    def _zset(self, key: str) -> _ZSet | None:
        return self._typed(key, _ZSet)

    def _cmd_zadd(self, key: str, mapping: dict[str, float]) -> int:
        current = self._zset(key)
        if current is None:
            current = self._data[key] = _ZSet()
        added = sum(1 for member in mapping if member not in current)
        current.update({str(member): float(score) for member, score in mapping.items()})
        return added

    def _cmd_zincrby(self, key: str, amount: float, member: str) -> float:
        current = self._zset(key)
        if current is None:
            current = self._data[key] = _ZSet()
        current[member] = current.get(member, 0.0) + float(amount)
        return current[member]

    def _cmd_zscore(self, key: str, member: str) -> float | None:
        current = self._zset(key)
        if current is None:
            return None
        return current.get(member)

    def _cmd_zrevrange(self, key: str, start: int, end: int) -> list[str]:
        current = self._zset(key)
        if not current:
            return []
        # Redis orders equal scores by member, reversed for descending reads.
        ranked = sorted(current.items(), key=lambda item: (item[1], item[0]), reverse=True)
        size = len(ranked)
        if start < 0:
            start = max(size + start, 0)
        if end < 0:
            end = size + end
        end = min(end, size - 1)
        if start > end:
            return []
        return [member for member, _ in ranked[start : end + 1]]

    def _cmd_zinterstore(self, dest: str, keys: list[str], aggregate: str = "MAX") -> int:
        combine = _AGGREGATES[aggregate.upper()]
        sources = [self._as_scored(key) for key in keys]
        result = _ZSet()
        if sources:
            common = set(sources[0]).intersection(*sources[1:])
            for member in common:
                score = sources[0][member]
                for source in sources[1:]:
                    score = combine(score, source[member])
                result[member] = score
        self._delete(dest)
        if result:
            self._data[dest] = result
        return len(result)

    def _as_scored(self, key: str) -> dict[str, float]:
        value = self._live(key)
        if value is None:
            return {}
        if isinstance(value, _ZSet):
            return value
        if isinstance(value, set):
            return dict.fromkeys(value, 1.0)
        raise TypeError(_WRONGTYPE)


class _ZSet(dict):
    """Member to score mapping, kept distinct from hashes for type checks."""


_AGGREGATES: dict[str, Callable[[float, float], float]] = {
    "SUM": lambda left, right: left + right,
    "MIN": min,
    "MAX": max,
}
