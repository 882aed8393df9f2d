"""Redis-backed store client."""

from __future__ import annotations

import logging
from typing import Any

import redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from linkshare.core.errors import StoreUnavailableError
from linkshare.store.base import StoreClient, StorePipeline

logger = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (RedisConnectionError, RedisTimeoutError)


class RedisPipeline(StorePipeline):
    """Buffers commands on a redis-py pipeline until ``execute``."""

    def __init__(self, pipe: redis.client.Pipeline) -> None:
        self._pipe = pipe

    def _dispatch(self, command: str, *args: Any, **kwargs: Any) -> RedisPipeline:
        getattr(self._pipe, command)(*args, **kwargs)
        return self

    def execute(self) -> list[Any]:
        try:
            return self._pipe.execute()
        except _TRANSPORT_ERRORS as exc:
            logger.error("Redis pipeline failed: %s", exc)
            raise StoreUnavailableError(str(exc)) from exc


class RedisStore(StoreClient):
    """Store client delegating every command to a ``redis.Redis`` connection.

    Transport failures are re-raised as ``StoreUnavailableError``. Responses
    are decoded to ``str`` so both stores hand back the same types.
    """

    def __init__(self, client: redis.Redis) -> None:
        self._redis = client

    @classmethod
    def from_url(cls, url: str, *, socket_timeout: float | None = None) -> RedisStore:
        """Build a store from a ``redis://`` URL."""
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=socket_timeout,
        )
        return cls(client)

    def _dispatch(self, command: str, *args: Any, **kwargs: Any) -> Any:
        try:
            return getattr(self._redis, command)(*args, **kwargs)
        except _TRANSPORT_ERRORS as exc:
            logger.error("Redis command %s failed: %s", command.upper(), exc)
            raise StoreUnavailableError(str(exc)) from exc

    def pipeline(self, transaction: bool = True) -> RedisPipeline:
        return RedisPipeline(self._redis.pipeline(transaction=transaction))

    def ping(self) -> bool:
        return bool(self._dispatch("ping"))
