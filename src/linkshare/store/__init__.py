"""Store clients for the Linkshare ranking services."""

from __future__ import annotations

import logging
from functools import lru_cache

from linkshare.core.settings import settings

from .base import StoreClient, StorePipeline
from .memory import InMemoryStore
from .redis_store import RedisStore

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_store() -> StoreClient:
    """Return the process-wide store client for the configured backend."""
    if settings.store_backend == "memory":
        logger.info("Using in-memory store")
        return InMemoryStore()
    logger.info("Using Redis store")
    return RedisStore.from_url(
        settings.redis_url,
        socket_timeout=settings.redis_socket_timeout_seconds,
    )


__all__ = [
    "InMemoryStore",
    "RedisStore",
    "StoreClient",
    "StorePipeline",
    "get_store",
]
