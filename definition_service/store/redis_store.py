"""Redis-backed storage of computed definitions."""

from __future__ import annotations

import json
import logging
from typing import Any, BinaryIO

import redis.asyncio as redis

from ..coordinates import ResultCoordinates
from ..errors import DefinitionNotFoundError

logger = logging.getLogger("definition_service")


class RedisDefinitionStore:
    """Store and retrieve serialized definitions in Redis."""

    DEFAULT_KEY_PREFIX = "definition:"

    def __init__(
        self,
        redis_client: redis.Redis,
        *,
        key_prefix: str = DEFAULT_KEY_PREFIX,
        ttl_seconds: int | None = None,
    ) -> None:
        self.redis = redis_client
        self.key_prefix = key_prefix
        self.ttl_seconds = ttl_seconds

    async def get(self, coordinates: ResultCoordinates) -> dict[str, Any]:
        key = self._definition_key(coordinates)
        raw = await self.redis.get(key)
        if raw is None:
            raise DefinitionNotFoundError(key)
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        try:
            return json.loads(raw)
        except (TypeError, json.JSONDecodeError) as exc:
            logger.warning("Discarding unreadable definition stored at %s", key)
            raise DefinitionNotFoundError(key) from exc

    async def store(self, coordinates: ResultCoordinates, stream: BinaryIO) -> None:
        key = self._definition_key(coordinates)
        payload = stream.read()
        if self.ttl_seconds:
            await self.redis.set(key, payload, ex=self.ttl_seconds)
        else:
            await self.redis.set(key, payload)

    def _definition_key(self, coordinates: ResultCoordinates) -> str:
        return f"{self.key_prefix}{coordinates}"


def create_redis_client(redis_url: str) -> redis.Redis:
    """Instantiate an asyncio Redis client for the given URL."""

    return redis.Redis.from_url(redis_url)


__all__ = ["RedisDefinitionStore", "create_redis_client"]
