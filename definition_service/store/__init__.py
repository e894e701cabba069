"""Definition store adapters."""

from __future__ import annotations

from ..config import ServiceSettings
from .memory_store import MemoryDefinitionStore
from .redis_store import RedisDefinitionStore, create_redis_client


def create_definition_store(settings: ServiceSettings) -> MemoryDefinitionStore | RedisDefinitionStore:
    """Build the definition store selected by the settings."""

    if settings.store_backend == "memory":
        return MemoryDefinitionStore()
    return RedisDefinitionStore(
        create_redis_client(settings.redis_url),
        key_prefix=settings.store_key_prefix,
        ttl_seconds=settings.store_ttl,
    )


__all__ = [
    "MemoryDefinitionStore",
    "RedisDefinitionStore",
    "create_definition_store",
    "create_redis_client",
]
