from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("definition_service")

STORE_BACKENDS = ("redis", "memory")


@dataclass(slots=True)
class ServiceSettings:
    """Runtime configuration for the definition service."""

    redis_url: str = "redis://127.0.0.1:6379/0"
    store_backend: str = "redis"
    store_key_prefix: str = "definition:"
    store_ttl: int | None = None
    max_concurrency: int = 10
    strict_store_reads: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ServiceSettings":
        def _int_env(name: str, default: int) -> int:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return int(raw)
            except ValueError:
                logger.warning("Invalid integer for %s: %s", name, raw)
                return default

        def _optional_int(name: str) -> int | None:
            raw = os.getenv(name)
            if not raw:
                return None
            try:
                return int(raw)
            except ValueError:
                logger.warning("Invalid integer for %s: %s", name, raw)
                return None

        def _bool_env(name: str, default: bool) -> bool:
            raw = os.getenv(name)
            if not raw:
                return default
            normalized = raw.strip().lower()
            if normalized in {"1", "true", "yes", "on"}:
                return True
            if normalized in {"0", "false", "no", "off"}:
                return False
            logger.warning("Invalid boolean for %s: %s", name, raw)
            return default

        backend = os.getenv("DEFINITION_STORE_BACKEND", "redis").strip().lower()
        if backend not in STORE_BACKENDS:
            logger.warning("Unknown definition store backend %s; using redis", backend)
            backend = "redis"

        max_concurrency = _int_env("DEFINITION_MAX_CONCURRENCY", 10)
        if max_concurrency <= 0:
            logger.warning("DEFINITION_MAX_CONCURRENCY must be positive: %s", max_concurrency)
            max_concurrency = 10

        return cls(
            redis_url=os.getenv("REDIS_URL", "redis://127.0.0.1:6379/0"),
            store_backend=backend,
            store_key_prefix=os.getenv("DEFINITION_STORE_KEY_PREFIX", "definition:"),
            store_ttl=_optional_int("DEFINITION_STORE_TTL"),
            max_concurrency=max_concurrency,
            strict_store_reads=_bool_env("DEFINITION_STRICT_STORE_READS", False),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


__all__ = ["ServiceSettings", "STORE_BACKENDS"]
