"""Redis-backed JSON cache for rendered catalog views, with a no-op fallback.

Usage:
    from app.cache import build_cache_from_env
    cache = await build_cache_from_env()
    await cache.set_json("map:streets:all", {"points": []})
    data = await cache.get_json("map:streets:all")
    await cache.clear()  # after any catalog mutation

Operations swallow connection errors so the catalog keeps serving when Redis
is unavailable (tests, CI, local runs without the container). Keys are
automatically prefixed.
"""
from __future__ import annotations

import asyncio
import json
import logging
import os
from typing import Any, Optional

import redis.asyncio as redis

logger = logging.getLogger(__name__)


class _NoopCache:
    async def get_json(self, key: str):  # pragma: no cover - trivial
        return None

    async def set_json(self, key: str, value: Any, ttl: int | None = None):  # pragma: no cover - trivial
        return False

    async def clear(self) -> int:  # pragma: no cover - trivial
        return 0

    async def close(self):  # pragma: no cover - trivial
        return None


class RedisCache:
    def __init__(self, client: Any, prefix: str = "catalog", default_ttl: int = 300):
        self.client = client
        self.prefix = prefix.rstrip(":")
        self.default_ttl = default_ttl

    def _k(self, key: str) -> str:
        return f"{self.prefix}:{key}" if self.prefix else key

    async def get_json(self, key: str) -> Optional[Any]:
        try:
            raw = await self.client.get(self._k(key))
        except Exception as e:  # pragma: no cover (network issues)
            logger.debug("Redis get failed for %s: %s", key, e)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            return None

    async def set_json(self, key: str, value: Any, ttl: int | None = None) -> bool:
        try:
            data = json.dumps(value, separators=(",", ":"))
            ex = ttl if ttl is not None else self.default_ttl
            await self.client.set(self._k(key), data, ex=ex)
            return True
        except Exception as e:  # pragma: no cover
            logger.debug("Redis set failed for %s: %s", key, e)
            return False

    async def clear(self) -> int:
        """Drop every key under this cache's prefix; returns the number removed."""
        removed = 0
        try:
            async for key in self.client.scan_iter(match=self._k("*")):
                removed += await self.client.delete(key)
        except Exception as e:  # pragma: no cover
            logger.debug("Redis clear failed: %s", e)
        return removed

    async def close(self):  # pragma: no cover - rarely used
        try:
            await self.client.aclose()
        except Exception as e:
            logger.debug("Redis close failed: %s", e)


async def build_cache_from_env() -> RedisCache | _NoopCache:
    """Instantiate a RedisCache if REDIS_URL is set and reachable; else a no-op.

    Env vars:
      REDIS_URL          e.g. redis://redis:6379/0
      CACHE_DISABLE=1    force disable
      CACHE_PREFIX       (optional) namespace prefix (default 'catalog')
      CACHE_TTL_SECONDS  (optional) default TTL (int, default 300)
    """
    if os.getenv("CACHE_DISABLE") == "1":
        return _NoopCache()
    url = os.getenv("REDIS_URL")
    if not url:
        return _NoopCache()
    try:
        client = redis.from_url(url, encoding="utf-8", decode_responses=False)
        # Ping with short timeout so startup isn't delayed badly
        await asyncio.wait_for(client.ping(), timeout=0.75)
        prefix = os.getenv("CACHE_PREFIX", "catalog")
        ttl = int(os.getenv("CACHE_TTL_SECONDS", "300"))
        return RedisCache(client, prefix=prefix, default_ttl=ttl)
    except Exception as e:  # pragma: no cover (network issues)
        logger.info("Redis unavailable (%s); proceeding without cache", e)
        return _NoopCache()
