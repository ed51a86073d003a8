import asyncio
import fnmatch

from app.cache import RedisCache, _NoopCache, build_cache_from_env


class FakeRedis:
    """Just enough of redis.asyncio.Redis for RedisCache."""

    def __init__(self):
        self.data = {}

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value, ex=None):
        self.data[key] = value.encode("utf-8") if isinstance(value, str) else value
        return True

    async def delete(self, key):
        return 1 if self.data.pop(key, None) is not None else 0

    async def scan_iter(self, match=None):
        for key in list(self.data):
            if match is None or fnmatch.fnmatch(key, match):
                yield key


def run(coro):
    return asyncio.run(coro)


def test_set_get_and_prefix():
    fake = FakeRedis()
    cache = RedisCache(fake, prefix="catalog:")
    assert run(cache.set_json("map:a", {"points": [1, 2]})) is True
    assert "catalog:map:a" in fake.data
    assert run(cache.get_json("map:a")) == {"points": [1, 2]}
    assert run(cache.get_json("missing")) is None


def test_corrupt_entry_reads_as_miss():
    fake = FakeRedis()
    fake.data["catalog:bad"] = b"{not json"
    assert run(RedisCache(fake).get_json("bad")) is None


def test_clear_only_touches_own_prefix():
    fake = FakeRedis()
    fake.data["other:x"] = b"1"
    cache = RedisCache(fake)
    run(cache.set_json("a", 1))
    run(cache.set_json("b", 2))
    assert run(cache.clear()) == 2
    assert list(fake.data) == ["other:x"]


def test_env_without_redis_url_is_noop(monkeypatch):
    monkeypatch.delenv("REDIS_URL", raising=False)
    assert isinstance(run(build_cache_from_env()), _NoopCache)
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")
    monkeypatch.setenv("CACHE_DISABLE", "1")
    assert isinstance(run(build_cache_from_env()), _NoopCache)


def test_map_view_cached_and_invalidated(app, client, admin_headers):
    fake = FakeRedis()
    app.state.cache = RedisCache(fake)

    first = client.get("/locations/map").json()
    assert len(fake.data) == 1
    assert client.get("/locations/map").json() == first

    resp = client.post(
        "/locations",
        json={"name": "Tanjung Piai", "state": "Johor", "coordinates": "1.2667, 103.5083"},
        headers=admin_headers,
    )
    assert resp.status_code == 201
    assert fake.data == {}

    refreshed = client.get("/locations/map").json()
    assert len(refreshed["points"]) == len(first["points"]) + 1
