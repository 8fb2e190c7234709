"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : test_cache.py
# @Software: PyCharm
"""
import pytest

from app.aries.config import Settings, CacheConfig, RedisConfig
from app.extension.cache import build_cache
from app.extension.cache.memory import MemoryCache
from app.extension.redis.redis_client import RedisCache
from conftest import FakeTimer


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def cache(timer):
    return MemoryCache(timer=timer)


async def test_set_and_get(cache):
    await cache.set("k", "v", 10)
    assert await cache.get("k") == "v"


async def test_entry_expires(cache, timer):
    await cache.set("k", "v", 10)
    timer.advance(9.9)
    assert await cache.get("k") == "v"
    timer.advance(0.1)
    assert await cache.get("k") is None


async def test_pop_consumes(cache):
    await cache.set("k", "v", 10)
    assert await cache.pop("k") == "v"
    assert await cache.pop("k") is None


async def test_pop_expired(cache, timer):
    await cache.set("k", "v", 10)
    timer.advance(11)
    assert await cache.pop("k") is None


async def test_delete_and_purge(cache, timer):
    await cache.set("a", "1", 5)
    await cache.set("b", "2", 50)
    await cache.delete("b")
    assert await cache.get("b") is None

    await cache.set("c", "3", 50)
    timer.advance(10)
    assert cache.purge() == 1
    assert await cache.get("c") == "3"


def test_build_cache_backends():
    assert isinstance(build_cache(Settings(cache=CacheConfig(backend="memory"))), MemoryCache)
    redis_cache = build_cache(Settings(cache=CacheConfig(backend="redis"), redis=RedisConfig(port=6380)))
    assert isinstance(redis_cache, RedisCache)


def test_build_cache_unknown_backend():
    with pytest.raises(ValueError):
        build_cache(Settings(cache=CacheConfig(backend="memcached")))
