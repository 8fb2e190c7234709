"""
缓存后端选择：memory（默认，单进程）/ redis（多进程部署）
"""
from loguru import logger

from app.extension.cache.base import BaseCache
from app.extension.cache.memory import MemoryCache


def build_cache(settings) -> BaseCache:
    backend = settings.cache.backend.lower()
    if backend == "redis":
        from app.extension.redis.redis_client import RedisCache
        logger.info(f"🔴 缓存后端: redis ({settings.redis.host}:{settings.redis.port})")
        return RedisCache(settings.redis.url)
    if backend != "memory":
        raise ValueError(f"不支持的缓存后端: {settings.cache.backend}")
    logger.info("🧠 缓存后端: memory")
    return MemoryCache()
