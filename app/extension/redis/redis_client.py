"""
Aries-Core | Redis 异步客户端
---------------------------------------------------
✅ 自动延迟初始化
✅ 实现 BaseCache 接口（SET EX / GETDEL）
"""

from typing import Optional

import redis.asyncio as aioredis
from loguru import logger

from app.extension.cache.base import BaseCache


class RedisCache(BaseCache):
    name = "redis"

    def __init__(self, redis_url: str):
        self.redis_url = redis_url
        self.client: Optional[aioredis.Redis] = None

    # ===========================================================
    # 🔧 自动初始化逻辑
    # ===========================================================
    async def _ensure_client(self) -> aioredis.Redis:
        """确保 Redis 客户端已连接（延迟初始化）"""
        if self.client is None:
            self.client = aioredis.from_url(self.redis_url, decode_responses=True)
            logger.info("🔴 Redis 客户端已创建")
        return self.client

    # ===========================================================
    # 🧩 BaseCache
    # ===========================================================
    async def get(self, key: str) -> Optional[str]:
        client = await self._ensure_client()
        return await client.get(key)

    async def set(self, key: str, value: str, ttl: int) -> None:
        client = await self._ensure_client()
        await client.set(key, value, ex=ttl)

    async def delete(self, key: str) -> None:
        client = await self._ensure_client()
        await client.delete(key)

    async def pop(self, key: str) -> Optional[str]:
        client = await self._ensure_client()
        return await client.getdel(key)

    async def close(self) -> None:
        if self.client:
            await self.client.aclose()
            self.client = None
            logger.info("🛑 Redis 已断开连接")
