# -*- coding: utf-8 -*-
"""
进程内 TTL 缓存
所有操作都在事件循环内同步完成（中间没有 await），单个 key 的读写天然原子。
"""
import time
from typing import Callable, Dict, Optional, Tuple

from app.extension.cache.base import BaseCache


class MemoryCache(BaseCache):
    name = "memory"

    def __init__(self, timer: Callable[[], float] = time.monotonic):
        self._timer = timer
        self._store: Dict[str, Tuple[str, float]] = {}

    def _alive(self, key: str) -> Optional[str]:
        item = self._store.get(key)
        if item is None:
            return None
        value, expire_at = item
        if expire_at <= self._timer():
            del self._store[key]
            return None
        return value

    def purge(self) -> int:
        """清理已过期条目，返回清理数量"""
        now = self._timer()
        expired = [k for k, (_, expire_at) in self._store.items() if expire_at <= now]
        for k in expired:
            del self._store[k]
        return len(expired)

    async def get(self, key: str) -> Optional[str]:
        return self._alive(key)

    async def set(self, key: str, value: str, ttl: int) -> None:
        self.purge()
        self._store[key] = (value, self._timer() + ttl)

    async def delete(self, key: str) -> None:
        self._store.pop(key, None)

    async def pop(self, key: str) -> Optional[str]:
        value = self._alive(key)
        self._store.pop(key, None)
        return value

    async def close(self) -> None:
        self._store.clear()
