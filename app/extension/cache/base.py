# -*- coding: utf-8 -*-
"""
键值 TTL 缓存接口
"""
from typing import Optional


class BaseCache:
    """验证码 / 邮箱验证码等短期数据的存储接口"""
    name: str = "base"

    async def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    async def set(self, key: str, value: str, ttl: int) -> None:
        """写入并设置过期秒数"""
        raise NotImplementedError

    async def delete(self, key: str) -> None:
        raise NotImplementedError

    async def pop(self, key: str) -> Optional[str]:
        """读取后立即删除（一次性消费）"""
        raise NotImplementedError

    async def close(self) -> None:
        pass
