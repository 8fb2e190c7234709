# -*- coding: utf-8 -*-
"""
分页工具
"""
from typing import Any, Tuple

from fastapi import Query
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


class Pagination:
    """分页参数，作为 FastAPI 依赖注入"""

    def __init__(
            self,
            page: int = Query(1, ge=1, title="页码", description="页码"),
            size: int = Query(10, ge=1, le=100, title="每页数量", description="每页数量"),
    ):
        self.page = page
        self.size = size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


async def paginate(session: AsyncSession, stmt: Select, pagination: Pagination) -> Tuple[list[Any], int]:
    """
    执行分页查询
    返回: (items, total)，total 复用同样的过滤条件统计
    """
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = (await session.execute(count_stmt)).scalar() or 0

    result = await session.execute(stmt.offset(pagination.offset).limit(pagination.size))
    return list(result.scalars().all()), int(total)
