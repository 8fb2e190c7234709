# -*- coding: utf-8 -*-
"""
Aries-Core 异步 ORM 基类
---------------------------------------------
✅ 异步 CRUD 接口（显式传入 session）
✅ auto_commit() 自动事务上下文
✅ deleted_at 软删除，查询默认过滤
✅ 异步 engine / session_factory 构建
"""

from __future__ import annotations
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional, List, Type, TypeVar, Sequence

from sqlalchemy import Column, Integer, DateTime, select, update
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.orm import declarative_base, declared_attr

# ======================================================
# ⚙️ ORM Base 定义
# ======================================================
Base = declarative_base()
T = TypeVar("T", bound="BaseModel")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# ======================================================
# ⚙️ Aries-Core ORM BaseModel
# ======================================================
class BaseModel(Base):
    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True)
    create_time = Column(DateTime(timezone=True), default=utc_now, comment="创建时间")
    update_time = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, comment="更新时间")

    # -----------------------------------------
    # 🧩 自动表名
    # -----------------------------------------
    @declared_attr.directive
    def __tablename__(cls) -> str:
        """驼峰转下划线"""
        name = cls.__name__
        return "".join(["_" + i.lower() if i.isupper() else i for i in name]).lstrip("_")

    # -----------------------------------------
    # 🔍 通用异步 CRUD 操作
    # -----------------------------------------
    @classmethod
    def select(cls):
        """查询入口，软删除模型自动过滤"""
        stmt = select(cls)
        if hasattr(cls, "deleted_at"):
            stmt = stmt.where(cls.deleted_at.is_(None))
        return stmt

    @classmethod
    async def get(cls: Type[T], session: AsyncSession, id: int) -> Optional[T]:
        result = await session.execute(cls.select().where(cls.id == id))
        return result.scalar_one_or_none()

    @classmethod
    async def first(cls: Type[T], session: AsyncSession, **filters) -> Optional[T]:
        result = await session.execute(cls.select().filter_by(**filters).limit(1))
        return result.scalars().first()

    @classmethod
    async def filter_by(cls: Type[T], session: AsyncSession, **filters) -> List[T]:
        result = await session.execute(cls.select().filter_by(**filters).order_by(cls.id))
        return list(result.scalars().all())

    # -----------------------------------------
    # ✏️ 写入、更新（不提交，由 auto_commit 统一提交）
    # -----------------------------------------
    @classmethod
    async def create(cls: Type[T], session: AsyncSession, **data) -> T:
        obj = cls(**data)
        session.add(obj)
        await session.flush()
        return obj

    async def update(self: T, session: AsyncSession, **kwargs) -> T:
        for k, v in kwargs.items():
            setattr(self, k, v)
        session.add(self)
        await session.flush()
        return self

    # -----------------------------------------
    # 🔒 自动事务上下文
    # -----------------------------------------
    @classmethod
    @asynccontextmanager
    async def auto_commit(cls, session: AsyncSession):
        try:
            yield
            await session.commit()
        except Exception as e:
            await session.rollback()
            raise e


class SoftDeleteMixin:
    """软删除：deleted_at 为空表示有效"""

    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True, comment="删除时间")

    @classmethod
    async def soft_delete_by_ids(cls, session: AsyncSession, ids: Sequence[int]) -> int:
        if not ids:
            return 0
        stmt = (
            update(cls)
            .where(cls.id.in_(list(ids)), cls.deleted_at.is_(None))
            .values(deleted_at=utc_now())
        )
        result = await session.execute(stmt)
        return result.rowcount or 0


# ======================================================
# ⚙️ 异步引擎 & Session 工厂
# ======================================================
def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """自动适配异步数据库URL (sqlite / postgres / mysql)"""
    return create_async_engine(url, echo=echo, future=True)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def create_all(engine: AsyncEngine) -> None:
    """同步数据库表结构"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
