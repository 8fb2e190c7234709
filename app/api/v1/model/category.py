"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : category.py
# @Software: PyCharm
"""
from sqlalchemy import Column, Integer, String, SmallInteger, ForeignKey, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.aries.db import BaseModel, SoftDeleteMixin
from app.aries.enums import CategoryType


class Category(SoftDeleteMixin, BaseModel):
    type = Column(SmallInteger, nullable=False, default=CategoryType.ARTICLE.value, index=True,
                  comment="分类类型 0：文章 1：友链")
    name = Column(String(100), nullable=False, comment="分类名称")
    url = Column(String(255), comment="访问 URL")
    parent_id = Column(Integer, ForeignKey("category.id"), nullable=True, comment="父级分类 ID")

    @classmethod
    async def get_by_type(cls, session: AsyncSession, id: int, category_type: CategoryType):
        return await cls.first(session, id=id, type=category_type.value)

    @classmethod
    async def detach_children(cls, session: AsyncSession, parent_ids) -> None:
        """父级被删除后，子分类挂回顶级"""
        stmt = update(cls).where(cls.parent_id.in_(list(parent_ids))).values(parent_id=None)
        await session.execute(stmt)
