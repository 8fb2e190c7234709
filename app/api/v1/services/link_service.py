"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : link_service.py
# @Software: PyCharm
"""
from typing import List, Optional

from sqlalchemy import desc, or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.aries.db import BaseModel
from app.aries.enums import CategoryType
from app.aries.exception import NotFound, RequestError
from app.aries.pagination import Pagination, paginate
from app.api.v1.model.category import Category
from app.api.v1.model.link import Link
from app.api.v1.schema.link import LinkAddForm, LinkEditForm


class LinkService:

    @staticmethod
    async def page(session: AsyncSession, pagination: Pagination, key: Optional[str] = None,
                   category_id: Optional[int] = None):
        stmt = Link.select()
        if key:
            stmt = stmt.where(or_(Link.name.like(f"%{key}%"), Link.url.like(f"%{key}%")))
        if category_id:
            stmt = stmt.where(Link.category_id == category_id)
        return await paginate(session, stmt.order_by(desc(Link.id)), pagination)

    @staticmethod
    async def all(session: AsyncSession) -> List[Link]:
        return await Link.filter_by(session)

    @staticmethod
    async def get(session: AsyncSession, id: int) -> Link:
        link = await Link.get(session, id)
        if not link:
            raise NotFound("友链不存在")
        return link

    @staticmethod
    async def _check_category(session: AsyncSession, category_id: Optional[int]) -> Optional[int]:
        if not category_id:
            return None
        if not await Category.get_by_type(session, category_id, CategoryType.LINK):
            raise RequestError("友链分类不存在")
        return category_id

    @classmethod
    async def add(cls, session: AsyncSession, form: LinkAddForm) -> Link:
        async with BaseModel.auto_commit(session):
            data = form.model_dump()
            data["category_id"] = await cls._check_category(session, form.category_id)
            link = await Link.create(session, **data)
        await session.refresh(link, attribute_names=["category"])
        return link

    @classmethod
    async def edit(cls, session: AsyncSession, form: LinkEditForm) -> Link:
        async with BaseModel.auto_commit(session):
            link = await Link.get(session, form.id)
            if not link:
                raise NotFound("友链不存在")
            data = form.model_dump(exclude={"id"})
            data["category_id"] = await cls._check_category(session, form.category_id)
            await link.update(session, **data)
        await session.refresh(link, attribute_names=["category"])
        return link

    @staticmethod
    async def delete(session: AsyncSession, ids: List[int]) -> int:
        async with BaseModel.auto_commit(session):
            count = await Link.soft_delete_by_ids(session, ids)
        return count
