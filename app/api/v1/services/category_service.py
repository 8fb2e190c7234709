"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : category_service.py
# @Software: PyCharm
"""
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.ext.asyncio import AsyncSession

from app.aries.db import BaseModel
from app.aries.enums import CategoryType
from app.aries.exception import NotFound, RequestError
from app.aries.pagination import Pagination, paginate
from app.api.v1.model.category import Category
from app.api.v1.schema.category import (
    ArticleCategoryAddForm,
    ArticleCategoryEditForm,
    LinkCategoryAddForm,
    LinkCategoryEditForm,
)


class CategoryService:

    @staticmethod
    async def page(session: AsyncSession, pagination: Pagination, category_type: CategoryType,
                   key: Optional[str] = None):
        stmt = Category.select().where(Category.type == category_type.value)
        if key:
            stmt = stmt.where(Category.name.like(f"%{key}%"))
        return await paginate(session, stmt.order_by(desc(Category.id)), pagination)

    @staticmethod
    async def all(session: AsyncSession, category_type: CategoryType) -> List[Category]:
        return await Category.filter_by(session, type=category_type.value)

    @staticmethod
    async def parents(session: AsyncSession) -> List[Category]:
        return await Category.filter_by(session, type=CategoryType.ARTICLE.value, parent_id=None)

    @staticmethod
    async def get(session: AsyncSession, id: int) -> Category:
        category = await Category.get(session, id)
        if not category:
            raise NotFound("分类不存在")
        return category

    @staticmethod
    async def _check_parent(session: AsyncSession, parent_id: Optional[int], self_id: Optional[int] = None):
        if not parent_id:
            return None
        if self_id and parent_id == self_id:
            raise RequestError("父级分类不能是自身")
        parent = await Category.get_by_type(session, parent_id, CategoryType.ARTICLE)
        if not parent:
            raise RequestError("父级分类不存在")
        # 分类只有两级：父级必须是顶级分类，已有子分类的分类不能再挂到别处
        if parent.parent_id is not None:
            raise RequestError("父级分类不能是子分类")
        if self_id and await Category.first(session, parent_id=self_id):
            raise RequestError("该分类下存在子分类，不能设置父级分类")
        return parent_id

    # ======================================================
    # ✏️ 文章分类
    # ======================================================
    @classmethod
    async def add_article_category(cls, session: AsyncSession, form: ArticleCategoryAddForm) -> Category:
        async with BaseModel.auto_commit(session):
            parent_id = await cls._check_parent(session, form.parent_id)
            category = await Category.create(
                session,
                type=CategoryType.ARTICLE.value,
                name=form.name,
                url=form.url,
                parent_id=parent_id,
            )
        return category

    @classmethod
    async def edit_article_category(cls, session: AsyncSession, form: ArticleCategoryEditForm) -> Category:
        async with BaseModel.auto_commit(session):
            category = await Category.get_by_type(session, form.id, CategoryType.ARTICLE)
            if not category:
                raise NotFound("分类不存在")
            parent_id = await cls._check_parent(session, form.parent_id, self_id=category.id)
            await category.update(session, name=form.name, url=form.url, parent_id=parent_id)
        return category

    # ======================================================
    # ✏️ 友链分类
    # ======================================================
    @staticmethod
    async def add_link_category(session: AsyncSession, form: LinkCategoryAddForm) -> Category:
        async with BaseModel.auto_commit(session):
            category = await Category.create(session, type=CategoryType.LINK.value, name=form.name)
        return category

    @staticmethod
    async def edit_link_category(session: AsyncSession, form: LinkCategoryEditForm) -> Category:
        async with BaseModel.auto_commit(session):
            category = await Category.get_by_type(session, form.id, CategoryType.LINK)
            if not category:
                raise NotFound("分类不存在")
            await category.update(session, name=form.name)
        return category

    # ======================================================
    # ❌ 软删除
    # ======================================================
    @staticmethod
    async def delete(session: AsyncSession, ids: List[int]) -> int:
        async with BaseModel.auto_commit(session):
            count = await Category.soft_delete_by_ids(session, ids)
            await Category.detach_children(session, ids)
        return count
