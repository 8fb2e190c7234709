"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : category.py
# @Software: PyCharm
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.aries.aries_jwt import login_required
from app.aries.context import get_session
from app.aries.enums import CategoryType
from app.aries.pagination import Pagination
from app.aries.response import AriesResponse, PageData
from app.aries.utils import parse_ids
from app.api.v1.schema.category import (
    CategorySchema,
    ArticleCategoryAddForm,
    ArticleCategoryEditForm,
    LinkCategoryAddForm,
    LinkCategoryEditForm,
)
from app.api.v1.services.category_service import CategoryService

rp = APIRouter(prefix="/categories", tags=["分类"], dependencies=[Depends(login_required)])


@rp.get("", name="分页获取分类", response_model=AriesResponse[PageData[CategorySchema]])
async def get_categories(
        category_type: int = Query(CategoryType.ARTICLE.value, ge=0, le=1, title="分类类型",
                                   description="分类类型 0：文章 1：友链"),
        key: Optional[str] = Query(None, description="关键词"),
        pagination: Pagination = Depends(),
        session: AsyncSession = Depends(get_session),
):
    items, total = await CategoryService.page(session, pagination, CategoryType(category_type), key)
    return AriesResponse.page(items=items, total=total, page=pagination.page, size=pagination.size,
                              schema=CategorySchema)


@rp.get("/all", name="获取全部分类", response_model=AriesResponse[list[CategorySchema]])
async def get_all_categories(
        category_type: int = Query(CategoryType.ARTICLE.value, ge=0, le=1, title="分类类型",
                                   description="分类类型 0：文章 1：友链"),
        session: AsyncSession = Depends(get_session),
):
    data = await CategoryService.all(session, CategoryType(category_type))
    return AriesResponse.success(data=data, schema=CategorySchema)


@rp.get("/parents", name="获取父级分类", response_model=AriesResponse[list[CategorySchema]])
async def get_parent_categories(session: AsyncSession = Depends(get_session)):
    data = await CategoryService.parents(session)
    return AriesResponse.success(data=data, schema=CategorySchema)


@rp.get("/{id}", name="获取分类", response_model=AriesResponse[CategorySchema])
async def get_category(id: int, session: AsyncSession = Depends(get_session)):
    category = await CategoryService.get(session, id)
    return AriesResponse.success(data=category, schema=CategorySchema)


@rp.post("/article", name="添加文章分类", response_model=AriesResponse[CategorySchema])
async def add_article_category(form: ArticleCategoryAddForm, session: AsyncSession = Depends(get_session)):
    category = await CategoryService.add_article_category(session, form)
    return AriesResponse.success(data=category, msg="添加成功", schema=CategorySchema)


@rp.put("/article", name="修改文章分类", response_model=AriesResponse[CategorySchema])
async def edit_article_category(form: ArticleCategoryEditForm, session: AsyncSession = Depends(get_session)):
    category = await CategoryService.edit_article_category(session, form)
    return AriesResponse.success(data=category, msg="修改成功", schema=CategorySchema)


@rp.post("/link", name="添加友链分类", response_model=AriesResponse[CategorySchema])
async def add_link_category(form: LinkCategoryAddForm, session: AsyncSession = Depends(get_session)):
    category = await CategoryService.add_link_category(session, form)
    return AriesResponse.success(data=category, msg="添加成功", schema=CategorySchema)


@rp.put("/link", name="修改友链分类", response_model=AriesResponse[CategorySchema])
async def edit_link_category(form: LinkCategoryEditForm, session: AsyncSession = Depends(get_session)):
    category = await CategoryService.edit_link_category(session, form)
    return AriesResponse.success(data=category, msg="修改成功", schema=CategorySchema)


@rp.delete("/{id}", name="删除分类", response_model=AriesResponse[None])
async def delete_category(id: int, session: AsyncSession = Depends(get_session)):
    await CategoryService.get(session, id)
    await CategoryService.delete(session, [id])
    return AriesResponse.success(msg="删除成功")


@rp.delete("", name="批量删除分类", response_model=AriesResponse[None])
async def multi_delete_categories(
        ids: str = Query(..., title="ID 列表", description="逗号分隔的 ID，如 1,2,3"),
        session: AsyncSession = Depends(get_session),
):
    await CategoryService.delete(session, parse_ids(ids))
    return AriesResponse.success(msg="删除成功")
