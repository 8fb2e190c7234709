"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : link.py
# @Software: PyCharm
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.aries.aries_jwt import login_required
from app.aries.context import get_session
from app.aries.pagination import Pagination
from app.aries.response import AriesResponse, PageData
from app.aries.utils import parse_ids
from app.api.v1.schema.link import LinkSchema, LinkAddForm, LinkEditForm
from app.api.v1.services.link_service import LinkService

rp = APIRouter(prefix="/links", tags=["友链"], dependencies=[Depends(login_required)])


@rp.get("", name="分页获取友链", response_model=AriesResponse[PageData[LinkSchema]])
async def get_links(
        key: Optional[str] = Query(None, description="关键词"),
        category_id: Optional[int] = Query(None, description="分类 ID"),
        pagination: Pagination = Depends(),
        session: AsyncSession = Depends(get_session),
):
    items, total = await LinkService.page(session, pagination, key, category_id)
    return AriesResponse.page(items=items, total=total, page=pagination.page, size=pagination.size,
                              schema=LinkSchema)


@rp.get("/all", name="获取全部友链", response_model=AriesResponse[list[LinkSchema]])
async def get_all_links(session: AsyncSession = Depends(get_session)):
    data = await LinkService.all(session)
    return AriesResponse.success(data=data, schema=LinkSchema)


@rp.get("/{id}", name="获取友链", response_model=AriesResponse[LinkSchema])
async def get_link(id: int, session: AsyncSession = Depends(get_session)):
    link = await LinkService.get(session, id)
    return AriesResponse.success(data=link, schema=LinkSchema)


@rp.post("", name="添加友链", response_model=AriesResponse[LinkSchema])
async def add_link(form: LinkAddForm, session: AsyncSession = Depends(get_session)):
    link = await LinkService.add(session, form)
    return AriesResponse.success(data=link, msg="添加成功", schema=LinkSchema)


@rp.put("", name="修改友链", response_model=AriesResponse[LinkSchema])
async def edit_link(form: LinkEditForm, session: AsyncSession = Depends(get_session)):
    link = await LinkService.edit(session, form)
    return AriesResponse.success(data=link, msg="修改成功", schema=LinkSchema)


@rp.delete("/{id}", name="删除友链", response_model=AriesResponse[None])
async def delete_link(id: int, session: AsyncSession = Depends(get_session)):
    await LinkService.get(session, id)
    await LinkService.delete(session, [id])
    return AriesResponse.success(msg="删除成功")


@rp.delete("", name="批量删除友链", response_model=AriesResponse[None])
async def multi_delete_links(
        ids: str = Query(..., title="ID 列表", description="逗号分隔的 ID，如 1,2,3"),
        session: AsyncSession = Depends(get_session),
):
    await LinkService.delete(session, parse_ids(ids))
    return AriesResponse.success(msg="删除成功")
