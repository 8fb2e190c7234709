"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : sys_setting.py
# @Software: PyCharm
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.aries.aries_jwt import login_required
from app.aries.context import AppContext, get_ctx, get_session
from app.aries.response import AriesResponse
from app.api.v1.schema.sys_setting import SiteForm, EmailForm, EmailSendForm
from app.api.v1.services.sys_setting_service import SysSettingService

rp = APIRouter(prefix="/sys_setting", tags=["系统设置"], dependencies=[Depends(login_required)])


@rp.get("/items", name="获取设置条目", response_model=AriesResponse[dict[str, str]])
async def get_items(
        name: str = Query(..., min_length=1, title="设置类型名称", description="设置类型名称"),
        session: AsyncSession = Depends(get_session),
):
    data = await SysSettingService.get_items(session, name)
    return AriesResponse.success(data=data)


@rp.post("/site", name="保存网站设置", response_model=AriesResponse[None])
async def save_site_setting(form: SiteForm, session: AsyncSession = Depends(get_session)):
    await SysSettingService.save_site(session, form)
    return AriesResponse.success(msg="保存成功")


@rp.post("/smtp", name="保存 SMTP 设置", response_model=AriesResponse[None])
async def save_smtp_setting(form: EmailForm, session: AsyncSession = Depends(get_session)):
    await SysSettingService.save_smtp(session, form)
    return AriesResponse.success(msg="保存成功")


@rp.post("/email/send", name="发送测试邮件", response_model=AriesResponse[None])
async def send_test_email(
        form: EmailSendForm,
        session: AsyncSession = Depends(get_session),
        ctx: AppContext = Depends(get_ctx),
):
    await SysSettingService.send_test_email(session, ctx, form)
    return AriesResponse.success(msg="发送成功")
