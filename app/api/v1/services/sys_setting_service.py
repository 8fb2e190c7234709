"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : sys_setting_service.py
# @Software: PyCharm
"""
from typing import Dict, Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.aries.config import SmtpConfig
from app.aries.context import AppContext
from app.aries.db import BaseModel
from app.aries.exception import NotFound, ServerError
from app.api.v1.model.sys_setting import SysSetting, SysSettingItem, SMTP_SETTING_NAME
from app.api.v1.schema.sys_setting import SiteForm, EmailForm, EmailSendForm
from app.extension.mail.smtp_mailer import MailDeliveryError
from app.util.build_email_html import build_test_email

SMTP_REQUIRED_KEYS = ("address", "port", "account", "pwd")


class SysSettingService:

    @staticmethod
    async def get_items(session: AsyncSession, name: str) -> Dict[str, str]:
        sys_setting = await SysSetting.get_by_name(session, name)
        if not sys_setting:
            return {}
        return await SysSettingItem.get_map(session, sys_setting.id)

    @staticmethod
    async def save_group(session: AsyncSession, sys_id: Optional[int], type_name: str,
                         items: Dict[str, str]) -> SysSetting:
        """
        保存一组设置：
        - 传入 sys_id：更新该设置组
        - 未传 sys_id：按 type_name 查找，不存在则创建
        设置组与设置项在同一事务内提交
        """
        try:
            async with BaseModel.auto_commit(session):
                if sys_id:
                    sys_setting = await SysSetting.get(session, sys_id)
                    if not sys_setting:
                        raise NotFound("设置不存在")
                else:
                    sys_setting = await SysSetting.get_by_name(session, type_name)
                    if not sys_setting:
                        sys_setting = await SysSetting.create(session, name=type_name)
                await SysSettingItem.multi_create_or_update(session, sys_setting.id, items)
        except SQLAlchemyError as e:
            logger.error(f"保存设置失败: {e}")
            raise ServerError()
        return sys_setting

    @classmethod
    async def save_site(cls, session: AsyncSession, form: SiteForm) -> SysSetting:
        items = form.model_dump(exclude={"sys_id"})
        return await cls.save_group(session, form.sys_id, form.type_name, items)

    @classmethod
    async def save_smtp(cls, session: AsyncSession, form: EmailForm) -> SysSetting:
        items = form.model_dump(exclude={"sys_id"})
        items["port"] = str(form.port)
        return await cls.save_group(session, form.sys_id, form.type_name, items)

    @classmethod
    async def resolve_smtp(cls, session: AsyncSession, ctx: AppContext) -> SmtpConfig:
        """数据库中已保存完整的邮件设置则优先使用，否则使用配置文件"""
        items = await cls.get_items(session, SMTP_SETTING_NAME)
        if not all(items.get(k) for k in SMTP_REQUIRED_KEYS):
            return ctx.settings.smtp
        try:
            port = int(items["port"])
        except ValueError:
            logger.warning(f"邮件设置端口无效: {items['port']}，使用配置文件")
            return ctx.settings.smtp
        return SmtpConfig(
            address=items["address"],
            port=port,
            account=items["account"],
            password=items["pwd"],
            sender=items.get("sender") or ctx.settings.smtp.sender,
            timeout=ctx.settings.smtp.timeout,
        )

    @classmethod
    async def send_test_email(cls, session: AsyncSession, ctx: AppContext, form: EmailSendForm) -> None:
        smtp = await cls.resolve_smtp(session, ctx)
        try:
            await ctx.mailer.send(
                smtp=smtp,
                to=form.receive_email,
                subject=form.title,
                html=build_test_email(form.content),
                sender=form.sender,
            )
        except MailDeliveryError as e:
            logger.error(f"测试邮件发送失败：{e}")
            raise ServerError("邮件发送失败，请检查 smtp 配置")
