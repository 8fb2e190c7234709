"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : sys_setting.py
# @Software: PyCharm
"""
from typing import Dict, Optional

from sqlalchemy import Column, Integer, String, Text, ForeignKey, UniqueConstraint, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.aries.db import BaseModel

SITE_SETTING_NAME = "网站设置"
SMTP_SETTING_NAME = "邮件设置"


class SysSetting(BaseModel):
    name = Column(String(100), nullable=False, unique=True, comment="设置类型名称")

    @classmethod
    async def get_by_name(cls, session: AsyncSession, name: str) -> Optional["SysSetting"]:
        return await cls.first(session, name=name)


class SysSettingItem(BaseModel):
    __table_args__ = (UniqueConstraint("sys_id", "key", name="uq_sys_setting_item_sys_key"),)

    sys_id = Column(Integer, ForeignKey("sys_setting.id"), nullable=False, index=True, comment="设置 ID")
    key = Column(String(100), nullable=False, comment="键")
    val = Column(Text, comment="值")

    @classmethod
    async def multi_create_or_update(cls, session: AsyncSession, sys_id: int, items: Dict[str, str]) -> None:
        """按 (sys_id, key) 批量 upsert"""
        result = await session.execute(select(cls).where(cls.sys_id == sys_id))
        existing = {item.key: item for item in result.scalars().all()}
        for key, val in items.items():
            item = existing.get(key)
            if item:
                item.val = val
            else:
                session.add(cls(sys_id=sys_id, key=key, val=val))
        await session.flush()

    @classmethod
    async def get_map(cls, session: AsyncSession, sys_id: int) -> Dict[str, str]:
        result = await session.execute(select(cls).where(cls.sys_id == sys_id).order_by(cls.id))
        return {item.key: item.val for item in result.scalars().all()}
