"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : user.py
# @Software: PyCharm
"""
from typing import Optional

from sqlalchemy import Column, String, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.aries.db import BaseModel, SoftDeleteMixin
from app.aries.security import generate_password_hash, check_password_hash


class User(SoftDeleteMixin, BaseModel):
    username = Column(String(24), nullable=False, unique=True, index=True, comment="用户名")
    nickname = Column(String(24), comment="昵称")
    pwd = Column(String(255), nullable=False, comment="密码哈希")
    email = Column(String(100), unique=True, index=True, comment="邮箱")
    user_img = Column(String(500), comment="头像URL")

    # ======================================================
    # 🔐 密码相关
    # ======================================================
    def set_password(self, raw: str) -> None:
        self.pwd = generate_password_hash(raw)

    def verify_password(self, raw: str) -> bool:
        return check_password_hash(raw, self.pwd)

    # ======================================================
    # 🔍 查询
    # ======================================================
    @classmethod
    async def get_by_username(cls, session: AsyncSession, username: str) -> Optional["User"]:
        return await cls.first(session, username=username)

    @classmethod
    async def get_by_email(cls, session: AsyncSession, email: str) -> Optional["User"]:
        return await cls.first(session, email=email)

    @classmethod
    async def update_pwd_by_email(cls, session: AsyncSession, email: str, raw: str) -> int:
        """按邮箱重置密码，返回受影响行数"""
        stmt = (
            update(cls)
            .where(cls.email == email, cls.deleted_at.is_(None))
            .values(pwd=generate_password_hash(raw))
        )
        result = await session.execute(stmt)
        return result.rowcount or 0
