"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : auth_service.py
# @Software: PyCharm
"""
from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.aries.context import AppContext
from app.aries.db import BaseModel
from app.aries.exception import RequestError, ServerError
from app.aries.utils import create_random_code
from app.api.v1.model.sys_setting import SysSetting, SysSettingItem, SITE_SETTING_NAME
from app.api.v1.model.user import User
from app.api.v1.schema.auth import RegisterForm, LoginForm, ForgetPwdForm, ResetPwdForm, TokenSchema
from app.api.v1.services.sys_setting_service import SysSettingService
from app.extension.mail.smtp_mailer import MailDeliveryError
from app.util.build_email_html import build_forget_pwd_email
from app.util.redis_key_schema import cache_key_verify_code

VERIFY_CODE_LENGTH = 6


class AuthService:

    # ======================================================
    # 🧩 注册：用户 + 默认网站设置，同一事务
    # ======================================================
    @staticmethod
    async def register(session: AsyncSession, form: RegisterForm) -> User:
        if await User.get_by_username(session, form.username):
            raise RequestError("该用户已被注册")

        try:
            async with BaseModel.auto_commit(session):
                user = User(username=form.username, email=form.email)
                user.set_password(form.pwd)
                session.add(user)
                await session.flush()

                sys_setting = await SysSetting.get_by_name(session, SITE_SETTING_NAME)
                if not sys_setting:
                    sys_setting = await SysSetting.create(session, name=SITE_SETTING_NAME)
                await SysSettingItem.multi_create_or_update(session, sys_setting.id, {
                    "type_name": SITE_SETTING_NAME,
                    "site_name": form.site_name,
                    "site_url": form.site_url,
                })
        except IntegrityError as e:
            logger.warning(f"注册冲突: username={form.username} error={e.orig}")
            if await User.get_by_username(session, form.username):
                raise RequestError("该用户已被注册")
            if await User.get_by_email(session, form.email):
                raise RequestError("该邮箱已被注册")
            logger.error(f"注册失败: {e}")
            raise ServerError()
        except SQLAlchemyError as e:
            logger.error(f"注册失败: {e}")
            raise ServerError()
        return user

    # ======================================================
    # 🔐 登录：验证码 → 用户 → 密码 → Token
    # ======================================================
    @staticmethod
    async def login(session: AsyncSession, ctx: AppContext, form: LoginForm) -> TokenSchema:
        if not await ctx.captcha.verify(form.captcha_id, form.captcha_val):
            raise RequestError("验证码错误")

        user = await User.get_by_username(session, form.username)
        if not user:
            raise RequestError("不存在该用户")
        if not user.verify_password(form.pwd):
            raise RequestError("密码错误")

        token = ctx.tokens.create_token(user.username, user.user_img)
        return TokenSchema(token=token, user_id=user.id, username=user.username, user_img=user.user_img)

    @staticmethod
    async def create_captcha(ctx: AppContext) -> dict:
        try:
            captcha_id, captcha_url = await ctx.captcha.generate()
        except OSError as e:
            logger.error(f"验证码生成失败: {e}")
            raise ServerError()
        return {"captcha_id": captcha_id, "captcha_url": captcha_url}

    # ======================================================
    # ✉️ 忘记密码：有效期内重复请求返回同一验证码
    # ======================================================
    @staticmethod
    async def forget_pwd(session: AsyncSession, ctx: AppContext, form: ForgetPwdForm) -> str:
        user = await User.get_by_email(session, form.email)
        if not user:
            raise RequestError("不存在该邮箱帐号")

        expire = ctx.settings.auth.verify_code_expire
        key = cache_key_verify_code(form.email)
        verify_code = await ctx.cache.get(key)
        if not verify_code:
            verify_code = create_random_code(VERIFY_CODE_LENGTH)
            await ctx.cache.set(key, verify_code, expire)

        smtp = await SysSettingService.resolve_smtp(session, ctx)
        try:
            await ctx.mailer.send(
                smtp=smtp,
                to=form.email,
                subject="忘记密码验证",
                html=build_forget_pwd_email(user.username, verify_code, expire // 60),
            )
        except MailDeliveryError as e:
            logger.error(f"验证码发送失败：{e}")
            raise ServerError("验证码发送失败，请检查 smtp 配置")
        return verify_code

    # ======================================================
    # 🔁 重置密码
    # ======================================================
    @staticmethod
    async def reset_pwd(session: AsyncSession, ctx: AppContext, form: ResetPwdForm) -> None:
        key = cache_key_verify_code(form.email)
        verify_code = await ctx.cache.get(key)
        if not verify_code or verify_code != form.verify_code:
            raise RequestError("验证码无效或错误")

        try:
            async with BaseModel.auto_commit(session):
                updated = await User.update_pwd_by_email(session, form.email, form.pwd)
        except SQLAlchemyError as e:
            logger.error(f"重置密码失败: {e}")
            raise ServerError()
        if not updated:
            raise RequestError("不存在该邮箱帐号")

        if ctx.settings.auth.invalidate_verify_code:
            await ctx.cache.delete(key)
