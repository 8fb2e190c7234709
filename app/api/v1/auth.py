# -*- coding: utf-8 -*-
"""
Aries 授权模块
---------------------------------------------
✅ 注册（用户 + 默认网站设置）
✅ 图形验证码
✅ 登录签发 JWT
✅ 忘记密码 / 重置密码（邮箱验证码）
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.aries.context import AppContext, get_ctx, get_session
from app.aries.response import AriesResponse
from app.api.v1.schema.auth import (
    RegisterForm,
    LoginForm,
    ForgetPwdForm,
    ResetPwdForm,
    TokenSchema,
    CaptchaSchema,
)
from app.api.v1.services.auth_service import AuthService

rp = APIRouter(prefix="/auth", tags=["授权"])


@rp.post("/register", name="注册", response_model=AriesResponse[None])
async def register(form: RegisterForm, session: AsyncSession = Depends(get_session)):
    await AuthService.register(session, form)
    return AriesResponse.success(msg="注册成功")


@rp.post("/login", name="登录", response_model=AriesResponse[TokenSchema])
async def login(
        form: LoginForm,
        session: AsyncSession = Depends(get_session),
        ctx: AppContext = Depends(get_ctx),
):
    token = await AuthService.login(session, ctx, form)
    return AriesResponse.success(data=token, msg="登录成功")


@rp.get("/captcha", name="创建验证码", response_model=AriesResponse[CaptchaSchema])
async def create_captcha(ctx: AppContext = Depends(get_ctx)):
    data = await AuthService.create_captcha(ctx)
    return AriesResponse.success(data=data, msg="验证码创建成功")


@rp.post("/pwd/forget", name="忘记密码", response_model=AriesResponse[None])
async def forget_pwd(
        form: ForgetPwdForm,
        session: AsyncSession = Depends(get_session),
        ctx: AppContext = Depends(get_ctx),
):
    await AuthService.forget_pwd(session, ctx, form)
    return AriesResponse.success(msg="验证码发送成功，请前往邮箱查看")


@rp.post("/pwd/reset", name="重置密码", response_model=AriesResponse[None])
async def reset_pwd(
        form: ResetPwdForm,
        session: AsyncSession = Depends(get_session),
        ctx: AppContext = Depends(get_ctx),
):
    await AuthService.reset_pwd(session, ctx, form)
    return AriesResponse.success(msg="重置密码成功")
