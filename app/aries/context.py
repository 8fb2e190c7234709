# -*- coding: utf-8 -*-
"""
Aries-Core 应用上下文
-----------------------------------
配置、数据库、缓存、验证码、Token、邮件等进程级对象统一挂在 AppContext 上，
创建 app 时构建一次，通过 FastAPI 依赖注入到各个接口。
"""
from dataclasses import dataclass
from typing import AsyncGenerator, Optional

from fastapi import Request
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.aries.config import Settings


@dataclass
class AppContext:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker
    cache: "BaseCache"
    captcha: "CaptchaService"
    tokens: "TokenIssuer"
    mailer: "SmtpMailer"

    async def startup(self) -> None:
        from app.aries.db import create_all
        await create_all(self.engine)
        logger.info("✅ 数据库表已同步")

    async def shutdown(self) -> None:
        await self.cache.close()
        await self.engine.dispose()
        logger.info("🧹 数据库连接与缓存已关闭")


def build_context(settings: Settings, *, cache=None, mailer=None) -> AppContext:
    """根据配置构建上下文，cache / mailer 可替换（测试用）"""
    from app.aries.aries_jwt import TokenIssuer
    from app.aries.db import build_engine, build_session_factory
    from app.extension.cache import build_cache
    from app.extension.captcha.captcha import CaptchaService
    from app.extension.mail.smtp_mailer import SmtpMailer

    engine = build_engine(settings.database.url, echo=settings.database.echo)
    cache = cache or build_cache(settings)
    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=build_session_factory(engine),
        cache=cache,
        captcha=CaptchaService(cache, settings.captcha),
        tokens=TokenIssuer(settings.auth.secret, settings.auth.token_expire_time),
        mailer=mailer or SmtpMailer(),
    )


# ======================================================
# 🧩 FastAPI 依赖
# ======================================================
def get_ctx(request: Request) -> AppContext:
    return request.app.state.ctx


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """异步数据库会话（每个请求一个）"""
    ctx: Optional[AppContext] = request.app.state.ctx
    async with ctx.session_factory() as session:
        yield session
