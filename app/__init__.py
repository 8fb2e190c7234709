# -*- coding: utf-8 -*-
"""
Aries 应用工厂
--------------------------------------------
create_app() 组装：配置 → AppContext → 日志 → CORS → 路由 → 异常处理
启动时建表，关闭时释放缓存与数据库连接
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.aries.config import Settings, get_settings
from app.aries.context import AppContext, build_context


def register_cors(app: FastAPI):
    # 管理后台与前台可能部署在不同域名
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def register_routes(app: FastAPI):
    from app.api import register_blueprint
    register_blueprint(app)


def register_errors(app: FastAPI):
    from app.aries.exception import register_exception_handlers
    register_exception_handlers(app)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ctx: AppContext = app.state.ctx
    await ctx.startup()
    logger.info(f"🚀 {ctx.settings.app.name} 已启动 | env={ctx.settings.app.env}")

    yield

    logger.info("🧹 正在关闭，释放资源...")
    await ctx.shutdown()


def create_app(settings: Optional[Settings] = None, ctx: Optional[AppContext] = None) -> FastAPI:
    """
    构建 FastAPI 实例
    :param settings: 不传则读取 APP_ENV 对应的配置文件
    :param ctx: 预先构建好的上下文（测试中用来替换缓存 / 邮件）
    """
    if settings is None:
        settings = ctx.settings if ctx else get_settings()

    # 只在 debug 模式下暴露接口文档
    docs = {} if settings.app.debug else {"docs_url": None, "redoc_url": None, "openapi_url": None}
    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description="Aries 博客管理后台接口",
        debug=settings.app.debug,
        lifespan=lifespan,
        **docs,
    )
    app.state.settings = settings
    app.state.ctx = ctx or build_context(settings)

    from app.aries.logger import setup_logger
    setup_logger(app, settings)
    register_cors(app)
    register_routes(app)
    register_errors(app)

    logger.info(f"✅ 应用初始化完成 | routes={len(app.routes)}")
    return app
