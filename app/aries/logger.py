"""
Aries 日志
---------------------
loguru 统一输出：
- 控制台（彩色）
- 按天滚动的文件（可关闭）
- uvicorn / 标准 logging 转发
- 每个请求一行访问日志
"""

import logging
import sys
import time

from fastapi import FastAPI, Request
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from app.aries.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class InterceptHandler(logging.Handler):
    """标准 logging → loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # 跳过 logging 模块自身的栈帧，定位到真正的调用方
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def init_logger(settings: Settings) -> None:
    level = "DEBUG" if settings.app.debug else settings.app.log_level.upper()

    logger.remove()
    logger.add(sys.stdout, level=level, colorize=True, backtrace=True, format=CONSOLE_FORMAT)
    if settings.app.log_path:
        logger.add(
            settings.app.log_path,
            level=level,
            rotation="00:00",
            retention="14 days",
            encoding="utf-8",
            enqueue=True,
            backtrace=True,
        )

    for name in INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
    logger.debug(f"日志级别: {level} | 文件: {settings.app.log_path or '-'}")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """访问日志：方法、路径、状态码、耗时、来源 IP"""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        cost = (time.perf_counter() - started) * 1000
        client = request.client.host if request.client else "-"
        logger.info(f"{request.method} {request.url.path} {response.status_code} {cost:.1f}ms {client}")
        return response


def setup_logger(app: FastAPI, settings: Settings) -> None:
    init_logger(settings)
    app.add_middleware(RequestLoggingMiddleware)
