# -*- coding: utf-8 -*-
"""
Aries exception system
所有接口 HTTP 状态码恒为 200，错误信息通过 {code, msg, data} 传递
"""
import traceback
import uuid

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from loguru import logger

from app.aries.enums import ResultCode
from app.aries.form import get_form_error, collect_labels
from app.aries.response import AriesResponse


class APIException(Exception):
    def __init__(self, msg="sorry, we made a mistake (*￣︶￣)!", code=ResultCode.FAILURE):
        super().__init__(msg)
        self.msg = msg
        self.code = code


class RequestError(APIException):
    def __init__(self, msg="请求数据有误"):
        super().__init__(msg, ResultCode.REQUEST_ERROR)


class NotFound(RequestError):
    def __init__(self, msg="资源不存在"):
        super().__init__(msg)


class ServerError(APIException):
    def __init__(self, msg="服务器端错误"):
        super().__init__(msg, ResultCode.SERVER_ERROR)


class UnAuthentication(APIException):
    def __init__(self, msg="认证失败，请重新登录"):
        super().__init__(msg, ResultCode.UNAUTHORIZED)


def register_exception_handlers(app):

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        return AriesResponse.fail(msg=exc.msg, code=exc.code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        route = request.scope.get("route")
        labels = collect_labels(getattr(route, "dependant", None))
        return AriesResponse.fail(msg=get_form_error(exc.errors(), labels), code=ResultCode.REQUEST_ERROR)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        trace_id = uuid.uuid4().hex[:8]
        tb_str = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        logger.error(f"[Unhandled] TraceID={trace_id} {request.method} {request.url.path}\n{tb_str}")
        return AriesResponse.fail(msg=ServerError().msg, code=ResultCode.SERVER_ERROR)
