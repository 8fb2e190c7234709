# @Time    : 2026/10/16
# @Author  : Aries
# @File    : response.py
# @Software: PyCharm
"""
Aries 统一响应
所有接口返回 HTTP 200，业务结果放在 {code, msg, data} 中：
- success()：code=100
- fail()：业务 / 校验 / 服务器错误
- page()：data={items, total, page, size}
传入 schema 时先用它过滤 ORM 对象，避免把密码哈希等字段带出去。
"""

import datetime
import json
from decimal import Decimal
from typing import Any, Generic, Iterable, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from starlette.responses import JSONResponse

from app.aries.enums import ResultCode

T = TypeVar("T")


def serialize(data: Any) -> Any:
    """转成可 JSON 编码的结构"""
    if data is None or isinstance(data, (str, int, float, bool)):
        return data
    if isinstance(data, (datetime.datetime, datetime.date)):
        return data.isoformat()
    if isinstance(data, Decimal):
        return float(data)
    if isinstance(data, BaseModel):
        return serialize(data.model_dump())
    if hasattr(data, "__table__"):
        return {c.key: serialize(getattr(data, c.key)) for c in data.__table__.columns}
    if isinstance(data, dict):
        return {k: serialize(v) for k, v in data.items()}
    if isinstance(data, (list, tuple, set)):
        return [serialize(i) for i in data]
    return data


def _filter_with_schema(schema: Type[BaseModel], value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes, dict, BaseModel)):
        return [schema.model_validate(v, from_attributes=True).model_dump() for v in value]
    return schema.model_validate(value, from_attributes=True).model_dump()


class AriesJSONResponse(JSONResponse):
    """中文不转义"""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, allow_nan=False, separators=(",", ":")).encode("utf-8")


def _envelope(code: int, msg: str, data: Any) -> AriesJSONResponse:
    return AriesJSONResponse(content={"code": int(code), "msg": msg, "data": serialize(data)})


class AriesResponse(BaseModel, Generic[T]):
    """响应结构，同时用作 OpenAPI 文档中的 response_model"""

    code: int = Field(default=ResultCode.SUCCESS, description="业务状态码")
    msg: str = Field(default="success", description="提示信息")
    data: Optional[T] = Field(default=None, description="数据")

    model_config = ConfigDict(arbitrary_types_allowed=True, from_attributes=True)

    @classmethod
    def success(cls, data: Any = None, msg: str = "success", schema: Optional[Type[BaseModel]] = None):
        if schema is not None:
            data = _filter_with_schema(schema, data)
        return _envelope(ResultCode.SUCCESS, msg, data)

    @classmethod
    def fail(cls, msg: str = "failed", code: int = ResultCode.REQUEST_ERROR, data: Any = None):
        return _envelope(code, msg, data)

    @classmethod
    def page(cls, *, items: Any, total: int, page: int, size: int, msg: str = "success",
             schema: Optional[Type[BaseModel]] = None):
        if schema is not None:
            items = _filter_with_schema(schema, items)
        return _envelope(ResultCode.SUCCESS, msg, {
            "items": items or [],
            "total": total,
            "page": page,
            "size": size,
        })


class PageData(BaseModel, Generic[T]):
    items: list[T] = []
    total: int = 0
    page: int = 1
    size: int = 10
