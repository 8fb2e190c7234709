# -*- coding: utf-8 -*-
"""
表单基类与校验错误翻译
--------------------------------
✅ 表单字段 / 查询参数通过 title 声明中文标签
✅ 按当前路由收集 {参数名: 标签}，不同表单的同名字段互不干扰
✅ 将 pydantic 校验错误翻译为面向用户的中文提示（含 EmailStr 的格式错误）
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class FormSchema(BaseModel):
    """所有请求表单的基类"""

    model_config = ConfigDict(str_strip_whitespace=True)

    @classmethod
    def labels(cls) -> Dict[str, str]:
        return {name: field.title for name, field in cls.model_fields.items() if field.title}


def normalize_email(value: str) -> str:
    """邮箱统一小写后再存储 / 查询 / 作为缓存 key"""
    return value.lower()


def collect_labels(dependant) -> Dict[str, str]:
    """遍历路由依赖树，收集请求体表单字段与查询参数的标签"""
    labels: Dict[str, str] = {}
    if dependant is None:
        return labels

    for param in dependant.body_params:
        model = param.field_info.annotation
        if isinstance(model, type) and issubclass(model, FormSchema):
            labels.update(model.labels())
    for param in dependant.query_params + dependant.path_params:
        if param.field_info.title:
            labels[param.alias] = param.field_info.title
    for sub in dependant.dependencies:
        labels.update(collect_labels(sub))
    return labels


def _label_of(loc, labels: Dict[str, str]) -> str:
    for part in reversed(loc):
        if isinstance(part, str) and part not in ("body", "query", "path"):
            return labels.get(part, part)
    return "请求参数"


def get_form_error(errors: List[Dict[str, Any]], labels: Optional[Dict[str, str]] = None) -> str:
    """取第一条校验错误，翻译为中文提示"""
    if not errors:
        return "请求数据有误"

    err = errors[0]
    label = _label_of(err.get("loc", ()), labels or {})
    err_type = err.get("type", "")
    ctx = err.get("ctx") or {}

    if err_type == "missing" or (err_type == "string_too_short" and ctx.get("min_length") == 1):
        return f"{label}为必填字段"
    if err_type == "string_too_short":
        return f"{label}长度必须至少为{ctx.get('min_length')}个字符"
    if err_type == "string_too_long":
        return f"{label}长度不能超过{ctx.get('max_length')}个字符"
    if err_type in ("greater_than_equal", "greater_than"):
        return f"{label}必须大于或等于{ctx.get('ge', ctx.get('gt'))}"
    if err_type in ("less_than_equal", "less_than"):
        return f"{label}必须小于或等于{ctx.get('le', ctx.get('lt'))}"
    if err_type in ("int_parsing", "int_type"):
        return f"{label}必须是一个整数"
    if err_type in ("string_type",):
        return f"{label}必须是一个字符串"
    if err_type == "json_invalid":
        return "请求数据不是合法的 JSON"
    if err_type == "value_error" and "valid email address" in err.get("msg", ""):
        return f"{label}必须是一个有效的邮箱"
    if err_type == "value_error":
        reason = ctx.get("error")
        return f"{label}{reason}" if reason else f"{label}格式错误"
    return f"{label}格式错误"
