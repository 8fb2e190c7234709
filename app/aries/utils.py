# -*- coding:utf-8 -*-
"""
Aries 工具集
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
✅ 随机验证码生成
✅ 逗号分隔 ID 解析
"""

import secrets
from typing import List

from app.aries.exception import RequestError

CODE_CHARS = "1234567890abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def create_random_code(length: int = 6) -> str:
    """
    生成指定长度的随机验证码
    """
    return "".join(secrets.choice(CODE_CHARS) for _ in range(length))


def parse_ids(ids: str) -> List[int]:
    """
    "1,2,3" -> [1, 2, 3]
    """
    try:
        result = [int(i) for i in ids.split(",") if i.strip()]
    except ValueError:
        raise RequestError("ID 列表格式错误")
    if not result:
        raise RequestError("ID 列表不能为空")
    return result
