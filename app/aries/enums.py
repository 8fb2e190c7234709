# -*- coding:utf-8 -*-
"""
Aries 枚举定义
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
✅ 接口返回码
✅ 分类类型
"""

from enum import Enum


class ResultCode(int, Enum):
    """
    统一响应码（与 HTTP 状态码无关，HTTP 恒为 200）
      - SUCCESS：成功
      - FAILURE：一般失败
      - UNAUTHORIZED：未登录 / Token 无效
      - REQUEST_ERROR：请求数据有误（表单校验、业务规则）
      - SERVER_ERROR：服务器端错误
    """

    SUCCESS = 100
    FAILURE = 101
    UNAUTHORIZED = 102
    REQUEST_ERROR = 103
    SERVER_ERROR = 104


class CategoryType(int, Enum):
    ARTICLE = 0
    LINK = 1

