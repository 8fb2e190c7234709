"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : redis_key_schema.py
# @Software: PyCharm
"""

# 规范使用缓存 key 避免手写每个key出错
def cache_key_verify_code(email: str) -> str:
    """忘记密码邮箱验证码，email 由表单统一转为小写"""
    return f"verify_code:{email}"


def cache_key_captcha(captcha_id: str) -> str:
    """图形验证码答案"""
    return f"captcha:{captcha_id}"
