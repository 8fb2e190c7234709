"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : auth.py
# @Software: PyCharm
"""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.aries.form import FormSchema, normalize_email


class RegisterForm(FormSchema):
    username: str = Field(title="用户名", min_length=1, max_length=24)
    pwd: str = Field(title="密码", min_length=6, max_length=20)
    email: EmailStr = Field(title="邮箱")
    site_name: str = Field(title="网站名称", min_length=1, max_length=50)
    site_url: str = Field(title="网站地址", min_length=1, max_length=255)

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)


class LoginForm(FormSchema):
    username: str = Field(title="用户名", min_length=1, max_length=24)
    pwd: str = Field(title="密码", min_length=1, max_length=20)
    captcha_id: str = Field(title="验证码 ID", min_length=1)
    captcha_val: str = Field(title="验证码", min_length=1)


class ForgetPwdForm(FormSchema):
    email: EmailStr = Field(title="邮箱")

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)


class ResetPwdForm(FormSchema):
    email: EmailStr = Field(title="邮箱")
    verify_code: str = Field(title="验证码", min_length=1, max_length=6)
    pwd: str = Field(title="密码", min_length=6, max_length=20)

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)


# ======================================================
# 📤 响应数据
# ======================================================
class TokenSchema(BaseModel):
    token: str
    user_id: int
    username: str
    user_img: Optional[str] = None


class CaptchaSchema(BaseModel):
    captcha_id: str
    captcha_url: str
