"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : sys_setting.py
# @Software: PyCharm
"""
from typing import Optional

from pydantic import EmailStr, Field

from app.aries.form import FormSchema


class SiteForm(FormSchema):
    sys_id: Optional[int] = Field(default=None, title="设置 ID")
    type_name: str = Field(title="设置类型名称", min_length=1, max_length=50)
    site_name: str = Field(title="网站名称", min_length=1, max_length=50)
    site_desc: str = Field(default="", title="网站描述")
    site_url: str = Field(title="网站地址", min_length=1, max_length=255)
    site_logo: str = Field(default="", title="Logo")
    seo_key_words: str = Field(default="", title="SEO 关键词")
    head_content: str = Field(default="", title="全局 head")
    footer_content: str = Field(default="", title="全局 footer")


class EmailForm(FormSchema):
    sys_id: Optional[int] = Field(default=None, title="设置 ID")
    type_name: str = Field(title="设置类型名称", min_length=1, max_length=50)
    address: str = Field(title="SMTP 地址", min_length=1, max_length=30)
    port: int = Field(title="端口", ge=1, le=65535)
    account: EmailStr = Field(title="邮箱帐号")
    pwd: str = Field(title="密码", min_length=1, max_length=30)
    sender: str = Field(title="发送人", min_length=1, max_length=30)


class EmailSendForm(FormSchema):
    sender: str = Field(title="发送人", min_length=1, max_length=30)
    receive_email: EmailStr = Field(title="接收邮箱")
    title: str = Field(title="邮箱标题", min_length=1, max_length=100)
    content: str = Field(title="邮件内容", min_length=1, max_length=1200)
