"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : link.py
# @Software: PyCharm
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.aries.form import FormSchema
from app.api.v1.schema.category import CategorySchema


class LinkAddForm(FormSchema):
    category_id: Optional[int] = Field(default=None, title="分类")
    name: str = Field(title="网站名称", min_length=1, max_length=100)
    url: str = Field(title="网站地址", min_length=1, max_length=255)
    desc: str = Field(default="", title="网站描述", max_length=255)
    icon: str = Field(title="图标", min_length=1, max_length=255)


class LinkEditForm(LinkAddForm):
    id: int = Field(title="ID", ge=1)


class LinkSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category_id: Optional[int] = None
    category: Optional[CategorySchema] = None
    name: str
    url: str
    desc: Optional[str] = None
    icon: str
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
