"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : category.py
# @Software: PyCharm
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.aries.form import FormSchema


class ArticleCategoryAddForm(FormSchema):
    name: str = Field(title="分类名称", min_length=1, max_length=100)
    url: str = Field(title="访问 URL", min_length=1, max_length=255)
    parent_id: Optional[int] = Field(default=None, title="父级分类")


class ArticleCategoryEditForm(ArticleCategoryAddForm):
    id: int = Field(title="ID", ge=1)


class LinkCategoryAddForm(FormSchema):
    name: str = Field(title="分类名称", min_length=1, max_length=100)


class LinkCategoryEditForm(LinkCategoryAddForm):
    id: int = Field(title="ID", ge=1)


class CategorySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: int
    name: str
    url: Optional[str] = None
    parent_id: Optional[int] = None
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
