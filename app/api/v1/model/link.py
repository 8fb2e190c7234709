"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : link.py
# @Software: PyCharm
"""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.aries.db import BaseModel, SoftDeleteMixin


class Link(SoftDeleteMixin, BaseModel):
    category_id = Column(Integer, ForeignKey("category.id"), nullable=True, index=True, comment="分类 ID")
    name = Column(String(100), nullable=False, comment="网站名称")
    url = Column(String(255), nullable=False, comment="网站地址")
    desc = Column(String(255), comment="网站描述")
    icon = Column(String(255), nullable=False, comment="图标")

    # 分类被软删除后仍可解析
    category = relationship("Category", lazy="selectin")
