"""
API 注册入口
"""
from app.api.v1 import create_v1


def register_blueprint(app):
    app.include_router(create_v1())
