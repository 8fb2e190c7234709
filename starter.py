# -*- coding: utf-8 -*-
"""
Aries FastAPI 启动文件
--------------------------------
入口职责：
✅ 调用 create_app()
✅ 启动 uvicorn
"""

import uvicorn
from app import create_app
from app.aries.config import get_settings

settings = get_settings()
app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(
        "starter:app",
        host=settings.app.host,
        port=settings.app.port,
        reload=settings.app.debug,
    )
