# -*- coding: utf-8 -*-
"""
Aries-Core JWT 服务
-----------------------------------
✅ 签发携带 username / user_img 的 Token
✅ 校验签名与过期时间
✅ login_required FastAPI 依赖
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jwt import ExpiredSignatureError, InvalidTokenError
from sqlalchemy.ext.asyncio import AsyncSession

from app.aries.context import get_ctx, get_session, AppContext
from app.aries.exception import UnAuthentication


class TokenIssuer:
    algorithm = "HS256"

    def __init__(self, secret: str, expire_seconds: int):
        self.secret = secret
        self.expire_seconds = expire_seconds

    def create_token(self, username: str, user_img: Optional[str] = None) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "username": username,
            "user_img": user_img or "",
            "iat": now,
            "exp": now + timedelta(seconds=self.expire_seconds),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def parse_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise UnAuthentication("Token 已过期，请重新登录")
        except InvalidTokenError:
            raise UnAuthentication("Token 无效")


# ======================================================
# ⚙️ FastAPI 依赖封装
# ======================================================
security_scheme = HTTPBearer(auto_error=False)


async def login_required(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
        ctx: AppContext = Depends(get_ctx),
        session: AsyncSession = Depends(get_session),
):
    if not credentials:
        raise UnAuthentication("缺少认证凭据，请先登录")

    payload = ctx.tokens.parse_token(credentials.credentials)

    from app.api.v1.model.user import User
    user = await User.get_by_username(session, payload.get("username", ""))
    if not user:
        raise UnAuthentication("用户不存在或已被停用")
    return user
