# -*- coding: utf-8 -*-
"""
密码哈希（argon2，加盐慢哈希）
"""
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def generate_password_hash(raw: str) -> str:
    return pwd_context.hash(raw)


def check_password_hash(raw: str, hashed: str) -> bool:
    if not raw or not hashed:
        return False
    return pwd_context.verify(raw, hashed)
