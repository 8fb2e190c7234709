# -*- coding: utf-8 -*-
"""
@Time    : 2026/10/16
@Author  : Aries
@File    : config.py
@Software: PyCharm

Aries 配置
---------------------------------------------------
优先级（高 → 低）：
  1. 构造参数，整段覆盖（测试 / 脚本）
  2. app/config/{APP_ENV}.yaml，逐键合并，值中的 ${VAR} 取自环境变量
  3. 下方各配置段的默认值
根目录存在 .env 时先加载到环境变量。
"""

import os
import re
from functools import lru_cache
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))
CONFIG_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../config"))
ENV_VAR_PATTERN = re.compile(r"\$\{([^{}]+)\}")

if os.path.exists(os.path.join(ROOT_DIR, ".env")):
    load_dotenv(os.path.join(ROOT_DIR, ".env"), override=True)


# ======================================================
# 🧩 配置段
# ======================================================
class AppConfig(BaseModel):
    name: str = "Aries"
    version: str = "0.1.0"
    env: str = "dev"
    debug: bool = True
    log_level: str = "DEBUG"
    # None 表示只输出到控制台
    log_path: Optional[str] = "logs/aries_{time:YYYY-MM-DD}.log"
    host: str = "127.0.0.1"
    port: int = 8080


class DatabaseConfig(BaseModel):
    url: str = "sqlite+aiosqlite:///./aries.db"
    echo: bool = False


class RedisConfig(BaseModel):
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None
    # 完整连接串，优先于上面的分项
    redis_url: Optional[str] = None

    @property
    def url(self) -> str:
        if self.redis_url:
            return self.redis_url
        auth = f":{self.password}@" if self.password else ""
        return f"redis://{auth}{self.host}:{self.port}/{self.db}"


class CacheConfig(BaseModel):
    # memory | redis
    backend: str = "memory"


class AuthConfig(BaseModel):
    secret: str = "Aries-Core"
    # 秒
    token_expire_time: int = 86400
    verify_code_expire: int = 900
    # 重置密码成功后是否立即作废邮箱验证码
    invalidate_verify_code: bool = False


class CaptchaConfig(BaseModel):
    length: int = 4
    width: int = 240
    height: int = 80
    expire: int = 300
    case_sensitive: bool = False


class SmtpConfig(BaseModel):
    address: str = "smtp.qq.com"
    port: int = 465
    account: str = ""
    password: str = ""
    sender: str = "Aries"
    timeout: int = 15


# ======================================================
# 🧠 YAML 读取
# ======================================================
def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """递归合并，override 中的键覆盖 base"""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            value = deep_merge(merged[key], value)
        merged[key] = value
    return merged


def substitute_env_vars(value: Any) -> Any:
    """把 ${VAR} 替换为环境变量，未设置的占位符保持原样"""
    if isinstance(value, str):
        return ENV_VAR_PATTERN.sub(lambda m: os.getenv(m.group(1)) or m.group(0), value)
    if isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [substitute_env_vars(v) for v in value]
    return value


def load_yaml_config(env: str) -> Dict[str, Any]:
    path = os.path.join(CONFIG_DIR, f"{env}.yaml")
    if not os.path.isfile(path):
        logger.debug(f"⚠️ 未找到 {path}，使用默认配置")
        return {}

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    logger.debug(f"✅ 已读取配置文件 {path}")
    return substitute_env_vars(raw)


# ======================================================
# 🌍 Settings
# ======================================================
class Settings(BaseSettings):
    app: AppConfig = AppConfig()
    database: DatabaseConfig = DatabaseConfig()
    redis: RedisConfig = RedisConfig()
    cache: CacheConfig = CacheConfig()
    auth: AuthConfig = AuthConfig()
    captcha: CaptchaConfig = CaptchaConfig()
    smtp: SmtpConfig = SmtpConfig()

    model_config = SettingsConfigDict(env_file_encoding="utf-8", extra="ignore")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        overrides = load_yaml_config(os.getenv("APP_ENV", self.app.env or "dev"))

        for name in type(self).model_fields:
            section = overrides.get(name)
            if name in kwargs or not isinstance(section, dict):
                continue
            current = getattr(self, name)
            setattr(self, name, type(current)(**deep_merge(current.model_dump(), section)))

    def summary(self) -> None:
        """打印各配置段，密码与密钥不输出"""
        logger.info(f"🌍 [{self.app.env}] {self.app.name} 配置概览：")
        for name in type(self).model_fields:
            section = getattr(self, name).model_dump(exclude={"password", "secret", "redis_url"})
            logger.info(f"🧩 {name}: {section}")


@lru_cache()
def get_settings() -> Settings:
    """进程内唯一的配置实例"""
    settings = Settings()
    settings.summary()
    return settings
