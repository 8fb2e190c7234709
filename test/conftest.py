"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : conftest.py
# @Software: PyCharm
"""
import asyncio

import pytest
from fastapi.testclient import TestClient

from app import create_app
from app.aries.config import (
    Settings,
    AppConfig,
    DatabaseConfig,
    RedisConfig,
    CacheConfig,
    AuthConfig,
    CaptchaConfig,
    SmtpConfig,
)
from app.aries.context import build_context
from app.extension.cache.memory import MemoryCache
from app.extension.mail.smtp_mailer import MailDeliveryError
from app.util.redis_key_schema import cache_key_captcha

API = "/api/v1"


class FakeTimer:
    """可手动拨动的时钟，用于验证 TTL"""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeMailer:
    """记录发送内容，不连接真实 SMTP"""

    def __init__(self):
        self.sent = []
        self.fail = False

    async def send(self, *, smtp, to, subject, html, sender=None):
        if self.fail:
            raise MailDeliveryError("connection refused")
        self.sent.append({"smtp": smtp, "to": to, "subject": subject, "html": html, "sender": sender})


def make_settings(db_path, **auth) -> Settings:
    return Settings(
        app=AppConfig(debug=False, log_level="WARNING", log_path=None),
        database=DatabaseConfig(url=f"sqlite+aiosqlite:///{db_path}"),
        redis=RedisConfig(),
        cache=CacheConfig(backend="memory"),
        auth=AuthConfig(secret="aries-test-secret", **auth),
        captcha=CaptchaConfig(),
        smtp=SmtpConfig(address="smtp.example.com", port=465, account="noreply@example.com", password="x"),
    )


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path / "aries.db")


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def cache(timer):
    return MemoryCache(timer=timer)


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def ctx(settings, cache, mailer):
    return build_context(settings, cache=cache, mailer=mailer)


@pytest.fixture
def client(settings, ctx):
    app = create_app(settings, ctx=ctx)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register_user(client):
    def _register(username="alice", pwd="Secret123!", email="a@x.com", site_name="Blog",
                  site_url="https://blog.example.com"):
        return client.post(f"{API}/auth/register", json={
            "username": username,
            "pwd": pwd,
            "email": email,
            "site_name": site_name,
            "site_url": site_url,
        }).json()
    return _register


@pytest.fixture
def issue_captcha(client, cache):
    """领取验证码，并从缓存中读出答案"""
    def _issue():
        data = client.get(f"{API}/auth/captcha").json()["data"]
        answer = asyncio.run(cache.get(cache_key_captcha(data["captcha_id"])))
        return data["captcha_id"], answer
    return _issue


@pytest.fixture
def login(client, issue_captcha):
    def _login(username="alice", pwd="Secret123!"):
        captcha_id, answer = issue_captcha()
        return client.post(f"{API}/auth/login", json={
            "username": username,
            "pwd": pwd,
            "captcha_id": captcha_id,
            "captcha_val": answer,
        }).json()
    return _login


@pytest.fixture
def auth_client(client, register_user, login):
    """已登录的客户端"""
    assert register_user()["code"] == 100
    token = login()["data"]["token"]
    client.headers.update({"Authorization": f"Bearer {token}"})
    return client
