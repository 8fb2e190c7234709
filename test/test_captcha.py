"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : test_captcha.py
# @Software: PyCharm
"""
import base64

import pytest

from app.aries.config import CaptchaConfig
from app.extension.cache.memory import MemoryCache
from app.extension.captcha.captcha import CaptchaService, render_captcha
from app.util.redis_key_schema import cache_key_captcha
from conftest import FakeTimer


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def cache(timer):
    return MemoryCache(timer=timer)


def test_render_png():
    png = render_captcha("ab3d", 240, 80)
    assert png[:8] == b"\x89PNG\r\n\x1a\n"


async def test_generate_stores_answer(cache):
    service = CaptchaService(cache, CaptchaConfig(length=5))
    captcha_id, url = await service.generate()

    answer = await cache.get(cache_key_captcha(captcha_id))
    assert len(answer) == 5
    prefix = "data:image/png;base64,"
    assert url.startswith(prefix)
    assert base64.b64decode(url[len(prefix):])[:4] == b"\x89PNG"


async def test_verify_is_case_insensitive_by_default(cache):
    service = CaptchaService(cache, CaptchaConfig())
    captcha_id, _ = await service.generate()
    answer = await cache.get(cache_key_captcha(captcha_id))
    assert await service.verify(captcha_id, answer.swapcase())


async def test_verify_case_sensitive(cache):
    await cache.set(cache_key_captcha("fixed"), "AbCd", 60)
    service = CaptchaService(cache, CaptchaConfig(case_sensitive=True))
    assert not await service.verify("fixed", "abcd")


async def test_verify_consumes_on_failure(cache):
    service = CaptchaService(cache, CaptchaConfig())
    captcha_id, _ = await service.generate()
    answer = await cache.get(cache_key_captcha(captcha_id))

    assert not await service.verify(captcha_id, "wrong")
    assert not await service.verify(captcha_id, answer)


async def test_verify_expired(cache, timer):
    service = CaptchaService(cache, CaptchaConfig(expire=60))
    captcha_id, _ = await service.generate()
    answer = await cache.get(cache_key_captcha(captcha_id))
    timer.advance(61)
    assert not await service.verify(captcha_id, answer)


async def test_verify_unknown_id(cache):
    service = CaptchaService(cache, CaptchaConfig())
    assert not await service.verify("", "abcd")
    assert not await service.verify("missing", "abcd")
