# -*- coding: utf-8 -*-
"""
图形验证码
--------------------------------
✅ Pillow 绘制 PNG（干扰线 + 噪点 + 字符抖动）
✅ 答案写入 TTL 缓存，key 为随机 id
✅ 校验即消费，无论成功与否
"""
import base64
import io
import random
import secrets
import uuid
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from app.aries.config import CaptchaConfig
from app.extension.cache.base import BaseCache
from app.util.redis_key_schema import cache_key_captcha

# 去掉 0/O、1/I/l 等易混淆字符
CAPTCHA_CHARS = "23456789abcdefghjkmnpqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ"


def random_color(low: int = 0, high: int = 255) -> Tuple[int, int, int]:
    return random.randint(low, high), random.randint(low, high), random.randint(low, high)


def render_captcha(text: str, width: int, height: int) -> bytes:
    """绘制验证码图片，返回 PNG 字节"""
    image = Image.new("RGB", (width, height), random_color(225, 255))
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default(size=int(height * 0.6))

    # 干扰线
    for _ in range(5):
        start = (random.randint(0, width), random.randint(0, height))
        end = (random.randint(0, width), random.randint(0, height))
        draw.line([start, end], fill=random_color(120, 200), width=2)

    # 字符
    step = width // (len(text) + 1)
    for i, ch in enumerate(text):
        x = step * i + step // 2 + random.randint(-4, 4)
        y = random.randint(0, max(height // 5, 1))
        draw.text((x, y), ch, font=font, fill=random_color(10, 120))

    # 噪点
    for _ in range(width * height // 30):
        draw.point((random.randint(0, width - 1), random.randint(0, height - 1)), fill=random_color())

    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


class CaptchaService:
    def __init__(self, cache: BaseCache, config: CaptchaConfig):
        self.cache = cache
        self.config = config

    def _random_answer(self) -> str:
        return "".join(secrets.choice(CAPTCHA_CHARS) for _ in range(self.config.length))

    async def generate(self) -> Tuple[str, str]:
        """
        生成验证码
        :return: (captcha_id, data:image/png;base64,...)
        """
        answer = self._random_answer()
        png = render_captcha(answer, self.config.width, self.config.height)
        captcha_id = uuid.uuid4().hex
        await self.cache.set(cache_key_captcha(captcha_id), answer, self.config.expire)
        return captcha_id, "data:image/png;base64," + base64.b64encode(png).decode("ascii")

    async def verify(self, captcha_id: str, value: str) -> bool:
        """校验验证码，一次性消费"""
        if not captcha_id:
            return False
        answer = await self.cache.pop(cache_key_captcha(captcha_id))
        if not answer or not value:
            return False
        if not self.config.case_sensitive:
            answer, value = answer.lower(), value.lower()
        return secrets.compare_digest(answer.encode("utf-8"), value.encode("utf-8"))
