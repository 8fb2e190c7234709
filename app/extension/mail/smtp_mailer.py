# -*- coding: utf-8 -*-
"""
SMTP 邮件发送（aiosmtplib）
465 端口走隐式 TLS，587 端口走 STARTTLS
"""
from email.message import EmailMessage
from email.utils import formataddr

import aiosmtplib
from loguru import logger

from app.aries.config import SmtpConfig


class MailDeliveryError(Exception):
    """邮件投递失败（连接、认证、收件人被拒等）"""


class SmtpMailer:

    @staticmethod
    def build_message(*, smtp: SmtpConfig, to: str, subject: str, html: str, sender: str = None) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = formataddr((sender or smtp.sender or smtp.account, smtp.account))
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content(html, subtype="html", charset="utf-8")
        return msg

    async def send(self, *, smtp: SmtpConfig, to: str, subject: str, html: str, sender: str = None) -> None:
        msg = self.build_message(smtp=smtp, to=to, subject=subject, html=html, sender=sender)
        try:
            await aiosmtplib.send(
                msg,
                hostname=smtp.address,
                port=smtp.port,
                username=smtp.account or None,
                password=smtp.password or None,
                use_tls=smtp.port == 465,
                start_tls=True if smtp.port == 587 else None,
                timeout=smtp.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            raise MailDeliveryError(str(e)) from e
        logger.info(f"📧 邮件已发送: to={to} subject={subject}")
