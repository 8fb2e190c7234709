# -*- coding: utf-8 -*-
"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : build_email_html.py
# @Software: PyCharm
"""
from html import escape


def build_forget_pwd_email(username: str, verify_code: str, expire_minutes: int = 15) -> str:
    """
    ✉️ 构建忘记密码验证码邮件 HTML 模板
    --------------------------------------------------
    :param username: 收件人用户名
    :param verify_code: 验证码
    :param expire_minutes: 有效期（分钟）
    :return: HTML 字符串
    """
    html = f"""\
<!DOCTYPE html>
<html lang="zh-CN">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <title>忘记密码验证</title>
  <style>
    body {{ background:#f4f4f4; font-family: Arial, Helvetica, sans-serif; margin:0; padding:0; color:#333; }}
    .wrap {{ max-width:600px; margin:36px auto; background:#ffffff; border-radius:8px; overflow:hidden; box-shadow:0 3px 10px rgba(0,0,0,0.06); }}
    .hdr {{ background:#2b7a9e; color:#fff; text-align:center; padding:22px 16px; font-size:20px; font-weight:600; }}
    .body {{ padding:20px 22px; line-height:1.6; font-size:15px; color:#333; }}
    .code {{ text-align:center; margin:22px 0; font-size:28px; font-weight:700; letter-spacing:6px; color:#11607f; }}
    .note {{ font-size:13px; color:#666; margin-top:8px; }}
    .footer {{ background:#fafafa; color:#777; font-size:12px; padding:14px 18px; text-align:center; }}
  </style>
</head>
<body>
  <div class="wrap" role="article" aria-roledescription="email">
    <div class="hdr">Aries</div>
    <div class="body">
      <p>您好，<strong>{escape(username)}</strong>：</p>

      <p>您正在进行找回密码操作，本次的验证码为：</p>

      <div class="code">{escape(verify_code)}</div>

      <p class="note">验证码 {expire_minutes} 分钟内有效，请勿泄露给他人。</p>
      <p class="note">如果这不是您本人的操作，请忽略本邮件。</p>
    </div>

    <div class="footer">
      此邮件由系统自动发送，请勿直接回复
    </div>
  </div>
</body>
</html>
"""
    return html


def build_test_email(content: str) -> str:
    """测试邮件：内容由管理员填写，原样作为 HTML 正文"""
    return f"""\
<!DOCTYPE html>
<html lang="zh-CN">
<head><meta charset="utf-8" /></head>
<body>
{content}
</body>
</html>
"""
