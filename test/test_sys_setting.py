"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : test_sys_setting.py
# @Software: PyCharm
"""
from conftest import API

SMTP_FORM = {
    "type_name": "邮件设置",
    "address": "smtp.aries.dev",
    "port": 587,
    "account": "bot@aries.dev",
    "pwd": "smtp-pwd",
    "sender": "Aries Bot",
}


def test_items_of_unknown_group(auth_client):
    res = auth_client.get(f"{API}/sys_setting/items", params={"name": "不存在"}).json()
    assert res == {"code": 100, "msg": "success", "data": {}}


def test_save_site_updates_registered_group(auth_client):
    res = auth_client.post(f"{API}/sys_setting/site", json={
        "type_name": "网站设置",
        "site_name": "New Blog",
        "site_url": "https://new.example.com",
        "site_desc": "desc",
    }).json()
    assert res["code"] == 100

    items = auth_client.get(f"{API}/sys_setting/items", params={"name": "网站设置"}).json()["data"]
    assert items["site_name"] == "New Blog"
    assert items["site_url"] == "https://new.example.com"
    assert items["site_desc"] == "desc"


def test_save_with_unknown_sys_id(auth_client):
    res = auth_client.post(f"{API}/sys_setting/site", json={
        "sys_id": 999,
        "type_name": "网站设置",
        "site_name": "x",
        "site_url": "x",
    }).json()
    assert res["code"] == 103
    assert res["msg"] == "设置不存在"


def test_save_smtp(auth_client):
    assert auth_client.post(f"{API}/sys_setting/smtp", json=SMTP_FORM).json()["code"] == 100
    items = auth_client.get(f"{API}/sys_setting/items", params={"name": "邮件设置"}).json()["data"]
    assert items["port"] == "587"
    assert items["account"] == "bot@aries.dev"


def test_save_smtp_invalid_account(auth_client):
    res = auth_client.post(f"{API}/sys_setting/smtp", json={**SMTP_FORM, "account": "bot"}).json()
    assert res["code"] == 103
    assert res["msg"] == "邮箱帐号必须是一个有效的邮箱"


def test_send_test_email_uses_file_config(auth_client, mailer, settings):
    res = auth_client.post(f"{API}/sys_setting/email/send", json={
        "sender": "Aries",
        "receive_email": "reader@x.com",
        "title": "hello",
        "content": "<p>hi</p>",
    }).json()
    assert res["code"] == 100
    assert mailer.sent[0]["smtp"] == settings.smtp
    assert mailer.sent[0]["to"] == "reader@x.com"
    assert "<p>hi</p>" in mailer.sent[0]["html"]


def test_forget_pwd_uses_saved_smtp(auth_client, mailer):
    auth_client.post(f"{API}/sys_setting/smtp", json=SMTP_FORM)
    auth_client.post(f"{API}/auth/pwd/forget", json={"email": "a@x.com"})

    smtp = mailer.sent[-1]["smtp"]
    assert smtp.address == "smtp.aries.dev"
    assert smtp.port == 587
    assert smtp.password == "smtp-pwd"
    assert smtp.sender == "Aries Bot"


def test_send_test_email_failure(auth_client, mailer):
    mailer.fail = True
    res = auth_client.post(f"{API}/sys_setting/email/send", json={
        "sender": "Aries",
        "receive_email": "reader@x.com",
        "title": "hello",
        "content": "hi",
    }).json()
    assert res["code"] == 104
    assert res["msg"] == "邮件发送失败，请检查 smtp 配置"
