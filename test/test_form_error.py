"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : test_form_error.py
# @Software: PyCharm
"""
import pytest
from pydantic import ValidationError

from app.aries.form import get_form_error
from app.api.v1.schema.auth import RegisterForm, ResetPwdForm
from app.api.v1.schema.sys_setting import EmailForm

REGISTER = {
    "username": "alice",
    "pwd": "Secret123!",
    "email": "a@x.com",
    "site_name": "Blog",
    "site_url": "https://blog.example.com",
}


def first_error(model, data) -> str:
    with pytest.raises(ValidationError) as e:
        model(**data)
    return get_form_error(e.value.errors(), model.labels())


@pytest.mark.parametrize("email", ["plain", "a@-x..com", "<a>@x.com", "a@@x.com"])
def test_invalid_email(email):
    assert first_error(RegisterForm, {**REGISTER, "email": email}) == "邮箱必须是一个有效的邮箱"


def test_email_lowercased():
    assert RegisterForm(**{**REGISTER, "email": "Alice@Blog.COM"}).email == "alice@blog.com"


def test_missing_field():
    data = dict(REGISTER)
    data.pop("username")
    assert first_error(RegisterForm, data) == "用户名为必填字段"


def test_blank_is_required():
    assert first_error(RegisterForm, {**REGISTER, "username": "   "}) == "用户名为必填字段"


def test_too_long():
    assert first_error(RegisterForm, {**REGISTER, "username": "a" * 25}) == "用户名长度不能超过24个字符"


def test_reset_code_too_long():
    msg = first_error(ResetPwdForm, {"email": "a@x.com", "verify_code": "1234567", "pwd": "Secret123!"})
    assert msg == "验证码长度不能超过6个字符"


def test_port_range():
    data = {
        "type_name": "邮件设置",
        "address": "smtp.aries.dev",
        "port": 70000,
        "account": "bot@aries.dev",
        "pwd": "x",
        "sender": "Aries",
    }
    assert first_error(EmailForm, data) == "端口必须小于或等于65535"
    assert first_error(EmailForm, {**data, "port": "abc"}) == "端口必须是一个整数"


def test_unlabelled_field_falls_back_to_name():
    errors = [{"type": "missing", "loc": ("query", "ids"), "msg": "Field required"}]
    assert get_form_error(errors) == "ids为必填字段"


def test_no_errors():
    assert get_form_error([]) == "请求数据有误"


def test_invalid_json_over_http(client):
    res = client.post(
        "/api/v1/auth/register",
        content="{bad json",
        headers={"Content-Type": "application/json"},
    ).json()
    assert res == {"code": 103, "msg": "请求数据不是合法的 JSON", "data": None}
