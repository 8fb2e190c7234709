"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : test_token.py
# @Software: PyCharm
"""
import pytest

from app.aries.aries_jwt import TokenIssuer
from app.aries.exception import UnAuthentication


def test_create_and_parse():
    issuer = TokenIssuer("secret", 3600)
    payload = issuer.parse_token(issuer.create_token("alice", "https://img/a.png"))
    assert payload["username"] == "alice"
    assert payload["user_img"] == "https://img/a.png"
    assert payload["exp"] - payload["iat"] == 3600


def test_expired_token():
    issuer = TokenIssuer("secret", -10)
    with pytest.raises(UnAuthentication) as e:
        issuer.parse_token(issuer.create_token("alice"))
    assert e.value.msg == "Token 已过期，请重新登录"
    assert e.value.code == 102


def test_wrong_secret():
    token = TokenIssuer("secret", 3600).create_token("alice")
    with pytest.raises(UnAuthentication) as e:
        TokenIssuer("other", 3600).parse_token(token)
    assert e.value.msg == "Token 无效"


def test_expired_token_over_http(client, register_user, settings, ctx):
    register_user()
    token = TokenIssuer(settings.auth.secret, -10).create_token("alice")
    res = client.get("/api/v1/links", headers={"Authorization": f"Bearer {token}"}).json()
    assert res["code"] == 102
    assert res["msg"] == "Token 已过期，请重新登录"


def test_token_for_unknown_user(client, ctx):
    token = ctx.tokens.create_token("ghost")
    res = client.get("/api/v1/links", headers={"Authorization": f"Bearer {token}"}).json()
    assert res["msg"] == "用户不存在或已被停用"
