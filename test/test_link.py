"""
# @Time    : 2026/10/16
# @Author  : Aries
# @File    : test_link.py
# @Software: PyCharm
"""
from conftest import API


def add_link_category(client, name="朋友"):
    return client.post(f"{API}/categories/link", json={"name": name}).json()["data"]


def add_link(client, category_id=None, name="Aries", url="https://aries.example.com"):
    return client.post(f"{API}/links", json={
        "category_id": category_id,
        "name": name,
        "url": url,
        "desc": "a blog",
        "icon": "https://aries.example.com/favicon.ico",
    }).json()


def test_add_link_with_category(auth_client):
    category = add_link_category(auth_client)
    res = add_link(auth_client, category_id=category["id"])
    assert res["code"] == 100
    link = res["data"]
    assert link["category_id"] == category["id"]
    assert link["category"]["name"] == "朋友"


def test_add_link_rejects_article_category(auth_client):
    article = auth_client.post(f"{API}/categories/article", json={"name": "Python", "url": "python"}).json()["data"]
    res = add_link(auth_client, category_id=article["id"])
    assert res["code"] == 103
    assert res["msg"] == "友链分类不存在"


def test_edit_link(auth_client):
    link = add_link(auth_client)["data"]
    category = add_link_category(auth_client)
    res = auth_client.put(f"{API}/links", json={
        "id": link["id"],
        "category_id": category["id"],
        "name": "Aries Blog",
        "url": "https://aries.example.com",
        "icon": "https://aries.example.com/favicon.ico",
    }).json()
    assert res["code"] == 100
    assert res["data"]["name"] == "Aries Blog"
    assert res["data"]["category"]["id"] == category["id"]
    assert res["data"]["desc"] == ""


def test_edit_missing_link(auth_client):
    res = auth_client.put(f"{API}/links", json={
        "id": 42,
        "name": "x",
        "url": "https://x.example.com",
        "icon": "x",
    }).json()
    assert res["msg"] == "友链不存在"


def test_link_page_filters(auth_client):
    category = add_link_category(auth_client)
    add_link(auth_client, category_id=category["id"], name="Alpha", url="https://alpha.dev")
    add_link(auth_client, name="Beta", url="https://beta.dev")

    res = auth_client.get(f"{API}/links", params={"key": "alpha"}).json()
    assert [i["name"] for i in res["data"]["items"]] == ["Alpha"]

    res = auth_client.get(f"{API}/links", params={"category_id": category["id"]}).json()
    assert res["data"]["total"] == 1

    res = auth_client.get(f"{API}/links/all").json()
    assert [i["name"] for i in res["data"]] == ["Alpha", "Beta"]


def test_delete_link(auth_client):
    link = add_link(auth_client)["data"]
    assert auth_client.delete(f"{API}/links/{link['id']}").json()["code"] == 100

    res = auth_client.get(f"{API}/links/{link['id']}").json()
    assert res["code"] == 103
    assert res["msg"] == "友链不存在"

    res = auth_client.delete(f"{API}/links/{link['id']}").json()
    assert res["msg"] == "友链不存在"


def test_link_form_label(auth_client):
    res = auth_client.post(f"{API}/links", json={"name": "", "url": "x", "icon": "x"}).json()
    assert res["msg"] == "网站名称为必填字段"
