"""Tests of the category hierarchy"""

from storefront.services.category_service import build_category_tree


def test_orphan_category_is_dropped():
    rows = [
        {"id": 1, "name": "Root", "parent_id": None},
        {"id": 2, "name": "Child", "parent_id": 1},
        {"id": 3, "name": "Orphan", "parent_id": 99},
    ]

    tree = build_category_tree(rows)

    assert [node["id"] for node in tree] == [1]
    assert [child["id"] for child in tree[0]["children"]] == [2]
    ids = {node["id"] for node in tree} | {c["id"] for c in tree[0]["children"]}
    assert 3 not in ids


def test_nested_levels_are_preserved():
    rows = [
        {"id": 10, "name": "Grandchild", "parent_id": 2},
        {"id": 2, "name": "Child", "parent_id": 1},
        {"id": 1, "name": "Root", "parent_id": None},
    ]

    tree = build_category_tree(rows)

    assert len(tree) == 1
    child = tree[0]["children"][0]
    assert child["id"] == 2
    assert child["children"][0]["id"] == 10


def test_roots_keep_input_order_and_fields():
    rows = [
        {"id": 5, "name": "B", "description": "b", "image": "/b.png", "parent_id": None},
        {"id": 4, "name": "A", "parent_id": None},
    ]

    tree = build_category_tree(rows)

    assert [node["id"] for node in tree] == [5, 4]
    assert tree[0]["image"] == "/b.png"
    assert tree[1]["description"] is None
    assert tree[1]["children"] == []


def test_empty_input():
    assert build_category_tree([]) == []


def test_list_categories_endpoint(client, categories):
    response = client.get("/api/v1/categories")
    assert response.status_code == 200

    data = response.json()
    assert [node["id"] for node in data] == [1, 2]
    assert data[0]["children"][0]["name"] == "Citrus"
    assert data[1]["children"][0]["name"] == "Cereal"


def test_category_detail_lists_products(client, products):
    response = client.get("/api/v1/categories/1")
    assert response.status_code == 200

    data = response.json()
    assert data["category"]["name"] == "Fruits"
    assert {p["name"] for p in data["products"]} == {"Orange", "Apple"}


def test_unknown_category_returns_404(client, categories):
    assert client.get("/api/v1/categories/404").status_code == 404
