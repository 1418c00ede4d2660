"""Tests of product and store listings"""

from storefront.utils.validators import normalize_image_path


def test_featured_products_are_limited_to_configured_categories(client, products):
    response = client.get("/api/v1/products")
    assert response.status_code == 200

    names = {p["name"] for p in response.json()}
    assert names == {"Orange", "Apple", "Oat Flakes"}


def test_latest_products_are_newest_first(client, products):
    response = client.get("/api/v1/products/latest", params={"limit": 2})
    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Lemon", "Oat Flakes"]


def test_product_detail_includes_related_products(client, products):
    response = client.get("/api/v1/products/1")
    assert response.status_code == 200

    data = response.json()
    assert data["product"]["name"] == "Orange"
    assert [p["id"] for p in data["related"]] == [2]


def test_unknown_product_returns_404(client, products):
    response = client.get("/api/v1/products/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Product not found"


def test_list_stores(client, store):
    response = client.get("/api/v1/stores")
    assert response.status_code == 200

    data = response.json()
    assert len(data) == 1
    assert set(data[0].keys()) == {
        "id",
        "name",
        "address",
        "price",
        "delivery_time",
        "delivery_fee",
        "main_image",
        "gallery_images",
    }
    assert data[0]["gallery_images"] == ["/stores/green-1.png"]


def test_store_detail(client, store):
    assert client.get(f"/api/v1/stores/{store.id}").json()["name"] == "Green Grocer"
    assert client.get("/api/v1/stores/999").status_code == 404


def test_normalize_image_path():
    assert normalize_image_path("../../assets/orange.png") == "/orange.png"
    assert normalize_image_path("../assets/img/a.jpg") == "/img/a.jpg"
    assert normalize_image_path("/already/public.png") == "/already/public.png"
    assert normalize_image_path(None) == ""
