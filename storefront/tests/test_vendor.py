"""Vendor back office tests"""

from storefront.models.product import Product
from storefront.models.supermarket import Supermarket


def test_protected_route_redirects_without_session(client):
    response = client.get("/api/v1/vendor/dashboard", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/api/v1/vendor/login?redirected=1"


def test_redirect_lands_on_login_page(client):
    response = client.get("/api/v1/vendor/dashboard")
    assert response.status_code == 200
    assert response.json()["redirected"] is True
    assert response.json()["login"] == "POST /api/v1/vendor/login"


def test_guarded_post_without_session_is_sent_to_login_page(client):
    response = client.post(
        "/api/v1/vendor/create-store",
        json={"name": "Corner Shop", "address": "1 Main Road"},
    )
    assert response.status_code == 200
    assert response.history[0].status_code == 303
    assert response.json()["message"] == "Vendor sign-in required"


def test_session_cookie_passes_guard(client, vendor, products):
    login = client.post(
        "/api/v1/vendor/login",
        json={"email": "vendor@example.com", "password": "testpass123"},
    )
    assert login.status_code == 200

    response = client.get("/api/v1/vendor/dashboard")
    assert response.status_code == 200


def test_shopper_cannot_use_back_office(client, shopper_headers, products):
    response = client.get("/api/v1/vendor/dashboard", headers=shopper_headers)
    assert response.status_code == 403


def test_dashboard_sorting_and_image_paths(client, vendor_headers, products):
    response = client.get(
        "/api/v1/vendor/dashboard", params={"sort": "asc"}, headers=vendor_headers
    )
    assert response.status_code == 200
    data = response.json()
    assert [p["name"] for p in data] == ["Orange", "Apple", "Oat Flakes", "Lemon"]
    assert data[0]["image"] == "/orange.png"

    response = client.get("/api/v1/vendor/dashboard", headers=vendor_headers)
    assert response.json()[0]["name"] == "Lemon"


def test_add_inventory_with_image(client, db, vendor_headers, categories, png_bytes):
    response = client.post(
        "/api/v1/vendor/add-inventory",
        headers=vendor_headers,
        data={
            "name": "Bananas",
            "price": "1.25",
            "quantity": "30",
            "categoryid": "1",
            "supermarketid": "1",
            "description": "Ripe",
        },
        files={"image": ("banana.png", png_bytes, "image/png")},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Bananas"
    assert data["image"].startswith("/media/images/public/")
    assert data["date_added"] is not None

    assert db.query(Product).filter(Product.name == "Bananas").count() == 1


def test_edit_and_delete_inventory(client, db, vendor_headers, products):
    response = client.put(
        "/api/v1/vendor/edit-inventory/2",
        headers=vendor_headers,
        json={"name": "Green Apple", "price": 1.1, "quantity": 12},
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Green Apple"

    response = client.delete("/api/v1/vendor/edit-inventory/2", headers=vendor_headers)
    assert response.status_code == 204
    assert db.query(Product).filter(Product.id == 2).first() is None

    response = client.delete("/api/v1/vendor/edit-inventory/2", headers=vendor_headers)
    assert response.status_code == 404


def test_create_store(client, db, vendor, vendor_headers):
    response = client.post(
        "/api/v1/vendor/create-store",
        headers=vendor_headers,
        json={
            "name": "Corner Shop",
            "address": "1 Main Road",
            "delivery_time": "20 min",
            "gallery_images": ["/a.png", "/b.png"],
        },
    )
    assert response.status_code == 201

    created = db.query(Supermarket).filter(Supermarket.name == "Corner Shop").first()
    assert created.vendor_id == vendor.id
    assert created.gallery_images == ["/a.png", "/b.png"]
