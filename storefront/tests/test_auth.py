"""Authentication tests"""

from storefront.core.config import settings
from storefront.models.profile import Profile


def test_signup_creates_shopper_profile(client, db):
    response = client.post(
        "/api/v1/auth/signup",
        json={"email": "new@example.com", "name": "New Shopper", "password": "securepass123"},
    )
    assert response.status_code == 201
    data = response.json()
    assert "access_token" in data
    assert "refresh_token" in data
    assert data["token_type"] == "bearer"

    profile = db.query(Profile).filter(Profile.email == "new@example.com").first()
    assert profile is not None
    assert profile.role == "shopper"
    assert profile.full_name == "New Shopper"


def test_signup_duplicate_email(client, shopper):
    response = client.post(
        "/api/v1/auth/signup",
        json={"email": shopper.email, "name": "Again", "password": "securepass123"},
    )
    assert response.status_code == 400
    assert "already been registered" in response.json()["detail"]


def test_login_success_sets_session_cookie(client, shopper):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "shopper@example.com", "password": "testpass123"},
    )
    assert response.status_code == 200
    assert settings.SESSION_COOKIE_NAME in response.cookies


def test_login_wrong_password(client, shopper):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "shopper@example.com", "password": "wrongpassword"},
    )
    assert response.status_code == 401


def test_refresh_token(client, shopper):
    tokens = client.post(
        "/api/v1/auth/login",
        json={"email": "shopper@example.com", "password": "testpass123"},
    ).json()

    response = client.post(
        "/api/v1/auth/refresh", json={"refresh_token": tokens["refresh_token"]}
    )
    assert response.status_code == 200

    response = client.post(
        "/api/v1/auth/refresh", json={"refresh_token": tokens["access_token"]}
    )
    assert response.status_code == 401


def test_vendor_login_requires_vendor_role(client, shopper, vendor):
    response = client.post(
        "/api/v1/vendor/login",
        json={"email": "shopper@example.com", "password": "testpass123"},
    )
    assert response.status_code == 403

    response = client.post(
        "/api/v1/vendor/login",
        json={"email": "vendor@example.com", "password": "testpass123"},
    )
    assert response.status_code == 200


def test_admin_login_requires_admin_role(client, vendor, admin):
    response = client.post(
        "/api/v1/admin/login",
        json={"email": "vendor@example.com", "password": "testpass123"},
    )
    assert response.status_code == 403

    response = client.post(
        "/api/v1/admin/login",
        json={"email": "admin@example.com", "password": "testpass123"},
    )
    assert response.status_code == 200


def test_profile_me(client, shopper_headers):
    response = client.get("/api/v1/profile/me", headers=shopper_headers)
    assert response.status_code == 200
    assert response.json()["full_name"] == "Sam Shopper"

    assert client.get("/api/v1/profile/me").status_code == 401


def test_profile_update_with_avatar(client, db, shopper, shopper_headers, png_bytes):
    response = client.put(
        "/api/v1/profile/me",
        headers=shopper_headers,
        data={"full_name": "Samantha"},
        files={"avatar": ("me.png", png_bytes, "image/png")},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["full_name"] == "Samantha"
    assert data["avatar_url"].startswith(f"/media/avatars/public/{shopper.id}-")

    db.refresh(shopper)
    assert shopper.user_metadata["full_name"] == "Samantha"


def test_profile_update_rejects_non_image(client, shopper_headers):
    response = client.put(
        "/api/v1/profile/me",
        headers=shopper_headers,
        files={"avatar": ("me.png", b"plain text", "image/png")},
    )
    assert response.status_code == 400
