"""pytest configuration and fixtures"""

import os
import tempfile

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("MEDIA_ROOT", tempfile.mkdtemp(prefix="storefront-media-"))

import io
import pytest
from datetime import datetime, timedelta
from fastapi.testclient import TestClient
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from storefront.core.database import Base, get_db
from storefront.core.dependencies import (
    get_cart_bus,
    get_local_storage,
    get_object_storage,
)
from storefront.core.security import get_password_hash, create_access_token
from storefront.main import app
from storefront.models.category import Category
from storefront.models.identity import Identity
from storefront.models.product import Product
from storefront.models.profile import (
    Profile,
    ROLE_ADMIN,
    ROLE_VENDOR,
    ROLE_SHOPPER,
)
from storefront.models.supermarket import Supermarket
from storefront.services.cart_service import CartEventBus
from storefront.services.local_storage import MemoryStorage
from storefront.services.object_storage import ObjectStorage

SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def cart_bus():
    return CartEventBus()


@pytest.fixture
def object_storage(tmp_path):
    return ObjectStorage(str(tmp_path / "media"), "/media")


@pytest.fixture(scope="function")
def client(db, storage, cart_bus, object_storage):
    """FastAPI test client bound to the test session and in-memory stores"""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_local_storage] = lambda: storage
    app.dependency_overrides[get_cart_bus] = lambda: cart_bus
    app.dependency_overrides[get_object_storage] = lambda: object_storage

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _make_account(db, email, role, full_name="Test User", password="testpass123"):
    identity = Identity(
        email=email,
        password_hash=get_password_hash(password),
        email_confirmed_at=datetime.utcnow(),
        user_metadata={"full_name": full_name},
    )
    db.add(identity)
    db.flush()
    db.add(Profile(id=identity.id, full_name=full_name, email=email, role=role))
    db.commit()
    db.refresh(identity)
    return identity


@pytest.fixture
def shopper(db):
    return _make_account(db, "shopper@example.com", ROLE_SHOPPER, "Sam Shopper")


@pytest.fixture
def vendor(db):
    return _make_account(db, "vendor@example.com", ROLE_VENDOR, "Val Vendor")


@pytest.fixture
def admin(db):
    return _make_account(db, "admin@example.com", ROLE_ADMIN, "Ada Admin")


def _headers(identity):
    token = create_access_token({"sub": identity.id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def shopper_headers(shopper):
    return _headers(shopper)


@pytest.fixture
def vendor_headers(vendor):
    return _headers(vendor)


@pytest.fixture
def admin_headers(admin):
    return _headers(admin)


@pytest.fixture
def categories(db):
    rows = [
        Category(id=1, name="Fruits", description="Fresh fruit", parent_id=None),
        Category(id=2, name="Breakfast", description="Morning staples", parent_id=None),
        Category(id=3, name="Citrus", parent_id=1),
        Category(id=4, name="Cereal", parent_id=2),
        Category(id=5, name="Lost", parent_id=99),
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture
def products(db, categories):
    now = datetime.utcnow()
    rows = [
        Product(
            id=1,
            name="Orange",
            price=2.5,
            image="../../assets/orange.png",
            quantity=40,
            categoryid=1,
            supermarketid=1,
            date_added=now - timedelta(days=3),
        ),
        Product(
            id=2,
            name="Apple",
            price=1.0,
            image="/apple.png",
            quantity=25,
            categoryid=1,
            supermarketid=1,
            date_added=now - timedelta(days=2),
        ),
        Product(
            id=3,
            name="Oat Flakes",
            price=4.2,
            image=None,
            quantity=10,
            categoryid=2,
            supermarketid=1,
            date_added=now - timedelta(days=1),
        ),
        Product(
            id=4,
            name="Lemon",
            price=0.8,
            quantity=60,
            categoryid=3,
            supermarketid=1,
            date_added=now,
        ),
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture
def store(db, vendor):
    supermarket = Supermarket(
        name="Green Grocer",
        address="12 Market Street",
        price="$$",
        delivery_time="30-45 min",
        delivery_fee=2.99,
        main_image="/stores/green.png",
        gallery_images=["/stores/green-1.png"],
        vendor_id=vendor.id,
    )
    db.add(supermarket)
    db.commit()
    db.refresh(supermarket)
    return supermarket


@pytest.fixture
def png_bytes():
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(0, 128, 0)).save(buffer, format="PNG")
    return buffer.getvalue()
