"""
Business logic services
"""

from storefront.services.auth_service import AuthService
from storefront.services.profile_service import ProfileService
from storefront.services.vendor_service import VendorService
from storefront.services.category_service import CategoryService, build_category_tree
from storefront.services.catalog_service import CatalogService
from storefront.services.store_service import StoreService
from storefront.services.inventory_service import InventoryService
from storefront.services.cart_service import CartStore, CartEventBus, CartLine, cart_key
from storefront.services.location_service import LocationService
from storefront.services.local_storage import LocalStorage, MemoryStorage, JsonFileStorage
from storefront.services.object_storage import ObjectStorage

__all__ = [
    "AuthService",
    "ProfileService",
    "VendorService",
    "CategoryService",
    "build_category_tree",
    "CatalogService",
    "StoreService",
    "InventoryService",
    "CartStore",
    "CartEventBus",
    "CartLine",
    "cart_key",
    "LocationService",
    "LocalStorage",
    "MemoryStorage",
    "JsonFileStorage",
    "ObjectStorage",
]
