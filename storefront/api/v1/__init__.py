"""
API v1 routes
"""

from fastapi import APIRouter
from storefront.api.v1 import (
    auth,
    profiles,
    categories,
    products,
    stores,
    cart,
    location,
    vendor,
    admin,
)

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(profiles.router)
api_router.include_router(categories.router)
api_router.include_router(products.router)
api_router.include_router(stores.router)
api_router.include_router(cart.router)
api_router.include_router(location.router)
api_router.include_router(vendor.router)
api_router.include_router(admin.router)

__all__ = ["api_router"]
