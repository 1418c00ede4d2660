from storefront.schemas.auth import (
    SignupRequest,
    LoginRequest,
    TokenResponse,
    RefreshRequest,
)
from storefront.schemas.profile import ProfileResponse
from storefront.schemas.vendor import (
    CreateVendorRequest,
    CreateVendorResponse,
    VendorResponse,
)
from storefront.schemas.product import (
    ProductResponse,
    ProductDetailResponse,
    InventoryProductResponse,
    ProductUpdate,
)
from storefront.schemas.category import (
    CategoryResponse,
    CategoryNode,
    CategoryDetailResponse,
)
from storefront.schemas.supermarket import StoreResponse, StoreCreate
from storefront.schemas.cart import (
    CartLineResponse,
    CartResponse,
    CartAddRequest,
    CartQuantityRequest,
    LocationRequest,
    LocationResponse,
)

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "TokenResponse",
    "RefreshRequest",
    "ProfileResponse",
    "CreateVendorRequest",
    "CreateVendorResponse",
    "VendorResponse",
    "ProductResponse",
    "ProductDetailResponse",
    "InventoryProductResponse",
    "ProductUpdate",
    "CategoryResponse",
    "CategoryNode",
    "CategoryDetailResponse",
    "StoreResponse",
    "StoreCreate",
    "CartLineResponse",
    "CartResponse",
    "CartAddRequest",
    "CartQuantityRequest",
    "LocationRequest",
    "LocationResponse",
]
