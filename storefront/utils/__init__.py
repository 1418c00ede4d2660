from storefront.utils.validators import (
    normalize_image_path,
    storage_safe_name,
    file_extension,
)
from storefront.utils.images import decode_base64_image, ensure_image
from storefront.utils.exceptions import (
    ProductNotFoundException,
    CategoryNotFoundException,
    StoreNotFoundException,
    ProfileNotFoundException,
    CartItemNotFoundException,
    AccessDeniedException,
    StorefrontError,
    InvalidRequestError,
    IdentityCreationError,
)

__all__ = [
    "normalize_image_path",
    "storage_safe_name",
    "file_extension",
    "decode_base64_image",
    "ensure_image",
    "ProductNotFoundException",
    "CategoryNotFoundException",
    "StoreNotFoundException",
    "ProfileNotFoundException",
    "CartItemNotFoundException",
    "AccessDeniedException",
    "StorefrontError",
    "InvalidRequestError",
    "IdentityCreationError",
]
