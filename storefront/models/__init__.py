from storefront.models.identity import Identity
from storefront.models.profile import Profile
from storefront.models.category import Category
from storefront.models.supermarket import Supermarket
from storefront.models.product import Product

__all__ = [
    "Identity",
    "Profile",
    "Category",
    "Supermarket",
    "Product",
]
