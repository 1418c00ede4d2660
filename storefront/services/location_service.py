from typing import Optional
import logging

from storefront.services.local_storage import LocalStorage
from storefront.utils.exceptions import InvalidRequestError

logger = logging.getLogger(__name__)

LOCATION_KEY = "userLocation"


class LocationService:
    """Saved delivery location, one string shared by the whole storefront."""

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def get_location(self) -> Optional[str]:
        return self.storage.get_item(LOCATION_KEY)

    def save_location(self, location: str) -> str:
        location = location.strip()
        if not location:
            raise InvalidRequestError("Location cannot be empty")
        self.storage.set_item(LOCATION_KEY, location)
        logger.info(f"Delivery location saved: {location}")
        return location
