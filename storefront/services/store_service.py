from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from storefront.middleware.transaction_handler import transactional
from storefront.models.supermarket import Supermarket

logger = logging.getLogger(__name__)


class StoreService:
    def __init__(self, db: Session):
        self.db = db

    def list_stores(self) -> List[Supermarket]:
        return self.db.query(Supermarket).order_by(Supermarket.id).all()

    def get_store(self, store_id: int) -> Optional[Supermarket]:
        return self.db.query(Supermarket).filter(Supermarket.id == store_id).first()

    @transactional
    def create_store(
        self,
        vendor_id: str,
        name: str,
        address: Optional[str] = None,
        delivery_time: Optional[str] = None,
        main_image: Optional[str] = None,
        gallery_images: Optional[List[str]] = None,
    ) -> Supermarket:
        store = Supermarket(
            name=name,
            address=address,
            delivery_time=delivery_time,
            main_image=main_image,
            gallery_images=gallery_images or [],
            vendor_id=vendor_id,
        )
        self.db.add(store)
        self.db.flush()
        self.db.refresh(store)

        logger.info(f"Store created: {store.id} '{store.name}' by vendor {vendor_id}")
        return store
