from sqlalchemy.orm import Session
from typing import Optional, List
from datetime import datetime
import logging
import time

from storefront.core.config import settings
from storefront.middleware.transaction_handler import transactional
from storefront.models.product import Product
from storefront.services.object_storage import ObjectStorage
from storefront.utils.images import ensure_image
from storefront.utils.validators import file_extension

logger = logging.getLogger(__name__)


class InventoryService:
    """Vendor-side product management"""

    def __init__(self, db: Session, object_storage: Optional[ObjectStorage] = None):
        self.db = db
        self.object_storage = object_storage

    def list_products(self, ascending: bool = False) -> List[Product]:
        order = Product.date_added.asc() if ascending else Product.date_added.desc()
        return self.db.query(Product).order_by(order).all()

    def get_product(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def upload_image(self, contents: bytes, filename: Optional[str]) -> str:
        ensure_image(contents)
        ext = file_extension(filename)
        path = f"public/{int(time.time() * 1000)}.{ext}"
        self.object_storage.upload(
            settings.IMAGE_BUCKET, path, contents, content_type=f"image/{ext}"
        )
        return self.object_storage.get_public_url(settings.IMAGE_BUCKET, path)

    @transactional
    def add_product(
        self,
        name: str,
        price: float,
        quantity: int,
        categoryid: int,
        supermarketid: int,
        description: Optional[str] = None,
        image: Optional[str] = None,
    ) -> Product:
        product = Product(
            name=name,
            price=price,
            description=description,
            quantity=quantity,
            image=image,
            categoryid=categoryid,
            supermarketid=supermarketid,
            date_added=datetime.utcnow(),
        )
        self.db.add(product)
        self.db.flush()
        self.db.refresh(product)

        logger.info(f"Product added: {product.id} '{product.name}'")
        return product

    @transactional
    def update_product(
        self,
        product_id: int,
        name: Optional[str] = None,
        price: Optional[float] = None,
        quantity: Optional[int] = None,
    ) -> Optional[Product]:
        product = self.get_product(product_id)
        if not product:
            return None

        if name is not None:
            product.name = name
        if price is not None:
            product.price = price
        if quantity is not None:
            product.quantity = quantity

        self.db.flush()
        self.db.refresh(product)
        return product

    @transactional
    def delete_product(self, product_id: int) -> bool:
        product = self.get_product(product_id)
        if not product:
            return False

        self.db.delete(product)
        logger.info(f"Product deleted: {product_id}")
        return True
