from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional, Sequence
import logging

from storefront.models.product import Product

logger = logging.getLogger(__name__)


class CatalogService:
    """Read side of the product catalog"""

    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def list_featured(self, category_ids: Sequence[int]) -> List[Product]:
        return (
            self.db.query(Product)
            .filter(Product.categoryid.in_(list(category_ids)))
            .order_by(Product.id)
            .all()
        )

    def list_latest(self, limit: Optional[int] = None) -> List[Product]:
        query = self.db.query(Product).order_by(Product.date_added.desc())
        if limit:
            query = query.limit(limit)
        return query.all()

    def list_related(self, product: Product, limit: int) -> List[Product]:
        """Products of the same category; lookup errors yield an empty list."""
        if product.categoryid is None:
            return []
        try:
            return (
                self.db.query(Product)
                .filter(
                    Product.categoryid == product.categoryid,
                    Product.id != product.id,
                )
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Related products lookup failed for {product.id}: {e}")
            return []
