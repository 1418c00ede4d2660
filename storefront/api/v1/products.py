from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from storefront.core.config import settings
from storefront.core.database import get_db
from storefront.schemas.product import ProductResponse, ProductDetailResponse
from storefront.services.catalog_service import CatalogService
from storefront.utils.exceptions import ProductNotFoundException

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=List[ProductResponse])
def list_featured_products(db: Session = Depends(get_db)):
    return CatalogService(db).list_featured(settings.FEATURED_CATEGORY_IDS)


@router.get("/latest", response_model=List[ProductResponse])
def list_latest_products(
    db: Session = Depends(get_db),
    limit: Optional[int] = Query(None, ge=1, le=500),
):
    return CatalogService(db).list_latest(limit)


@router.get("/{product_id}", response_model=ProductDetailResponse)
def get_product(product_id: int, db: Session = Depends(get_db)):
    service = CatalogService(db)
    product = service.get_product(product_id)
    if not product:
        raise ProductNotFoundException()

    return {
        "product": product,
        "related": service.list_related(product, settings.RELATED_PRODUCTS_LIMIT),
    }
