from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from storefront.core.database import get_db
from storefront.schemas.category import CategoryNode, CategoryDetailResponse
from storefront.services.category_service import CategoryService
from storefront.utils.exceptions import CategoryNotFoundException

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=List[CategoryNode])
def list_categories(db: Session = Depends(get_db)):
    """Root categories with their sub-categories nested under ``children``"""
    return CategoryService(db).get_hierarchy()


@router.get("/{category_id}", response_model=CategoryDetailResponse)
def get_category(category_id: int, db: Session = Depends(get_db)):
    service = CategoryService(db)
    category = service.get_category(category_id)
    if not category:
        raise CategoryNotFoundException()

    return {
        "category": category,
        "products": service.get_category_products(category_id),
    }
