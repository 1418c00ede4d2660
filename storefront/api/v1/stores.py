from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from storefront.core.database import get_db
from storefront.schemas.supermarket import StoreResponse
from storefront.services.store_service import StoreService
from storefront.utils.exceptions import StoreNotFoundException

router = APIRouter(prefix="/stores", tags=["Stores"])


@router.get("", response_model=List[StoreResponse])
def list_stores(db: Session = Depends(get_db)):
    return StoreService(db).list_stores()


@router.get("/{store_id}", response_model=StoreResponse)
def get_store(store_id: int, db: Session = Depends(get_db)):
    store = StoreService(db).get_store(store_id)
    if not store:
        raise StoreNotFoundException()
    return store
