from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Response, UploadFile
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from storefront.core.database import get_db
from storefront.core.dependencies import get_object_storage, require_role
from storefront.api.v1.auth import login_with_role
from storefront.models.identity import Identity
from storefront.models.profile import ROLE_VENDOR
from storefront.schemas.auth import LoginRequest, TokenResponse
from storefront.schemas.product import (
    InventoryProductResponse,
    ProductResponse,
    ProductUpdate,
)
from storefront.schemas.supermarket import StoreCreate, StoreResponse
from storefront.services.inventory_service import InventoryService
from storefront.services.object_storage import ObjectStorage
from storefront.services.store_service import StoreService
from storefront.utils.exceptions import ProductNotFoundException
from storefront.utils.validators import normalize_image_path

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vendor", tags=["Vendor"])

require_vendor = require_role(ROLE_VENDOR)


@router.post("/login", response_model=TokenResponse)
def vendor_login(
    request: LoginRequest, response: Response, db: Session = Depends(get_db)
):
    return login_with_role(request, response, db, role=ROLE_VENDOR)


@router.get("/login")
def vendor_login_page(redirected: bool = Query(False)):
    """Where the back-office guard sends requests that carry no session."""
    return {
        "message": "Vendor sign-in required",
        "redirected": redirected,
        "login": "POST /api/v1/vendor/login",
    }


@router.get("/dashboard", response_model=List[InventoryProductResponse])
def vendor_dashboard(
    sort: str = Query("desc", pattern="^(asc|desc)$"),
    current_vendor: Identity = Depends(require_vendor),
    db: Session = Depends(get_db),
):
    products = InventoryService(db).list_products(ascending=sort == "asc")
    return [
        {
            "id": p.id,
            "name": p.name,
            "price": p.price,
            "image": normalize_image_path(p.image),
            "quantity": p.quantity,
            "date_added": p.date_added,
        }
        for p in products
    ]


@router.post("/add-inventory", response_model=ProductResponse, status_code=201)
async def add_inventory(
    name: str = Form(..., min_length=1),
    price: float = Form(..., ge=0),
    quantity: int = Form(..., ge=0),
    categoryid: int = Form(1),
    supermarketid: int = Form(1),
    description: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    current_vendor: Identity = Depends(require_vendor),
    db: Session = Depends(get_db),
    object_storage: ObjectStorage = Depends(get_object_storage),
):
    service = InventoryService(db, object_storage)

    image_url = None
    if image is not None and image.filename:
        contents = await image.read()
        try:
            image_url = service.upload_image(contents, image.filename)
        except (ValueError, OSError) as e:
            raise HTTPException(status_code=400, detail=f"Image upload failed: {e}")

    return service.add_product(
        name=name.strip(),
        price=price,
        quantity=quantity,
        categoryid=categoryid,
        supermarketid=supermarketid,
        description=description,
        image=image_url,
    )


@router.put("/edit-inventory/{product_id}", response_model=ProductResponse)
def edit_inventory(
    product_id: int,
    request: ProductUpdate,
    current_vendor: Identity = Depends(require_vendor),
    db: Session = Depends(get_db),
):
    product = InventoryService(db).update_product(
        product_id, name=request.name, price=request.price, quantity=request.quantity
    )
    if not product:
        raise ProductNotFoundException()
    return product


@router.delete("/edit-inventory/{product_id}", status_code=204)
def delete_inventory(
    product_id: int,
    current_vendor: Identity = Depends(require_vendor),
    db: Session = Depends(get_db),
):
    if not InventoryService(db).delete_product(product_id):
        raise ProductNotFoundException()
    return None


@router.post("/create-store", response_model=StoreResponse, status_code=201)
def create_store(
    request: StoreCreate,
    current_vendor: Identity = Depends(require_vendor),
    db: Session = Depends(get_db),
):
    return StoreService(db).create_store(
        vendor_id=current_vendor.id,
        name=request.name,
        address=request.address,
        delivery_time=request.delivery_time,
        main_image=request.main_image,
        gallery_images=request.gallery_images,
    )
