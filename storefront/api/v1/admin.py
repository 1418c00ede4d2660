from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from typing import List

from storefront.core.database import get_db
from storefront.core.dependencies import get_object_storage, require_role
from storefront.api.v1.auth import login_with_role
from storefront.models.identity import Identity
from storefront.models.profile import ROLE_ADMIN
from storefront.schemas.auth import LoginRequest, TokenResponse
from storefront.schemas.vendor import (
    CreateVendorRequest,
    CreateVendorResponse,
    VendorResponse,
)
from storefront.services.object_storage import ObjectStorage
from storefront.services.vendor_service import VendorService
from storefront.utils.exceptions import ProfileNotFoundException

router = APIRouter(prefix="/admin", tags=["Admin"])

require_admin = require_role(ROLE_ADMIN)


@router.post("/login", response_model=TokenResponse)
def admin_login(
    request: LoginRequest, response: Response, db: Session = Depends(get_db)
):
    return login_with_role(request, response, db, role=ROLE_ADMIN)


@router.get("/vendors", response_model=List[VendorResponse])
def list_vendors(
    current_admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db),
    object_storage: ObjectStorage = Depends(get_object_storage),
):
    return VendorService(db, object_storage).list_vendors()


@router.post("/vendors", response_model=CreateVendorResponse)
def add_vendor(
    request: CreateVendorRequest,
    current_admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db),
    object_storage: ObjectStorage = Depends(get_object_storage),
):
    """
    Provision a vendor account.

    The generated password is returned once in the response body so the
    admin can hand it to the vendor; it cannot be retrieved again.
    """
    result = VendorService(db, object_storage).create_vendor(
        request.name, request.email, request.avatar_base64
    )

    return {"success": result["success"], "password": result["password"]}


@router.post("/vendors/{profile_id}/disable", response_model=VendorResponse)
def disable_vendor(
    profile_id: str,
    current_admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db),
    object_storage: ObjectStorage = Depends(get_object_storage),
):
    profile = VendorService(db, object_storage).disable_vendor(profile_id)
    if not profile:
        raise ProfileNotFoundException()
    return profile
