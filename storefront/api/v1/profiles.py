from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session
from typing import Optional

from storefront.core.database import get_db
from storefront.core.dependencies import get_current_identity, get_object_storage
from storefront.models.identity import Identity
from storefront.schemas.profile import ProfileResponse
from storefront.services.object_storage import ObjectStorage
from storefront.services.profile_service import ProfileService
from storefront.utils.exceptions import ProfileNotFoundException

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("/me", response_model=ProfileResponse)
def get_my_profile(
    current_identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    profile = ProfileService(db).get_profile(current_identity.id)
    if not profile:
        raise ProfileNotFoundException()
    return profile


@router.put("/me", response_model=ProfileResponse)
async def update_my_profile(
    full_name: Optional[str] = Form(None, max_length=100),
    avatar: Optional[UploadFile] = File(None),
    current_identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
    object_storage: ObjectStorage = Depends(get_object_storage),
):
    service = ProfileService(db, object_storage)

    avatar_url = None
    if avatar is not None and avatar.filename:
        contents = await avatar.read()
        try:
            avatar_url = service.upload_avatar(current_identity, contents, avatar.filename)
        except (ValueError, OSError) as e:
            raise HTTPException(status_code=400, detail=f"Avatar upload failed: {e}")

    return service.update_profile(
        current_identity,
        full_name=full_name.strip() if full_name else None,
        avatar_url=avatar_url,
    )
