from fastapi import APIRouter, Depends

from storefront.core.dependencies import get_local_storage
from storefront.schemas.cart import LocationRequest, LocationResponse
from storefront.services.local_storage import LocalStorage
from storefront.services.location_service import LocationService

router = APIRouter(prefix="/location", tags=["Location"])


@router.get("", response_model=LocationResponse)
def get_location(storage: LocalStorage = Depends(get_local_storage)):
    return {"location": LocationService(storage).get_location()}


@router.put("", response_model=LocationResponse)
def save_location(
    request: LocationRequest, storage: LocalStorage = Depends(get_local_storage)
):
    location = LocationService(storage).save_location(request.location)
    return {"location": location}
