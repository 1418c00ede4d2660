from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from functools import lru_cache
from typing import Optional

from storefront.core.config import settings
from storefront.core.database import get_db
from storefront.core.security import decode_token
from storefront.models.identity import Identity
from storefront.models.profile import Profile
from storefront.services.cart_service import CartEventBus, CartStore, cart_key
from storefront.services.local_storage import LocalStorage, create_local_storage
from storefront.services.object_storage import ObjectStorage
from storefront.utils.exceptions import AccessDeniedException

security = HTTPBearer(auto_error=False)


def _extract_token(
    request: Request, credentials: Optional[HTTPAuthorizationCredentials]
) -> Optional[str]:
    if credentials:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def _identity_from_token(token: str, db: Session) -> Identity:
    payload = decode_token(token)
    if payload.get("type") != "access":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type",
        )

    identity_id = payload.get("sub")
    if not identity_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    identity = db.query(Identity).filter(Identity.id == str(identity_id)).first()
    if not identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return identity


async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> Identity:
    token = _extract_token(request, credentials)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return _identity_from_token(token, db)


async def get_current_identity_optional(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> Optional[Identity]:
    token = _extract_token(request, credentials)
    if not token:
        return None

    try:
        return _identity_from_token(token, db)
    except HTTPException:
        return None


def require_role(*roles: str):
    """Dependency factory admitting identities whose profile has one of ``roles``."""

    async def checker(
        identity: Identity = Depends(get_current_identity),
        db: Session = Depends(get_db),
    ) -> Identity:
        profile = db.query(Profile).filter(Profile.id == identity.id).first()
        if not profile or profile.role not in roles:
            raise AccessDeniedException(
                f"Access denied: requires role {' or '.join(roles)}"
            )
        return identity

    return checker


@lru_cache()
def get_local_storage() -> LocalStorage:
    return create_local_storage(settings.LOCAL_STORAGE_PATH)


@lru_cache()
def get_cart_bus() -> CartEventBus:
    return CartEventBus()


@lru_cache()
def get_object_storage() -> ObjectStorage:
    return ObjectStorage(settings.MEDIA_ROOT, settings.MEDIA_URL)


def get_cart(
    identity: Optional[Identity] = Depends(get_current_identity_optional),
    storage: LocalStorage = Depends(get_local_storage),
    bus: CartEventBus = Depends(get_cart_bus),
) -> CartStore:
    return CartStore(cart_key(identity.id if identity else None), storage, bus)
