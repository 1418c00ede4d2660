from pydantic import validate_email
from pydantic_core import PydanticCustomError
from sqlalchemy.orm import Session
from typing import Optional, List, Dict, Any
from datetime import datetime
import logging
import secrets
import string
import time

from storefront.core.config import settings
from storefront.middleware.transaction_handler import transactional
from storefront.models.profile import Profile, ROLE_VENDOR, ROLE_DISABLED_VENDOR
from storefront.services.auth_service import AuthService
from storefront.services.object_storage import ObjectStorage
from storefront.utils.exceptions import IdentityCreationError, InvalidRequestError
from storefront.utils.images import decode_base64_image, ensure_image
from storefront.utils.validators import storage_safe_name

logger = logging.getLogger(__name__)

PASSWORD_ALPHABET = string.ascii_lowercase + string.digits
PASSWORD_SUFFIX = "A1!aB2@"


def generate_vendor_password(length: int = 12) -> str:
    """Random lowercase alphanumerics plus a fixed suffix covering the
    upper-case, digit and symbol classes."""
    body = "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))
    return body + PASSWORD_SUFFIX


def normalize_vendor_email(email: str) -> str:
    try:
        _, normalized = validate_email(email)
    except PydanticCustomError:
        raise InvalidRequestError(f"Invalid email address: {email}")
    return normalized


class VendorService:
    """
    Vendor accounts administered from the back office.

    Provisioning creates a confirmed identity with a generated password,
    optionally stores an avatar, and upserts a ``vendor`` profile. The
    password is only ever returned to the caller, never stored in clear.
    """

    def __init__(self, db: Session, object_storage: ObjectStorage):
        self.db = db
        self.object_storage = object_storage
        self.auth = AuthService(db)

    def _upload_avatar(self, email: str, avatar_base64: str) -> Optional[str]:
        # A failed upload leaves the vendor without an avatar.
        try:
            contents = decode_base64_image(avatar_base64)
            ensure_image(contents)
            path = f"avatars/{storage_safe_name(email)}_{int(time.time() * 1000)}.png"
            self.object_storage.upload(
                settings.AVATAR_BUCKET, path, contents, content_type="image/png"
            )
        except (ValueError, OSError) as e:
            logger.warning(f"Avatar upload failed for {email}: {e}")
            return None
        return self.object_storage.get_public_url(settings.AVATAR_BUCKET, path)

    @transactional
    def create_vendor(
        self, name: str, email: str, avatar_base64: Optional[str] = None
    ) -> Dict[str, Any]:
        name = (name or "").strip()
        email = (email or "").strip()
        if not name or not email:
            raise InvalidRequestError("Name and email are required.")

        email = normalize_vendor_email(email)
        if self.auth.get_identity_by_email(email):
            raise IdentityCreationError(
                "A user with this email address has already been registered"
            )

        avatar_url = None
        if avatar_base64:
            avatar_url = self._upload_avatar(email, avatar_base64)

        password = generate_vendor_password()
        identity = self.auth.create_identity(
            email,
            password,
            email_confirm=True,
            user_metadata={"full_name": name, "avatar_url": avatar_url},
        )

        profile = self.db.query(Profile).filter(Profile.id == identity.id).first()
        if profile is None:
            profile = Profile(id=identity.id)
            self.db.add(profile)
        profile.full_name = name
        profile.avatar_url = avatar_url
        profile.role = ROLE_VENDOR
        profile.email = identity.email
        profile.updated_at = datetime.utcnow()
        self.db.flush()

        logger.info(f"Vendor provisioned: {identity.id} - {identity.email}")
        return {"success": True, "password": password, "profile": profile}

    def list_vendors(self) -> List[Profile]:
        return (
            self.db.query(Profile)
            .filter(Profile.role == ROLE_VENDOR)
            .order_by(Profile.email)
            .all()
        )

    @transactional
    def disable_vendor(self, profile_id: str) -> Optional[Profile]:
        profile = (
            self.db.query(Profile)
            .filter(Profile.id == profile_id, Profile.role == ROLE_VENDOR)
            .first()
        )
        if profile is None:
            return None

        profile.role = ROLE_DISABLED_VENDOR
        self.db.flush()
        logger.info(f"Vendor disabled: {profile.id}")
        return profile
