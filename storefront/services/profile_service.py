from sqlalchemy.orm import Session
from typing import Optional
import logging
import time

from storefront.core.config import settings
from storefront.middleware.transaction_handler import transactional
from storefront.models.identity import Identity
from storefront.models.profile import Profile, ROLE_SHOPPER
from storefront.services.object_storage import ObjectStorage
from storefront.utils.images import ensure_image
from storefront.utils.validators import file_extension

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, db: Session, object_storage: Optional[ObjectStorage] = None):
        self.db = db
        self.object_storage = object_storage

    def get_profile(self, profile_id: str) -> Optional[Profile]:
        return self.db.query(Profile).filter(Profile.id == profile_id).first()

    def upload_avatar(self, identity: Identity, contents: bytes, filename: str) -> str:
        """Store an avatar image and return its public url."""
        ensure_image(contents)
        ext = file_extension(filename)
        path = f"public/{identity.id}-{int(time.time() * 1000)}.{ext}"
        self.object_storage.upload(
            settings.AVATAR_BUCKET, path, contents, content_type=f"image/{ext}"
        )
        return self.object_storage.get_public_url(settings.AVATAR_BUCKET, path)

    @transactional
    def update_profile(
        self,
        identity: Identity,
        full_name: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> Profile:
        """Upsert the profile row and mirror the values into identity metadata."""
        profile = self.get_profile(identity.id)
        if profile is None:
            profile = Profile(id=identity.id, email=identity.email, role=ROLE_SHOPPER)
            self.db.add(profile)

        metadata = dict(identity.user_metadata or {})
        if full_name is not None:
            profile.full_name = full_name
            metadata["full_name"] = full_name
        if avatar_url is not None:
            profile.avatar_url = avatar_url
            metadata["avatar_url"] = avatar_url
        identity.user_metadata = metadata

        self.db.flush()
        self.db.refresh(profile)
        logger.info(f"Profile updated: {profile.id}")
        return profile
