from sqlalchemy.orm import Session
from typing import Optional, Dict, Any, Tuple
from datetime import datetime
import logging

from storefront.middleware.transaction_handler import transactional
from storefront.models.identity import Identity
from storefront.models.profile import Profile, ROLE_SHOPPER
from storefront.core.security import get_password_hash, verify_password
from storefront.utils.exceptions import IdentityCreationError

logger = logging.getLogger(__name__)


class AuthService:
    """Identity provisioning and credential checks"""

    def __init__(self, db: Session):
        self.db = db

    def get_identity(self, identity_id: str) -> Optional[Identity]:
        return self.db.query(Identity).filter(Identity.id == identity_id).first()

    def get_identity_by_email(self, email: str) -> Optional[Identity]:
        return self.db.query(Identity).filter(Identity.email == email.lower()).first()

    def create_identity(
        self,
        email: str,
        password: str,
        email_confirm: bool = False,
        user_metadata: Optional[Dict[str, Any]] = None,
    ) -> Identity:
        """Adds an identity to the session; the caller owns the commit."""
        email = email.lower()
        if self.get_identity_by_email(email):
            raise IdentityCreationError(
                "A user with this email address has already been registered"
            )

        identity = Identity(
            email=email,
            password_hash=get_password_hash(password),
            email_confirmed_at=datetime.utcnow() if email_confirm else None,
            user_metadata=user_metadata or {},
        )
        self.db.add(identity)
        self.db.flush()

        logger.info(f"Identity created: {identity.id} - {identity.email}")
        return identity

    @transactional
    def sign_up(self, email: str, password: str, full_name: str) -> Tuple[Identity, Profile]:
        identity = self.create_identity(
            email, password, user_metadata={"full_name": full_name}
        )
        profile = Profile(
            id=identity.id,
            full_name=full_name,
            email=identity.email,
            role=ROLE_SHOPPER,
        )
        self.db.add(profile)
        self.db.flush()
        return identity, profile

    def authenticate(self, email: str, password: str) -> Optional[Identity]:
        identity = self.get_identity_by_email(email)
        if not identity or not verify_password(password, identity.password_hash):
            logger.info(f"Failed sign-in attempt for {email}")
            return None
        return identity

    def get_role(self, identity: Identity) -> Optional[str]:
        profile = self.db.query(Profile).filter(Profile.id == identity.id).first()
        return profile.role if profile else None
