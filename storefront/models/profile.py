from sqlalchemy import Column, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime

from storefront.core.database import Base

ROLE_ADMIN = "admin"
ROLE_VENDOR = "vendor"
ROLE_DISABLED_VENDOR = "disabled_vendor"
ROLE_SHOPPER = "shopper"

ROLES = (ROLE_ADMIN, ROLE_VENDOR, ROLE_DISABLED_VENDOR, ROLE_SHOPPER)


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(
        String(36), ForeignKey("identities.id", ondelete="CASCADE"), primary_key=True
    )
    full_name = Column(String)
    avatar_url = Column(String, nullable=True)
    role = Column(String, nullable=False, default=ROLE_SHOPPER, index=True)
    email = Column(String, index=True)

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    identity = relationship("Identity", back_populates="profile")

    def __repr__(self):
        return f"<Profile(id={self.id}, email={self.email}, role={self.role})>"
