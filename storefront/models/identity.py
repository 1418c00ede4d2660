from sqlalchemy import Column, String, JSON, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid

from storefront.core.database import Base


def _new_identity_id() -> str:
    return str(uuid.uuid4())


class Identity(Base):
    """Authentication identity; profiles share its id."""

    __tablename__ = "identities"

    id = Column(String(36), primary_key=True, default=_new_identity_id)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    email_confirmed_at = Column(DateTime, nullable=True)
    user_metadata = Column(JSON, default=dict)

    created_at = Column(DateTime, default=datetime.utcnow)

    profile = relationship(
        "Profile",
        back_populates="identity",
        uselist=False,
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Identity(id={self.id}, email={self.email})>"
