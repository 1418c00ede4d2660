from storefront.core.config import settings
from storefront.core.database import Base, engine, SessionLocal, get_db
from storefront.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    create_refresh_token,
    create_session_tokens,
    decode_token,
)

__all__ = [
    "settings",
    "Base",
    "engine",
    "SessionLocal",
    "get_db",
    "get_password_hash",
    "verify_password",
    "create_access_token",
    "create_refresh_token",
    "create_session_tokens",
    "decode_token",
]
