from pydantic_settings import BaseSettings
from typing import Optional, List


class Settings(BaseSettings):
    APP_NAME: str = "Grocery Storefront API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite:///./storefront.db"

    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    SESSION_COOKIE_NAME: str = "sb-access-token"
    PROTECTED_ROUTES: List[str] = [
        "/api/v1/vendor/dashboard",
        "/api/v1/vendor/add-inventory",
        "/api/v1/vendor/edit-inventory",
        "/api/v1/vendor/create-store",
    ]
    VENDOR_LOGIN_PATH: str = "/api/v1/vendor/login"

    FEATURED_CATEGORY_IDS: List[int] = [1, 2]
    RELATED_PRODUCTS_LIMIT: int = 10

    LOCAL_STORAGE_PATH: Optional[str] = None

    MEDIA_ROOT: str = "./media"
    MEDIA_URL: str = "/media"
    AVATAR_BUCKET: str = "avatars"
    IMAGE_BUCKET: str = "images"

    ALLOWED_ORIGINS: List[str] = ["http://localhost", "http://localhost:3000"]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
