from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from contextlib import asynccontextmanager
from pathlib import Path
import logging

from storefront.core.config import settings
from storefront.core.database import engine, Base
from storefront.middleware.error_handler import (
    database_error_handler,
    storefront_error_handler,
    unhandled_error_handler,
)
from storefront.middleware.logging import configure_logging, RequestLoggingMiddleware
from storefront.middleware.route_guard import RouteGuardMiddleware
from storefront.api.v1 import api_router
from storefront.utils.exceptions import StorefrontError

import storefront.models  # noqa: F401  registers the tables on Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Starting storefront API...")

    Base.metadata.create_all(bind=engine)

    yield

    logger.info("Stopping storefront API...")


Path(settings.MEDIA_ROOT).mkdir(parents=True, exist_ok=True)

app = FastAPI(title=settings.APP_NAME, version=settings.VERSION, lifespan=lifespan)

app.add_middleware(
    RouteGuardMiddleware,
    protected_routes=settings.PROTECTED_ROUTES,
    cookie_name=settings.SESSION_COOKIE_NAME,
    login_path=settings.VENDOR_LOGIN_PATH,
)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

app.add_exception_handler(StorefrontError, storefront_error_handler)
app.add_exception_handler(SQLAlchemyError, database_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(api_router, prefix="/api/v1")
app.mount(settings.MEDIA_URL, StaticFiles(directory=settings.MEDIA_ROOT), name="media")


@app.get("/")
async def root():
    return {"message": settings.APP_NAME, "version": settings.VERSION, "docs": "/docs"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
