from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import Optional

from storefront.core.config import settings
from storefront.core.database import get_db
from storefront.core.security import create_session_tokens, decode_token
from storefront.models.identity import Identity
from storefront.schemas.auth import (
    LoginRequest,
    SignupRequest,
    TokenResponse,
    RefreshRequest,
)
from storefront.services.auth_service import AuthService
from storefront.utils.exceptions import AccessDeniedException

router = APIRouter(prefix="/auth", tags=["Authentication"])


def issue_session(response: Response, identity: Identity) -> dict:
    tokens = create_session_tokens(identity.id)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=tokens["access_token"],
        httponly=True,
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
    return tokens


def login_with_role(
    request: LoginRequest,
    response: Response,
    db: Session,
    role: Optional[str] = None,
) -> dict:
    service = AuthService(db)
    identity = service.authenticate(request.email, request.password)

    if not identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
        )

    if role is not None and service.get_role(identity) != role:
        raise AccessDeniedException(f"Access denied: not a {role} account")

    return issue_session(response, identity)


@router.post(
    "/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED
)
def signup(request: SignupRequest, response: Response, db: Session = Depends(get_db)):
    identity, _ = AuthService(db).sign_up(request.email, request.password, request.name)

    return issue_session(response, identity)


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, response: Response, db: Session = Depends(get_db)):
    return login_with_role(request, response, db)


@router.post("/refresh", response_model=TokenResponse)
def refresh_token(
    request: RefreshRequest, response: Response, db: Session = Depends(get_db)
):
    payload = decode_token(request.refresh_token)

    if payload.get("type") != "refresh":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type",
        )

    identity_id = payload.get("sub")
    identity = AuthService(db).get_identity(str(identity_id)) if identity_id else None
    if not identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    return issue_session(response, identity)


@router.post("/logout", status_code=204)
def logout(response: Response):
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return None
