"""Register/login routes and the auth dependencies (get_current_identity)."""

from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.security import TokenSigner
from app.schemas.auth import CredentialsRequest, Identity, RegisterResponse, TokenResponse
from app.services.access_guard import AccessGuard
from app.services.accounts import AccountStore
from app.services.credentials import CredentialService

router = APIRouter()
# Only used so OpenAPI documents the bearer scheme; AccessGuard parses the header itself.
security = HTTPBearer(auto_error=False)


@lru_cache
def get_token_signer() -> TokenSigner:
    """Signer built once from settings; override in tests to use another secret."""
    return TokenSigner.from_settings(get_settings())


def get_access_guard(
    signer: Annotated[TokenSigner, Depends(get_token_signer)],
) -> AccessGuard:
    return AccessGuard(signer)


def get_credential_service(
    db: Annotated[Session, Depends(get_db)],
    signer: Annotated[TokenSigner, Depends(get_token_signer)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CredentialService:
    return CredentialService(AccountStore(db), signer, bcrypt_rounds=settings.BCRYPT_ROUNDS)


def get_current_identity(
    request: Request,
    _credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
) -> Identity:
    """Dependency: require a valid Bearer JWT and return the caller. 401 if missing, 403 if invalid."""
    return guard.authenticate(request.headers.get("Authorization"))


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Missing fields or email already exists"}},
)
def register(
    body: CredentialsRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> RegisterResponse:
    """Register a new account with email and password."""
    return service.register(body.email, body.password)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={
        400: {"description": "Missing fields"},
        401: {"description": "Invalid credentials"},
    },
)
def login(
    body: CredentialsRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    return TokenResponse(token=service.login(body.email, body.password))
