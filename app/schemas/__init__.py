"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CredentialsRequest,
    Identity,
    RegisterResponse,
    TokenResponse,
)
from app.schemas.health import GreetingResponse, HealthResponse
from app.schemas.users import DeleteAllResponse, UserCreate, UserOut, UserUpdate

__all__ = [
    "CredentialsRequest",
    "DeleteAllResponse",
    "GreetingResponse",
    "HealthResponse",
    "Identity",
    "RegisterResponse",
    "TokenResponse",
    "UserCreate",
    "UserOut",
    "UserUpdate",
]
