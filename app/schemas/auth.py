"""Request/response schemas for registration, login and the caller identity."""

from pydantic import BaseModel, ConfigDict, Field


class CredentialsRequest(BaseModel):
    """
    Email and password for register and login.

    Both are optional at the schema level so that a missing field is reported
    by the credential service as a 400 with a single message.
    """

    email: str | None = Field(default=None, max_length=255, description="Account email")
    password: str | None = Field(default=None, description="Password")


class RegisterResponse(BaseModel):
    """Returned after a successful registration."""

    message: str = Field(default="User registered")
    email: str


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")


class Identity(BaseModel):
    """Authenticated caller (account id and email) decoded from the bearer token."""

    model_config = ConfigDict(frozen=True)

    id: int
    email: str
