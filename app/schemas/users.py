"""Pydantic schemas for the User resource."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

Role = Literal["admin", "user"]

AGE_MIN = 0
AGE_MAX = 125


class UserCreate(BaseModel):
    """Body for POST /users. adult is derived from age, so it is not accepted here."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, max_length=255, description="User's full name")
    email: EmailStr = Field(..., description="User's email address")
    age: int = Field(..., ge=AGE_MIN, le=AGE_MAX, description="User's age (0-125)")
    role: Role = Field(..., description="User's role (admin or user)")


class UserUpdate(BaseModel):
    """Body for PUT /users/{id}. Every field is optional; null means unchanged."""

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {"name": "John Doe", "email": "john@example.com", "age": 30, "role": "user"}
        },
    )

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    age: int | None = Field(default=None, ge=AGE_MIN, le=AGE_MAX)
    role: Role | None = None

    def changes(self) -> dict[str, object]:
        """Fields the client actually supplied with a non-null value."""
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}


class UserOut(BaseModel):
    """User record as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: int
    role: Role
    adult: bool = Field(description="Whether the user is an adult (18+)")
    owner_id: int = Field(description="Id of the account that owns this record")


class DeleteAllResponse(BaseModel):
    """Response for DELETE /users."""

    deleted: int = Field(description="Number of records removed")
