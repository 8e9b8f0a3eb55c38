"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for GET /health."""

    status: Literal["ok"] = "ok"
    environment: str = Field(description="App environment (dev or prod)")
    database: Literal["connected", "disconnected"]
    ownership_enforced: bool = Field(
        description="Whether user records are scoped to the authenticated account",
    )


class GreetingResponse(BaseModel):
    message: str
