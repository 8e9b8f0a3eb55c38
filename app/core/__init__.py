"""Core app configuration, database session, error types and security primitives."""

from app.core.config import Settings, get_settings, settings
from app.core.database import get_db
from app.core.errors import AppError, AuthError, ConflictError, NotFoundError, StoreError, ValidationError

__all__ = [
    "AppError",
    "AuthError",
    "ConflictError",
    "NotFoundError",
    "Settings",
    "StoreError",
    "ValidationError",
    "get_db",
    "get_settings",
    "settings",
]
