"""CRUD routes for User records, always scoped to the authenticated account."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_identity
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.errors import NotFoundError, ValidationError
from app.schemas.auth import Identity
from app.schemas.users import DeleteAllResponse, UserCreate, UserOut, UserUpdate
from app.services.records import RecordStore

router = APIRouter()

NOT_FOUND = {404: {"description": "User not found"}}


def get_record_store(
    db: Annotated[Session, Depends(get_db)],
    identity: Annotated[Identity, Depends(get_current_identity)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RecordStore:
    """Dependency: record store bound to the caller; resolving it authenticates the request."""
    return RecordStore(db, owner_id=identity.id, enforce_ownership=settings.ENFORCE_OWNERSHIP)


# Largest value the Integer primary key column can hold.
MAX_ID = 2**31 - 1


def _parse_id(raw: str) -> int:
    """Accept plain ASCII digits within the id column range; anything else is 400."""
    if not (raw.isascii() and raw.isdigit()) or len(raw) > 10 or int(raw) > MAX_ID:
        raise ValidationError("Invalid ID")
    return int(raw)


@router.get("", response_model=list[UserOut])
def list_users(
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> list[UserOut]:
    """List the caller's users."""
    return [UserOut.model_validate(u) for u in store.find_many()]


@router.get("/{user_id}", response_model=UserOut, responses=NOT_FOUND)
def get_user(
    user_id: str,
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> UserOut:
    """Get one of the caller's users by id."""
    record = store.find_first(_parse_id(user_id))
    if record is None:
        raise NotFoundError("User not found")
    return UserOut.model_validate(record)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> UserOut:
    """Create a user owned by the caller. adult is computed from age."""
    return UserOut.model_validate(store.create(body.model_dump()))


@router.put("/{user_id}", response_model=UserOut, responses=NOT_FOUND)
def update_user(
    user_id: str,
    body: UserUpdate,
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> UserOut:
    """Partially update one of the caller's users; adult is recomputed when age changes."""
    record = store.update(_parse_id(user_id), body.changes())
    if record is None:
        raise NotFoundError("User not found")
    return UserOut.model_validate(record)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
def delete_user(
    user_id: str,
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> Response:
    if not store.delete(_parse_id(user_id)):
        raise NotFoundError("User not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", response_model=DeleteAllResponse)
def delete_all_users(
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> DeleteAllResponse:
    """Delete all of the caller's users; other accounts' records are untouched."""
    return DeleteAllResponse(deleted=store.delete_many())
