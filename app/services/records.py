"""
User record persistence scoped to the calling account.

Every query is filtered by owner_id when ownership is enforced, so a record
owned by someone else looks exactly like a missing one (None / False).
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from app.core.errors import StoreError
from app.models import User

logger = logging.getLogger(__name__)

ADULT_AGE = 18

# Columns clients may write; id, owner_id and adult are managed here.
WRITABLE_FIELDS = frozenset({"name", "email", "age", "role"})


def is_adult(age: int) -> bool:
    """True when age is 18 or over."""
    return age >= ADULT_AGE


def _with_derived_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    data = {k: v for k, v in fields.items() if k in WRITABLE_FIELDS}
    if data.get("age") is not None:
        data["adult"] = is_adult(data["age"])
    return data


class RecordStore:
    """
    find/create/update/delete on User records for one caller.

    Outcomes are a closed set: a value, None/False/0 for "nothing matched",
    or StoreError for any database failure.
    """

    def __init__(self, session: Session, owner_id: int, enforce_ownership: bool = True) -> None:
        self.session = session
        self.owner_id = owner_id
        self.enforce_ownership = enforce_ownership

    def _scoped(self) -> Query:
        query = self.session.query(User)
        if self.enforce_ownership:
            query = query.filter(User.owner_id == self.owner_id)
        return query

    def find_many(self) -> list[User]:
        try:
            return self._scoped().order_by(User.id).all()
        except SQLAlchemyError as e:
            raise StoreError("Failed to fetch users") from e

    def find_first(self, record_id: int) -> User | None:
        try:
            return self._scoped().filter(User.id == record_id).first()
        except SQLAlchemyError as e:
            raise StoreError("Failed to fetch user") from e

    def create(self, fields: Mapping[str, Any]) -> User:
        """Insert a record stamped with the caller as owner."""
        record = User(**_with_derived_fields(fields), owner_id=self.owner_id)
        try:
            self.session.add(record)
            self.session.commit()
            self.session.refresh(record)
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError("Failed to create user") from e
        return record

    def update(self, record_id: int, fields: Mapping[str, Any]) -> User | None:
        """Apply a partial update; adult follows age. None if no visible record matches."""
        record = self.find_first(record_id)
        if record is None:
            return None
        for key, value in _with_derived_fields(fields).items():
            setattr(record, key, value)
        try:
            self.session.commit()
            self.session.refresh(record)
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError("Failed to update user") from e
        return record

    def delete(self, record_id: int) -> bool:
        try:
            deleted = (
                self._scoped()
                .filter(User.id == record_id)
                .delete(synchronize_session=False)
            )
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError("Failed to delete user") from e
        return deleted > 0

    def delete_many(self) -> int:
        """Delete every visible record and return how many were removed."""
        try:
            deleted = self._scoped().delete(synchronize_session=False)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError("Failed to delete all users") from e
        if deleted > 0:
            logger.info("Deleted records: owner_id=%s, deleted=%s", self.owner_id, deleted)
        return deleted
