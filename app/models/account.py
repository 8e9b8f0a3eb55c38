"""ORM model for credential identities (accounts that log in and own records)."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class Account(Base):
    """
    Email/password identity used for JWT authentication.

    Created on registration and never updated. email is unique and compared
    case-sensitively, exactly as stored.
    """

    __tablename__ = "auth_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    records = relationship(
        "User",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
