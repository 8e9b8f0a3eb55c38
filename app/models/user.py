"""ORM model for the managed User resource (business record, not a login)."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class User(Base):
    """
    User record owned by exactly one Account.

    role: 'admin' or 'user'. adult is derived from age and never set by clients.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    role = Column(String(32), nullable=False, default="user")
    adult = Column(Boolean, nullable=False, default=False)
    owner_id = Column(
        Integer,
        ForeignKey("auth_users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    owner = relationship("Account", back_populates="records")
