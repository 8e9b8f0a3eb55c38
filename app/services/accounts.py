"""Account persistence: lookup by email and creation with unique-email enforcement."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, StoreError
from app.models import Account


class AccountStore:
    """Accounts keyed by email. The database unique index is the authority on duplicates."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, email: str) -> Account | None:
        try:
            return self.session.query(Account).filter(Account.email == email).first()
        except SQLAlchemyError as e:
            raise StoreError("Failed to look up account") from e

    def create(self, email: str, password_hash: str) -> Account:
        """Insert a new account. Raises ConflictError if the email is already taken."""
        account = Account(email=email, password_hash=password_hash)
        try:
            self.session.add(account)
            self.session.commit()
            self.session.refresh(account)
        except IntegrityError as e:
            self.session.rollback()
            raise ConflictError("Email already exists") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError("Failed to create account") from e
        return account
