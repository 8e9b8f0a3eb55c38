"""Registration (hash-and-store) and login (verify-and-issue-token) for accounts."""

import logging

from app.core.errors import AuthError, ConflictError, ValidationError
from app.core.security import TokenSigner, hash_password, verify_password
from app.schemas.auth import RegisterResponse
from app.services.accounts import AccountStore

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password so neither is revealed.
INVALID_CREDENTIALS = "Invalid email or password"


def _require_credentials(email: str | None, password: str | None) -> tuple[str, str]:
    if not email or not password:
        raise ValidationError("Email and password are required")
    return email, password


class CredentialService:
    """Owns the email -> password hash mapping and issues tokens on successful login."""

    def __init__(self, accounts: AccountStore, signer: TokenSigner, bcrypt_rounds: int = 10) -> None:
        self.accounts = accounts
        self.signer = signer
        self.bcrypt_rounds = bcrypt_rounds

    def register(self, email: str | None, password: str | None) -> RegisterResponse:
        """
        Create an account for email with a salted bcrypt hash of password.

        Raises ValidationError if a field is missing and ConflictError if the
        email is taken, including when a concurrent registration wins the race
        between the pre-check and the insert.
        """
        email, password = _require_credentials(email, password)
        if self.accounts.find_by_email(email) is not None:
            raise ConflictError("Email already exists")
        account = self.accounts.create(email, hash_password(password, self.bcrypt_rounds))
        logger.info("Account registered: account_id=%s", account.id)
        return RegisterResponse(email=account.email)

    def login(self, email: str | None, password: str | None) -> str:
        """Verify credentials and return a signed access token."""
        email, password = _require_credentials(email, password)
        account = self.accounts.find_by_email(email)
        if account is None or not verify_password(password, account.password_hash):
            logger.info("Login rejected: invalid credentials")
            raise AuthError(INVALID_CREDENTIALS, code="INVALID_CREDENTIALS")
        logger.info("Login succeeded: account_id=%s", account.id)
        return self.signer.issue(account.id, account.email)
