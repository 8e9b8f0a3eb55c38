"""Bearer-token gate in front of every protected route."""

import logging

import jwt
from fastapi.security.utils import get_authorization_scheme_param

from app.core.errors import AuthError
from app.core.security import TokenSigner
from app.schemas.auth import Identity

logger = logging.getLogger(__name__)


class AccessGuard:
    """
    Turns an Authorization header into the caller's Identity.

    Stateless: only the token's signature and expiry are checked, the store
    is never consulted. Handlers must filter every record query by the
    returned Identity.id.
    """

    def __init__(self, signer: TokenSigner) -> None:
        self.signer = signer

    def authenticate(self, authorization: str | None) -> Identity:
        """
        Return the Identity encoded in a 'Bearer <token>' header.

        Raises AuthError NO_TOKEN (401) when the header is missing or not a
        bearer credential, and INVALID_TOKEN (403) when the token fails
        verification or carries an unusable payload.
        """
        scheme, token = get_authorization_scheme_param(authorization)
        if scheme.lower() != "bearer" or not token or " " in token:
            raise AuthError("No token provided", code="NO_TOKEN")

        try:
            payload = self.signer.verify(token)
        except jwt.PyJWTError as e:
            logger.warning("Rejected bearer token: %s", type(e).__name__)
            raise AuthError("Invalid token", code="INVALID_TOKEN") from e

        try:
            return Identity(id=int(payload["sub"]), email=str(payload["email"]))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Rejected bearer token: payload missing sub or email")
            raise AuthError("Invalid token", code="INVALID_TOKEN") from e
