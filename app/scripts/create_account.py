"""
Create an account from the command line (same rules as POST /register). Run from project root:
  python -m app.scripts.create_account EMAIL PASSWORD
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import AppError
from app.core.security import TokenSigner
from app.services.accounts import AccountStore
from app.services.credentials import CredentialService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an account that can log in and own users.")
    parser.add_argument("email", help="Account email (stored as given, case-sensitive)")
    parser.add_argument("password", help="Password")
    args = parser.parse_args(argv)

    settings = get_settings()
    db = SessionLocal()
    try:
        service = CredentialService(
            AccountStore(db),
            TokenSigner.from_settings(settings),
            bcrypt_rounds=settings.BCRYPT_ROUNDS,
        )
        try:
            result = service.register(args.email.strip(), args.password)
        except AppError as e:
            print(e.message, file=sys.stderr)
            return 1
        print(f"Created account '{result.email}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
