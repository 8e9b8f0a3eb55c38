"""Unit tests for app.core.security: bcrypt hashing and TokenSigner."""

import unittest

import jwt

from app.core.config import Settings
from app.core.security import TokenSigner, hash_password, verify_password

SECRET = "unit-test-secret-with-enough-bytes-for-hs256"


class TestPasswordHashing(unittest.TestCase):
    """hash_password salts every hash; verify_password accepts only the hashed password."""

    def test_verify_matches_hashed_password(self) -> None:
        hashed = hash_password("pw123", rounds=4)
        self.assertTrue(verify_password("pw123", hashed))
        self.assertFalse(verify_password("pw124", hashed))

    def test_same_password_gets_different_salts(self) -> None:
        self.assertNotEqual(hash_password("pw123", rounds=4), hash_password("pw123", rounds=4))

    def test_hash_is_not_plaintext(self) -> None:
        self.assertNotIn("pw123", hash_password("pw123", rounds=4))

    def test_garbage_hash_is_a_mismatch_not_an_error(self) -> None:
        self.assertFalse(verify_password("pw123", "not-a-bcrypt-hash"))

    def test_passwords_beyond_72_bytes_are_truncated_consistently(self) -> None:
        long_pw = "x" * 100
        hashed = hash_password(long_pw, rounds=4)
        self.assertTrue(verify_password(long_pw, hashed))


class TestTokenSigner(unittest.TestCase):
    """TokenSigner binds account id and email and rejects foreign or expired tokens."""

    def test_issue_then_verify_round_trip(self) -> None:
        signer = TokenSigner(secret=SECRET)
        payload = signer.verify(signer.issue(7, "a@x.com"))
        self.assertEqual(payload["sub"], "7")
        self.assertEqual(payload["email"], "a@x.com")
        self.assertGreater(payload["exp"], payload["iat"])

    def test_expiry_follows_expire_minutes(self) -> None:
        signer = TokenSigner(secret=SECRET, expire_minutes=90)
        payload = signer.verify(signer.issue(1, "a@x.com"))
        self.assertEqual(payload["exp"] - payload["iat"], 90 * 60)

    def test_token_from_other_secret_is_rejected(self) -> None:
        token = TokenSigner(secret="another-secret-with-enough-bytes-too!").issue(1, "a@x.com")
        with self.assertRaises(jwt.InvalidSignatureError):
            TokenSigner(secret=SECRET).verify(token)

    def test_expired_token_is_rejected(self) -> None:
        token = TokenSigner(secret=SECRET, expire_minutes=-1).issue(1, "a@x.com")
        with self.assertRaises(jwt.ExpiredSignatureError):
            TokenSigner(secret=SECRET).verify(token)

    def test_from_settings_uses_configured_secret(self) -> None:
        settings = Settings(JWT_SECRET=SECRET, JWT_EXPIRE_MINUTES=15)
        signer = TokenSigner.from_settings(settings)
        self.assertEqual(signer.secret, SECRET)
        self.assertEqual(signer.expire_minutes, 15)
        self.assertEqual(signer.algorithm, "HS256")


if __name__ == "__main__":
    unittest.main()
