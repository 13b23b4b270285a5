"""Unit tests for password hashing and JWT encode/decode."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from app.schemas.auth import Principal

from api_support import make_settings

PRINCIPAL = Principal(id=7, email="owner@example.com", role="manager", name="Owner")


class TestPasswordHashing(unittest.TestCase):
    def test_verify_accepts_original_password(self) -> None:
        hashed = hash_password("s3cret-pass", rounds=4)
        self.assertNotEqual(hashed, "s3cret-pass")
        self.assertTrue(verify_password("s3cret-pass", hashed))

    def test_verify_rejects_other_password(self) -> None:
        hashed = hash_password("s3cret-pass", rounds=4)
        self.assertFalse(verify_password("s3cret-pasS", hashed))

    def test_same_password_gets_different_salt(self) -> None:
        self.assertNotEqual(hash_password("same", rounds=4), hash_password("same", rounds=4))

    def test_only_first_72_bytes_are_significant(self) -> None:
        base = "a" * 72
        hashed = hash_password(base + "tail-one", rounds=4)
        self.assertTrue(verify_password(base + "tail-two", hashed))

    def test_malformed_hash_is_rejected_not_raised(self) -> None:
        self.assertFalse(verify_password("anything", "not-a-bcrypt-hash"))


class TestAccessToken(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = make_settings()

    def test_round_trip_returns_principal_claims(self) -> None:
        token = create_access_token(PRINCIPAL, self.settings)
        payload = decode_access_token(token, self.settings)
        self.assertEqual(payload["id"], 7)
        self.assertEqual(payload["email"], "owner@example.com")
        self.assertEqual(payload["role"], "manager")
        self.assertEqual(payload["name"], "Owner")
        self.assertEqual(Principal.model_validate(payload), PRINCIPAL)

    def test_expiry_is_issued_at_plus_configured_minutes(self) -> None:
        issued = datetime.now(UTC).replace(microsecond=0)
        payload = decode_access_token(
            create_access_token(PRINCIPAL, self.settings, now=issued), self.settings
        )
        self.assertEqual(payload["exp"] - payload["iat"], self.settings.JWT_EXPIRE_MINUTES * 60)

    def test_token_valid_just_before_expiry(self) -> None:
        issued = datetime.now(UTC) - timedelta(minutes=self.settings.JWT_EXPIRE_MINUTES - 1)
        token = create_access_token(PRINCIPAL, self.settings, now=issued)
        self.assertEqual(decode_access_token(token, self.settings)["id"], 7)

    def test_token_rejected_at_expiry(self) -> None:
        issued = datetime.now(UTC) - timedelta(minutes=self.settings.JWT_EXPIRE_MINUTES)
        token = create_access_token(PRINCIPAL, self.settings, now=issued)
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token, self.settings)

    def test_token_signed_with_other_secret_rejected(self) -> None:
        other = make_settings(JWT_SECRET="a-different-secret")
        token = create_access_token(PRINCIPAL, other)
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(token, self.settings)

    def test_token_without_exp_rejected(self) -> None:
        token = jwt.encode(
            PRINCIPAL.model_dump(),
            self.settings.JWT_SECRET.get_secret_value(),
            algorithm="HS256",
        )
        with self.assertRaises(jwt.MissingRequiredClaimError):
            decode_access_token(token, self.settings)


if __name__ == "__main__":
    unittest.main()
