"""Tests for settings validation and the JWT secret fallback."""

import os
import unittest
from unittest.mock import patch

import pydantic

from app.core.config import DEV_JWT_SECRET, Settings


def build(**values) -> Settings:
    return Settings(_env_file=None, **values)


@patch.dict(os.environ, {}, clear=True)
class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = build()
        self.assertEqual(settings.APP_ENV, "dev")
        self.assertEqual(settings.PORT, 3001)
        self.assertEqual(settings.API_PREFIX, "/api")
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 7 * 24 * 60)
        self.assertEqual(settings.BCRYPT_ROUNDS, 10)
        self.assertFalse(settings.is_production)

    def test_dev_falls_back_to_development_secret(self) -> None:
        with self.assertLogs("app.core.config", level="WARNING"):
            settings = build(APP_ENV="dev")
        self.assertEqual(settings.JWT_SECRET.get_secret_value(), DEV_JWT_SECRET)

    def test_prod_requires_secret(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            build(APP_ENV="prod")
        with self.assertRaises(pydantic.ValidationError):
            build(APP_ENV="prod", JWT_SECRET="   ")

    def test_prod_with_secret(self) -> None:
        settings = build(APP_ENV="prod", JWT_SECRET="long-random-value")
        self.assertTrue(settings.is_production)
        self.assertEqual(settings.JWT_SECRET.get_secret_value(), "long-random-value")

    def test_reads_environment(self) -> None:
        with patch.dict(os.environ, {"PORT": "8080", "LOG_LEVEL": "debug"}):
            settings = build()
        self.assertEqual(settings.PORT, 8080)
        self.assertEqual(settings.LOG_LEVEL, "DEBUG")

    def test_rejects_out_of_range_values(self) -> None:
        bad = (
            {"DATABASE_URL": "postgresql://localhost/app"},
            {"DATABASE_URL": "  "},
            {"PORT": 0},
            {"BCRYPT_ROUNDS": 3},
            {"BCRYPT_ROUNDS": 17},
            {"JWT_EXPIRE_MINUTES": 0},
            {"PASSWORD_MIN_LEN": 0},
            {"LOG_LEVEL": "LOUD"},
            {"API_PREFIX": "api"},
            {"APP_ENV": "staging"},
        )
        for values in bad:
            with self.subTest(values=values):
                with self.assertRaises(pydantic.ValidationError):
                    build(**values)

    def test_api_prefix_trailing_slash_is_trimmed(self) -> None:
        self.assertEqual(build(API_PREFIX="/api/").API_PREFIX, "/api")


if __name__ == "__main__":
    unittest.main()
