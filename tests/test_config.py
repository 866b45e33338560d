"""Validation of Settings fields loaded from the environment."""

import base64
import unittest

from pydantic import SecretStr, ValidationError

from eshop.core.config import Settings, decode_jwt_secret


def _settings(**kwargs: object) -> Settings:
    """Settings built only from kwargs (no .env file)."""
    return Settings(_env_file=None, **kwargs)


class TestDefaults(unittest.TestCase):
    def test_defaults_are_valid(self) -> None:
        settings = _settings()
        self.assertEqual(settings.API_PREFIX, "/api")
        self.assertEqual(settings.JWT_ALGORITHM, "HS256")
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 10080)
        self.assertGreaterEqual(len(decode_jwt_secret(settings.JWT_SECRET.get_secret_value())), 32)


class TestValidators(unittest.TestCase):
    def test_database_url_accepts_postgres_and_sqlite(self) -> None:
        self.assertEqual(_settings(DATABASE_URL=" sqlite:// ").DATABASE_URL, "sqlite://")
        self.assertTrue(
            _settings(DATABASE_URL="postgresql://u:p@db/eshop").DATABASE_URL.startswith("postgresql")
        )

    def test_database_url_rejects_other_schemes(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://u:p@db/eshop")

    def test_short_jwt_secret_rejected(self) -> None:
        short = base64.urlsafe_b64encode(b"tiny").decode("ascii")
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET=SecretStr(short))

    def test_jwt_algorithm_normalized_and_limited(self) -> None:
        self.assertEqual(_settings(JWT_ALGORITHM="hs512").JWT_ALGORITHM, "HS512")
        with self.assertRaises(ValidationError):
            _settings(JWT_ALGORITHM="RS256")

    def test_jwt_expire_minutes_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=0)
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=10081)

    def test_department_url_must_be_http(self) -> None:
        self.assertEqual(
            _settings(DEPARTMENT_SERVICE_URL="http://dept:8001/api/").DEPARTMENT_SERVICE_URL,
            "http://dept:8001/api",
        )
        with self.assertRaises(ValidationError):
            _settings(DEPARTMENT_SERVICE_URL="ftp://dept")

    def test_api_prefix_must_start_with_slash(self) -> None:
        self.assertEqual(_settings(API_PREFIX="/shop/").API_PREFIX, "/shop")
        with self.assertRaises(ValidationError):
            _settings(API_PREFIX="shop")

    def test_log_level(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            _settings(LOG_LEVEL="chatty")


if __name__ == "__main__":
    unittest.main()
