"""Tests for eshop.services.auth against a real SQLite credential store."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from eshop.core.database import build_session_factory
from eshop.core.security import JwtTokenCodec
from eshop.models import Base, Role, User
from eshop.schemas.auth import LoginRequest, RegisterRequest
from eshop.services.auth import AuthService
from eshop.services.credentials import DuplicateCredentialError, SqlCredentialStore
from eshop.services.results import ErrorKind

SECRET = "VGhpcyBpcyB0aGUgSldUIHNlY3JldCBrZXkgZm9yIGltcGxlbWVudGluZyBqd3QgdG9rZW4gc3lzdGVtIGluIGF1dGhnIHNlcnZpY2U="


def _register_request(
    username: str = "john",
    email: str = "john@x.com",
    role_name: str = "ROLE_USER",
    **kwargs: str,
) -> RegisterRequest:
    """Build a RegisterRequest with sensible defaults."""
    defaults = {"name": "John Doe", "password": "password123"}
    defaults.update(kwargs)
    return RegisterRequest(username=username, email=email, role_name=role_name, **defaults)


class _StoreTestCase(unittest.TestCase):
    """Fresh in-memory database per test."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.session_factory = build_session_factory(self.engine)
        self.db = self.session_factory()
        self.codec = JwtTokenCodec(SECRET)
        self.service = AuthService(SqlCredentialStore(self.db), self.codec)
        self.assertTrue(self.service.add_role("ROLE_USER").ok)

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()

    def user_count(self) -> int:
        return self.db.query(User).count()


class TestAddRole(_StoreTestCase):
    def test_creates_role(self) -> None:
        result = self.service.add_role("ROLE_ADMIN")
        self.assertTrue(result.ok)
        self.assertEqual(result.value, "Role added successfully")
        self.assertIsNotNone(self.db.query(Role).filter(Role.name == "ROLE_ADMIN").first())

    def test_duplicate_role_is_conflict(self) -> None:
        result = self.service.add_role("ROLE_USER")
        self.assertFalse(result.ok)
        self.assertEqual(result.error.kind, ErrorKind.CONFLICT)
        self.assertIn("ROLE_USER", result.error.message)

    def test_blank_role_is_invalid(self) -> None:
        result = self.service.add_role("   ")
        self.assertEqual(result.error.kind, ErrorKind.INVALID_INPUT)


class TestRegister(_StoreTestCase):
    def test_registers_user_with_role_and_hashed_password(self) -> None:
        result = self.service.register(_register_request())
        self.assertTrue(result.ok)
        self.assertEqual(result.value, "User registered successfully")
        user = self.db.query(User).filter(User.username == "john").one()
        self.assertEqual(user.email, "john@x.com")
        self.assertEqual(user.role_names, ["ROLE_USER"])
        self.assertNotEqual(user.password_hash, "password123")

    def test_duplicate_username_fails_and_keeps_first_record(self) -> None:
        self.assertTrue(self.service.register(_register_request()).ok)
        result = self.service.register(_register_request(email="other@x.com", name="Other"))
        self.assertEqual(result.error.kind, ErrorKind.CONFLICT)
        self.assertEqual(result.error.message, "Username is already taken!")
        self.assertEqual(self.user_count(), 1)
        user = self.db.query(User).filter(User.username == "john").one()
        self.assertEqual(user.email, "john@x.com")
        self.assertEqual(user.name, "John Doe")

    def test_duplicate_email_fails(self) -> None:
        self.assertTrue(self.service.register(_register_request()).ok)
        result = self.service.register(_register_request(username="johnny"))
        self.assertEqual(result.error.kind, ErrorKind.CONFLICT)
        self.assertEqual(result.error.message, "Email is already taken!")
        self.assertEqual(self.user_count(), 1)

    def test_unknown_role_fails_without_write(self) -> None:
        result = self.service.register(_register_request(role_name="ROLE_MISSING"))
        self.assertEqual(result.error.kind, ErrorKind.INVALID_INPUT)
        self.assertEqual(result.error.message, "Role not found")
        self.assertEqual(self.user_count(), 0)

    def test_racing_registration_is_stopped_by_unique_constraint(self) -> None:
        """Second registrant passed the existence checks before the first committed."""
        self.assertTrue(self.service.register(_register_request()).ok)

        racing_db = self.session_factory()
        try:
            racing_store = SqlCredentialStore(racing_db)
            racing_store.username_exists = lambda username: False  # type: ignore[method-assign]
            racing_store.email_exists = lambda email: False  # type: ignore[method-assign]
            racer = AuthService(racing_store, self.codec)
            result = racer.register(_register_request(email="other@x.com"))
        finally:
            racing_db.close()

        self.assertEqual(result.error.kind, ErrorKind.CONFLICT)
        self.assertEqual(self.user_count(), 1)

    def test_store_conflict_maps_to_conflict_result(self) -> None:
        store = MagicMock()
        store.username_exists.return_value = False
        store.email_exists.return_value = False
        store.get_role.return_value = Role(name="ROLE_USER")
        store.add_user.side_effect = DuplicateCredentialError("Username or email is already taken!")
        result = AuthService(store, self.codec).register(_register_request())
        self.assertEqual(result.error.kind, ErrorKind.CONFLICT)


class TestLogin(_StoreTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.assertTrue(self.service.register(_register_request()).ok)

    def test_login_by_username_issues_token_for_username(self) -> None:
        result = self.service.login(LoginRequest(username_or_email="john", password="password123"))
        self.assertTrue(result.ok)
        self.assertEqual(self.codec.validate(result.value), "john")

    def test_login_by_email_issues_token_for_username(self) -> None:
        result = self.service.login(
            LoginRequest(username_or_email="john@x.com", password="password123")
        )
        self.assertEqual(self.codec.validate(result.value), "john")

    def test_wrong_password(self) -> None:
        result = self.service.login(LoginRequest(username_or_email="john", password="wrong-pass"))
        self.assertEqual(result.error.kind, ErrorKind.INVALID_CREDENTIALS)

    def test_unknown_user(self) -> None:
        result = self.service.login(LoginRequest(username_or_email="nobody", password="password123"))
        self.assertEqual(result.error.kind, ErrorKind.INVALID_CREDENTIALS)


class TestSqlCredentialStore(_StoreTestCase):
    def test_lookup_helpers(self) -> None:
        self.service.register(_register_request())
        store = SqlCredentialStore(self.db)
        self.assertTrue(store.username_exists("john"))
        self.assertTrue(store.email_exists("john@x.com"))
        self.assertFalse(store.username_exists("jane"))
        self.assertEqual(store.get_user_by_username_or_email("john@x.com").username, "john")
        self.assertIsNone(store.get_user_by_username("jane"))

    def test_duplicate_role_insert_raises(self) -> None:
        store = SqlCredentialStore(self.db)
        with self.assertRaises(DuplicateCredentialError):
            store.add_role(Role(name="ROLE_USER"))
        self.assertEqual(self.db.query(Role).count(), 1)


if __name__ == "__main__":
    unittest.main()
