"""Role creation, registration and login on top of a CredentialStore and a TokenCodec."""

import logging

from eshop.core.security import TokenCodec, hash_password, verify_password
from eshop.models import Role, User
from eshop.schemas.auth import LoginRequest, RegisterRequest
from eshop.services.credentials import CredentialStore, DuplicateCredentialError
from eshop.services.results import ErrorKind, Result

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password."


class AuthService:
    """Auth operations; every business-rule failure comes back as a Result error."""

    def __init__(self, store: CredentialStore, codec: TokenCodec) -> None:
        self.store = store
        self.codec = codec

    def add_role(self, role_name: str) -> Result[str]:
        name = (role_name or "").strip()
        if not name:
            return Result.failure(ErrorKind.INVALID_INPUT, "Role name must not be empty")
        if self.store.role_exists(name):
            return Result.failure(ErrorKind.CONFLICT, f"Role: {name} is already taken!")
        try:
            self.store.add_role(Role(name=name))
        except DuplicateCredentialError as e:
            return Result.failure(ErrorKind.CONFLICT, e.message)
        logger.info("Role created", extra={"role": name})
        return Result.success("Role added successfully")

    def register(self, request: RegisterRequest) -> Result[str]:
        """
        Create a user with one existing role.

        Fails without writing anything when the username or email is already
        present or the role does not exist. A concurrent registration that
        slips past the checks is stopped by the store's unique constraints.
        """
        if self.store.username_exists(request.username):
            return Result.failure(ErrorKind.CONFLICT, "Username is already taken!")
        if self.store.email_exists(str(request.email)):
            return Result.failure(ErrorKind.CONFLICT, "Email is already taken!")
        role = self.store.get_role(request.role_name)
        if role is None:
            return Result.failure(ErrorKind.INVALID_INPUT, "Role not found")

        user = User(
            name=request.name,
            username=request.username,
            email=str(request.email),
            password_hash=hash_password(request.password),
            roles=[role],
        )
        try:
            self.store.add_user(user)
        except DuplicateCredentialError as e:
            return Result.failure(ErrorKind.CONFLICT, e.message)
        logger.info("User registered", extra={"username": request.username})
        return Result.success("User registered successfully")

    def login(self, request: LoginRequest) -> Result[str]:
        """Return a signed bearer token for valid credentials."""
        user = self.store.get_user_by_username_or_email(request.username_or_email)
        if user is None or not verify_password(request.password, user.password_hash):
            logger.info("Login failed", extra={"identifier": request.username_or_email})
            return Result.failure(ErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)
        return Result.success(self.codec.issue(user.username))
