"""Credential store: narrow interface over users and roles, plus the SQLAlchemy implementation."""

import logging
from abc import ABC, abstractmethod

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from eshop.models import Role, User

logger = logging.getLogger(__name__)


class DuplicateCredentialError(Exception):
    """Raised when an insert violates a username, email or role-name uniqueness constraint."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CredentialStore(ABC):
    """Read/insert access to users and roles. Records are never updated or deleted."""

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None:
        pass

    @abstractmethod
    def get_user_by_username_or_email(self, identifier: str) -> User | None:
        pass

    @abstractmethod
    def username_exists(self, username: str) -> bool:
        pass

    @abstractmethod
    def email_exists(self, email: str) -> bool:
        pass

    @abstractmethod
    def get_role(self, name: str) -> Role | None:
        pass

    @abstractmethod
    def role_exists(self, name: str) -> bool:
        pass

    @abstractmethod
    def add_user(self, user: User) -> User:
        """Persist user; raise DuplicateCredentialError if username or email is taken."""
        pass

    @abstractmethod
    def add_role(self, role: Role) -> Role:
        """Persist role; raise DuplicateCredentialError if the name is taken."""
        pass


class SqlCredentialStore(CredentialStore):
    """CredentialStore backed by the users/roles tables of one session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_user_by_username(self, username: str) -> User | None:
        return self.session.query(User).filter(User.username == username).first()

    def get_user_by_username_or_email(self, identifier: str) -> User | None:
        return (
            self.session.query(User)
            .filter(or_(User.username == identifier, User.email == identifier))
            .first()
        )

    def username_exists(self, username: str) -> bool:
        return self.session.query(User.id).filter(User.username == username).first() is not None

    def email_exists(self, email: str) -> bool:
        return self.session.query(User.id).filter(User.email == email).first() is not None

    def get_role(self, name: str) -> Role | None:
        return self.session.query(Role).filter(Role.name == name).first()

    def role_exists(self, name: str) -> bool:
        return self.get_role(name) is not None

    def add_user(self, user: User) -> User:
        return self._insert(user, "Username or email is already taken!")

    def add_role(self, role: Role) -> Role:
        return self._insert(role, f"Role: {role.name} is already taken!")

    def _insert(self, record, conflict_message: str):
        self.session.add(record)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info("Insert rejected by unique constraint: %s", type(record).__name__)
            raise DuplicateCredentialError(conflict_message) from e
        self.session.refresh(record)
        return record
