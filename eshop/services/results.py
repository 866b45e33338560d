"""Explicit success/failure values returned by services for business-rule outcomes."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_INPUT = "INVALID_INPUT"


@dataclass(frozen=True)
class ServiceError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service call: exactly one of value or error is meaningful."""

    value: T | None = None
    error: ServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=ServiceError(kind=kind, message=message))


def not_found(entity: str, entity_id: int) -> Result:
    return Result.failure(ErrorKind.NOT_FOUND, f"{entity} not found with id {entity_id}")
