"""Password hashing and JWT issuance/validation for authentication."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

import bcrypt
import jwt

from eshop.core.config import MIN_JWT_KEY_BYTES, decode_jwt_secret

if TYPE_CHECKING:
    from eshop.core.config import Settings

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Min/max lengths for username, password and role name validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128
ROLE_NAME_MAX_LEN = 64

REQUIRED_CLAIMS = ("sub", "iat", "exp")


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class TokenErrorKind(str, Enum):
    """Why a bearer token was rejected."""

    EMPTY_OR_INVALID_INPUT = "empty_or_invalid_input"
    MALFORMED = "malformed"
    INVALID_SIGNATURE = "invalid_signature"
    UNSUPPORTED = "unsupported"
    EXPIRED = "expired"


TOKEN_ERROR_MESSAGES = {
    TokenErrorKind.EMPTY_OR_INVALID_INPUT: "Jwt claims string is empty.",
    TokenErrorKind.MALFORMED: "Invalid JWT token",
    TokenErrorKind.INVALID_SIGNATURE: "Invalid JWT signature",
    TokenErrorKind.UNSUPPORTED: "Jwt token is unsupported",
    TokenErrorKind.EXPIRED: "Expired JWT token",
}


class TokenValidationError(Exception):
    """Raised when a token cannot be trusted. The request must not proceed with its identity."""

    def __init__(self, kind: TokenErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or TOKEN_ERROR_MESSAGES[kind]
        super().__init__(self.message)


class TokenCodec(Protocol):
    """Issues and validates bearer tokens carrying a subject."""

    def issue(self, subject: str) -> str: ...

    def validate(self, token: str) -> str: ...


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenCodec:
    """
    HMAC-signed JWT with sub, iat and exp claims.

    One symmetric key is shared by issuer and validator; nothing about an
    issued token is stored. Expiry is checked against the injected clock so
    that a token is valid up to and including its exp second.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        validity: timedelta = timedelta(days=7),
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        key = decode_jwt_secret(secret)
        if len(key) < MIN_JWT_KEY_BYTES:
            raise ValueError(
                f"JWT signing key must be at least {MIN_JWT_KEY_BYTES} bytes (256 bits)"
            )
        if validity.total_seconds() < 1:
            raise ValueError("Token validity must be at least one second")
        self._key = key
        self._algorithm = algorithm
        self._validity_seconds = int(validity.total_seconds())
        self._clock = clock or _utcnow

    def issue(self, subject: str) -> str:
        """Create a signed token for subject, valid from now for the configured window."""
        if not isinstance(subject, str) or not subject.strip():
            raise ValueError("Token subject must be a non-empty string")
        issued_at = int(self._clock().timestamp())
        payload: dict[str, Any] = {
            "sub": subject,
            "iat": issued_at,
            "exp": issued_at + self._validity_seconds,
        }
        return jwt.encode(payload, self._key, algorithm=self._algorithm)

    def validate(self, token: str) -> str:
        """
        Verify signature and claims; return the subject.
        Raises TokenValidationError with the matching TokenErrorKind otherwise.
        """
        if not isinstance(token, str) or not token.strip() or "." not in token:
            raise TokenValidationError(TokenErrorKind.EMPTY_OR_INVALID_INPUT)
        try:
            claims = jwt.decode(
                token.strip(),
                self._key,
                algorithms=[self._algorithm],
                options={
                    "require": list(REQUIRED_CLAIMS),
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                },
            )
        except jwt.InvalidAlgorithmError as e:
            raise TokenValidationError(TokenErrorKind.UNSUPPORTED) from e
        except jwt.InvalidSignatureError as e:
            raise TokenValidationError(TokenErrorKind.INVALID_SIGNATURE) from e
        except jwt.PyJWTError as e:
            raise TokenValidationError(TokenErrorKind.MALFORMED) from e

        subject = claims.get("sub")
        issued_at = claims.get("iat")
        expires_at = claims.get("exp")
        if not isinstance(subject, str) or not subject.strip():
            raise TokenValidationError(TokenErrorKind.MALFORMED)
        if not _is_timestamp(issued_at) or not _is_timestamp(expires_at):
            raise TokenValidationError(TokenErrorKind.MALFORMED)
        if expires_at <= issued_at:
            raise TokenValidationError(TokenErrorKind.MALFORMED)
        if self._clock().timestamp() > expires_at:
            raise TokenValidationError(TokenErrorKind.EXPIRED)
        return subject


def _is_timestamp(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def build_token_codec(settings: "Settings") -> JwtTokenCodec:
    """Build the shared token codec from settings."""
    return JwtTokenCodec(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        validity=timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
    )


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an 'Authorization: Bearer <token>' header value, if any."""
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[len("Bearer "):].strip()
    return token or None
