"""Role creation, registration, JWT login and the current-user dependency."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from eshop.api.errors import unwrap
from eshop.core.database import get_db
from eshop.core.security import ROLE_NAME_MAX_LEN
from eshop.schemas.auth import LoginRequest, Principal, RegisterRequest
from eshop.services.auth import AuthService
from eshop.services.credentials import SqlCredentialStore

router = APIRouter()


def get_auth_service(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> AuthService:
    return AuthService(SqlCredentialStore(db), request.app.state.token_codec)


def get_current_user(request: Request) -> Principal:
    """Dependency: require the principal attached by the authenticator. Raises 401 otherwise."""
    principal = getattr(request.state, "principal", None)
    if principal is None:
        reason = getattr(request.state, "auth_error", None)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=reason or "Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return principal


@router.post("/roles", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def create_role(
    request: Request,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> str:
    """Create a role from the plain-text request body (e.g. ROLE_ADMIN)."""
    try:
        role_name = (await request.body()).decode("utf-8").strip()
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Role name must be UTF-8 text.",
        )
    if not role_name or len(role_name) > ROLE_NAME_MAX_LEN:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Invalid role name length.",
        )
    return unwrap(service.add_role(role_name))


@router.post("/register", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> str:
    """Register a user with an existing role. Username and email must both be unused."""
    return unwrap(service.register(body))


@router.post("/login", response_class=PlainTextResponse)
def login(
    body: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> str:
    """
    Authenticate with username (or email) and password; returns the JWT as plain text.
    Include the token in the Authorization header as: Bearer <token>
    """
    return unwrap(service.login(body))


@router.get("/me", response_model=Principal)
def me(current_user: Annotated[Principal, Depends(get_current_user)]) -> Principal:
    """Return the authenticated principal resolved from the bearer token."""
    return current_user
