"""Per-request bearer authentication that runs before routing."""

import logging

from sqlalchemy.orm import Session, sessionmaker
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from eshop.core.security import TokenCodec, TokenValidationError, extract_bearer_token
from eshop.schemas.auth import Principal
from eshop.services.credentials import SqlCredentialStore

logger = logging.getLogger(__name__)


def resolve_principal(
    token: str,
    codec: TokenCodec,
    session_factory: sessionmaker[Session],
) -> tuple[Principal | None, str | None]:
    """Validate token and load its user. Returns (principal, None) or (None, reason)."""
    try:
        subject = codec.validate(token)
    except TokenValidationError as e:
        logger.warning("Bearer token rejected", extra={"token_error": e.kind.value})
        return None, e.message

    db = session_factory()
    try:
        user = SqlCredentialStore(db).get_user_by_username(subject)
        if user is None:
            logger.warning("Bearer token subject has no user", extra={"subject": subject})
            return None, "User not found"
        return (
            Principal(id=user.id, username=user.username, email=user.email, roles=user.role_names),
            None,
        )
    finally:
        db.close()


class RequestAuthenticator(BaseHTTPMiddleware):
    """
    Attach request.state.principal when a valid bearer token is present.

    Never rejects a request: a missing or bad token leaves the request
    anonymous (auth_error records why) and route dependencies decide.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.principal = None
        request.state.auth_error = None
        token = extract_bearer_token(request.headers.get("Authorization"))
        if token is not None:
            principal, reason = await run_in_threadpool(
                resolve_principal,
                token,
                request.app.state.token_codec,
                request.app.state.session_factory,
            )
            request.state.principal = principal
            request.state.auth_error = reason
        return await call_next(request)
