"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session, sessionmaker

from eshop.api.endpoints import router as api_router
from eshop.api.errors import register_exception_handlers
from eshop.api.middleware import RequestAuthenticator
from eshop.core.config import Settings, get_settings
from eshop.core.database import SessionLocal
from eshop.core.security import TokenCodec, build_token_codec
from eshop.services.department_client import DepartmentClient

logging.basicConfig(
    level=get_settings().LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def create_app(
    settings: Settings | None = None,
    session_factory: sessionmaker[Session] | None = None,
    token_codec: TokenCodec | None = None,
    department_client: DepartmentClient | None = None,
) -> FastAPI:
    """Build the API with explicitly wired collaborators; defaults come from settings."""
    settings = settings or get_settings()

    app = FastAPI(
        title="eshop API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.session_factory = session_factory or SessionLocal
    app.state.token_codec = token_codec or build_token_codec(settings)
    app.state.department_client = department_client or DepartmentClient.from_settings(settings)

    app.add_middleware(RequestAuthenticator)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "eshop API"}

    return app


app = create_app()
