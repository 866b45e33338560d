"""Database engine, session factory and the per-request session dependency."""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from eshop.core.config import settings


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; SQLite connections are shared across request threads."""
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=echo,
        )
    return create_engine(database_url, pool_pre_ping=True, echo=echo)


def build_session_factory(bind: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = build_session_factory(engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session from the app's factory and closes it when done."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
