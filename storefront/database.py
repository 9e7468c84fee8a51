# storefront/database.py
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from storefront.core.config import get_settings
from storefront.core.logging import get_logger

settings = get_settings()
logger = get_logger(__name__)

# ---------------------------------------------------------
# Engine
#
# PostgreSQL:
#   - sslmode        : appended from DB_SSLMODE when not already in the URL
#   - pool_pre_ping  : validate pooled connections before use
#   - pool_size / max_overflow from settings
#
# SQLite:
#   - check_same_thread=False : FastAPI runs sync endpoints in a threadpool
#   - in-memory URLs share one connection (StaticPool), otherwise every
#     connection would see its own empty database
# ---------------------------------------------------------


def _build_url(raw_url: str) -> str:
    if not raw_url.startswith("postgresql") or not settings.DB_SSLMODE:
        return raw_url
    if "sslmode=" in raw_url:
        return raw_url
    separator = "&" if "?" in raw_url else "?"
    return f"{raw_url}{separator}sslmode={settings.DB_SSLMODE}"


def _engine_kwargs(url: str) -> dict[str, Any]:
    if url.startswith("sqlite"):
        kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return kwargs

    return {
        "pool_pre_ping": True,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
    }


db_url = _build_url(settings.DATABASE_URL)

engine = create_engine(
    db_url,
    echo=settings.DB_ECHO,
    **_engine_kwargs(db_url),
)


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(engine)


def get_session() -> Iterator[Session]:
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """
    One unit of work: commit when the block finishes, roll back and
    re-raise on any exception.

    Repositories only add/delete/flush, so everything done inside the block
    lands in the database together or not at all.
    """
    try:
        yield session
        session.commit()
    except Exception:
        logger.debug("Rolling back transaction")
        session.rollback()
        raise
