"""
Database configuration and session management for the Inventory service.

This module sets up the database connection using SQLAlchemy and provides
a session factory, a connectivity check and table creation.
"""
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import DATABASE_URL

logger = logging.getLogger(__name__)

# Engine creation does not connect; the first connection happens on startup
engine       = create_engine(DATABASE_URL, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base         = declarative_base()


def get_db():
    """
    Dependency function that provides a database session.

    Yields:
        Session: SQLAlchemy database session

    Usage:
        Use as a FastAPI dependency to inject database sessions into route handlers.
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError:
        db.rollback()
        raise
    finally:
        db.close()


def describe_target(bind: Engine) -> str:
    """Return ``user@host/database`` for log messages, never the password."""
    url = make_url(bind.url)
    host = url.host or ""
    if url.port:
        host = f"{host}:{url.port}"
    return f"{url.username or ''}@{host}/{url.database or ''}"


def ping(db: Session) -> bool:
    """
    Check that the database answers a trivial query.

    Args:
        db: Database session

    Returns:
        True if ``SELECT 1`` succeeded, False otherwise
    """
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database ping failed: {e}")
        return False


def check_connection(bind: Engine) -> None:
    """
    Open a connection and run ``SELECT 1``.

    Raises:
        SQLAlchemyError: If the database is unreachable
    """
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))


def init_db(bind: Engine) -> None:
    """Create the tables if they don't exist."""
    from . import models  # noqa: F401  registers the mapped tables on Base

    Base.metadata.create_all(bind=bind)
