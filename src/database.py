"""Database configuration and session management."""

import logging
import time
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_database_connection() -> float:
    """Run a trivial query against the database and return the elapsed milliseconds."""
    started_at = time.perf_counter()
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    elapsed_ms = (time.perf_counter() - started_at) * 1000
    logger.info(f"Database connectivity check passed in {elapsed_ms:.0f}ms")
    return elapsed_ms
