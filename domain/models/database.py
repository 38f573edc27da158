"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("mealstreak.database")

# Create SQLAlchemy Base
Base = declarative_base()


def _engine_kwargs() -> dict:
    kwargs = {"echo": settings.db_echo, "future": True}
    if settings.is_sqlite():
        # Sessions are handed across FastAPI's threadpool workers
        kwargs["connect_args"] = {"check_same_thread": False}
    return kwargs


# Create engine
engine = create_engine(settings.database_url, **_engine_kwargs())

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True)


def init_database(bind=None):
    """Initialize database schema"""
    target = bind if bind is not None else engine
    with target.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Database tables created successfully")


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
