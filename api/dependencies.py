"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_user_id(
    user_id: Optional[str] = Header(None, alias=settings.user_id_header),
) -> UUID:
    """
    Resolve the caller's identity.

    Authentication happens upstream; this only reads the resolved user id
    from the identity header and checks that it is a UUID.

    Raises:
        UnauthorizedError: If the header is missing or malformed
    """
    if not user_id:
        raise UnauthorizedError(f"Missing {settings.user_id_header} header")
    try:
        return UUID(user_id)
    except ValueError:
        raise UnauthorizedError(f"Invalid {settings.user_id_header} header")


def get_ownership_scope(
    user_id: UUID = Depends(get_current_user_id),
) -> Optional[UUID]:
    """Owner id to scope single-meal operations by, or None when scoping is off."""
    return user_id if settings.enforce_meal_ownership else None
