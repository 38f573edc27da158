"""
App package - Application configuration and core utilities.
Contains settings and the exception taxonomy shared by every layer.
"""

from app.config import settings
from app.exceptions import (
    MealStreakError,
    NotFoundError,
    UnauthorizedError,
)

__all__ = [
    "settings",
    "MealStreakError",
    "NotFoundError",
    "UnauthorizedError",
]
