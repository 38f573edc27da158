"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealEnvelope,
    MealListResponse,
    MealMetricsResponse,
)

__all__ = [
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealEnvelope",
    "MealListResponse",
    # Metrics schemas
    "MealMetricsResponse",
]
