"""Services package - Business logic layer"""

from services.metrics_service import MetricsService
from services.meal_service import MealService

__all__ = [
    "MealService",
    "MetricsService",
]
