from typing import Optional
from sqlalchemy.orm import Session
import logging
import uuid
from datetime import datetime, timezone

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealMetricsResponse
from domain.sequences import OrderedMeals
from repositories import MealRepository
from services.metrics_service import MetricsService
from app.exceptions import NotFoundError

logger = logging.getLogger("mealstreak.meals")


def normalize_occurred_at(value: datetime) -> datetime:
    """Convert aware datetimes to naive UTC; naive values are taken as UTC already."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class MealService:
    @staticmethod
    def create_meal(db: Session, owner_id: uuid.UUID, payload: MealCreate) -> Meal:
        """
        Record a new meal for a user.

        Args:
            db: Database session
            owner_id: Already-resolved identity of the reporting user
            payload: Validated meal fields

        Returns:
            The stored Meal, including its generated meal_id
        """
        meal = MealRepository(db).create_meal(
            owner_id=owner_id,
            name=payload.name,
            description=payload.description,
            occurred_at=normalize_occurred_at(payload.occurred_at),
            is_on_diet=payload.is_on_diet,
        )
        logger.info(f"Meal {meal.meal_id} created for user {owner_id}")
        return meal

    @staticmethod
    def get_meal(
        db: Session, meal_id: uuid.UUID, owner_id: Optional[uuid.UUID] = None
    ) -> Meal:
        """
        Fetch one meal by id.

        owner_id is only applied when given; without it the lookup is not
        scoped to any user.

        Raises:
            NotFoundError: If no matching meal exists
        """
        meal = MealRepository(db).get_by_id(meal_id, owner_id=owner_id)
        if meal is None:
            logger.warning(f"Meal {meal_id} not found")
            raise NotFoundError(f"Meal {meal_id} not found")
        return meal

    @staticmethod
    def list_meals(db: Session, owner_id: uuid.UUID) -> OrderedMeals:
        return MealRepository(db).list_by_owner(owner_id)

    @staticmethod
    def update_meal(
        db: Session,
        meal_id: uuid.UUID,
        payload: MealUpdate,
        owner_id: Optional[uuid.UUID] = None,
    ) -> Meal:
        """
        Replace name, description, occurred_at and is_on_diet of a meal.

        meal_id and owner_id of the stored record never change.

        Raises:
            NotFoundError: If no matching meal exists; nothing is written
        """
        meal_repo = MealRepository(db)
        meal = meal_repo.get_by_id(meal_id, owner_id=owner_id)
        if meal is None:
            logger.warning(f"update_meal failed: meal {meal_id} not found")
            raise NotFoundError(f"Meal {meal_id} not found")

        meal = meal_repo.replace_fields(
            meal,
            name=payload.name,
            description=payload.description,
            occurred_at=normalize_occurred_at(payload.occurred_at),
            is_on_diet=payload.is_on_diet,
        )
        logger.info(f"Meal {meal_id} updated")
        return meal

    @staticmethod
    def delete_meal(
        db: Session, meal_id: uuid.UUID, owner_id: Optional[uuid.UUID] = None
    ) -> None:
        """
        Permanently remove a meal.

        Raises:
            NotFoundError: If no matching meal exists
        """
        meal_repo = MealRepository(db)
        meal = meal_repo.get_by_id(meal_id, owner_id=owner_id)
        if meal is None:
            logger.warning(f"delete_meal failed: meal {meal_id} not found")
            raise NotFoundError(f"Meal {meal_id} not found")

        meal_repo.delete(meal)
        logger.info(f"Meal {meal_id} deleted")

    @staticmethod
    def get_metrics(db: Session, owner_id: uuid.UUID) -> MealMetricsResponse:
        """Read the user's meals in canonical order and reduce them to metrics."""
        meals = MealService.list_meals(db, owner_id)
        return MetricsService.compute_metrics(meals)
