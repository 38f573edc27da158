"""
Meal Repository - Data access layer for meal log operations
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal
from domain.sequences import OrderedMeals


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_by_id(
        self, meal_id: UUID, owner_id: Optional[UUID] = None
    ) -> Optional[Meal]:
        """Get meal by ID, optionally restricted to one owner"""
        query = self.db.query(Meal).filter(Meal.meal_id == meal_id)
        if owner_id is not None:
            query = query.filter(Meal.owner_id == owner_id)
        return query.first()

    def list_by_owner(self, owner_id: UUID) -> OrderedMeals:
        """
        Get every meal for an owner, most recent first.

        Meals sharing the same occurred_at come back in insertion order
        (oldest inserted first). MetricsService depends on this ordering.
        """
        meals = (
            self.db.query(Meal)
            .filter(Meal.owner_id == owner_id)
            .order_by(Meal.occurred_at.desc(), Meal.row_id.asc())
            .all()
        )
        return OrderedMeals.assume_ordered(meals)

    def create_meal(
        self,
        owner_id: UUID,
        name: str,
        description: str,
        occurred_at,
        is_on_diet: bool,
    ) -> Meal:
        """Insert a new meal with a freshly generated meal_id"""
        meal = Meal(
            owner_id=owner_id,
            name=name,
            description=description,
            occurred_at=occurred_at,
            is_on_diet=is_on_diet,
        )
        return self.create(meal)

    def replace_fields(
        self,
        meal: Meal,
        name: str,
        description: str,
        occurred_at,
        is_on_diet: bool,
    ) -> Meal:
        """Overwrite all mutable fields of a meal in a single commit"""
        meal.name = name
        meal.description = description
        meal.occurred_at = occurred_at
        meal.is_on_diet = is_on_diet
        return self.update(meal)
