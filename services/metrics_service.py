import logging

from domain.schemas.meal_schemas import MealMetricsResponse
from domain.sequences import OrderedMeals

logger = logging.getLogger("mealstreak.metrics")


class MetricsService:
    @staticmethod
    def compute_metrics(meals: OrderedMeals) -> MealMetricsResponse:
        """
        Reduce a user's meals to consumption metrics in a single pass.

        The best on-diet streak is the longest run of consecutive on-diet
        meals while walking the sequence as given: most recent first, as
        produced by MealRepository.list_by_owner. The result depends on that
        order, so this method refuses plain lists and never sorts.

        Args:
            meals: Meals already in canonical reverse-chronological order

        Returns:
            MealMetricsResponse with total, on/off diet counts and best streak.
            An empty sequence yields all zeros.

        Raises:
            TypeError: If meals is not an OrderedMeals
        """
        if not isinstance(meals, OrderedMeals):
            raise TypeError(
                "compute_metrics expects OrderedMeals; "
                "use OrderedMeals.assume_ordered() for pre-sorted input"
            )

        total = 0
        on_diet = 0
        current = 0
        best = 0
        for meal in meals:
            total += 1
            if meal.is_on_diet:
                on_diet += 1
                current += 1
                if current > best:
                    best = current
            else:
                current = 0

        logger.debug(f"Computed metrics over {total} meals: best streak {best}")
        return MealMetricsResponse(
            total=total,
            on_diet_count=on_diet,
            off_diet_count=total - on_diet,
            best_on_diet_streak=best,
        )
