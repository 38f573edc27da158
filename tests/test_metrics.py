"""
Tests for diet metrics aggregation.

MetricsService.compute_metrics is a pure function over meals that are
already in canonical order (most recent first). These tests build that
sequence directly from on/off flags instead of going through the database.
"""

import pytest
from datetime import timedelta

from test_fixtures import BASE_TIME, make_meal, meals_from_flags
from services.metrics_service import MetricsService
from domain.schemas.meal_schemas import MealMetricsResponse
from domain.sequences import OrderedMeals

ON = True
OFF = False


def metrics_for(flags) -> MealMetricsResponse:
    return MetricsService.compute_metrics(
        OrderedMeals.assume_ordered(meals_from_flags(flags))
    )


def test_empty_sequence_yields_all_zeros():
    metrics = MetricsService.compute_metrics(OrderedMeals.assume_ordered([]))

    assert metrics == MealMetricsResponse(
        total=0, on_diet_count=0, off_diet_count=0, best_on_diet_streak=0
    )


@pytest.mark.parametrize(
    "flags, expected_streak",
    [
        ([ON, ON, ON], 3),
        ([ON, OFF, ON, OFF, ON], 1),
        ([OFF, ON, ON, OFF, ON], 2),
        ([ON, OFF, ON, ON, OFF], 2),
        ([ON, ON, OFF, ON], 2),
        ([ON, OFF, ON, ON], 2),
        ([OFF, OFF], 0),
        ([ON], 1),
        ([OFF, ON, ON, ON, OFF, ON, ON, ON, ON], 4),
    ],
)
def test_best_on_diet_streak(flags, expected_streak):
    assert metrics_for(flags).best_on_diet_streak == expected_streak


@pytest.mark.parametrize(
    "flags",
    [
        [ON, OFF, ON, ON],
        [OFF, OFF, OFF],
        [ON, ON, ON, ON, ON],
        [OFF, ON, OFF, ON, ON, OFF, ON],
    ],
)
def test_counts_add_up_and_bound_streak(flags):
    metrics = metrics_for(flags)

    assert metrics.total == len(flags)
    assert metrics.on_diet_count == flags.count(ON)
    assert metrics.off_diet_count == flags.count(OFF)
    assert metrics.on_diet_count + metrics.off_diet_count == metrics.total
    assert metrics.best_on_diet_streak <= metrics.on_diet_count
    assert (metrics.best_on_diet_streak == 0) == (metrics.on_diet_count == 0)


def test_streak_depends_on_the_order_given():
    """
    The same meals read in a different order can give a different streak.

    compute_metrics must walk the sequence exactly as provided.
    """
    meals = meals_from_flags([ON, OFF, ON, OFF, ON])
    regrouped = sorted(meals, key=lambda m: not m.is_on_diet)

    as_listed = MetricsService.compute_metrics(OrderedMeals.assume_ordered(meals))
    as_regrouped = MetricsService.compute_metrics(
        OrderedMeals.assume_ordered(regrouped)
    )

    assert as_listed.best_on_diet_streak == 1
    assert as_regrouped.best_on_diet_streak == 3
    assert as_listed.total == as_regrouped.total == 5


def test_compute_metrics_does_not_sort_by_timestamp():
    oldest = make_meal(occurred_at=BASE_TIME - timedelta(hours=2), is_on_diet=ON)
    newest = make_meal(occurred_at=BASE_TIME, is_on_diet=OFF)
    middle = make_meal(occurred_at=BASE_TIME - timedelta(hours=1), is_on_diet=ON)

    # Sorting newest first would put both on-diet meals next to each other
    metrics = MetricsService.compute_metrics(
        OrderedMeals.assume_ordered([oldest, newest, middle])
    )

    assert metrics.best_on_diet_streak == 1
    assert metrics.off_diet_count == 1


def test_compute_metrics_rejects_unordered_input():
    with pytest.raises(TypeError):
        MetricsService.compute_metrics(meals_from_flags([ON, OFF]))


def test_ordered_meals_behaves_like_a_sequence():
    meals = meals_from_flags([ON, OFF, ON])
    ordered = OrderedMeals.assume_ordered(meals)

    assert len(ordered) == 3
    assert list(ordered) == meals
    assert ordered[1] is meals[1]
    assert isinstance(ordered[:2], OrderedMeals)
    assert ordered == OrderedMeals.assume_ordered(iter(meals))


def test_ordered_meals_is_unhashable():
    ordered = OrderedMeals.assume_ordered(meals_from_flags([ON, OFF]))

    with pytest.raises(TypeError):
        hash(ordered)
