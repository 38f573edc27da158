"""Meal log and diet metrics routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging
from typing import Optional
from uuid import UUID

from api.dependencies import get_db, get_current_user_id, get_ownership_scope
from api.responses import ERROR_RESPONSES
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealEnvelope,
    MealListResponse,
    MealMetricsResponse,
)
from services.meal_service import MealService

router = APIRouter(prefix="/meals", tags=["Meals"], responses=ERROR_RESPONSES)
logger = logging.getLogger("mealstreak.api.meals")


@router.post("", response_model=MealResponse, status_code=status.HTTP_201_CREATED)
def create_meal(
    payload: MealCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Report a meal for the calling user"""
    meal = MealService.create_meal(db, user_id, payload)
    return MealResponse.model_validate(meal)


@router.get("", response_model=MealListResponse)
def list_meals(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """List the calling user's meals, most recent first"""
    meals = MealService.list_meals(db, user_id)
    return MealListResponse(meals=[MealResponse.model_validate(m) for m in meals])


# Declared before /{meal_id} so "metrics" is never parsed as a meal id
@router.get("/metrics", response_model=MealMetricsResponse)
def get_metrics(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Get diet metrics for the calling user.

    Returns the total number of meals, how many were on and off the diet,
    and the longest run of consecutive on-diet meals (most recent first).
    """
    metrics = MealService.get_metrics(db, user_id)
    logger.info(
        f"Metrics for user {user_id}: total={metrics.total} "
        f"best_streak={metrics.best_on_diet_streak}"
    )
    return metrics


@router.get("/{meal_id}", response_model=MealEnvelope)
def get_meal(
    meal_id: UUID,
    owner_scope: Optional[UUID] = Depends(get_ownership_scope),
    db: Session = Depends(get_db),
):
    """Get a single meal"""
    meal = MealService.get_meal(db, meal_id, owner_id=owner_scope)
    return MealEnvelope(meal=MealResponse.model_validate(meal))


@router.put("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_meal(
    meal_id: UUID,
    payload: MealUpdate,
    owner_scope: Optional[UUID] = Depends(get_ownership_scope),
    db: Session = Depends(get_db),
):
    """Replace name, description, occurred_at and is_on_diet of a meal"""
    MealService.update_meal(db, meal_id, payload, owner_id=owner_scope)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_meal(
    meal_id: UUID,
    owner_scope: Optional[UUID] = Depends(get_ownership_scope),
    db: Session = Depends(get_db),
):
    """Delete a meal permanently"""
    MealService.delete_meal(db, meal_id, owner_id=owner_scope)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
