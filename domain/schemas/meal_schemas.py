from pydantic import BaseModel, Field, field_validator
from typing import List
from datetime import datetime, timezone
from uuid import UUID


class MealBase(BaseModel):
    """Fields a caller supplies when reporting a meal"""

    name: str = Field(..., min_length=1, description="Meal name, e.g. 'Lunch salad'")
    description: str = Field("", description="Free-form description (may be empty)")
    occurred_at: datetime = Field(..., description="When the meal was eaten")
    is_on_diet: bool = Field(..., description="Whether the meal complied with the diet")


class MealCreate(MealBase):
    """Schema for reporting a new meal"""


class MealUpdate(MealBase):
    """Schema for replacing every mutable field of an existing meal"""


class MealResponse(BaseModel):
    """Schema for a stored meal"""

    meal_id: UUID
    owner_id: UUID
    name: str
    description: str
    occurred_at: datetime
    is_on_diet: bool

    model_config = {"from_attributes": True}

    @field_validator("occurred_at")
    @classmethod
    def mark_as_utc(cls, value: datetime) -> datetime:
        """Stored timestamps are naive UTC; send them out with an explicit offset"""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class MealEnvelope(BaseModel):
    """Single meal wrapped under a ``meal`` key"""

    meal: MealResponse


class MealListResponse(BaseModel):
    """A user's meals, most recent first"""

    meals: List[MealResponse]


class MealMetricsResponse(BaseModel):
    """Consumption metrics for one user"""

    total: int = Field(0, ge=0, description="Number of meals")
    on_diet_count: int = Field(0, ge=0, description="Meals within the diet")
    off_diet_count: int = Field(0, ge=0, description="Meals outside the diet")
    best_on_diet_streak: int = Field(
        0, ge=0, description="Longest run of consecutive on-diet meals"
    )
