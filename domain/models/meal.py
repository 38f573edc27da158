"""
Meal log models.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    Boolean,
    Integer,
    Uuid,
    Index,
)
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Meal(Base):
    """A meal reported by a user, flagged as on or off their diet"""

    __tablename__ = "meal"

    # Insertion sequence; breaks ties between meals sharing occurred_at
    row_id = Column(Integer, primary_key=True, autoincrement=True)
    meal_id = Column(Uuid, unique=True, nullable=False, default=uuid.uuid4)
    owner_id = Column(Uuid, nullable=False, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    occurred_at = Column(TIMESTAMP(timezone=False), nullable=False)
    is_on_diet = Column(Boolean, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        Index("ix_meal_owner_occurred_at", "owner_id", "occurred_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<Meal meal_id={self.meal_id} owner_id={self.owner_id} "
            f"occurred_at={self.occurred_at} is_on_diet={self.is_on_diet}>"
        )
