from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class User(CamelModel):
    id: str
    username: str
    email: str
    created_at: Optional[datetime] = None


class UserStatsUpdate(CamelModel):
    weekly_goal: Optional[int] = Field(None, ge=0)
    hours_completed: Optional[int] = Field(None, ge=0)
    concepts_mastered: Optional[int] = Field(None, ge=0)
    streak: Optional[int] = Field(None, ge=0)
    last_active_date: Optional[datetime] = None

    @field_validator("weekly_goal", "hours_completed", "concepts_mastered", "streak", mode="before")
    @classmethod
    def reject_null_counters(cls, value):
        # Omit a field to leave it unchanged; null is not a counter value.
        if value is None:
            raise ValueError("must not be null")
        return value


class UserStats(CamelModel):
    id: str
    user_id: Optional[str] = None
    weekly_goal: int = 15
    hours_completed: int = 0
    concepts_mastered: int = 0
    streak: int = 0
    last_active_date: Optional[datetime] = None
    goal_progress: int = Field(0, description="Percentage of the weekly hour goal completed")
