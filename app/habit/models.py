from datetime import date as dt_date, datetime, UTC
from typing import Any

from pydantic import ConfigDict, Field

from app.dao.database import Base


class Habit(Base):
    # Client-supplied values are stored as given
    title: Any
    description: Any = None
    frequency: Any  # "daily", "weekly" or "custom"
    days: list[Any]
    user_id: Any  # Owner reference, not checked against users
    active: bool = True
    progress: int = 0  # Percentage of completed logs, 0..100
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    # Partial updates may merge keys that are not declared fields
    model_config = ConfigDict(extra="allow")

    def __repr__(self):
        return f"{self.__class__.__name__}(id={self.id}, title={self.title})"


class HabitLog(Base):
    habit_id: str
    date: dt_date
    completed: bool = True

    def __repr__(self):
        return f"{self.__class__.__name__}(id={self.id}, habit_id={self.habit_id}, date={self.date})"
