from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SHabitCreate(BaseModel):
    # Presence is checked on creation, not by the schema
    title: Any = Field(default=None, description="Habit title")
    description: Any = Field(default=None, description="Optional description")
    frequency: Any = Field(default=None, description="daily, weekly or custom")
    days: Any = Field(default=None, description="Day indices, e.g. weekdays")
    user_id: Any = Field(default=None, description="Owner user ID")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
