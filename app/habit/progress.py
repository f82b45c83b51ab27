import math

from app.dao.database import InMemoryStorage
from app.habit.dao import HabitLogDAO


async def calculate_progress(storage: InMemoryStorage, habit_id: str) -> int:
    """
    Percentage of completed logs among all logs of a habit.
    0 when the habit has no logs. Halves round up (12.5 -> 13).
    """
    total = await HabitLogDAO.count(storage=storage, filters={"habit_id": habit_id})
    if total == 0:
        return 0
    completed = await HabitLogDAO.count(storage=storage, filters={"habit_id": habit_id, "completed": True})
    return math.floor(completed * 100 / total + 0.5)
