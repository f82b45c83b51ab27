from collections.abc import Mapping
from datetime import date, datetime, UTC
from typing import Any

from loguru import logger

from app.dao.database import InMemoryStorage
from app.exceptions import HabitAlreadyCompletedException, HabitNotFoundException, InvalidHabitDataException
from app.habit.dao import HabitDAO, HabitLogDAO
from app.habit.models import Habit, HabitLog
from app.habit.progress import calculate_progress
from app.habit.schemas import SHabitCreate


def utc_today() -> date:
    return datetime.now(UTC).date()


async def create_habit(storage: InMemoryStorage, habit_data: SHabitCreate) -> Habit:
    if not habit_data.title or not habit_data.frequency or not habit_data.user_id:
        raise InvalidHabitDataException
    if not isinstance(habit_data.days, list):
        raise InvalidHabitDataException

    habit = await HabitDAO.add(storage=storage, values=habit_data)
    logger.info(f"Habit created: id={habit.id}, user_id={habit.user_id}")
    return habit


async def list_user_habits(storage: InMemoryStorage, user_id: str) -> list[Habit]:
    """Active habits of a user, in creation order."""
    return await HabitDAO.find_all(storage=storage, filters={"user_id": user_id, "active": True})


async def complete_habit_today(storage: InMemoryStorage, habit_id: str) -> Habit:
    """
    Record today's completion of an active habit and refresh its progress.
    A habit can be completed once per UTC calendar day.
    """
    habit = await HabitDAO.find_one_or_none_by_id(data_id=habit_id, storage=storage)
    if not habit or not habit.active:
        raise HabitNotFoundException

    today = utc_today()
    existing_log = await HabitLogDAO.find_one_or_none(storage=storage, filters={"habit_id": habit.id, "date": today})
    if existing_log:
        logger.info(f"Habit {habit.id} already completed on {today}")
        raise HabitAlreadyCompletedException

    await HabitLogDAO.add(storage=storage, values={"habit_id": habit.id, "date": today, "completed": True})
    habit.progress = await calculate_progress(storage=storage, habit_id=habit.id)
    logger.info(f"Habit {habit.id} completed on {today}, progress={habit.progress}")
    return habit


async def list_habit_logs(storage: InMemoryStorage, habit_id: str) -> list[HabitLog]:
    # No existence check: unknown or inactive habits still answer with their logs
    return await HabitLogDAO.find_all(storage=storage, filters={"habit_id": habit_id})


async def update_habit(storage: InMemoryStorage, habit_id: str, values: Mapping[str, Any]) -> Habit:
    habit = await HabitDAO.find_one_or_none_by_id(data_id=habit_id, storage=storage)
    if not habit:
        raise HabitNotFoundException
    return await HabitDAO.update(record=habit, values=values)


async def deactivate_habit(storage: InMemoryStorage, habit_id: str) -> None:
    habit = await HabitDAO.find_one_or_none_by_id(data_id=habit_id, storage=storage)
    if not habit:
        raise HabitNotFoundException
    await HabitDAO.update(record=habit, values={"active": False})
    logger.info(f"Habit {habit.id} deactivated")
