from typing import Any

from fastapi import APIRouter, Body, Response, status

from app.config import settings
from app.dao.database import InMemoryStorage
from app.dao.session_maker import StorageDep, TransactionStorageDep
from app.habit.schemas import SHabitCreate
from app.habit.service import (
    complete_habit_today,
    create_habit,
    deactivate_habit,
    list_habit_logs,
    list_user_habits,
    update_habit,
)

router = APIRouter(prefix=settings.API_PREFIX, tags=["Habit"])


# Habit bodies go through to_dict(): a partial update may have stored values
# of any type, which a strict response model would refuse.
@router.post("/habits", status_code=status.HTTP_201_CREATED, response_model=None)
async def add_habit(habit_data: SHabitCreate, storage: InMemoryStorage = StorageDep) -> dict[str, Any]:
    habit = await create_habit(storage=storage, habit_data=habit_data)
    return {"data": habit.to_dict()}


@router.get("/users/{user_id}/habits", response_model=None)
async def get_user_habits(user_id: str, storage: InMemoryStorage = StorageDep) -> dict[str, Any]:
    habits = await list_user_habits(storage=storage, user_id=user_id)
    return {"data": [habit.to_dict() for habit in habits]}


@router.post("/habits/{habit_id}/complete", response_model=None)
async def complete_habit(habit_id: str, storage: InMemoryStorage = TransactionStorageDep) -> dict[str, Any]:
    habit = await complete_habit_today(storage=storage, habit_id=habit_id)
    return {"data": habit.to_dict()}


@router.get("/habits/{habit_id}/logs", response_model=None)
async def get_habit_logs(habit_id: str, storage: InMemoryStorage = StorageDep) -> dict[str, Any]:
    logs = await list_habit_logs(storage=storage, habit_id=habit_id)
    return {"data": [log.to_dict() for log in logs]}


@router.put("/habits/{habit_id}", response_model=None)
async def edit_habit(
    habit_id: str,
    values: dict[str, Any] | None = Body(None),  # nosec # noqa B008
    storage: InMemoryStorage = StorageDep,
) -> dict[str, Any]:
    habit = await update_habit(storage=storage, habit_id=habit_id, values=values or {})
    return {"data": habit.to_dict()}


@router.delete("/habits/{habit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_habit(habit_id: str, storage: InMemoryStorage = StorageDep) -> Response:
    await deactivate_habit(storage=storage, habit_id=habit_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
