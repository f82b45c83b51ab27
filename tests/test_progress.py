import pytest

from app.habit.dao import HabitLogDAO
from app.habit.progress import calculate_progress

pytestmark = pytest.mark.anyio


async def test_no_logs_means_zero(storage):
    assert await calculate_progress(storage=storage, habit_id="h1") == 0


async def test_all_completed_means_hundred(storage):
    await HabitLogDAO.add(storage=storage, values={"habit_id": "h1", "date": "2026-10-17"})
    await HabitLogDAO.add(storage=storage, values={"habit_id": "h1", "date": "2026-10-18"})
    assert await calculate_progress(storage=storage, habit_id="h1") == 100


async def test_only_logs_of_the_habit_are_counted(storage):
    await HabitLogDAO.add(storage=storage, values={"habit_id": "h1", "date": "2026-10-18"})
    await HabitLogDAO.add(storage=storage, values={"habit_id": "h2", "date": "2026-10-18", "completed": False})
    assert await calculate_progress(storage=storage, habit_id="h1") == 100
    assert await calculate_progress(storage=storage, habit_id="h2") == 0


@pytest.mark.parametrize(
    ("completed", "total", "expected"),
    [(1, 2, 50), (1, 3, 33), (2, 3, 67), (1, 8, 13)],
)
async def test_rounds_half_up(storage, completed, total, expected):
    for index in range(total):
        await HabitLogDAO.add(
            storage=storage,
            values={"habit_id": "h1", "date": f"2026-10-{index + 1:02d}", "completed": index < completed},
        )
    assert await calculate_progress(storage=storage, habit_id="h1") == expected
