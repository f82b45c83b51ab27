import pytest

from app.auth.dao import UsersDAO
from app.dao.database import InMemoryStorage
from app.habit.dao import HabitDAO, HabitLogDAO
from app.habit.models import Habit, HabitLog

pytestmark = pytest.mark.anyio


async def test_storage_starts_empty(storage):
    assert storage.collection(Habit) == []
    assert storage.collection(HabitLog) == []
    assert HabitLog.collection_name() == "habitlogs"


async def test_collections_are_not_shared_between_storages(storage):
    await UsersDAO.add(storage=storage, values={"name": "A", "email": "a@x.com", "password": "p"})
    assert await UsersDAO.find_all(storage=InMemoryStorage(), filters=None) == []


async def test_add_generates_unique_ids(storage):
    first = await UsersDAO.add(storage=storage, values={"name": "A", "email": "a@x.com", "password": "p"})
    second = await UsersDAO.add(storage=storage, values={"name": "B", "email": "b@x.com", "password": "p"})
    assert first.id != second.id
    assert await UsersDAO.find_one_or_none_by_id(data_id=second.id, storage=storage) is second


async def test_find_one_or_none_by_id_missing(storage):
    assert await HabitDAO.find_one_or_none_by_id(data_id="missing", storage=storage) is None


async def test_find_one_or_none_combines_filter_list_with_or(storage):
    await UsersDAO.add(storage=storage, values={"name": "A", "email": "a@x.com", "password": "p"})
    user_b = await UsersDAO.add(storage=storage, values={"name": "B", "email": "b@x.com", "password": "q"})

    found = await UsersDAO.find_one_or_none(storage=storage, filters=[{"email": "z@x.com"}, {"name": "B"}])
    assert found is user_b
    assert await UsersDAO.find_one_or_none(storage=storage, filters={"name": "B", "password": "p"}) is None


async def test_find_all_keeps_insertion_order(storage):
    for day in ("2026-10-01", "2026-10-02", "2026-10-03"):
        await HabitLogDAO.add(storage=storage, values={"habit_id": "h1", "date": day})
    await HabitLogDAO.add(storage=storage, values={"habit_id": "h2", "date": "2026-10-01"})

    logs = await HabitLogDAO.find_all(storage=storage, filters={"habit_id": "h1"})
    assert [str(log.date) for log in logs] == ["2026-10-01", "2026-10-02", "2026-10-03"]
    assert await HabitLogDAO.count(storage=storage, filters={"habit_id": "h2"}) == 1


async def test_update_accepts_aliases_and_unknown_keys(storage):
    habit = await HabitDAO.add(
        storage=storage, values={"title": "Run", "frequency": "daily", "days": [1], "user_id": "u1"}
    )
    await HabitDAO.update(record=habit, values={"userId": "u2", "title": "Walk", "color": "red"})

    assert habit.user_id == "u2"
    assert habit.title == "Walk"
    assert habit.model_dump(by_alias=True)["color"] == "red"


async def test_update_snake_case_key_targets_the_declared_field(storage):
    habit = await HabitDAO.add(
        storage=storage, values={"title": "Run", "frequency": "daily", "days": [1], "user_id": "u1"}
    )
    await HabitDAO.update(record=habit, values={"user_id": "u2", "created_at": "yesterday"})

    dumped = habit.to_dict()
    assert dumped["userId"] == "u2"
    assert dumped["createdAt"] == "yesterday"
    assert "user_id" not in dumped
    assert "created_at" not in dumped


async def test_to_dict_uses_camel_case_and_iso_dates(storage):
    log = await HabitLogDAO.add(storage=storage, values={"habit_id": "h1", "date": "2026-10-18"})
    assert log.to_dict() == {"id": log.id, "habitId": "h1", "date": "2026-10-18", "completed": True}
