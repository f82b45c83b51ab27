from app.dao.base import BaseDAO
from app.habit.models import Habit, HabitLog


class HabitDAO(BaseDAO[Habit]):
    model = Habit


class HabitLogDAO(BaseDAO[HabitLog]):
    model = HabitLog
