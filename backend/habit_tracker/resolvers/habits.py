import logging
from typing import List
from strawberry.types import Info
from .. import crud, schemas
from ..graphql_types import AddHabitInput, AddHabitPayload, Habit, UpdateHabitInput, UpdateHabitPayload
from ..guards import authenticated, habit_owner, use_guards

logger = logging.getLogger(__name__)


@use_guards(authenticated)
def my_habits(info: Info) -> List[Habit]:
    user = info.context.current_user()
    return [Habit.from_model(h) for h in crud.get_habits(info.context.db, user_id=user.id)]


@use_guards(authenticated, habit_owner)
def habit(info: Info, id: int) -> Habit:
    return Habit.from_model(crud.get_habit(info.context.db, habit_id=id))


@schemas.validated(schemas.AddHabitIn)
@use_guards(authenticated)
def add_habit(info: Info, data: AddHabitInput) -> AddHabitPayload:
    user = info.context.current_user()
    db_habit = crud.create_habit(
        info.context.db,
        user_id=user.id,
        title=data.title,
        description=data.description,
        start_date=data.start_date,
    )
    logger.info(f"User {user.username} added habit {db_habit.id}")
    return AddHabitPayload(habit=Habit.from_model(db_habit))


@schemas.validated(schemas.UpdateHabitIn)
@use_guards(authenticated, habit_owner)
def update_habit(info: Info, data: UpdateHabitInput) -> UpdateHabitPayload:
    db_habit = crud.get_habit(info.context.db, habit_id=int(data.habit_id))
    db_habit = crud.update_habit(
        info.context.db,
        db_habit,
        title=data.title,
        description=data.description,
        start_date=data.start_date,
    )
    return UpdateHabitPayload(habit=Habit.from_model(db_habit))


@use_guards(authenticated, habit_owner)
def remove_habit(info: Info, id: int) -> Habit:
    db_habit = crud.get_habit(info.context.db, habit_id=id)
    removed = Habit.from_model(db_habit)
    crud.delete_habit(info.context.db, db_habit)
    logger.info(f"Removed habit {id}")
    return removed
