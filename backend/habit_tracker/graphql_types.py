from datetime import date, datetime
from enum import Enum
from typing import List, Optional
import strawberry
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext
from strawberry.types import Info
from . import auth, crud, models
from .errors import NotFoundError


class GraphQLContext(BaseContext):
    """Per-request context: the DB session plus whatever the session middleware attached."""

    def __init__(self, db: Session):
        super().__init__()
        self.db = db

    @property
    def username(self) -> Optional[str]:
        return getattr(self.request.state, "username", None)

    def current_user(self) -> models.User:
        user = crud.get_user_by_username(self.db, username=self.username)
        if user is None:
            raise NotFoundError('Could not find any entity of type "User"')
        return user

    def set_auth_cookies(self, tokens: auth.Tokens):
        auth.set_auth_cookies(self.response, tokens)
        self.request.state.auth_cookies_written = True

    def clear_auth_cookies(self):
        auth.clear_auth_cookies(self.response)
        self.request.state.auth_cookies_cleared = True


@strawberry.enum(description="All possible toggle states")
class ToggleState(Enum):
    ADDED = "ADDED"
    REMOVED = "REMOVED"


@strawberry.type
class User:
    id: strawberry.ID
    email: str
    username: str
    firstname: str
    lastname: str
    created_at: datetime

    @strawberry.field
    def habits(self, info: Info) -> List["Habit"]:
        return [Habit.from_model(h) for h in crud.get_habits(info.context.db, user_id=int(self.id))]

    @classmethod
    def from_model(cls, user: models.User) -> "User":
        return cls(
            id=strawberry.ID(str(user.id)),
            email=user.email,
            username=user.username,
            firstname=user.firstname,
            lastname=user.lastname,
            created_at=user.created_at,
        )


@strawberry.type
class Habit:
    id: strawberry.ID
    title: str
    description: Optional[str]
    start_date: date
    user_id: strawberry.Private[int]

    @strawberry.field
    def user(self, info: Info) -> User:
        user = crud.get_user(info.context.db, user_id=self.user_id)
        if user is None:
            raise NotFoundError(f"Couldnt find User for Habit ID {self.id}")
        return User.from_model(user)

    @strawberry.field
    def entries(self, info: Info) -> List["Entry"]:
        return [Entry.from_model(e) for e in crud.get_entries_for_habit(info.context.db, habit_id=int(self.id))]

    @classmethod
    def from_model(cls, habit: models.Habit) -> "Habit":
        return cls(
            id=strawberry.ID(str(habit.id)),
            title=habit.title,
            description=habit.description,
            start_date=habit.start_date,
            user_id=habit.user_id,
        )


@strawberry.type
class Entry:
    id: strawberry.ID
    year: int
    month: int
    day: int
    habit_id: strawberry.Private[int]

    @strawberry.field
    def habit(self, info: Info) -> Habit:
        habit = crud.get_habit(info.context.db, habit_id=self.habit_id)
        if habit is None:
            raise NotFoundError(f"Couldnt find Habit for Entry ID {self.id}")
        return Habit.from_model(habit)

    @classmethod
    def from_model(cls, entry: models.Entry) -> "Entry":
        return cls(
            id=strawberry.ID(str(entry.id)),
            year=entry.year,
            month=entry.month,
            day=entry.day,
            habit_id=entry.habit_id,
        )


@strawberry.type
class RegisterPayload:
    user: User


@strawberry.type
class LoginPayload:
    user: User


@strawberry.type
class AddHabitPayload:
    habit: Habit


@strawberry.type
class UpdateHabitPayload:
    habit: Habit


@strawberry.type
class ToggleEntryPayload:
    entry: Entry
    toggle_state: ToggleState


@strawberry.input
class RegisterInput:
    email: str
    password: str
    username: str
    firstname: str
    lastname: str


@strawberry.input
class LoginInput:
    email: str
    password: str


@strawberry.input
class AddHabitInput:
    title: str
    start_date: date
    description: Optional[str] = None


@strawberry.input
class UpdateHabitInput:
    habit_id: strawberry.ID
    title: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[date] = None


@strawberry.input
class ToggleEntryInput:
    habit_id: strawberry.ID
    year: int
    month: int
    day: int


@strawberry.input
class EntriesForMonthInput:
    habit_id: strawberry.ID
    year: int
    month: int


@strawberry.input
class UpdatePasswordInput:
    password: str


@strawberry.input
class UpdateEmailInput:
    email: str


@strawberry.input
class UpdateUsernameInput:
    username: str


@strawberry.input
class UpdateMeInput:
    firstname: Optional[str] = None
    lastname: Optional[str] = None


@strawberry.input
class DeleteMyAccountInput:
    password: str
