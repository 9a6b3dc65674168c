"""Pre-resolver authorization checks.

A guard is a callable ``guard(info, kwargs)`` that raises to reject the call.
``use_guards`` runs them in the order given; the first failure stops the
chain and the resolver body never runs.
"""
from functools import wraps
from . import crud
from .errors import AuthenticationError, NotFoundError


def authenticated(info, kwargs):
    if not info.context.username:
        raise AuthenticationError()


def _habit_id(kwargs):
    if "id" in kwargs:
        return kwargs["id"]
    data = kwargs.get("data")
    return getattr(data, "habit_id", None)


def habit_owner(info, kwargs):
    habit_id = _habit_id(kwargs)
    habit = None
    if habit_id is not None:
        habit = crud.get_owned_habit(info.context.db, habit_id=int(habit_id), username=info.context.username)
    if habit is None:
        raise NotFoundError(f"Habit with the ID {habit_id} does not exist")


def use_guards(*guards):
    def decorator(resolver):
        @wraps(resolver)
        def wrapper(*args, **kwargs):
            info = kwargs["info"]
            for guard in guards:
                guard(info, kwargs)
            return resolver(*args, **kwargs)
        return wrapper
    return decorator
