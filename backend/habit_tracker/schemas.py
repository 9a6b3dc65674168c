import dataclasses
from datetime import date
from functools import wraps
from typing import Optional, Type
from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError
from . import validators
from .errors import ArgumentValidationError


class InputSchema(BaseModel):
    """Base for resolver input validation.

    Every field is checked against ``validators.RULES``. Optional fields are
    skipped when they are missing or empty.
    """

    @field_validator("*")
    @classmethod
    def _apply_rules(cls, value, info: ValidationInfo):
        field = cls.model_fields[info.field_name]
        if value is None or (not field.is_required() and value == ""):
            return value
        failed = validators.check(info.field_name, value)
        if failed:
            raise PydanticCustomError(
                "constraints",
                "{property} failed validation",
                {"property": to_camel(info.field_name), "constraints": failed},
            )
        return value


class RegisterIn(InputSchema):
    email: str
    password: str
    username: str
    firstname: str
    lastname: str


class LoginIn(InputSchema):
    email: str
    password: str


class AddHabitIn(InputSchema):
    title: str
    description: Optional[str] = None
    start_date: date


class UpdateHabitIn(InputSchema):
    habit_id: int
    title: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[date] = None


class ToggleEntryIn(InputSchema):
    habit_id: int
    year: int
    month: int
    day: int


class EntriesForMonthIn(InputSchema):
    habit_id: int
    year: int
    month: int


class UpdatePasswordIn(InputSchema):
    password: str


class UpdateEmailIn(InputSchema):
    email: str


class UpdateUsernameIn(InputSchema):
    username: str


class UpdateMeIn(InputSchema):
    firstname: Optional[str] = None
    lastname: Optional[str] = None


class DeleteMyAccountIn(InputSchema):
    password: str


def _to_validation_errors(exc: ValidationError, values: dict) -> list:
    errors = []
    for err in exc.errors():
        name = str(err["loc"][0]) if err["loc"] else ""
        ctx = err.get("ctx") or {}
        if err["type"] == "constraints":
            constraints = ctx["constraints"]
        else:
            constraints = {err["type"]: err["msg"]}
        value = values.get(name)
        if value is not None and not isinstance(value, (str, int, float, bool)):
            value = str(value)
        errors.append({
            "property": to_camel(name),
            "value": value,
            "constraints": constraints,
        })
    return errors


def validate_input(schema: Type[InputSchema], data) -> InputSchema:
    values = dataclasses.asdict(data) if dataclasses.is_dataclass(data) else dict(data)
    try:
        return schema.model_validate(values)
    except ValidationError as e:
        raise ArgumentValidationError(_to_validation_errors(e, values)) from e


def validated(schema: Type[InputSchema], arg: str = "data"):
    """Validate the resolver argument ``arg`` before anything else runs.

    Validation only: the parsed model is dropped and the resolver keeps
    receiving the original strawberry input.
    """

    def decorator(resolver):
        @wraps(resolver)
        def wrapper(*args, **kwargs):
            validate_input(schema, kwargs[arg])
            return resolver(*args, **kwargs)
        return wrapper
    return decorator
