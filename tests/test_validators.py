from __future__ import annotations

from datetime import date

import pytest

from habit_tracker import schemas, validators
from habit_tracker.errors import ArgumentValidationError
from habit_tracker.graphql_types import ToggleEntryInput, UpdateHabitInput


@pytest.mark.parametrize("name", ["abc", "John_Doe", "a1_b2_c3", "Zed99"])
def test_valid_usernames(name: str) -> None:
    assert validators.is_username(name)


@pytest.mark.parametrize("name", ["1abc", "_abc", "ab c", "abc_", "a__b", "ab$c", ""])
def test_invalid_usernames(name: str) -> None:
    assert not validators.is_username(name)


def test_username_reports_every_failing_constraint() -> None:
    failed = validators.check("username", "1$")
    assert failed == {
        "length": "username must be longer than or equal to 3 characters",
        "isUsername": "username must be a valid username",
    }


def test_alpha_and_length_messages() -> None:
    assert validators.check("firstname", "") == {
        "length": "firstname must be longer than or equal to 1 characters",
        "isAlpha": "firstname must contain only letters (a-zA-Z)",
    }
    assert validators.check("lastname", "x" * 33) == {
        "length": "lastname must be shorter than or equal to 32 characters",
    }
    assert validators.check("firstname", "J0hn") == {
        "isAlpha": "firstname must contain only letters (a-zA-Z)",
    }


def test_email_rule() -> None:
    assert validators.check("email", "someone@mail.com") == {}
    assert validators.check("email", "not-an-email") == {"isEmail": "email must be an email"}


def test_calendar_is_not_cross_checked() -> None:
    # February 31st is accepted; only ranges are enforced.
    assert validators.check("month", 2) == {}
    assert validators.check("day", 31) == {}
    assert validators.check("month", 13) == {"max": "month must not be greater than 12"}
    assert validators.check("day", -1) == {"min": "day must not be less than 0"}
    assert validators.check("year", 0) == {"isPositive": "year must be a positive number"}


def test_validate_input_aggregates_all_fields() -> None:
    data = ToggleEntryInput(habit_id="1", year=-5, month=13, day=40)
    with pytest.raises(ArgumentValidationError) as exc:
        schemas.validate_input(schemas.ToggleEntryIn, data)

    assert str(exc.value) == "Argument Validation Error"
    by_property = {e["property"]: e["constraints"] for e in exc.value.validation_errors}
    assert by_property == {
        "year": {"isPositive": "year must be a positive number"},
        "month": {"max": "month must not be greater than 12"},
        "day": {"max": "day must not be greater than 31"},
    }
    assert exc.value.extensions["validationErrors"] == exc.value.validation_errors


def test_optional_fields_are_skipped_when_missing_or_empty() -> None:
    data = UpdateHabitInput(habit_id="3", title="", description=None, start_date=None)
    parsed = schemas.validate_input(schemas.UpdateHabitIn, data)
    assert parsed.habit_id == 3
    assert parsed.title == ""


def test_optional_fields_are_checked_when_given() -> None:
    data = UpdateHabitInput(habit_id="3", title="t" * 65, start_date=date(2021, 1, 1))
    with pytest.raises(ArgumentValidationError) as exc:
        schemas.validate_input(schemas.UpdateHabitIn, data)
    assert exc.value.validation_errors[0]["property"] == "title"
