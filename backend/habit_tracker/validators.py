"""Field validation rules.

Each rule is a ``(constraint, predicate, message)`` triple. ``RULES`` maps a
field name to the rules that apply to it; :func:`check` runs every rule for a
field and returns the failing constraints keyed by name, so a single field
can report several violations at once.
"""
import re
from typing import Any, Callable, Dict, List, Tuple
from email_validator import EmailNotValidError, validate_email

Rule = Tuple[str, Callable[[Any], bool], str]

USERNAME_REGEX = re.compile(r"^[A-Za-z][A-Za-z0-9]*(?:_[A-Za-z0-9]+)*$")
ALPHA_REGEX = re.compile(r"^[a-zA-Z]+$")


def is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_username(value: Any) -> bool:
    return isinstance(value, str) and bool(USERNAME_REGEX.match(value))


def is_alpha(value: Any) -> bool:
    return isinstance(value, str) and bool(ALPHA_REGEX.match(value))


def length(field: str, min_len: int = None, max_len: int = None) -> List[Rule]:
    rules = []
    if min_len is not None:
        rules.append((
            "length",
            lambda v: isinstance(v, str) and len(v) >= min_len,
            f"{field} must be longer than or equal to {min_len} characters",
        ))
    if max_len is not None:
        rules.append((
            "length",
            lambda v: isinstance(v, str) and len(v) <= max_len,
            f"{field} must be shorter than or equal to {max_len} characters",
        ))
    return rules


def min_value(field: str, minimum: int) -> Rule:
    return "min", lambda v: v >= minimum, f"{field} must not be less than {minimum}"


def max_value(field: str, maximum: int) -> Rule:
    return "max", lambda v: v <= maximum, f"{field} must not be greater than {maximum}"


def positive(field: str) -> Rule:
    return "isPositive", lambda v: v > 0, f"{field} must be a positive number"


RULES: Dict[str, List[Rule]] = {
    "email": [("isEmail", is_email, "email must be an email")],
    "username": length("username", 3, 32) + [
        ("isUsername", is_username, "username must be a valid username"),
    ],
    "password": length("password", 8, 64),
    "firstname": length("firstname", 1, 32) + [
        ("isAlpha", is_alpha, "firstname must contain only letters (a-zA-Z)"),
    ],
    "lastname": length("lastname", 1, 32) + [
        ("isAlpha", is_alpha, "lastname must contain only letters (a-zA-Z)"),
    ],
    "title": length("title", 1, 64),
    "description": length("description", max_len=255),
    "year": [positive("year")],
    "month": [min_value("month", 0), max_value("month", 12)],
    "day": [min_value("day", 0), max_value("day", 31)],
}


def check(field: str, value: Any) -> Dict[str, str]:
    failed: Dict[str, str] = {}
    for constraint, predicate, message in RULES.get(field, []):
        # The first failure of a constraint wins (length min before length max).
        if constraint not in failed and not predicate(value):
            failed[constraint] = message
    return failed
