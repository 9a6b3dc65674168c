from __future__ import annotations

REGISTER = """
mutation Register($data: RegisterInput!) {
  register(data: $data) { user { id email username firstname lastname } }
}
"""

LOGIN = """
mutation Login($data: LoginInput!) {
  login(data: $data) { user { id username email firstname lastname } }
}
"""

ADD_HABIT = """
mutation AddHabit($data: AddHabitInput!) {
  addHabit(data: $data) { habit { id title description startDate } }
}
"""

ME = """
query Me {
  me { email username firstname lastname habits { id } }
}
"""


def user_data(**overrides: str) -> dict:
    data = {
        "email": "funny@email.com",
        "password": "supersecret",
        "username": "funny_user",
        "firstname": "Funny",
        "lastname": "User",
    }
    data.update(overrides)
    return data


def validation_errors(res: dict) -> list[dict]:
    return res["errors"][0]["extensions"]["validationErrors"]
