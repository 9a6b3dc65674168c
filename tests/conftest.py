from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_ACCESS_SECRET", "test-access-secret")
os.environ.setdefault("JWT_REFRESH_SECRET", "test-refresh-secret")

from typing import Any, Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from habit_tracker import auth, crud
from habit_tracker.database import Base, SessionLocal, engine
from habit_tracker.main import app
from helpers import ADD_HABIT, LOGIN, user_data


@pytest.fixture(autouse=True)
def _fresh_db() -> Iterator[None]:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db() -> Iterator[Any]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def gql(client: TestClient) -> Callable[..., dict]:
    def _call(query: str, variables: dict | None = None) -> dict:
        r = client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert r.status_code == 200, r.text
        return r.json()

    return _call


@pytest.fixture
def make_user(db) -> Callable[..., Any]:
    """Insert a user straight through the repository, bypassing GraphQL."""

    def _make(**overrides: str):
        data = user_data(**overrides)
        return crud.create_user(
            db,
            email=data["email"],
            hashed_password=auth.get_password_hash(data["password"]),
            username=data["username"],
            firstname=data["firstname"],
            lastname=data["lastname"],
        )

    return _make


@pytest.fixture
def logged_in(client: TestClient, gql, make_user) -> Callable[..., Any]:
    """Create a user and log the test client in as them (cookies are kept by the client)."""

    def _login(**overrides: str):
        user = make_user(**overrides)
        data = user_data(**overrides)
        res = gql(LOGIN, {"data": {"email": data["email"], "password": data["password"]}})
        assert res.get("errors") is None, res
        return user

    return _login


@pytest.fixture
def add_habit(gql) -> Callable[..., dict]:
    def _add(title: str = "Run", start_date: str = "2020-08-01", description: str | None = None) -> dict:
        payload = {"title": title, "startDate": start_date}
        if description is not None:
            payload["description"] = description
        res = gql(ADD_HABIT, {"data": payload})
        assert res.get("errors") is None, res
        return res["data"]["addHabit"]["habit"]

    return _add
