from __future__ import annotations

import pytest
from fastapi import Response
from jose import JWTError

from habit_tracker import auth


def test_token_pair_carries_expected_claims(make_user) -> None:
    user = make_user()
    tokens = auth.create_tokens(user)

    access = auth.decode_access_token(tokens.access_token)
    refresh = auth.decode_refresh_token(tokens.refresh_token)

    assert access["username"] == user.username
    assert "tokenCount" not in access
    assert refresh["username"] == user.username
    assert refresh["tokenCount"] == 0
    assert refresh["exp"] > access["exp"]


def test_tokens_are_signed_with_distinct_secrets(make_user) -> None:
    tokens = auth.create_tokens(make_user())

    with pytest.raises(JWTError):
        auth.decode_refresh_token(tokens.access_token)
    with pytest.raises(JWTError):
        auth.decode_access_token(tokens.refresh_token)


def test_password_hash_roundtrip() -> None:
    hashed = auth.get_password_hash("supersecret")
    assert hashed != "supersecret"
    assert auth.verify_password("supersecret", hashed)
    assert not auth.verify_password("wrongpassword", hashed)


def test_invalidate_tokens_increments_count(db, make_user) -> None:
    user = make_user()

    assert auth.invalidate_tokens(db, user.username) is True
    assert auth.invalidate_tokens(db, user.username) is True

    db.refresh(user)
    assert user.token_count == 2


def test_invalidate_tokens_rejects_unknown_or_empty_username(db) -> None:
    assert auth.invalidate_tokens(db, "") is False
    assert auth.invalidate_tokens(db, "ghost") is False


def test_clear_auth_cookies_keeps_configured_attributes(monkeypatch) -> None:
    monkeypatch.setattr(auth, "COOKIE_SECURE", True)
    monkeypatch.setattr(auth, "COOKIE_SAMESITE", "none")
    response = Response()

    auth.clear_auth_cookies(response)

    cleared = response.headers.getlist("set-cookie")
    assert len(cleared) == 2
    for cookie in cleared:
        lowered = cookie.lower()
        assert "max-age=0" in lowered
        assert "samesite=none" in lowered
        assert "secure" in lowered
