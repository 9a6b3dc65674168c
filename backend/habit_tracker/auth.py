import logging
from datetime import datetime, timedelta
from typing import NamedTuple
from fastapi import Response
from jose import jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session
from . import crud
from .config import (
    ALGORITHM,
    ACCESS_TOKEN_EXPIRE_MINUTES,
    REFRESH_TOKEN_EXPIRE_DAYS,
    JWT_ACCESS_SECRET,
    JWT_REFRESH_SECRET,
    COOKIE_ACCESS_TOKEN,
    COOKIE_REFRESH_TOKEN,
    COOKIE_SECURE,
    COOKIE_SAMESITE,
)
from .models import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS_TOKEN_MAX_AGE = ACCESS_TOKEN_EXPIRE_MINUTES * 60
REFRESH_TOKEN_MAX_AGE = REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60


class Tokens(NamedTuple):
    access_token: str
    refresh_token: str


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


def _encode(data: dict, secret: str, expires_delta: timedelta) -> str:
    to_encode = data.copy()
    to_encode.update({"exp": datetime.utcnow() + expires_delta})
    return jwt.encode(to_encode, secret, algorithm=ALGORITHM)


def create_tokens(user: User) -> Tokens:
    refresh_token = _encode(
        {"username": user.username, "tokenCount": user.token_count},
        JWT_REFRESH_SECRET,
        timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS),
    )
    access_token = _encode(
        {"username": user.username},
        JWT_ACCESS_SECRET,
        timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return Tokens(access_token=access_token, refresh_token=refresh_token)


def decode_access_token(token: str) -> dict:
    return jwt.decode(token, JWT_ACCESS_SECRET, algorithms=[ALGORITHM])


def decode_refresh_token(token: str) -> dict:
    return jwt.decode(token, JWT_REFRESH_SECRET, algorithms=[ALGORITHM])


def set_auth_cookies(response: Response, tokens: Tokens):
    response.set_cookie(
        COOKIE_REFRESH_TOKEN,
        tokens.refresh_token,
        max_age=REFRESH_TOKEN_MAX_AGE,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE,
    )
    response.set_cookie(
        COOKIE_ACCESS_TOKEN,
        tokens.access_token,
        max_age=ACCESS_TOKEN_MAX_AGE,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE,
    )


def clear_auth_cookies(response: Response):
    response.set_cookie(
        COOKIE_REFRESH_TOKEN,
        "",
        max_age=0,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE,
    )
    response.set_cookie(
        COOKIE_ACCESS_TOKEN,
        "",
        max_age=0,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE,
    )


def invalidate_tokens(db: Session, username: str) -> bool:
    """Bump the user's token count so every refresh token issued so far is rejected."""
    if not username:
        return False

    user = crud.get_user_by_username(db, username=username)
    if not user:
        logger.warning(f"Cannot invalidate tokens, user {username} not found")
        return False

    user.token_count += 1
    db.commit()
    logger.info(f"Refresh tokens invalidated for {username} (tokenCount={user.token_count})")
    return True
