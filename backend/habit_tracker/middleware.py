"""Cookie session handling.

Runs once per request before GraphQL execution. A valid access token attaches
its username to ``request.state``. When the access token is missing or
expired, a valid refresh token whose ``tokenCount`` still matches the user's
mints a new token pair and the cookies are rotated on the response. Any
failure leaves the request anonymous; guards decide what that means.
"""
import logging
from typing import Any, Callable, Optional
from fastapi import Request, Response
from jose import JWTError
from starlette.concurrency import run_in_threadpool
from . import auth, crud
from .config import COOKIE_ACCESS_TOKEN, COOKIE_REFRESH_TOKEN
from .database import SessionLocal

logger = logging.getLogger(__name__)


def _refresh(refresh_token: str) -> Optional[tuple]:
    try:
        data = auth.decode_refresh_token(refresh_token)
    except JWTError as e:
        logger.debug(f"Refresh token rejected: {e}")
        return None

    username = data.get("username")
    if not username:
        return None

    db = SessionLocal()
    try:
        user = crud.get_user_by_username(db, username=username)
        if not user or user.token_count != data.get("tokenCount"):
            logger.info(f"Refresh token for {username} is stale or orphaned")
            return None
        return user.username, auth.create_tokens(user)
    finally:
        db.close()


async def auth_middleware(request: Request, call_next: Callable[[Request], Any]) -> Response:
    request.state.username = None
    refresh_token = request.cookies.get(COOKIE_REFRESH_TOKEN)
    access_token = request.cookies.get(COOKIE_ACCESS_TOKEN)

    if not refresh_token and not access_token:
        return await call_next(request)

    if access_token:
        try:
            data = auth.decode_access_token(access_token)
            request.state.username = data.get("username")
        except JWTError as e:
            logger.debug(f"Access token rejected: {e}")

    if request.state.username or not refresh_token:
        return await call_next(request)

    refreshed = await run_in_threadpool(_refresh, refresh_token)
    if refreshed is None:
        return await call_next(request)

    username, tokens = refreshed
    request.state.username = username
    response = await call_next(request)
    # A resolver that logged in or out owns the cookies on this response.
    written = getattr(request.state, "auth_cookies_written", False)
    cleared = getattr(request.state, "auth_cookies_cleared", False)
    if not written and not cleared:
        auth.set_auth_cookies(response, tokens)
        logger.info(f"Rotated tokens for {username}")
    return response
