import logging
from typing import List
from strawberry.types import Info
from .. import auth, crud, schemas
from ..errors import IncorrectPasswordError
from ..graphql_types import (
    DeleteMyAccountInput,
    UpdateEmailInput,
    UpdateMeInput,
    UpdatePasswordInput,
    UpdateUsernameInput,
    User,
)
from ..guards import authenticated, use_guards

logger = logging.getLogger(__name__)


def users(info: Info) -> List[User]:
    return [User.from_model(u) for u in crud.get_users(info.context.db)]


@schemas.validated(schemas.UpdatePasswordIn)
@use_guards(authenticated)
def update_password(info: Info, data: UpdatePasswordInput) -> bool:
    user = info.context.current_user()
    user.password = auth.get_password_hash(data.password)
    info.context.db.commit()

    auth.invalidate_tokens(info.context.db, user.username)
    info.context.clear_auth_cookies()
    logger.info(f"Password changed for {user.username}")
    return True


@schemas.validated(schemas.UpdateEmailIn)
@use_guards(authenticated)
def update_email(info: Info, data: UpdateEmailInput) -> bool:
    if crud.get_user_by_email(info.context.db, email=data.email):
        return False

    user = info.context.current_user()
    user.email = data.email
    info.context.db.commit()

    auth.invalidate_tokens(info.context.db, user.username)
    info.context.clear_auth_cookies()
    logger.info(f"Email changed for {user.username}")
    return True


@schemas.validated(schemas.UpdateUsernameIn)
@use_guards(authenticated)
def update_username(info: Info, data: UpdateUsernameInput) -> bool:
    if crud.get_user_by_username(info.context.db, username=data.username):
        return False

    user = info.context.current_user()
    old_username = user.username
    # Invalidate under the old name, tokens carry the username they were issued for.
    auth.invalidate_tokens(info.context.db, old_username)
    user.username = data.username
    info.context.db.commit()

    info.context.clear_auth_cookies()
    logger.info(f"Username changed from {old_username} to {data.username}")
    return True


@schemas.validated(schemas.UpdateMeIn)
@use_guards(authenticated)
def update_me(info: Info, data: UpdateMeInput) -> User:
    user = crud.update_user(
        info.context.db,
        info.context.current_user(),
        firstname=data.firstname,
        lastname=data.lastname,
    )
    return User.from_model(user)


@schemas.validated(schemas.DeleteMyAccountIn)
@use_guards(authenticated)
def delete_my_account(info: Info, data: DeleteMyAccountInput) -> User:
    user = info.context.current_user()
    if not auth.verify_password(data.password, user.password):
        raise IncorrectPasswordError()

    removed = User.from_model(user)
    crud.delete_user(info.context.db, user)
    info.context.clear_auth_cookies()
    logger.info(f"Deleted account {removed.username} (id={removed.id})")
    return removed
