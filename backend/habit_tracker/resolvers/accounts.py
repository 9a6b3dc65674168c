import logging
from strawberry.types import Info
from .. import auth, crud, schemas
from ..errors import InvalidCredentialsError
from ..graphql_types import LoginInput, LoginPayload, RegisterInput, RegisterPayload, User
from ..guards import authenticated, use_guards

logger = logging.getLogger(__name__)


@schemas.validated(schemas.RegisterIn)
def register(info: Info, data: RegisterInput) -> RegisterPayload:
    user = crud.create_user(
        info.context.db,
        email=data.email,
        hashed_password=auth.get_password_hash(data.password),
        username=data.username,
        firstname=data.firstname,
        lastname=data.lastname,
    )
    logger.info(f"Registered user {user.username} (id={user.id})")
    return RegisterPayload(user=User.from_model(user))


@schemas.validated(schemas.LoginIn)
def login(info: Info, data: LoginInput) -> LoginPayload:
    user = crud.get_user_by_email(info.context.db, email=data.email)
    if not user or not auth.verify_password(data.password, user.password):
        logger.info("Rejected login attempt")
        raise InvalidCredentialsError()

    info.context.set_auth_cookies(auth.create_tokens(user))
    logger.info(f"User {user.username} logged in")
    return LoginPayload(user=User.from_model(user))


@use_guards(authenticated)
def me(info: Info) -> User:
    return User.from_model(info.context.current_user())


def revoke_tokens(info: Info) -> bool:
    if not info.context.username:
        return False

    auth.invalidate_tokens(info.context.db, info.context.username)
    info.context.clear_auth_cookies()
    return True
