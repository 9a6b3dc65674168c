from typing import List
import strawberry
from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import GraphQLRouter
from .config import GRAPHIQL
from .database import get_db
from .graphql_types import (
    AddHabitPayload,
    Entry,
    GraphQLContext,
    Habit,
    LoginPayload,
    RegisterPayload,
    ToggleEntryPayload,
    UpdateHabitPayload,
    User,
)
from .resolvers import accounts as account_resolvers
from .resolvers import entries as entry_resolvers
from .resolvers import habits as habit_resolvers
from .resolvers import users as user_resolvers


@strawberry.type
class Query:
    me: User = strawberry.field(resolver=account_resolvers.me)
    users: List[User] = strawberry.field(resolver=user_resolvers.users)
    my_habits: List[Habit] = strawberry.field(resolver=habit_resolvers.my_habits)
    habit: Habit = strawberry.field(resolver=habit_resolvers.habit)
    entries: List[Entry] = strawberry.field(resolver=entry_resolvers.entries)
    entries_for_month: List[Entry] = strawberry.field(resolver=entry_resolvers.entries_for_month)


@strawberry.type
class Mutation:
    register: RegisterPayload = strawberry.mutation(resolver=account_resolvers.register)
    login: LoginPayload = strawberry.mutation(resolver=account_resolvers.login)
    revoke_tokens: bool = strawberry.mutation(resolver=account_resolvers.revoke_tokens)
    add_habit: AddHabitPayload = strawberry.mutation(resolver=habit_resolvers.add_habit)
    update_habit: UpdateHabitPayload = strawberry.mutation(resolver=habit_resolvers.update_habit)
    remove_habit: Habit = strawberry.mutation(resolver=habit_resolvers.remove_habit)
    toggle_entry: ToggleEntryPayload = strawberry.mutation(resolver=entry_resolvers.toggle_entry)
    update_password: bool = strawberry.mutation(resolver=user_resolvers.update_password)
    update_email: bool = strawberry.mutation(resolver=user_resolvers.update_email)
    update_username: bool = strawberry.mutation(resolver=user_resolvers.update_username)
    update_me: User = strawberry.mutation(resolver=user_resolvers.update_me)
    delete_my_account: User = strawberry.mutation(resolver=user_resolvers.delete_my_account)


schema = strawberry.Schema(query=Query, mutation=Mutation)


def get_context(db: Session = Depends(get_db)) -> GraphQLContext:
    return GraphQLContext(db)


def create_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(schema, context_getter=get_context, graphql_ide="graphiql" if GRAPHIQL else None)
