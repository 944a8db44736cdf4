import datetime
from typing import Any, Mapping

from databases import Database
from sentry_sdk.tracing import trace

from evently.events import tables as events_tables

from . import tables
from .schemas import User, UserCreate, UserUpdate


def _user(user_r: Mapping[str, Any]) -> User:
    return User(
        id=user_r["id"],
        clerk_id=user_r["clerk_id"],
        email=user_r["email"],
        username=user_r["username"],
        first_name=user_r["first_name"],
        last_name=user_r["last_name"],
        photo=user_r["photo"],
        created_at=user_r["created_at"],
    )


@trace
async def get_user_by_id(database: Database, user_id: int) -> User | None:
    user_r = await database.fetch_one(
        query=tables.users.select().where(tables.users.c.id == user_id)
    )
    if user_r is None:
        return None
    return _user(user_r)


@trace
async def get_user_by_clerk_id(database: Database, clerk_id: str) -> User | None:
    user_r = await database.fetch_one(
        query=tables.users.select().where(tables.users.c.clerk_id == clerk_id)
    )
    if user_r is None:
        return None
    return _user(user_r)


@trace
async def create_user(database: Database, user: UserCreate) -> User:
    async with database.transaction():
        user_id: int = await database.execute(
            query=tables.users.insert().values(
                clerk_id=user.clerk_id,
                email=user.email,
                username=user.username,
                first_name=user.first_name,
                last_name=user.last_name,
                photo=user.photo,
                created_at=datetime.datetime.now(datetime.timezone.utc),
            )
        )
        created = await get_user_by_id(database, user_id)
    assert created is not None
    return created


@trace
async def update_user(
    database: Database, clerk_id: str, fields: UserUpdate
) -> User | None:
    async with database.transaction():
        existing = await get_user_by_clerk_id(database, clerk_id)
        if existing is None:
            return None
        await database.execute(
            query=tables.users.update()
            .where(tables.users.c.clerk_id == clerk_id)
            .values(
                first_name=fields.first_name,
                last_name=fields.last_name,
                username=fields.username,
                photo=fields.photo,
            )
        )
        return await get_user_by_clerk_id(database, clerk_id)


@trace
async def delete_user(database: Database, clerk_id: str) -> User | None:
    """
    Deletes a user by their Clerk id.
    Events they organized are kept but no longer have an organizer.
    """
    async with database.transaction():
        existing = await get_user_by_clerk_id(database, clerk_id)
        if existing is None:
            return None
        await database.execute(
            query=events_tables.events.update()
            .where(events_tables.events.c.organizer_id == existing.id)
            .values(organizer_id=None)
        )
        await database.execute(
            query=tables.users.delete().where(tables.users.c.id == existing.id)
        )
    return existing
