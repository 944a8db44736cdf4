import datetime
import math

import sqlalchemy
from databases import Database
from sentry_sdk.tracing import trace

from . import tables
from .schemas import Event, EventCreate, EventsPage


@trace
async def create_event(
    database: Database, organizer_id: int, event: EventCreate
) -> int:
    event_id: int = await database.execute(
        query=tables.events.insert().values(
            organizer_id=organizer_id,
            created_at=datetime.datetime.now(datetime.timezone.utc),
            **event.model_dump(),
        )
    )
    return event_id


@trace
async def get_events_by_user(
    database: Database, user_id: int, page: int, limit: int
) -> EventsPage:
    where = tables.events.c.organizer_id == user_id
    async with database.transaction():
        count = await database.fetch_val(
            query=sqlalchemy.select(sqlalchemy.func.count())
            .select_from(tables.events)
            .where(where)
        )
        events_r = await database.fetch_all(
            query=tables.events.select()
            .where(where)
            .order_by(tables.events.c.created_at.desc(), tables.events.c.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
    return EventsPage(
        data=[
            Event(
                id=event_r["id"],
                title=event_r["title"],
                description=event_r["description"],
                location=event_r["location"],
                image_url=event_r["image_url"],
                start_date_time=event_r["start_date_time"],
                end_date_time=event_r["end_date_time"],
                price=event_r["price"],
                is_free=event_r["is_free"],
                url=event_r["url"],
                organizer_id=event_r["organizer_id"],
                created_at=event_r["created_at"],
            )
            for event_r in events_r
        ],
        total_pages=math.ceil((count or 0) / limit),
    )
