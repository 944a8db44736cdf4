from databases import Database
from fastapi import HTTPException, status

from evently import users

from . import repo
from .schemas import EventCreate, EventsPage

PAGE_SIZE = 6


async def create_event(
    database: Database, organizer_id: int, event: EventCreate
) -> int:
    organizer = await users.get_user_by_id(database, organizer_id)
    if organizer is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unknown user.",
        )
    if event.end_date_time < event.start_date_time:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Event can't end before it starts.",
        )
    return await repo.create_event(database, organizer_id, event)


async def get_events_by_user(
    database: Database, user_id: int | None, page: int = 1, limit: int = PAGE_SIZE
) -> EventsPage:
    """
    A page of the events organized by a user, newest first.
    A user id of None (a session whose Clerk metadata hasn't been linked
    yet) gets an empty page.
    """
    if user_id is None:
        return EventsPage(data=[], total_pages=0)
    return await repo.get_events_by_user(database, user_id, max(page, 1), limit)
