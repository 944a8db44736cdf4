from datetime import datetime

from pydantic import BaseModel


class EventCreate(BaseModel):
    title: str
    description: str | None = None
    location: str | None = None
    image_url: str
    start_date_time: datetime
    end_date_time: datetime
    price: str | None = None
    is_free: bool = False
    url: str | None = None


class Event(EventCreate):
    id: int
    organizer_id: int | None
    created_at: datetime


class EventsPage(BaseModel):
    data: list[Event]
    total_pages: int
