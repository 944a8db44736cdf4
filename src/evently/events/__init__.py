from .schemas import Event, EventCreate, EventsPage
from .service import PAGE_SIZE, create_event, get_events_by_user

__all__ = [
    "Event",
    "EventCreate",
    "EventsPage",
    "PAGE_SIZE",
    "create_event",
    "get_events_by_user",
]
