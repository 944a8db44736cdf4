from datetime import datetime

from pydantic import BaseModel

# Users are mirrored from Clerk by the webhook.
# clerk_id is Clerk's id, id is ours and gets written back to Clerk's
# public metadata as "userId".


class UserCreate(BaseModel):
    clerk_id: str
    email: str
    username: str | None
    first_name: str | None
    last_name: str | None
    photo: str


class UserUpdate(BaseModel):
    first_name: str | None
    last_name: str | None
    username: str | None
    photo: str


class User(UserCreate):
    id: int
    created_at: datetime
