from typing import Any, Literal

from pydantic import BaseModel


class ClerkEmailAddress(BaseModel):
    id: str
    email_address: str


class ClerkUserData(BaseModel):
    id: str
    email_addresses: list[ClerkEmailAddress] = []
    primary_email_address_id: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    image_url: str

    def primary_email(self) -> str:
        for email in self.email_addresses:
            if email.id == self.primary_email_address_id:
                return email.email_address
        if not self.email_addresses:
            raise ValueError(f"User {self.id} has no email addresses")
        return self.email_addresses[0].email_address


class ClerkDeletedObject(BaseModel):
    id: str
    deleted: bool = True


class UserCreatedEvent(BaseModel):
    type: Literal["user.created"] = "user.created"
    data: ClerkUserData


class UserUpdatedEvent(BaseModel):
    type: Literal["user.updated"] = "user.updated"
    data: ClerkUserData


class UserDeletedEvent(BaseModel):
    type: Literal["user.deleted"] = "user.deleted"
    data: ClerkDeletedObject


class UnhandledEvent(BaseModel):
    type: str


WebhookEvent = UserCreatedEvent | UserUpdatedEvent | UserDeletedEvent | UnhandledEvent


def parse_webhook_event(payload: dict[str, Any]) -> WebhookEvent:
    match payload.get("type"):
        case "user.created":
            return UserCreatedEvent.model_validate(payload)
        case "user.updated":
            return UserUpdatedEvent.model_validate(payload)
        case "user.deleted":
            return UserDeletedEvent.model_validate(payload)
        case _:
            return UnhandledEvent(type=str(payload.get("type")))
