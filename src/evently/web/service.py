import logging
from typing import Any, assert_never

from databases import Database
from fastapi.encoders import jsonable_encoder

from evently import events, users
from evently.users.clerk import Clerk

from .schemas import (
    UnhandledEvent,
    UserCreatedEvent,
    UserDeletedEvent,
    UserUpdatedEvent,
    WebhookEvent,
)

logger = logging.getLogger(__name__)


async def get_organized_events(
    database: Database, user_id: int | None, page: int
) -> events.EventsPage:
    return await events.get_events_by_user(database, user_id=user_id, page=page)


async def handle_webhook_event(
    database: Database, clerk: Clerk, event: WebhookEvent
) -> dict[str, Any]:
    """
    Syncs one Clerk user lifecycle event into the users table and returns
    the json body to acknowledge it with.
    """
    match event:
        case UserCreatedEvent(data=data):
            logger.info("Processing %s event for user %s", event.type, data.id)
            new_user = await users.create_user(
                database,
                users.UserCreate(
                    clerk_id=data.id,
                    email=data.primary_email(),
                    username=data.username,
                    first_name=data.first_name,
                    last_name=data.last_name,
                    photo=data.image_url,
                ),
            )
            logger.info("User created in database: %s", new_user)
            await clerk.update_user_metadata(data.id, {"userId": new_user.id})
            return {
                "message": "User created successfully",
                "user": jsonable_encoder(new_user),
            }
        case UserUpdatedEvent(data=data):
            logger.info("Processing %s event for user %s", event.type, data.id)
            updated_user = await users.update_user(
                database,
                data.id,
                users.UserUpdate(
                    first_name=data.first_name,
                    last_name=data.last_name,
                    username=data.username,
                    photo=data.image_url,
                ),
            )
            logger.info("User updated in database: %s", updated_user)
            return {
                "message": "User updated successfully",
                "user": jsonable_encoder(updated_user),
            }
        case UserDeletedEvent(data=data):
            logger.info("Processing %s event for user %s", event.type, data.id)
            deleted_user = await users.delete_user(database, data.id)
            logger.info("User deleted from database: %s", deleted_user)
            return {
                "message": "User deleted successfully",
                "user": jsonable_encoder(deleted_user),
            }
        case UnhandledEvent():
            logger.info("Unhandled event type: %s", event.type)
            return {"message": "Webhook received"}
        case _event as unknown:
            assert_never(unknown)
