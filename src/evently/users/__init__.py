from .repo import (
    create_user,
    delete_user,
    get_user_by_clerk_id,
    get_user_by_id,
    update_user,
)
from .schemas import User, UserCreate, UserUpdate

__all__ = [
    "User",
    "UserCreate",
    "UserUpdate",
    "create_user",
    "delete_user",
    "get_user_by_clerk_id",
    "get_user_by_id",
    "update_user",
]
