"""Convenience exports for ORM models."""
from .friendship import Friendship, FriendshipStatus
from .user import User

__all__ = [
    "Friendship",
    "FriendshipStatus",
    "User",
]
