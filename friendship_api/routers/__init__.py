"""Aggregate router exports."""
from .friendship_requests import router as friendship_requests_router
from .my_friends import router as my_friends_router

__all__ = [
    "friendship_requests_router",
    "my_friends_router",
]
