"""Convenience exports for schema layer."""
from .friendships import (
    FriendProfile,
    FriendshipEdge,
    FriendshipRequestPayload,
    FriendshipRequestsResponse,
    FriendSummary,
)

__all__ = [
    "FriendProfile",
    "FriendshipEdge",
    "FriendshipRequestPayload",
    "FriendshipRequestsResponse",
    "FriendSummary",
]
