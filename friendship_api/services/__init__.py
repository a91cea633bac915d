"""Convenience exports for service layer."""
from .auth_service import create_access_token, decode_access_token, get_current_user
from .friend_query_service import get_friend_profile, list_friends
from .friendship_service import accept_request, decline_request, list_requests, send_request

__all__ = [
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "get_friend_profile",
    "list_friends",
    "send_request",
    "accept_request",
    "decline_request",
    "list_requests",
]
