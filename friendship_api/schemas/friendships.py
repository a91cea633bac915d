"""Schemas for friendship requests and friend profiles."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt
from pydantic.alias_generators import to_camel

from ..models import FriendshipStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class FriendshipRequestPayload(_CamelModel):
    friend_user_id: int = Field(..., gt=0, description="Id of the other user")


class FriendshipEdge(_CamelModel):
    user_id: int
    friend_user_id: int
    status: FriendshipStatus
    created_at: datetime


class FriendshipRequestsResponse(_CamelModel):
    incoming: list[FriendshipEdge]
    outgoing: list[FriendshipEdge]


class FriendSummary(_CamelModel):
    id: int
    full_name: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)


class FriendProfile(FriendSummary):
    total_friend_count: NonNegativeInt
    mutual_friend_count: NonNegativeInt


__all__ = [
    "FriendshipRequestPayload",
    "FriendshipEdge",
    "FriendshipRequestsResponse",
    "FriendSummary",
    "FriendProfile",
]
