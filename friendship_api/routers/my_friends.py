"""Routes for reading accepted friends."""
from __future__ import annotations

from typing import cast

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from ..database import get_read_session
from ..models import User
from ..schemas import FriendProfile, FriendSummary
from ..services import get_current_user, get_friend_profile, list_friends

router = APIRouter(prefix="/my-friends", tags=["my-friends"])


@router.get("/", response_model=list[FriendSummary])
async def my_friends(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_read_session),
) -> list[FriendSummary]:
    return list_friends(db, user_id=cast(int, current_user.id))


@router.get("/{friend_user_id}", response_model=FriendProfile)
async def friend_profile(
    friend_user_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_read_session),
) -> FriendProfile:
    return get_friend_profile(db, viewer_id=cast(int, current_user.id), friend_user_id=friend_user_id)


__all__ = ["router"]
