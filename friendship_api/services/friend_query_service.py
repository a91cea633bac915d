"""Read-only queries over accepted friendships."""
from __future__ import annotations

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.orm import Session, aliased

from ..models import Friendship, FriendshipStatus, User
from ..schemas import FriendProfile, FriendSummary


def _total_friend_counts():
    """Accepted outgoing edge count for every user that has at least one."""

    return (
        select(
            Friendship.user_id.label("user_id"),
            func.count(Friendship.friend_user_id).label("total_friend_count"),
        )
        .where(Friendship.status == FriendshipStatus.ACCEPTED)
        .group_by(Friendship.user_id)
        .subquery("user_total_friend_count")
    )


def _mutual_friend_count(user_id: int, friend_user_id: int):
    """Number of users both parties have an accepted edge to."""

    fs1 = aliased(Friendship, name="fs1")
    fs2 = aliased(Friendship, name="fs2")
    return (
        select(func.count())
        .select_from(fs1)
        .join(fs2, fs1.friend_user_id == fs2.friend_user_id)
        .where(
            fs1.user_id == user_id,
            fs2.user_id == friend_user_id,
            fs1.status == FriendshipStatus.ACCEPTED,
            fs2.status == FriendshipStatus.ACCEPTED,
        )
        .scalar_subquery()
    )


def get_friend_profile(db: Session, *, viewer_id: int, friend_user_id: int) -> FriendProfile:
    """Return ``friend_user_id``'s profile as seen by an accepted friend."""

    totals = _total_friend_counts()
    stmt = (
        select(
            User.id,
            User.full_name,
            User.phone_number,
            func.coalesce(totals.c.total_friend_count, 0).label("total_friend_count"),
            _mutual_friend_count(viewer_id, friend_user_id).label("mutual_friend_count"),
        )
        .select_from(User)
        .join(Friendship, Friendship.friend_user_id == User.id)
        .outerjoin(totals, totals.c.user_id == User.id)
        .where(
            Friendship.user_id == viewer_id,
            Friendship.friend_user_id == friend_user_id,
            Friendship.status == FriendshipStatus.ACCEPTED,
        )
        .limit(1)
    )
    row = db.execute(stmt).mappings().first()
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Friend not found")
    return FriendProfile.model_validate(dict(row))


def list_friends(db: Session, *, user_id: int) -> list[FriendSummary]:
    stmt = (
        select(User)
        .join(Friendship, Friendship.friend_user_id == User.id)
        .where(Friendship.user_id == user_id, Friendship.status == FriendshipStatus.ACCEPTED)
        .order_by(User.full_name.asc(), User.id.asc())
    )
    return [FriendSummary.model_validate(friend) for friend in db.scalars(stmt)]


__all__ = ["get_friend_profile", "list_friends"]
