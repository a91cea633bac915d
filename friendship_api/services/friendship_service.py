"""Business logic for sending and answering friendship requests.

Every relationship is stored as two independent directed rows. Sending a
request writes only the requester's row; accepting it flips the requester's
row and creates or updates the responder's row inside the same transaction so
callers never observe a half-accepted pair.
"""
from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy import and_, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..database import transaction
from ..models import Friendship, FriendshipStatus, User

logger = logging.getLogger(__name__)


def _get_edge(db: Session, user_id: int, friend_user_id: int, *, lock: bool = False) -> Friendship | None:
    stmt = (
        select(Friendship)
        .where(Friendship.user_id == user_id, Friendship.friend_user_id == friend_user_id)
        .execution_options(populate_existing=True)
    )
    if lock:
        stmt = stmt.with_for_update()
    return db.scalars(stmt).first()


def _lock_pair(db: Session, first_id: int, second_id: int) -> None:
    """Row-lock both directions of a pair, always in primary key order."""

    db.execute(
        select(Friendship.id)
        .where(
            or_(
                and_(Friendship.user_id == first_id, Friendship.friend_user_id == second_id),
                and_(Friendship.user_id == second_id, Friendship.friend_user_id == first_id),
            )
        )
        .order_by(Friendship.id.asc())
        .with_for_update()
    ).all()


def _require_target_user(db: Session, requester_id: int, target_id: int) -> None:
    if db.get(User, target_id) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User not found")
    if target_id == requester_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot befriend yourself")


def _require_pending_request(db: Session, requester_id: int, responder_id: int) -> None:
    pending = db.scalar(
        select(Friendship.id).where(
            Friendship.user_id == requester_id,
            Friendship.friend_user_id == responder_id,
            Friendship.status == FriendshipStatus.REQUESTED,
        )
    )
    if pending is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No pending request to answer")


def _answer_pending_request(db: Session, requester_id: int, responder_id: int, new_status: FriendshipStatus) -> None:
    # Only one answer can win: a concurrent accept/decline leaves nothing to update here.
    result = db.execute(
        update(Friendship)
        .where(
            Friendship.user_id == requester_id,
            Friendship.friend_user_id == responder_id,
            Friendship.status == FriendshipStatus.REQUESTED,
        )
        .values(status=new_status)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount != 1:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No pending request to answer")


def _insert_edge(db: Session, user_id: int, friend_user_id: int, edge_status: FriendshipStatus) -> Friendship | None:
    """Insert a new edge, returning ``None`` when a concurrent writer created it first."""

    edge = Friendship(user_id=user_id, friend_user_id=friend_user_id, status=edge_status)
    try:
        with db.begin_nested():
            db.add(edge)
    except IntegrityError:
        logger.warning("Edge %s->%s was created concurrently", user_id, friend_user_id)
        return None
    return edge


def send_request(db: Session, *, requester_id: int, target_id: int) -> Friendship:
    """Create or revive the ``requester -> target`` edge in ``requested`` state."""

    _require_target_user(db, requester_id, target_id)

    with transaction(db):
        edge = _get_edge(db, requester_id, target_id, lock=True)
        if edge is None:
            edge = _insert_edge(db, requester_id, target_id, FriendshipStatus.REQUESTED)
            if edge is None:
                # Lost the insert race; the row written by the other transaction gets the same rules.
                edge = _get_edge(db, requester_id, target_id, lock=True)
        if edge.status == FriendshipStatus.DECLINED:
            edge.status = FriendshipStatus.REQUESTED
        elif edge.status == FriendshipStatus.ACCEPTED:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Already friends")

    logger.info("Friendship requested %s->%s", requester_id, target_id)
    return edge


def accept_request(db: Session, *, responder_id: int, requester_id: int) -> tuple[Friendship, Friendship]:
    """Accept the pending ``requester -> responder`` edge and mirror it back.

    Returns the ``(original, reverse)`` pair, both ``accepted``.
    """

    _require_pending_request(db, requester_id, responder_id)

    with transaction(db):
        _lock_pair(db, requester_id, responder_id)
        _answer_pending_request(db, requester_id, responder_id, FriendshipStatus.ACCEPTED)

        reverse = _get_edge(db, responder_id, requester_id, lock=True)
        if reverse is None:
            reverse = _insert_edge(db, responder_id, requester_id, FriendshipStatus.ACCEPTED)
        if reverse is None:
            reverse = _get_edge(db, responder_id, requester_id, lock=True)
        reverse.status = FriendshipStatus.ACCEPTED

        original = _get_edge(db, requester_id, responder_id)

    logger.info("Friendship accepted %s<->%s", requester_id, responder_id)
    return original, reverse


def decline_request(db: Session, *, responder_id: int, requester_id: int) -> Friendship:
    """Decline the pending ``requester -> responder`` edge; the reverse edge is left alone."""

    _require_pending_request(db, requester_id, responder_id)

    with transaction(db):
        _answer_pending_request(db, requester_id, responder_id, FriendshipStatus.DECLINED)
        original = _get_edge(db, requester_id, responder_id)

    logger.info("Friendship declined %s->%s", requester_id, responder_id)
    return original


def list_requests(db: Session, *, user_id: int) -> tuple[list[Friendship], list[Friendship]]:
    """Return the user's pending ``(incoming, outgoing)`` requests."""

    incoming_stmt = (
        select(Friendship)
        .where(Friendship.friend_user_id == user_id, Friendship.status == FriendshipStatus.REQUESTED)
        .order_by(Friendship.created_at.asc(), Friendship.id.asc())
    )
    outgoing_stmt = (
        select(Friendship)
        .where(Friendship.user_id == user_id, Friendship.status == FriendshipStatus.REQUESTED)
        .order_by(Friendship.created_at.asc(), Friendship.id.asc())
    )
    return list(db.scalars(incoming_stmt)), list(db.scalars(outgoing_stmt))


__all__ = [
    "send_request",
    "accept_request",
    "decline_request",
    "list_requests",
]
