"""Routes for sending and answering friendship requests."""
from __future__ import annotations

from typing import cast

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import FriendshipEdge, FriendshipRequestPayload, FriendshipRequestsResponse
from ..services import accept_request, decline_request, get_current_user, list_requests, send_request

router = APIRouter(prefix="/friendship-requests", tags=["friendship-requests"])


@router.get("/", response_model=FriendshipRequestsResponse)
async def pending_requests(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_session),
) -> FriendshipRequestsResponse:
    incoming, outgoing = list_requests(db, user_id=cast(int, current_user.id))
    return FriendshipRequestsResponse(
        incoming=[FriendshipEdge.model_validate(edge) for edge in incoming],
        outgoing=[FriendshipEdge.model_validate(edge) for edge in outgoing],
    )


@router.post("/send", status_code=status.HTTP_204_NO_CONTENT)
async def send_friendship_request(
    payload: FriendshipRequestPayload,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_session),
) -> Response:
    send_request(db, requester_id=cast(int, current_user.id), target_id=payload.friend_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/accept", status_code=status.HTTP_204_NO_CONTENT)
async def accept_friendship_request(
    payload: FriendshipRequestPayload,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_session),
) -> Response:
    accept_request(db, responder_id=cast(int, current_user.id), requester_id=payload.friend_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/decline", status_code=status.HTTP_204_NO_CONTENT)
async def decline_friendship_request(
    payload: FriendshipRequestPayload,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_session),
) -> Response:
    decline_request(db, responder_id=cast(int, current_user.id), requester_id=payload.friend_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
