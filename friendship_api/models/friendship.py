"""ORM model for one direction of a friendship between two users."""
from __future__ import annotations

import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from friendship_api.database import Base


class FriendshipStatus(str, enum.Enum):
    REQUESTED = "requested"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class Friendship(Base):
    """Directed edge owned by ``user_id`` pointing at ``friend_user_id``.

    The reverse direction is a separate row. Accepting a request keeps both rows
    in sync; nothing at the storage layer enforces symmetry.
    """

    __tablename__ = "friendships"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    friend_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(
        Enum(
            FriendshipStatus,
            name="friendship_status",
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
        default=FriendshipStatus.REQUESTED,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = relationship("User", foreign_keys=[user_id], back_populates="outgoing_friendships")
    friend = relationship("User", foreign_keys=[friend_user_id], back_populates="incoming_friendships")

    __table_args__ = (UniqueConstraint("user_id", "friend_user_id", name="uq_friendship_direction"),)

    def __repr__(self) -> str:
        return f"<Friendship {self.user_id}->{self.friend_user_id} {self.status}>"


__all__ = ["Friendship", "FriendshipStatus"]
