"""SQLAlchemy ORM model for application users."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from friendship_api.database import Base
from .friendship import Friendship


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(150), unique=True, nullable=False, index=True)
    full_name = Column(String(255), nullable=False)
    phone_number = Column(String(32), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    outgoing_friendships = relationship(
        Friendship,
        foreign_keys=[Friendship.user_id],
        back_populates="user",
        cascade="all, delete-orphan",
    )
    incoming_friendships = relationship(
        Friendship,
        foreign_keys=[Friendship.friend_user_id],
        back_populates="friend",
        cascade="all, delete-orphan",
    )


__all__ = ["User"]
