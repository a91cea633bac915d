"""Bearer token handling for identifying the calling user."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from ..config import MissingSecretError, get_settings
from ..database import get_session
from ..models import User

logger = logging.getLogger(__name__)

_security = HTTPBearer(auto_error=False)


@lru_cache(maxsize=1)
def _get_jwt_secret() -> str:
    try:
        return get_settings().require_jwt_secret()
    except MissingSecretError as exc:
        raise RuntimeError(str(exc)) from exc


def create_access_token(user_id: int, *, expires_minutes: Optional[int] = None) -> str:
    """Create a signed JWT whose subject is ``user_id``."""

    settings = get_settings()
    expire_delta = timedelta(minutes=expires_minutes or settings.jwt_expires_minutes)
    now = datetime.now(timezone.utc)
    payload = {"sub": str(user_id), "exp": now + expire_delta, "iat": now}
    return jwt.encode(payload, _get_jwt_secret(), algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> int:
    """Decode and validate a JWT, returning the embedded user id."""

    settings = get_settings()
    try:
        payload = jwt.decode(token, _get_jwt_secret(), algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token") from exc

    subject = payload.get("sub")
    if not subject:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")
    try:
        return int(subject)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload") from exc


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(_security),
    db: Session = Depends(get_session),
) -> User:
    """Resolve the authenticated user from the provided bearer token."""

    if not credentials or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing bearer token")

    user_id = decode_access_token(credentials.credentials)

    user = db.get(User, user_id)
    if not user:
        logger.warning("Token subject %s does not match a user", user_id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    return user


__all__ = [
    "create_access_token",
    "decode_access_token",
    "get_current_user",
]
