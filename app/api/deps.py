"""API dependencies for authentication and common operations."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AuthenticationError
from app.core.security import get_token_user_id, verify_token
from app.database import get_db
from app.models.user import User
from app.repositories import user_repository
from app.services.booking_service import BookingService, booking_service

# Missing credentials are reported as 401 by get_current_user, not 403 by HTTPBearer.
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """Get the current user from a bearer token bound to a live session."""
    if not credentials or not credentials.credentials:
        raise AuthenticationError("Missing bearer token")

    token = credentials.credentials
    payload = verify_token(token)
    user_id = get_token_user_id(payload)

    session = await user_repository.find_session_by_token(db, token)
    if not session or session.user_id != user_id:
        raise AuthenticationError("No active session for token")

    return session.user


def get_booking_service() -> BookingService:
    """Booking service dependency."""
    return booking_service
