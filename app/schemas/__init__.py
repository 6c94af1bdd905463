"""Pydantic schemas for API validation."""

from app.schemas.booking import (
    BookingIdResponse,
    BookingResponse,
    BookingRoomRequest,
    RoomResponse,
)
from app.schemas.user import SignInRequest, SignInResponse, UserResponse

__all__ = [
    # Booking
    "BookingRoomRequest",
    "BookingIdResponse",
    "BookingResponse",
    "RoomResponse",
    # User
    "SignInRequest",
    "SignInResponse",
    "UserResponse",
]
