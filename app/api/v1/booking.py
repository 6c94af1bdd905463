"""Booking endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_booking_service, get_current_user, get_db
from app.core.middleware import booking_limiter
from app.models.booking import Booking
from app.models.user import User
from app.schemas.booking import BookingIdResponse, BookingResponse, BookingRoomRequest
from app.services.booking_service import BookingService

router = APIRouter()


@router.get("", response_model=BookingResponse)
async def get_booking(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[BookingService, Depends(get_booking_service)],
) -> Booking:
    """Get the current user's booking and its room."""
    return await service.get_booking(db, current_user.id)


@router.post("", response_model=BookingIdResponse, dependencies=[Depends(booking_limiter)])
async def make_reservation(
    body: BookingRoomRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[BookingService, Depends(get_booking_service)],
) -> BookingIdResponse:
    """Reserve a room for the current user."""
    booking_id = await service.make_reservation(db, current_user.id, body.room_id)
    return BookingIdResponse(booking_id=booking_id)


@router.put(
    "/{booking_id}",
    response_model=BookingIdResponse,
    dependencies=[Depends(booking_limiter)],
)
async def update_booking(
    booking_id: Annotated[int, Path(gt=0)],
    body: BookingRoomRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[BookingService, Depends(get_booking_service)],
) -> BookingIdResponse:
    """Move the current user's booking to another room."""
    booking_id = await service.update_booking(db, current_user.id, booking_id, body.room_id)
    return BookingIdResponse(booking_id=booking_id)
