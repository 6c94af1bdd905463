"""Booking persistence."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.booking import Booking


class BookingRepository:
    """Queries and writes against the bookings table."""

    async def find_by_id(self, db: AsyncSession, booking_id: int) -> Booking | None:
        result = await db.execute(select(Booking).where(Booking.id == booking_id))
        return result.scalar_one_or_none()

    async def find_by_user_id(self, db: AsyncSession, user_id: int) -> Booking | None:
        """Get the user's booking with its room loaded."""
        result = await db.execute(
            select(Booking)
            .where(Booking.user_id == user_id)
            .options(selectinload(Booking.room))
            .order_by(Booking.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def count_by_room_id(self, db: AsyncSession, room_id: int) -> int:
        result = await db.execute(
            select(func.count()).select_from(Booking).where(Booking.room_id == room_id)
        )
        return result.scalar_one()

    async def create(self, db: AsyncSession, user_id: int, room_id: int) -> Booking:
        booking = Booking(user_id=user_id, room_id=room_id)
        db.add(booking)
        await db.flush()
        return booking

    async def update_room(self, db: AsyncSession, booking: Booking, room_id: int) -> Booking:
        booking.room_id = room_id
        await db.flush()
        return booking


booking_repository = BookingRepository()
