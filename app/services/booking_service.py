"""Booking service: runs the reservation and transfer rules against the database."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.domain.booking_rules import (
    BookingDenied,
    BookingResourceNotFound,
    DenyReason,
    assert_booking_exists,
    assert_enrollment_exists,
    assert_has_booking,
    assert_no_existing_booking,
    assert_owns_booking,
    assert_room_exists,
    assert_room_has_vacancy,
    assert_ticket_allows_hotel,
)
from app.models.booking import Booking
from app.repositories import (
    BookingRepository,
    EnrollmentRepository,
    RoomRepository,
    TicketRepository,
    booking_repository,
    enrollment_repository,
    room_repository,
    ticket_repository,
)

logger = logging.getLogger(__name__)


class BookingService:
    """Service for reading, creating and transferring bookings.

    Each mutating call performs its checks and its single write inside the
    caller's transaction. The target room row is locked before its bookings
    are counted, so capacity cannot be exceeded by concurrent requests.
    """

    def __init__(
        self,
        bookings: BookingRepository = booking_repository,
        rooms: RoomRepository = room_repository,
        enrollments: EnrollmentRepository = enrollment_repository,
        tickets: TicketRepository = ticket_repository,
    ) -> None:
        self.bookings = bookings
        self.rooms = rooms
        self.enrollments = enrollments
        self.tickets = tickets

    async def get_booking(self, db: AsyncSession, user_id: int) -> Booking:
        """Get the user's booking together with its room."""
        booking = await self.bookings.find_by_user_id(db, user_id)
        if not booking:
            raise NotFoundError("Booking")
        return booking

    async def make_reservation(self, db: AsyncSession, user_id: int, room_id: int) -> int:
        """Book a room for the user and return the new booking id."""
        try:
            enrollment = await self.enrollments.find_by_user_id(db, user_id)
            assert_enrollment_exists(enrollment)

            ticket = await self.tickets.find_by_enrollment_id(db, enrollment.id)
            assert_ticket_allows_hotel(ticket)

            room = await self.rooms.find_by_id_for_update(db, room_id)
            assert_room_exists(room, room_id)

            occupied = await self.bookings.count_by_room_id(db, room_id)
            assert_room_has_vacancy(room, occupied)

            existing = await self.bookings.find_by_user_id(db, user_id)
            assert_no_existing_booking(existing)
        except (BookingDenied, BookingResourceNotFound) as exc:
            logger.info(f"Reservation refused: user={user_id} room={room_id} reason={exc.reason.value}")
            raise

        try:
            booking = await self.bookings.create(db, user_id, room_id)
        except IntegrityError:
            # Another request for the same user committed first.
            logger.warning(f"Reservation raced on unique user: user={user_id} room={room_id}")
            raise BookingDenied(DenyReason.ALREADY_BOOKED)

        logger.info(f"Reservation created: booking={booking.id} user={user_id} room={room_id}")
        return booking.id

    async def update_booking(
        self,
        db: AsyncSession,
        user_id: int,
        booking_id: int,
        room_id: int,
    ) -> int:
        """Move the user's booking to another room and return its id."""
        try:
            own_booking = await self.bookings.find_by_user_id(db, user_id)
            assert_has_booking(own_booking)

            booking = await self.bookings.find_by_id(db, booking_id)
            assert_booking_exists(booking, booking_id)
            assert_owns_booking(own_booking, booking)

            room = await self.rooms.find_by_id_for_update(db, room_id)
            assert_room_exists(room, room_id)

            occupied = await self.bookings.count_by_room_id(db, room_id)
            assert_room_has_vacancy(room, occupied)
        except (BookingDenied, BookingResourceNotFound) as exc:
            logger.info(
                f"Transfer refused: user={user_id} booking={booking_id} "
                f"room={room_id} reason={exc.reason.value}"
            )
            raise

        previous_room_id = booking.room_id
        await self.bookings.update_room(db, booking, room_id)
        logger.info(
            f"Booking transferred: booking={booking.id} user={user_id} "
            f"room {previous_room_id} -> {room_id}"
        )
        return booking.id


booking_service = BookingService()
