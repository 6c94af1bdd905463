"""Reservation admission and transfer rules.

Create reservation, evaluated in order (first failure wins):
    enrollment exists -> ticket allows hotel -> room exists -> room has vacancy
    -> user holds no booking yet

Transfer, evaluated in order:
    caller holds a booking -> target booking exists -> caller owns it
    -> room exists -> room has vacancy

The order decides which error a multiply-invalid request gets, so callers
must look entities up and assert on them in exactly this sequence.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from app.core.exceptions import AuthorizationError, NotFoundError

if TYPE_CHECKING:
    from app.models.booking import Booking
    from app.models.hotel import Room
    from app.models.ticket import Ticket


class TicketStatus(str, Enum):
    """Ticket payment status."""

    RESERVED = "RESERVED"
    PAID = "PAID"


class DenyReason(str, Enum):
    """Every way a reservation or transfer can be refused."""

    NO_ENROLLMENT = "no_enrollment"
    TICKET_NOT_ELIGIBLE = "ticket_not_eligible"
    ROOM_NOT_FOUND = "room_not_found"
    ROOM_FULL = "room_full"
    ALREADY_BOOKED = "already_booked"
    NOTHING_TO_TRANSFER = "nothing_to_transfer"
    BOOKING_NOT_FOUND = "booking_not_found"
    NOT_BOOKING_OWNER = "not_booking_owner"


DENY_MESSAGES: dict[DenyReason, str] = {
    DenyReason.TICKET_NOT_ELIGIBLE: "Ticket must be paid, in person and include hotel",
    DenyReason.ROOM_FULL: "Room is at full capacity",
    DenyReason.ALREADY_BOOKED: "User already has a booking",
    DenyReason.NOTHING_TO_TRANSFER: "User has no booking to change",
    DenyReason.NOT_BOOKING_OWNER: "Booking belongs to another user",
}


class BookingDenied(AuthorizationError):
    """A booking rule refused the request."""

    def __init__(self, reason: DenyReason) -> None:
        self.reason = reason
        super().__init__(DENY_MESSAGES[reason])


class BookingResourceNotFound(NotFoundError):
    """A resource the booking rules depend on does not exist."""

    def __init__(self, reason: DenyReason, resource: str, identifier: Any = None) -> None:
        self.reason = reason
        super().__init__(resource, str(identifier) if identifier is not None else None)


def is_ticket_eligible(status: str, is_remote: bool, includes_hotel: bool) -> bool:
    """Whether a ticket entitles its holder to a hotel room."""
    return status != TicketStatus.RESERVED.value and not is_remote and includes_hotel


def has_vacancy(capacity: int, occupied: int) -> bool:
    """Whether a room can take one more booking."""
    return occupied < capacity


def assert_enrollment_exists(enrollment: Any) -> None:
    if enrollment is None:
        raise BookingResourceNotFound(DenyReason.NO_ENROLLMENT, "Enrollment")


def assert_ticket_allows_hotel(ticket: Ticket | None) -> None:
    if ticket is None:
        raise BookingDenied(DenyReason.TICKET_NOT_ELIGIBLE)
    ticket_type = ticket.ticket_type
    if not is_ticket_eligible(ticket.status, ticket_type.is_remote, ticket_type.includes_hotel):
        raise BookingDenied(DenyReason.TICKET_NOT_ELIGIBLE)


def assert_room_exists(room: Room | None, room_id: int) -> None:
    if room is None:
        raise BookingResourceNotFound(DenyReason.ROOM_NOT_FOUND, "Room", room_id)


def assert_room_has_vacancy(room: Room, occupied: int) -> None:
    if not has_vacancy(room.capacity, occupied):
        raise BookingDenied(DenyReason.ROOM_FULL)


def assert_no_existing_booking(existing: Booking | None) -> None:
    if existing is not None:
        raise BookingDenied(DenyReason.ALREADY_BOOKED)


def assert_has_booking(own_booking: Booking | None) -> None:
    if own_booking is None:
        raise BookingDenied(DenyReason.NOTHING_TO_TRANSFER)


def assert_booking_exists(booking: Booking | None, booking_id: int) -> None:
    if booking is None:
        raise BookingResourceNotFound(DenyReason.BOOKING_NOT_FOUND, "Booking", booking_id)


def assert_owns_booking(own_booking: Booking, booking: Booking) -> None:
    """The booking found by id must be the one the caller holds."""
    if own_booking.id != booking.id:
        raise BookingDenied(DenyReason.NOT_BOOKING_OWNER)
