"""Data access for the booking flow: lookups, inserts and updates only."""

from app.repositories.booking_repository import BookingRepository, booking_repository
from app.repositories.enrollment_repository import EnrollmentRepository, enrollment_repository
from app.repositories.room_repository import RoomRepository, room_repository
from app.repositories.ticket_repository import TicketRepository, ticket_repository
from app.repositories.user_repository import UserRepository, user_repository

__all__ = [
    "BookingRepository",
    "EnrollmentRepository",
    "RoomRepository",
    "TicketRepository",
    "UserRepository",
    "booking_repository",
    "enrollment_repository",
    "room_repository",
    "ticket_repository",
    "user_repository",
]
