"""Database models."""

from app.models.booking import Booking
from app.models.enrollment import Enrollment
from app.models.hotel import Hotel, Room
from app.models.ticket import Ticket, TicketType
from app.models.user import Session, User

__all__ = [
    # User
    "User",
    "Session",
    # Enrollment
    "Enrollment",
    # Ticket
    "Ticket",
    "TicketType",
    # Hotel
    "Hotel",
    "Room",
    # Booking
    "Booking",
]
