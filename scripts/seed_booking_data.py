#!/usr/bin/env python3
"""
Seed everything a user needs before booking a room.

Creates (for an existing user): an enrollment, a ticket of the requested
kind, and a hotel with a few rooms.

Usage:
    python scripts/seed_booking_data.py --email guest@hotelbooking.dev
    python scripts/seed_booking_data.py --email guest@hotelbooking.dev --ticket reserved
    python scripts/seed_booking_data.py --email guest@hotelbooking.dev --ticket remote --rooms 1,2,3
"""

import argparse
import asyncio
import sys
from datetime import date

from app.database import get_db_context
from app.domain.booking_rules import TicketStatus
from app.models import Enrollment, Hotel, Room, Ticket, TicketType
from app.repositories import enrollment_repository, user_repository

TICKET_KINDS = {
    # kind: (ticket type name, is_remote, includes_hotel, status)
    "hotel": ("In person + hotel", False, True, TicketStatus.PAID),
    "no-hotel": ("In person", False, False, TicketStatus.PAID),
    "remote": ("Online", True, False, TicketStatus.PAID),
    "reserved": ("In person + hotel", False, True, TicketStatus.RESERVED),
}


async def seed(email: str, ticket_kind: str, capacities: list[int]) -> None:
    async with get_db_context() as session:
        user = await user_repository.find_by_email(session, email)
        if not user:
            print(f"ERROR: user {email} does not exist; run scripts/create_user.py first")
            sys.exit(1)

        enrollment = await enrollment_repository.find_by_user_id(session, user.id)
        if not enrollment:
            enrollment = Enrollment(
                user_id=user.id,
                name=email.split("@")[0],
                cpf="000.000.000-00",
                birthday=date(1990, 1, 1),
                phone="(21) 99999-9999",
            )
            session.add(enrollment)
            await session.flush()
            print(f"Created enrollment {enrollment.id}")

        name, is_remote, includes_hotel, status = TICKET_KINDS[ticket_kind]
        ticket_type = TicketType(
            name=name,
            price=25000 if includes_hotel else 15000,
            is_remote=is_remote,
            includes_hotel=includes_hotel,
        )
        session.add(ticket_type)
        await session.flush()

        ticket = Ticket(
            enrollment_id=enrollment.id,
            ticket_type_id=ticket_type.id,
            status=status.value,
        )
        session.add(ticket)

        hotel = Hotel(name="Driven Resort", image="https://example.com/hotel.jpg")
        session.add(hotel)
        await session.flush()

        rooms = [
            Room(name=str(100 + i), capacity=capacity, hotel_id=hotel.id)
            for i, capacity in enumerate(capacities, start=1)
        ]
        session.add_all(rooms)
        await session.flush()

        print(f"Created {ticket_kind} ticket {ticket.id} ({status.value})")
        print(f"Created hotel {hotel.id} with rooms:")
        for room in rooms:
            print(f"  room {room.id}: {room.name} (capacity {room.capacity})")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed booking prerequisites for a user")
    parser.add_argument("--email", default="guest@hotelbooking.dev", help="Existing user email")
    parser.add_argument("--ticket", choices=sorted(TICKET_KINDS), default="hotel", help="Ticket kind")
    parser.add_argument("--rooms", default="1,2,3", help="Comma-separated room capacities")
    args = parser.parse_args()

    asyncio.run(seed(args.email, args.ticket, [int(c) for c in args.rooms.split(",")]))
