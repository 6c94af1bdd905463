"""Ticket persistence."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.ticket import Ticket


class TicketRepository:
    async def find_by_enrollment_id(self, db: AsyncSession, enrollment_id: int) -> Ticket | None:
        """Get the most recent ticket of an enrollment, with its type."""
        result = await db.execute(
            select(Ticket)
            .where(Ticket.enrollment_id == enrollment_id)
            .options(selectinload(Ticket.ticket_type))
            .order_by(Ticket.created_at.desc(), Ticket.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()


ticket_repository = TicketRepository()
