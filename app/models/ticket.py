"""Ticket and ticket type database models."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from app.database import Base
from app.domain.booking_rules import TicketStatus

if TYPE_CHECKING:
    from app.models.enrollment import Enrollment


class TicketType(Base):
    """Ticket category; its flags decide whether hotel booking is allowed."""

    __tablename__ = "ticket_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)  # in cents
    is_remote: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    includes_hotel: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    tickets: Mapped[list["Ticket"]] = relationship("Ticket", back_populates="ticket_type")


class Ticket(Base):
    """A ticket bought under an enrollment."""

    __tablename__ = "tickets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    enrollment_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("enrollments.id"), nullable=False, index=True
    )
    ticket_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("ticket_types.id"), nullable=False
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TicketStatus.RESERVED.value
    )  # RESERVED, PAID

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    enrollment: Mapped["Enrollment"] = relationship("Enrollment", back_populates="tickets")
    ticket_type: Mapped["TicketType"] = relationship("TicketType", back_populates="tickets")
