"""
Test configuration and fixtures.

Database access is replaced by AsyncMock repositories so the booking rules,
the service and the HTTP layer can be exercised without PostgreSQL.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import AsyncGenerator
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_booking_service, get_current_user, get_db
from app.main import app
from app.models import Booking, User
from app.services.booking_service import BookingService
from tests.factories import make_enrollment, make_room, make_ticket, make_user

# ============================================================================
# MOCK FIXTURES
# ============================================================================

@pytest.fixture
def mock_db_session():
    """Mock database session."""
    session = MagicMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def repos():
    """Repositories with every data access method mocked.

    Defaults describe an eligible user with no booking and an empty room.
    """
    bookings = MagicMock()
    bookings.find_by_id = AsyncMock(return_value=None)
    bookings.find_by_user_id = AsyncMock(return_value=None)
    bookings.count_by_room_id = AsyncMock(return_value=0)
    bookings.create = AsyncMock(
        side_effect=lambda db, user_id, room_id: Booking(id=501, user_id=user_id, room_id=room_id)
    )
    bookings.update_room = AsyncMock(
        side_effect=lambda db, booking, room_id: setattr(booking, "room_id", room_id) or booking
    )

    rooms = MagicMock()
    rooms.find_by_id = AsyncMock(return_value=make_room())
    rooms.find_by_id_for_update = AsyncMock(return_value=make_room())

    enrollments = MagicMock()
    enrollments.find_by_user_id = AsyncMock(return_value=make_enrollment())

    tickets = MagicMock()
    tickets.find_by_enrollment_id = AsyncMock(return_value=make_ticket())

    return SimpleNamespace(bookings=bookings, rooms=rooms, enrollments=enrollments, tickets=tickets)


@pytest.fixture
def service(repos) -> BookingService:
    return BookingService(
        bookings=repos.bookings,
        rooms=repos.rooms,
        enrollments=repos.enrollments,
        tickets=repos.tickets,
    )


@pytest.fixture
def current_user() -> User:
    return make_user()


# ============================================================================
# HTTP FIXTURES
# ============================================================================

@pytest.fixture
def unauthenticated_client(mock_db_session, service):
    """Client with real authentication and a mocked database."""

    async def override_get_db() -> AsyncGenerator[MagicMock, None]:
        yield mock_db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_booking_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def client(unauthenticated_client, current_user):
    """Client signed in as ``current_user``."""
    app.dependency_overrides[get_current_user] = lambda: current_user
    return unauthenticated_client
