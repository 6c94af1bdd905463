"""HTTP tests for /booking endpoints."""

from unittest.mock import MagicMock

import pytest

from app.core.security import create_access_token
from app.models.user import Session
from tests.factories import make_booking, make_room, make_ticket, make_user


def _session_lookup_returns(mock_db_session, session):
    result = MagicMock()
    result.scalar_one_or_none.return_value = session
    mock_db_session.execute.return_value = result


# ============================================================================
# AUTHENTICATION
# ============================================================================

@pytest.mark.parametrize(
    "method,path",
    [("get", "/booking"), ("post", "/booking"), ("put", "/booking/1")],
)
class TestAuthentication:
    def test_no_token_is_unauthorized(self, unauthenticated_client, method, path):
        response = getattr(unauthenticated_client, method)(path)

        assert response.status_code == 401
        assert response.json()["name"] == "UnauthorizedError"

    def test_invalid_token_is_unauthorized(self, unauthenticated_client, method, path):
        response = getattr(unauthenticated_client, method)(
            path, headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401

    def test_token_without_session_is_unauthorized(
        self, unauthenticated_client, mock_db_session, method, path
    ):
        _session_lookup_returns(mock_db_session, None)
        token = create_access_token(make_user().id)

        response = getattr(unauthenticated_client, method)(
            path, headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401


def test_token_with_session_is_accepted(unauthenticated_client, mock_db_session, repos):
    user = make_user()
    token = create_access_token(user.id)
    _session_lookup_returns(mock_db_session, Session(id=1, user_id=user.id, token=token, user=user))
    repos.bookings.find_by_user_id.return_value = make_booking(user_id=user.id)

    response = unauthenticated_client.get("/booking", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    repos.bookings.find_by_user_id.assert_awaited_once()
    assert repos.bookings.find_by_user_id.await_args.args[1] == user.id


# ============================================================================
# GET /booking
# ============================================================================

class TestGetBooking:
    def test_no_booking_is_not_found(self, client):
        response = client.get("/booking")

        assert response.status_code == 404
        assert response.json()["name"] == "NotFoundError"

    def test_returns_booking_with_room(self, client, repos):
        room = make_room(room_id=100, capacity=3, hotel_id=50)
        booking = make_booking(booking_id=500, user_id=1, room=room)
        repos.bookings.find_by_user_id.return_value = booking

        response = client.get("/booking")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 500
        assert set(body["Room"]) == {"id", "name", "capacity", "hotelId", "createdAt", "updatedAt"}
        assert body["Room"]["id"] == 100
        assert body["Room"]["name"] == "Room 100"
        assert body["Room"]["capacity"] == 3
        assert body["Room"]["hotelId"] == 50


# ============================================================================
# POST /booking
# ============================================================================

class TestMakeReservation:
    def test_eligible_user_gets_booking_id(self, client, repos):
        response = client.post("/booking", json={"roomId": 100})

        assert response.status_code == 200
        assert response.json() == {"bookingId": 501}

    def test_numeric_string_room_id_is_coerced(self, client, repos):
        response = client.post("/booking", json={"roomId": "100"})

        assert response.status_code == 200
        repos.bookings.create.assert_awaited_once()
        assert repos.bookings.create.await_args.args[2] == 100

    @pytest.mark.parametrize("body", [{}, {"roomId": 0}, {"roomId": -3}, {"roomId": "abc"}])
    def test_invalid_room_id_is_rejected(self, client, repos, body):
        response = client.post("/booking", json=body)

        assert response.status_code == 422
        assert response.json()["name"] == "InvalidDataError"
        repos.enrollments.find_by_user_id.assert_not_awaited()

    def test_validation_error_lists_fields(self, client):
        response = client.post("/booking", json={"roomId": 0})

        body = response.json()
        assert body["message"] == "Invalid request data"
        assert isinstance(body["detail"], list)
        assert body["detail"][0]["type"] == "greater_than"

    def test_no_enrollment_is_not_found(self, client, repos):
        repos.enrollments.find_by_user_id.return_value = None

        response = client.post("/booking", json={"roomId": 100})

        assert response.status_code == 404

    def test_unpaid_ticket_is_forbidden(self, client, repos):
        repos.tickets.find_by_enrollment_id.return_value = make_ticket(status="RESERVED")

        response = client.post("/booking", json={"roomId": 100})

        assert response.status_code == 403
        assert response.json()["name"] == "ForbiddenError"
        repos.bookings.create.assert_not_awaited()

    def test_remote_ticket_is_forbidden(self, client, repos):
        repos.tickets.find_by_enrollment_id.return_value = make_ticket(is_remote=True)

        response = client.post("/booking", json={"roomId": 100})

        assert response.status_code == 403

    def test_missing_room_is_not_found(self, client, repos):
        repos.rooms.find_by_id_for_update.return_value = None

        response = client.post("/booking", json={"roomId": 999})

        assert response.status_code == 404

    def test_full_room_is_forbidden(self, client, repos):
        repos.rooms.find_by_id_for_update.return_value = make_room(capacity=1)
        repos.bookings.count_by_room_id.return_value = 1

        response = client.post("/booking", json={"roomId": 100})

        assert response.status_code == 403
        assert response.json()["message"] == "Room is at full capacity"
        repos.bookings.create.assert_not_awaited()


# ============================================================================
# PUT /booking/{booking_id}
# ============================================================================

class TestUpdateBooking:
    @pytest.fixture
    def own_booking(self, repos):
        booking = make_booking(booking_id=500, user_id=1, room=make_room(room_id=100))
        repos.bookings.find_by_user_id.return_value = booking
        repos.bookings.find_by_id.return_value = booking
        repos.rooms.find_by_id_for_update.return_value = make_room(room_id=200, capacity=1)
        return booking

    def test_owner_moves_booking(self, client, repos, own_booking):
        response = client.put("/booking/500", json={"roomId": 200})

        assert response.status_code == 200
        assert response.json() == {"bookingId": 500}
        assert own_booking.room_id == 200

    def test_caller_without_booking_is_forbidden(self, client, repos):
        response = client.put("/booking/1", json={"roomId": 200})

        assert response.status_code == 403

    def test_other_users_booking_is_forbidden(self, client, repos, own_booking):
        repos.bookings.find_by_id.return_value = make_booking(booking_id=777, user_id=2)

        response = client.put("/booking/777", json={"roomId": 200})

        assert response.status_code == 403
        repos.bookings.update_room.assert_not_awaited()

    def test_unknown_booking_is_not_found(self, client, repos, own_booking):
        repos.bookings.find_by_id.return_value = None

        response = client.put("/booking/999", json={"roomId": 200})

        assert response.status_code == 404

    def test_missing_room_is_not_found(self, client, repos, own_booking):
        repos.rooms.find_by_id_for_update.return_value = None

        response = client.put("/booking/500", json={"roomId": 999})

        assert response.status_code == 404
        assert own_booking.room_id == 100

    def test_full_room_is_forbidden(self, client, repos, own_booking):
        repos.bookings.count_by_room_id.return_value = 1

        response = client.put("/booking/500", json={"roomId": 200})

        assert response.status_code == 403
        assert own_booking.room_id == 100

    @pytest.mark.parametrize("path,body", [("/booking/0", {"roomId": 200}), ("/booking/500", {"roomId": 0})])
    def test_non_positive_ids_are_rejected(self, client, repos, own_booking, path, body):
        response = client.put(path, json=body)

        assert response.status_code == 422
        repos.bookings.update_room.assert_not_awaited()
