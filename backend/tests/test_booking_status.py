from datetime import datetime

import pytest

from app.models import BookingStatus, CustomPackageBooking
from app.services import booking_workflow
from app.utils.errors import InvalidIdError, InvalidStatusError, NotFoundError


def _create_booking(db):
    booking = CustomPackageBooking(
        customer_name="Kamal",
        email="kamal@example.com",
        phone_number="0771234567",
        travel_date=datetime(2030, 1, 15),
        additional_notes="",
        selected_options={"Meals": {"id": 1, "name": "Dinner", "price": 15}},
        total_price=15,
        status=BookingStatus.PENDING,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


def test_approve_then_reject(client, db):
    booking = _create_booking(db)

    res = client.put(f"/api/custom-packages/bookings/{booking.id}", json={"status": "approved"})
    assert res.status_code == 200
    data = res.json()
    assert data["success"] is True
    assert data["message"] == "Booking status updated to approved"
    assert data["data"]["status"] == "approved"

    # no transition guard
    res = client.put(f"/api/custom-packages/bookings/{booking.id}", json={"status": "rejected"})
    assert res.status_code == 200
    assert res.json()["data"]["status"] == "rejected"


def test_invalid_status_leaves_booking_untouched(client, db, session_factory):
    booking = _create_booking(db)

    res = client.put(f"/api/custom-packages/bookings/{booking.id}", json={"status": "cancelled"})
    assert res.status_code == 400
    assert res.json()["message"] == (
        "Invalid status. Must be one of: pending, approved, rejected"
    )

    fresh = session_factory()
    assert fresh.get(CustomPackageBooking, booking.id).status == BookingStatus.PENDING
    fresh.close()


def test_status_is_case_sensitive(client, db):
    booking = _create_booking(db)
    res = client.put(f"/api/custom-packages/bookings/{booking.id}", json={"status": "Approved"})
    assert res.status_code == 400


def test_missing_body_is_invalid_status(client, db):
    booking = _create_booking(db)
    res = client.put(f"/api/custom-packages/bookings/{booking.id}")
    assert res.status_code == 400
    assert res.json()["field_errors"] == {"status": "invalid"}


def test_id_checked_before_status(client):
    res = client.put("/api/custom-packages/bookings/abc", json={"status": "bogus"})
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid booking ID format"


def test_status_checked_before_existence(client):
    res = client.put("/api/custom-packages/bookings/12345", json={"status": "bogus"})
    assert res.status_code == 400
    assert res.json()["field_errors"] == {"status": "invalid"}

    res = client.put("/api/custom-packages/bookings/12345", json={"status": "approved"})
    assert res.status_code == 404
    assert res.json()["message"] == "Booking not found"


def test_update_status_service_errors(db):
    with pytest.raises(InvalidIdError):
        booking_workflow.update_status(db, "0", "approved")
    with pytest.raises(InvalidStatusError):
        booking_workflow.update_status(db, "1", None)
    with pytest.raises(NotFoundError):
        booking_workflow.update_status(db, "1", "approved")


def test_oversized_booking_id_is_invalid(client):
    res = client.put(
        "/api/custom-packages/bookings/99999999999999999999", json={"status": "approved"}
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid booking ID format"

    res = client.delete("/api/custom-packages/bookings/99999999999999999999")
    assert res.status_code == 400
    res = client.delete("/api/custom-packages/categories/99999999999999999999")
    assert res.status_code == 400
