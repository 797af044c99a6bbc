def _vehicle_payload(**overrides):
    payload = {
        "vehicle_id": "CAB-1234",
        "type": "car",
        "model": "Toyota Prius",
        "seats": 4,
        "fuel_type": "Hybrid",
    }
    payload.update(overrides)
    return payload


def test_create_vehicle(client):
    res = client.post("/api/vehicles/", json=_vehicle_payload())
    assert res.status_code == 201
    data = res.json()
    assert data["status"] == "available"
    assert data["type"] == "car"


def test_duplicate_vehicle_id_conflict(client):
    client.post("/api/vehicles/", json=_vehicle_payload())
    res = client.post("/api/vehicles/", json=_vehicle_payload(model="Honda Fit"))
    assert res.status_code == 409
    data = res.json()
    assert data["message"] == "Vehicle ID already exists"
    assert data["field_errors"] == {"vehicle_id": "duplicate"}


def test_seats_must_be_positive(client):
    res = client.post("/api/vehicles/", json=_vehicle_payload(seats=0))
    assert res.status_code == 400
    assert "seats" in res.json()["field_errors"]


def test_update_vehicle_status(client):
    created = client.post("/api/vehicles/", json=_vehicle_payload()).json()
    res = client.put(
        f"/api/vehicles/{created['id']}",
        json=_vehicle_payload(status="maintenance"),
    )
    assert res.status_code == 200
    assert res.json()["status"] == "maintenance"


def test_vehicle_not_found_and_bad_id(client):
    assert client.get("/api/vehicles/77").status_code == 404
    res = client.get("/api/vehicles/-1")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid vehicle ID format"
