from app.models import (
    Employee,
    EmployeeRole,
    EmployeeStatus,
    Hotel,
    HotelStatus,
    Vehicle,
    VehicleStatus,
    VehicleType,
)


def _employee(name, employee_id, role, status=EmployeeStatus.ACTIVE):
    return Employee(
        name=name,
        employee_id=employee_id,
        email=f"{employee_id.lower()}@example.com",
        nic=f"NIC-{employee_id}",
        role=role,
        phone_number="0771234567",
        salary=300,
        status=status,
    )


def _hotel(name, quantities, status=HotelStatus.AVAILABLE):
    return Hotel(
        name=name,
        location="Kandy",
        contact_number="0811234567",
        room_types=list(quantities),
        room_prices={t: 100.0 for t in quantities},
        room_quantities=quantities,
        facilities=["pool"],
        status=status,
    )


def _vehicle(vehicle_id, status):
    return Vehicle(
        vehicle_id=vehicle_id,
        type=VehicleType.CAR,
        model="Prius",
        seats=4,
        fuel_type="Hybrid",
        status=status,
    )


def test_available_items_filters_each_kind(client, db):
    db.add_all(
        [
            _employee("Amal", "EMP-1", EmployeeRole.TRAVEL_AGENT),
            _employee("Bimal", "EMP-2", EmployeeRole.TRAVEL_AGENT, EmployeeStatus.INACTIVE),
            _employee("Chamal", "EMP-3", EmployeeRole.DRIVER),
            _hotel("Hill Top", {"single": 2, "double": 0}),
            _hotel("Full House", {"double": 0}),
            _hotel("Closed Inn", {"single": 5}, HotelStatus.UNAVAILABLE),
            _vehicle("CAR-1", VehicleStatus.AVAILABLE),
            _vehicle("CAR-2", VehicleStatus.RESERVED),
            _vehicle("CAR-3", VehicleStatus.MAINTENANCE),
        ]
    )
    db.commit()

    res = client.get("/api/custom-packages/available-items")
    assert res.status_code == 200
    data = res.json()

    assert [a["name"] for a in data["agents"]] == ["Amal"]
    assert data["agents"][0]["role"] == "Travel Agent"

    [hotel] = data["hotels"]
    assert hotel["name"] == "Hill Top"
    assert hotel["rooms"] == [{"room_type": "single", "price": 100.0, "available_count": 2}]

    assert [v["vehicle_id"] for v in data["vehicles"]] == ["CAR-1"]


def test_available_items_empty(client):
    res = client.get("/api/custom-packages/available-items")
    assert res.status_code == 200
    assert res.json() == {"agents": [], "hotels": [], "vehicles": []}
