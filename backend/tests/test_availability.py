from app.crud import crud_custom_package
from app.models import (
    Employee,
    EmployeeRole,
    EmployeeStatus,
    Hotel,
    HotelStatus,
    ItemModel,
    OptionCategory,
    PackageOption,
    Vehicle,
    VehicleStatus,
    VehicleType,
)
from app.services import availability


def _vehicle(db, vehicle_id="CAB-1234", status=VehicleStatus.AVAILABLE):
    vehicle = Vehicle(
        vehicle_id=vehicle_id,
        type=VehicleType.VAN,
        model="Toyota HiAce",
        seats=12,
        fuel_type="Diesel",
        status=status,
    )
    db.add(vehicle)
    db.commit()
    db.refresh(vehicle)
    return vehicle


def _category(db, name, *options):
    category = OptionCategory(name=name)
    for position, option in enumerate(options):
        option.position = position
        category.options.append(option)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def test_vehicle_option_uses_live_vehicle_details(db):
    vehicle = _vehicle(db)
    _category(
        db,
        "Transport",
        PackageOption(
            name="Old label",
            price=80,
            item_model=ItemModel.VEHICLE,
            item_id=vehicle.id,
        ),
    )

    [category] = availability.list_categories(db)
    [option] = category.options
    assert option.name == "Toyota HiAce (CAB-1234)"
    assert option.description == "Van with 12 seats"
    assert option.price == 80


def test_unresolved_reference_is_hidden_but_kept(db):
    _category(
        db,
        "Transport",
        PackageOption(name="Ghost van", price=50, item_model=ItemModel.VEHICLE, item_id=999),
        PackageOption(name="Airport pickup", price=25),
    )

    [category] = availability.list_categories(db)
    assert [o.name for o in category.options] == ["Airport pickup"]

    # storage is untouched
    [raw] = crud_custom_package.get_categories(db)
    assert [o.name for o in raw.options] == ["Ghost van", "Airport pickup"]


def test_vehicle_in_maintenance_is_hidden(db):
    vehicle = _vehicle(db, status=VehicleStatus.MAINTENANCE)
    _category(
        db,
        "Transport",
        PackageOption(name="Van", price=50, item_model=ItemModel.VEHICLE, item_id=vehicle.id),
    )
    [category] = availability.list_categories(db)
    assert category.options == []


def test_reserved_vehicle_stays_in_catalog(db):
    vehicle = _vehicle(db, status=VehicleStatus.RESERVED)
    _category(
        db,
        "Transport",
        PackageOption(name="Van", price=50, item_model=ItemModel.VEHICLE, item_id=vehicle.id),
    )
    [category] = availability.list_categories(db)
    assert len(category.options) == 1


def test_unavailable_option_is_hidden(db):
    _category(
        db,
        "Meals",
        PackageOption(name="Lunch", price=10, is_available=False),
        PackageOption(name="Dinner", price=20),
    )
    [category] = availability.list_categories(db)
    assert [o.name for o in category.options] == ["Dinner"]


def test_inactive_agent_and_unavailable_hotel_hidden(db):
    agent = Employee(
        name="Nimal",
        employee_id="EMP-1",
        email="nimal@example.com",
        nic="901234567V",
        role=EmployeeRole.TRAVEL_AGENT,
        phone_number="0771234567",
        salary=1000,
        status=EmployeeStatus.INACTIVE,
    )
    hotel = Hotel(
        name="Sea View",
        location="Galle",
        contact_number="0911234567",
        room_types=["double"],
        room_prices={"double": 150},
        room_quantities={"double": 2},
        facilities=[],
        status=HotelStatus.UNAVAILABLE,
    )
    db.add_all([agent, hotel])
    db.commit()
    _category(
        db,
        "Extras",
        PackageOption(name="Guide", price=30, item_model=ItemModel.EMPLOYEE, item_id=agent.id),
        PackageOption(
            name="Room",
            price=150,
            item_model=ItemModel.HOTEL,
            item_id=hotel.id,
            room_type="double",
        ),
    )
    [category] = availability.list_categories(db)
    assert category.options == []


def test_hotel_option_named_after_room_type(db):
    hotel = Hotel(
        name="Sea View",
        location="Galle",
        contact_number="0911234567",
        room_types=["double"],
        room_prices={"double": 150},
        room_quantities={"double": 2},
        facilities=[],
    )
    db.add(hotel)
    db.commit()
    _category(
        db,
        "Accommodation",
        PackageOption(
            name="Room",
            price=150,
            item_model=ItemModel.HOTEL,
            item_id=hotel.id,
            room_type="double",
        ),
    )
    [category] = availability.list_categories(db)
    assert category.options[0].name == "Sea View - double"
    assert category.options[0].description == "Sea View - double Room, Galle"


def test_categories_endpoint_applies_projection(client, db):
    _category(
        db,
        "Transport",
        PackageOption(name="Ghost van", price=50, item_model=ItemModel.VEHICLE, item_id=42),
    )
    res = client.get("/api/custom-packages/categories")
    assert res.status_code == 200
    [category] = res.json()
    assert category["name"] == "Transport"
    assert category["options"] == []


def test_hotel_option_hidden_when_room_type_withdrawn(db):
    hotel = Hotel(
        name="Sea View",
        location="Galle",
        contact_number="0911234567",
        room_types=["double", "suite"],
        room_prices={"double": 150, "suite": 300},
        room_quantities={"double": 2, "suite": 1},
        facilities=[],
    )
    db.add(hotel)
    db.commit()
    _category(
        db,
        "Accommodation",
        PackageOption(name="Suite", price=300, item_model=ItemModel.HOTEL, item_id=hotel.id, room_type="suite"),
        PackageOption(name="Double", price=150, item_model=ItemModel.HOTEL, item_id=hotel.id, room_type="double"),
    )

    hotel.room_types = ["double"]
    db.commit()

    [category] = availability.list_categories(db)
    assert [o.name for o in category.options] == ["Sea View - double"]


def test_unusable_statuses_are_real_status_values():
    assert availability.UNUSABLE_STATUSES[ItemModel.EMPLOYEE] <= {s.value for s in EmployeeStatus}
    assert availability.UNUSABLE_STATUSES[ItemModel.HOTEL] <= {s.value for s in HotelStatus}
    assert availability.UNUSABLE_STATUSES[ItemModel.VEHICLE] <= {s.value for s in VehicleStatus}
