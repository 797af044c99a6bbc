from app.crud import crud_custom_package
from app.models import OptionCategory, PackageOption


def _options_payload(name, *options):
    return {"name": name, "options": list(options)}


def test_post_options_creates_category(client):
    res = client.post(
        "/api/custom-packages/options",
        json=_options_payload(
            "Meals",
            {"name": "Breakfast", "price": 12.5},
            {"name": "Dinner", "description": "Three courses", "price": 30},
        ),
    )
    assert res.status_code == 201
    data = res.json()
    assert data["name"] == "Meals"
    assert [o["name"] for o in data["options"]] == ["Breakfast", "Dinner"]
    assert data["options"][0]["description"] == ""
    assert data["options"][0]["is_available"] is True
    assert data["options"][1]["price"] == 30


def test_post_options_appends_to_existing_category(client, session_factory):
    client.post(
        "/api/custom-packages/options",
        json=_options_payload("Guides", {"name": "City walk", "price": 20}),
    )
    res = client.post(
        "/api/custom-packages/options",
        json=_options_payload(
            "  Guides ",
            {"name": "City walk", "price": 20},
            {"name": "Museum", "price": 15},
        ),
    )
    assert res.status_code == 201
    # duplicates are kept and order is insertion order
    assert [o["name"] for o in res.json()["options"]] == ["City walk", "City walk", "Museum"]

    db = session_factory()
    assert db.query(OptionCategory).count() == 1
    positions = [
        o.position
        for o in db.query(PackageOption).order_by(PackageOption.id).all()
    ]
    assert positions == [0, 1, 2]
    db.close()


def test_categories_sorted_by_name(client):
    for name in ("Transport", "Accommodation", "Meals"):
        client.post(
            "/api/custom-packages/options",
            json=_options_payload(name, {"name": f"{name} option", "price": 1}),
        )
    res = client.get("/api/custom-packages/categories")
    assert res.status_code == 200
    assert [c["name"] for c in res.json()] == ["Accommodation", "Meals", "Transport"]


def test_blank_category_name_rejected(client):
    res = client.post(
        "/api/custom-packages/options",
        json=_options_payload("   ", {"name": "x", "price": 1}),
    )
    assert res.status_code == 400
    data = res.json()
    assert data["success"] is False
    assert data["message"] == "Category name is required"
    assert "name" in data["field_errors"]


def test_empty_option_list_rejected(client, session_factory):
    res = client.post("/api/custom-packages/options", json={"name": "Meals", "options": []})
    assert res.status_code == 400
    assert res.json()["message"] == "At least one option is required"
    db = session_factory()
    assert db.query(OptionCategory).count() == 0
    db.close()


def test_negative_price_rejected(client):
    res = client.post(
        "/api/custom-packages/options",
        json=_options_payload("Meals", {"name": "Lunch", "price": -1}),
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Price must be a finite, non-negative number"


def test_reference_requires_model_and_id_together(client):
    res = client.post(
        "/api/custom-packages/options",
        json=_options_payload("Transport", {"name": "Van", "price": 50, "item_model": "Vehicle"}),
    )
    assert res.status_code == 400
    assert res.json()["message"] == "item_model and item_id must be provided together"


def test_delete_category_removes_options(client, session_factory):
    created = client.post(
        "/api/custom-packages/options",
        json=_options_payload("Meals", {"name": "Breakfast", "price": 10}),
    ).json()

    res = client.delete(f"/api/custom-packages/categories/{created['id']}")
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Category deleted successfully"}

    db = session_factory()
    assert crud_custom_package.get_categories(db) == []
    assert db.query(PackageOption).count() == 0
    db.close()


def test_delete_category_invalid_and_missing_ids(client):
    res = client.delete("/api/custom-packages/categories/abc")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid category ID format"

    res = client.delete("/api/custom-packages/categories/999")
    assert res.status_code == 404
    assert res.json()["message"] == "Category not found"


def test_hotel_option_room_type_must_be_offered(client, db):
    from app.models import Hotel

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
    hotel_id = hotel.id

    res = client.post(
        "/api/custom-packages/options",
        json=_options_payload(
            "Accommodation",
            {"name": "Suite", "price": 300, "item_model": "Hotel", "item_id": hotel_id, "room_type": "suite"},
        ),
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Sea View does not offer room type: suite"
    assert res.json()["field_errors"] == {"room_type": "not_offered"}

    res = client.post(
        "/api/custom-packages/options",
        json=_options_payload(
            "Accommodation",
            {"name": "Double", "price": 150, "item_model": "Hotel", "item_id": hotel_id, "room_type": "double"},
        ),
    )
    assert res.status_code == 201
