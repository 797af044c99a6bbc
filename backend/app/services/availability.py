"""Read-time availability projection of the custom package catalog.

Nothing in this module writes to the database. Options whose reference
cannot be resolved, or whose resource is in an unusable state, are dropped
from the view while staying in storage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from ..crud import crud_custom_package, employee as crud_employee, hotel as crud_hotel, vehicle as crud_vehicle
from ..models import Employee, Hotel, ItemModel, OptionCategory, PackageOption, Vehicle
from ..schemas.custom_package import (
    AvailableAgent,
    AvailableHotel,
    AvailableItemsResponse,
    AvailableRoom,
    AvailableVehicle,
    OptionCategoryResponse,
    PackageOptionCreate,
    PackageOptionResponse,
)
from ..utils.errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedItem:
    """What a referenced resource currently reports about itself."""

    name: str
    description: str
    status: Optional[str]
    # False when the option sells something the resource no longer offers
    offered: bool = True


def _describe_employee(record: Employee, option: PackageOption) -> ResolvedItem:
    return ResolvedItem(
        name=record.name,
        description=f"{record.role.value} - {record.phone_number}",
        status=record.status.value if record.status else None,
    )


def _room_type_names(hotel: Hotel) -> List[str]:
    return [t.value if hasattr(t, "value") else str(t) for t in hotel.room_types or []]


def _describe_hotel(record: Hotel, option: PackageOption) -> ResolvedItem:
    if option.room_type:
        name = f"{record.name} - {option.room_type}"
        description = f"{record.name} - {option.room_type} Room, {record.location}"
    else:
        name, description = record.name, record.location
    return ResolvedItem(
        name=name,
        description=description,
        status=record.status.value if record.status else None,
        offered=not option.room_type or option.room_type in _room_type_names(record),
    )


def _describe_vehicle(record: Vehicle, option: PackageOption) -> ResolvedItem:
    return ResolvedItem(
        name=f"{record.model} ({record.vehicle_id})",
        description=f"{record.type.value.title()} with {record.seats} seats",
        status=record.status.value if record.status else None,
    )


# item_model -> (ORM class, describer)
RESOLVERS: Dict[ItemModel, Tuple[type, Callable[..., ResolvedItem]]] = {
    ItemModel.EMPLOYEE: (Employee, _describe_employee),
    ItemModel.HOTEL: (Hotel, _describe_hotel),
    ItemModel.VEHICLE: (Vehicle, _describe_vehicle),
}

# Resource statuses that make an option unusable, per kind
UNUSABLE_STATUSES: Dict[ItemModel, frozenset] = {
    ItemModel.EMPLOYEE: frozenset({"inactive"}),
    ItemModel.HOTEL: frozenset({"unavailable"}),
    ItemModel.VEHICLE: frozenset({"maintenance"}),
}


def resolve_reference(
    db: Session, option: PackageOption, cache: Optional[dict] = None
) -> Optional[ResolvedItem]:
    """Look up the resource an option points at, or ``None`` if it is gone."""
    model_cls, describe = RESOLVERS[option.item_model]
    key = (option.item_model, option.item_id)
    if cache is not None and key in cache:
        record = cache[key]
    else:
        record = db.get(model_cls, option.item_id)
        if cache is not None:
            cache[key] = record
    if record is None:
        return None
    return describe(record, option)


def resolve_option(
    db: Session, option: PackageOption, cache: Optional[dict] = None
) -> Optional[PackageOptionResponse]:
    """Return the display view of ``option`` or ``None`` when it is unusable."""
    if not option.is_available:
        return None
    view = PackageOptionResponse.model_validate(option)
    if option.item_model is None:
        return view
    resolved = resolve_reference(db, option, cache)
    if resolved is None:
        logger.debug(
            "Dropping option %s: %s #%s not found",
            option.id,
            option.item_model.value,
            option.item_id,
        )
        return None
    if resolved.status in UNUSABLE_STATUSES[option.item_model] or not resolved.offered:
        return None
    return view.model_copy(
        update={
            "name": resolved.name or view.name,
            "description": resolved.description or view.description,
        }
    )


def resolve_category(
    db: Session, category: OptionCategory, cache: Optional[dict] = None
) -> OptionCategoryResponse:
    cache = {} if cache is None else cache
    options = []
    for option in category.options:
        view = resolve_option(db, option, cache)
        if view is not None:
            options.append(view)
    return OptionCategoryResponse(
        id=category.id,
        name=category.name,
        options=options,
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


def list_categories(db: Session) -> List[OptionCategoryResponse]:
    """All categories sorted by name with unusable options filtered out."""
    cache: dict = {}
    return [resolve_category(db, c, cache) for c in crud_custom_package.get_categories(db)]


def check_room_types(db: Session, options: List[PackageOptionCreate]) -> None:
    """Reject hotel options selling a room type the hotel does not offer.

    Options pointing at a hotel that does not exist are left alone; the
    resolver hides them when the catalog is read.
    """
    for option in options:
        if option.item_model != ItemModel.HOTEL or not option.room_type:
            continue
        hotel = crud_hotel.get_hotel(db, option.item_id)
        if hotel is not None and option.room_type not in _room_type_names(hotel):
            raise ValidationError(
                f"{hotel.name} does not offer room type: {option.room_type}",
                {"room_type": "not_offered"},
            )


def hotel_rooms(hotel: Hotel) -> List[AvailableRoom]:
    """Room types of ``hotel`` that still have rooms left."""
    prices = hotel.room_prices or {}
    quantities = hotel.room_quantities or {}
    rooms = []
    for room_type in hotel.room_types or []:
        key = room_type.value if hasattr(room_type, "value") else str(room_type)
        count = int(quantities.get(key) or 0)
        if count <= 0:
            continue
        rooms.append(
            AvailableRoom(
                room_type=key,
                price=float(prices.get(key) or 0),
                available_count=count,
            )
        )
    return rooms


def list_available_items(db: Session) -> AvailableItemsResponse:
    agents = [
        AvailableAgent(
            id=e.id,
            name=e.name,
            email=e.email,
            phone_number=e.phone_number,
            role=e.role.value,
        )
        for e in crud_employee.get_active_agents(db)
    ]

    hotels = []
    for h in crud_hotel.get_open_hotels(db):
        rooms = hotel_rooms(h)
        if not rooms:
            continue
        hotels.append(
            AvailableHotel(
                id=h.id,
                name=h.name,
                location=h.location,
                contact_number=h.contact_number,
                rooms=rooms,
            )
        )

    vehicles = [
        AvailableVehicle(
            id=v.id,
            vehicle_id=v.vehicle_id,
            type=v.type.value,
            model=v.model,
            seats=v.seats,
        )
        for v in crud_vehicle.get_available_vehicles(db)
    ]
    return AvailableItemsResponse(agents=agents, hotels=hotels, vehicles=vehicles)
