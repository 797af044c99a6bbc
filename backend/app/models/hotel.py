import enum

from sqlalchemy import Column, Integer, String, JSON

from .base import BaseModel
from .types import CaseInsensitiveEnum


class RoomType(str, enum.Enum):
    SINGLE = "single"
    DOUBLE = "double"
    SUITE = "suite"
    DELUXE = "deluxe"


class HotelStatus(str, enum.Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class Hotel(BaseModel):
    __tablename__ = "hotels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    location = Column(String, nullable=False)
    contact_number = Column(String, nullable=False)
    available_rooms = Column(Integer, nullable=False, default=0)
    # room_types: ["double", ...]; room_prices/room_quantities keyed by room type
    room_types = Column(JSON, nullable=False, default=list)
    room_prices = Column(JSON, nullable=False, default=dict)
    room_quantities = Column(JSON, nullable=False, default=dict)
    facilities = Column(JSON, nullable=False, default=list)
    status = Column(
        CaseInsensitiveEnum(HotelStatus, name="hotelstatus"),
        default=HotelStatus.AVAILABLE,
        nullable=False,
        index=True,
    )
