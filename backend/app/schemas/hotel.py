import re
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..models.hotel import HotelStatus, RoomType

MAX_ROOM_PRICE = 2500
_PHONE_RE = re.compile(r"^\d{10}$")


class HotelBase(BaseModel):
    name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    contact_number: str
    available_rooms: int = Field(default=0, ge=0)
    room_types: List[RoomType]
    room_prices: Dict[str, float]
    room_quantities: Dict[str, int] = Field(default_factory=dict)
    facilities: List[str] = Field(default_factory=list)

    @field_validator("name", "location", "contact_number", mode="before")
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("contact_number")
    def ten_digit_contact(cls, v: str) -> str:
        if not _PHONE_RE.match(v):
            raise ValueError("Contact number must be exactly 10 digits")
        return v

    @field_validator("room_types")
    def at_least_one_room_type(cls, v: List[RoomType]) -> List[RoomType]:
        if not v:
            raise ValueError("At least one room type must be selected")
        # keep first occurrence order
        return list(dict.fromkeys(v))

    @field_validator("facilities")
    def clean_facilities(cls, v: List[str]) -> List[str]:
        return [f.strip() for f in v if f and f.strip()]

    @model_validator(mode="after")
    def prices_and_quantities(self) -> "HotelBase":
        types = [t.value for t in self.room_types]
        missing = [t for t in types if not self.room_prices.get(t) or self.room_prices[t] <= 0]
        if missing:
            raise ValueError(f"Missing or invalid prices for room types: {', '.join(missing)}")
        excessive = [t for t in types if self.room_prices[t] > MAX_ROOM_PRICE]
        if excessive:
            raise ValueError(f"Price cannot exceed $2,500 for room types: {', '.join(excessive)}")
        negative = [t for t, q in self.room_quantities.items() if q < 0]
        if negative:
            raise ValueError(f"Room quantities cannot be negative: {', '.join(negative)}")
        # Only room types the hotel offers are kept
        self.room_prices = {t: float(self.room_prices[t]) for t in types}
        self.room_quantities = {t: int(self.room_quantities.get(t, 0)) for t in types}
        return self


class HotelCreate(HotelBase):
    status: HotelStatus = HotelStatus.AVAILABLE


class HotelUpdate(HotelBase):
    status: Optional[HotelStatus] = None


class HotelResponse(BaseModel):
    id: int
    name: str
    location: str
    contact_number: str
    available_rooms: int
    room_types: List[RoomType]
    room_prices: Dict[str, float]
    room_quantities: Dict[str, int]
    facilities: List[str]
    status: HotelStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
