import math
from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, Field, field_validator, model_validator

from ..models.custom_package import ItemModel
from ..utils.errors import MAX_ID


def check_price(v: float) -> float:
    if not math.isfinite(v) or v < 0:
        raise ValueError("Price must be a finite, non-negative number")
    return v


Price = Annotated[float, AfterValidator(check_price)]


class PackageOptionCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    price: Price
    is_available: bool = True
    item_model: Optional[ItemModel] = None
    item_id: Optional[int] = Field(default=None, gt=0, le=MAX_ID)
    room_type: Optional[str] = None

    @field_validator("name", "description", mode="before")
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip()
        if v is None:
            return ""
        return v

    @model_validator(mode="after")
    def reference_is_complete(self) -> "PackageOptionCreate":
        """``item_model`` and ``item_id`` come as a pair or not at all."""
        if (self.item_model is None) != (self.item_id is None):
            raise ValueError("item_model and item_id must be provided together")
        if self.room_type and self.item_model != ItemModel.HOTEL:
            raise ValueError("room_type only applies to Hotel options")
        return self


class CategoryOptionsUpsert(BaseModel):
    name: str
    options: List[PackageOptionCreate]

    @field_validator("name", mode="before")
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("name")
    def name_required(cls, v: str) -> str:
        if not v:
            raise ValueError("Category name is required")
        return v

    @field_validator("options")
    def options_required(cls, v: List[PackageOptionCreate]) -> List[PackageOptionCreate]:
        if not v:
            raise ValueError("At least one option is required")
        return v


class PackageOptionResponse(BaseModel):
    id: int
    name: str
    description: str
    price: float
    is_available: bool
    item_model: Optional[ItemModel] = None
    item_id: Optional[int] = None
    room_type: Optional[str] = None

    model_config = {"from_attributes": True}


class OptionCategoryResponse(BaseModel):
    id: int
    name: str
    options: List[PackageOptionResponse]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


# ─── Aggregated availability view ────────────────────────────────────────────


class AvailableAgent(BaseModel):
    id: int
    name: str
    email: str
    phone_number: str
    role: str


class AvailableRoom(BaseModel):
    room_type: str
    price: float
    available_count: int


class AvailableHotel(BaseModel):
    id: int
    name: str
    location: str
    contact_number: str
    rooms: List[AvailableRoom]


class AvailableVehicle(BaseModel):
    id: int
    vehicle_id: str
    type: str
    model: str
    seats: int


class AvailableItemsResponse(BaseModel):
    agents: List[AvailableAgent]
    hotels: List[AvailableHotel]
    vehicles: List[AvailableVehicle]
