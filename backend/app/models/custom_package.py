import enum

from sqlalchemy import (
    Boolean,
    Column,
    Enum as SAEnum,
    Float,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import relationship

from .base import BaseModel


class ItemModel(str, enum.Enum):
    """Kinds of resource a package option can point at."""

    EMPLOYEE = "Employee"
    HOTEL = "Hotel"
    VEHICLE = "Vehicle"


class OptionCategory(BaseModel):
    __tablename__ = "custom_package_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)

    options = relationship(
        "PackageOption",
        back_populates="category",
        order_by="PackageOption.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class PackageOption(BaseModel):
    __tablename__ = "custom_package_options"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(
        Integer,
        ForeignKey("custom_package_categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Insertion order within the category
    position = Column(Integer, nullable=False, default=0)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    price = Column(Float, nullable=False)
    is_available = Column(Boolean, nullable=False, default=True)
    # Polymorphic reference: item_model selects the table item_id points into.
    item_model = Column(
        SAEnum(ItemModel, name="itemmodel", values_callable=lambda e: [m.value for m in e]),
        nullable=True,
    )
    item_id = Column(Integer, nullable=True)
    room_type = Column(String, nullable=True)

    category = relationship("OptionCategory", back_populates="options")
