"""Database models for the rentable equipment and material catalogs."""

import enum

from sqlalchemy import (
    Boolean, Column, Float, ForeignKey, Integer, JSON, String, Text
)
from sqlalchemy.orm import relationship

from backend.shared.models.base import Base, TimestampMixin


class VehicleCategory(str, enum.Enum):
    """Kinds of equipment that can be listed for rent."""
    EXCAVATOR = "excavator"
    TRUCK = "truck"
    CRANE = "crane"
    BULLDOZER = "bulldozer"
    LOADER = "loader"
    DUMP_TRUCK = "dump-truck"
    CONCRETE_MIXER = "concrete-mixer"
    OTHER = "other"


class VehicleStatus(str, enum.Enum):
    """Listing status of a vehicle. Only ACTIVE vehicles are publicly listed."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"


class MaterialCategory(str, enum.Enum):
    """Kinds of building material sold by suppliers."""
    SAND = "sand"
    GRAVEL = "gravel"
    STEEL = "steel"
    CONCRETE = "concrete"
    BRICKS = "bricks"
    TIMBER = "timber"
    SOIL = "soil"
    STONE = "stone"
    OTHER = "other"


class MaterialUnit(str, enum.Enum):
    """Unit a material price refers to."""
    CUBIC_METER = "cubic meter"
    TON = "ton"
    KG = "kg"
    PER_100_PIECES = "per 100 pieces"
    SQUARE_METER = "square meter"
    LINEAR_METER = "linear meter"


class Partner(TimestampMixin, Base):
    """A business that owns vehicles or supplies materials."""
    __tablename__ = "partners"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    business_name = Column(String(200), nullable=False)
    rating = Column(Float, default=0.0, nullable=False)
    contact = Column(JSON, nullable=True)   # {"phone": ..., "email": ...}
    address = Column(JSON, nullable=True)   # {"street": ..., "city": ..., "state": ...}

    vehicles = relationship("Vehicle", back_populates="owner")
    materials = relationship("Material", back_populates="supplier")


class Vehicle(TimestampMixin, Base):
    """Construction equipment offered for hourly or daily rent."""
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey("partners.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(50), nullable=False, index=True)
    type = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    price_per_hour = Column(Float, nullable=False)
    price_per_day = Column(Float, nullable=False)
    city = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)
    status = Column(String(20), default=VehicleStatus.ACTIVE.value, nullable=False, index=True)
    featured = Column(Boolean, default=False, nullable=False)
    rating = Column(Float, default=0.0, nullable=False)
    images = Column(JSON, nullable=True)
    specifications = Column(JSON, nullable=True)
    availability = Column(JSON, nullable=True)

    owner = relationship("Partner", back_populates="vehicles")

    def __repr__(self) -> str:
        return f"<Vehicle {self.id} '{self.name}' [{self.category}]>"


class Material(TimestampMixin, Base):
    """Building material sold per unit by a supplier."""
    __tablename__ = "materials"

    id = Column(Integer, primary_key=True, autoincrement=True)
    supplier_id = Column(Integer, ForeignKey("partners.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(50), nullable=False, index=True)
    price_per_unit = Column(Float, nullable=False)
    unit = Column(String(30), nullable=False)
    available_quantity = Column(Float, default=0.0, nullable=False)
    is_available = Column(Boolean, default=True, nullable=False, index=True)
    featured = Column(Boolean, default=False, nullable=False)
    rating = Column(Float, default=0.0, nullable=False)
    images = Column(JSON, nullable=True)
    availability = Column(JSON, nullable=True)

    supplier = relationship("Partner", back_populates="materials")

    def __repr__(self) -> str:
        return f"<Material {self.id} '{self.name}' [{self.category}]>"
