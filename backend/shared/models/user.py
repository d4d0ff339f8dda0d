from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from backend.shared.models.base import Base, TimestampMixin, utcnow


class User(TimestampMixin, Base):
    """SQLAlchemy model for marketplace customers and partner accounts"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    address = Column(JSON, nullable=True)
    role = Column(String(20), default="user", nullable=False)  # user, partner, admin
    password_hash = Column(String(255), nullable=True)

    service_requests = relationship("ServiceRequest", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"


class ServiceRequest(TimestampMixin, Base):
    """A customer's rental or purchase request (an "order")."""

    __tablename__ = "service_requests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="SET NULL"), nullable=True)
    material_id = Column(Integer, ForeignKey("materials.id", ondelete="SET NULL"), nullable=True)
    status = Column(String(20), default="pending", nullable=False)
    quantity = Column(Integer, nullable=True)
    request_date = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    notes = Column(Text, nullable=True)

    user = relationship("User", back_populates="service_requests")
    vehicle = relationship("Vehicle")
    material = relationship("Material")
