"""Shared fixtures: an in-memory database, an API client and data builders."""

from typing import Any, Dict, Optional

import pytest
from fastapi.testclient import TestClient

from backend.shared.auth.dependencies import get_jwt_handler
from backend.shared.database.session import DatabaseSession, set_db_manager
from backend.shared.models import Material, Partner, ServiceRequest, User, Vehicle
from backend.services.api.src.app import app

VEHICLE_DEFAULTS = {
    "name": "CAT 320 Excavator",
    "description": "Tracked excavator for earthworks and trenching",
    "category": "excavator",
    "type": "tracked",
    "model": "320",
    "year": 2019,
    "price_per_hour": 100.0,
    "price_per_day": 700.0,
    "city": "Austin",
    "state": "Texas",
    "status": "active",
}

MATERIAL_DEFAULTS = {
    "name": "Washed river sand",
    "description": "Clean sand for concrete and plaster work",
    "category": "sand",
    "price_per_unit": 40.0,
    "unit": "ton",
    "available_quantity": 500.0,
    "is_available": True,
}


class Seeder:
    """Writes rows through committed sessions so API requests can see them."""

    def __init__(self, manager: DatabaseSession):
        self.manager = manager

    def _add(self, record):
        with self.manager.session() as session:
            session.add(record)
            session.flush()
        return record

    def user(self, email: str = "user@example.com", **fields) -> User:
        data = {"name": "Test User", "email": email, "phone": "555-0100", "role": "user"}
        data.update(fields)
        return self._add(User(**data))

    def partner(self, business_name: str = "Acme Rentals", **fields) -> Partner:
        data = {"business_name": business_name, "rating": 4.5, "contact": {"phone": "555-0199"}}
        data.update(fields)
        return self._add(Partner(**data))

    def vehicle(self, owner: Partner, **fields) -> Vehicle:
        data = dict(VEHICLE_DEFAULTS, owner_id=owner.id)
        data.update(fields)
        return self._add(Vehicle(**data))

    def material(self, supplier: Partner, **fields) -> Material:
        data = dict(MATERIAL_DEFAULTS, supplier_id=supplier.id)
        data.update(fields)
        return self._add(Material(**data))

    def order(self, user: User, **fields) -> ServiceRequest:
        return self._add(ServiceRequest(user_id=user.id, **fields))


@pytest.fixture
def db_manager():
    """In-memory SQLite database shared by every session of one test."""
    manager = DatabaseSession(url="sqlite://")
    manager.create_all()
    set_db_manager(manager)
    yield manager
    manager.drop_all()
    set_db_manager(None)
    manager.engine.dispose()


@pytest.fixture
def seed(db_manager):
    return Seeder(db_manager)


@pytest.fixture
def fresh_session(db_manager):
    """Open a new session for assertions, so nothing is served from a stale identity map."""
    sessions = []

    def _open():
        session = db_manager.new_session()
        sessions.append(session)
        return session

    yield _open
    for session in sessions:
        session.close()


@pytest.fixture
def client(db_manager):
    """Test client whose requests get sessions from the in-memory database installed by db_manager."""
    return TestClient(app)


@pytest.fixture
def unsafe_client(db_manager):
    """Test client that returns 500 responses instead of re-raising server errors."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers():
    """Build an Authorization header for a user, optionally acting as a partner."""
    def _headers(user_id: int, partner_id: Optional[int] = None) -> Dict[str, Any]:
        claims = {"sub": user_id, "role": "partner" if partner_id is not None else "user"}
        if partner_id is not None:
            claims["partner_id"] = partner_id
        token = get_jwt_handler().create_access_token(claims)
        return {"Authorization": f"Bearer {token.access_token}"}
    return _headers
