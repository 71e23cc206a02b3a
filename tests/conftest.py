# tests/conftest.py
import os

# Must be set before the app modules read their configuration
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_API_TOKEN"] = "test-admin-token"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"

from datetime import datetime  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.database import Base, SessionLocal, engine, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Address, Client  # noqa: E402
from app.models_job import ServicePlan  # noqa: E402

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture(autouse=True)
def reset_database():
    """Fresh schema for every test (in-memory SQLite shared through StaticPool)."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api(db):
    """
    TestClient authenticated as admin.

    Requests share the test's session so seeded rows and API writes
    live in the same transaction stream on the single SQLite connection.
    The lifespan (create_all) is skipped; reset_database owns the schema.
    """

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    test_client = TestClient(app)
    test_client.headers.update({"Authorization": f"Bearer {ADMIN_TOKEN}"})
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def client_record(db):
    client = Client(name="Dana Whitfield", email="dana@example.com", phone="+16035550123")
    db.add(client)
    db.commit()
    db.refresh(client)
    return client


@pytest.fixture
def address_record(db, client_record):
    address = Address(client_id=client_record.id, line1="12 Elm St", city="Manchester", state="NH")
    db.add(address)
    db.commit()
    db.refresh(address)
    return address


@pytest.fixture
def make_plan(db, client_record):
    """Factory for service plans; defaults to an ACTIVE weekly mowing plan."""

    def _make_plan(**overrides) -> ServicePlan:
        fields = {
            "client_id": client_record.id,
            "title": "Weekly mowing",
            "notes": "Gate code 4411",
            "frequency": "WEEKLY",
            "status": "ACTIVE",
            "start_date": datetime(2026, 3, 4),
            "price_per_visit_cents": 4500,
        }
        fields.update(overrides)
        plan = ServicePlan(**fields)
        db.add(plan)
        db.commit()
        db.refresh(plan)
        return plan

    return _make_plan
