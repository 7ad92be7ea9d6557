"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

# Force an in-memory test DB when pytest runs; don't inherit from .env (avoids touching reloadlog.db)
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("REFERENCE_DATA_PATH", None)


# Synthetic taxonomy used by the pure filter/cascade/validator tests.
# Catalog order is not sorted, so ordering rules are observable.
SNAPSHOT_PAYLOAD: dict = {
    "cartridge_types": [
        {"id": 1, "name": "Rifle"},
        {"id": 2, "name": "Pistol"},
    ],
    "cartridges": [
        {"id": 1, "name": "Lapua .308 Win", "cartridge_type_ids": [1]},
        {"id": 2, "name": "9mm Luger", "cartridge_type_ids": [2]},
        {"id": 3, "name": ".357 Magnum", "cartridge_type_ids": [1, 2]},
        {"id": 4, "name": "Federal .308 Win", "cartridge_type_ids": [1]},
    ],
    "primer_types": [
        {"id": 1, "name": "Large Rifle", "cartridge_type_id": 1},
        {"id": 2, "name": "Small Pistol", "cartridge_type_id": 2},
        {"id": 3, "name": "Small Rifle", "cartridge_type_id": 1},
    ],
    "powders": [
        {"id": 1, "name": "Varget", "manufacturer_name": "Hodgdon", "cartridge_type_ids": [1]},
        {"id": 2, "name": "Bullseye", "manufacturer_name": "Alliant", "cartridge_type_ids": [2]},
        {"id": 3, "name": "H4895", "manufacturer_name": "Hodgdon", "cartridge_type_ids": [1]},
        {"id": 4, "name": "Blue Dot", "manufacturer_name": "Alliant", "cartridge_type_ids": [1, 2]},
        {"id": 5, "name": "benchmark", "manufacturer_name": "Hodgdon", "cartridge_type_ids": [1]},
    ],
    "bullet_weights": [
        {"id": 1, "weight": 168.0, "cartridge_type_ids": [1]},
        {"id": 2, "weight": 155.0, "cartridge_type_ids": [1]},
        {"id": 3, "weight": 115.0, "cartridge_type_ids": [2]},
    ],
    "bullets": [
        {"id": 1, "name": "Sierra MatchKing 168gr BTHP", "manufacturer_name": "Sierra", "weight": 168.0},
        {"id": 2, "name": "Hornady A-MAX 155gr", "manufacturer_name": "Hornady", "weight": 155.0},
        {"id": 3, "name": "ELD Match 168gr", "manufacturer_name": "Hornady", "weight": 168},
        {"id": 4, "name": "Gold Dot 115gr HP", "manufacturer_name": "Speer", "weight": 115.0},
    ],
}


@pytest.fixture
def snapshot():
    """Synthetic taxonomy snapshot (Rifle=1, Pistol=2; 168gr=1, 155gr=2, 115gr=3)."""
    from app.services.selection.taxonomy_snapshot import TaxonomySnapshot

    return TaxonomySnapshot.from_payload(SNAPSHOT_PAYLOAD)


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client."""
    from app.main import app

    return TestClient(app)


@pytest.fixture
def client_with_db(db: Session) -> TestClient:
    """TestClient with get_db overridden to use the test db session (for integration tests)."""
    from app.db.session import get_db
    from app.main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    c = TestClient(app)
    yield c
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture(autouse=True)
def _clear_reference_data_caches() -> None:
    """Clear lru_cache on the reference data loader before and after each test.

    Tests that point REFERENCE_DATA_PATH at a temporary file must not leak the
    cached result into later tests.
    """
    from app.reference_data.loader import get_reference_data_version, load_reference_data

    load_reference_data.cache_clear()
    get_reference_data_version.cache_clear()
    yield
    load_reference_data.cache_clear()
    get_reference_data_version.cache_clear()


@pytest.fixture(scope="session")
def _ensure_schema() -> None:
    """Create every table once per test session on the in-memory database."""
    import app.models  # noqa: F401
    from app.db import Base, engine

    Base.metadata.create_all(engine)


@pytest.fixture
def db(_ensure_schema: None) -> Session:
    """Database session for model tests. All changes are rolled back after each test."""
    from app.db import engine

    connection = engine.connect()
    transaction = connection.begin()
    session = Session(
        bind=connection,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )
    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()


@pytest.fixture
def seeded_db(db: Session) -> Session:
    """Test session with the packaged reference taxonomy seeded (rolled back after the test)."""
    from app.reference_data import load_reference_data
    from app.services.reference_data_seeder import seed_reference_data

    seed_reference_data(db, load_reference_data())
    return db


@pytest.fixture
def lookup(seeded_db: Session):
    """Find a seeded row id by model and natural key, e.g. ``lookup(Cartridge, name="9mm Luger")``."""

    def _lookup(model, **filters) -> int:
        row = seeded_db.query(model).filter_by(**filters).one()
        return row.id

    return _lookup
