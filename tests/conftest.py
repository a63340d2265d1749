import os
import tempfile

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_insurance.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["LOG_LEVEL"] = "DEBUG"

from datetime import date
from decimal import Decimal

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session

from app.db.base import enable_sqlite_foreign_keys
from app.main import app
from app.mappers import ClaimMapper, ClientMapper, PolicyMapper
from app.repositories import ClaimRepository, ClientRepository, PolicyRepository
from app.schemas.claim import Claim
from app.schemas.client import Client
from app.schemas.policy import Policy
from app.services import ClaimService, ClientService, PolicyService


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues, and enforce foreign keys as the app engine does
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()
        enable_sqlite_foreign_keys(dbapi_conn, connection_record)

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()

        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from app.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


# ============================================================================
# SERVICES WIRED AGAINST THE TEST SESSION
# ============================================================================


@pytest.fixture(scope="function")
def client_service(db: Session) -> ClientService:
    return ClientService(ClientRepository(db), ClientMapper())


@pytest.fixture(scope="function")
def policy_service(db: Session) -> PolicyService:
    return PolicyService(PolicyRepository(db), PolicyMapper(ClientRepository(db).lookup))


@pytest.fixture(scope="function")
def claim_service(db: Session) -> ClaimService:
    return ClaimService(ClaimRepository(db), ClaimMapper(PolicyRepository(db).lookup))


# ============================================================================
# SAMPLE TRANSFER RECORDS
# ============================================================================


def _client_data(**overrides) -> Client:
    data = {
        "name": "John Doe",
        "date_of_birth": date(1990, 1, 1),
        "address": "123 Main St",
        "contact_information": "9876543210",
    }
    data.update(overrides)
    return Client(**data)


def _policy_data(client_id: int, **overrides) -> Policy:
    data = {
        "policy_number": "POL123",
        "type": "Health",
        "coverage_amount": Decimal("50000.00"),
        "premium": Decimal("500.00"),
        "start_date": date(2023, 1, 1),
        "end_date": date(2024, 1, 1),
        "client_id": client_id,
    }
    data.update(overrides)
    return Policy(**data)


def _claim_data(policy_id: int, **overrides) -> Claim:
    data = {
        "claim_number": "CLM123",
        "description": "Hospitalization after an accident",
        "claim_date": date(2023, 1, 1),
        "status": "OPEN",
        "policy_id": policy_id,
    }
    data.update(overrides)
    return Claim(**data)


@pytest.fixture
def make_client():
    """Factory for valid client transfer records."""
    return _client_data


@pytest.fixture
def make_policy():
    """Factory for valid policy transfer records owned by ``client_id``."""
    return _policy_data


@pytest.fixture
def make_claim():
    """Factory for valid claim transfer records filed against ``policy_id``."""
    return _claim_data
