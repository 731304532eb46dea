import os
import tempfile
from datetime import date
from decimal import Decimal

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_policies.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["ENVIRONMENT"] = "test"
os.environ["DEFAULT_PAGE_SIZE"] = "20"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.main import app
from app.repositories.policy import create_policy


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

        try:
            if os.path.exists(test_db_path):
                os.remove(test_db_path)
            if os.path.exists(temp_db_dir):
                os.rmdir(temp_db_dir)
        except OSError as e:
            print(f"Cleanup failed: {e}")


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


@pytest.fixture(scope="function")
def policies(db: Session) -> dict:
    """Create four policies covering the searchable fields, keyed by policy number."""
    created = [
        create_policy(
            db,
            policy_number="POL001",
            named_insured="Acme Corporation",
            line_of_business=["Commercial Auto"],
            status="ACTIVE",
            effective_date=date(2024, 1, 1),
            expiration_date=date(2025, 1, 1),
            premium=Decimal("5000.00"),
            MNPID="A",
            MBU_handler="Jane Handler",
            producing_UW="Bob Writer",
        ),
        create_policy(
            db,
            policy_number="POL002",
            named_insured="XYZ Industries",
            line_of_business=["General Liability", "Acme Program"],
            status="BOUND",
            effective_date=date(2024, 2, 1),
            expiration_date=date(2025, 2, 1),
            premium=Decimal("7500.00"),
            MNPID="B",
            MBU_handler="John Smith",
            producing_UW="Alice Underwood",
        ),
        create_policy(
            db,
            policy_number="POL003",
            named_insured="ABC Company",
            line_of_business=["Workers Compensation"],
            status="QUOTED",
            effective_date=date(2024, 3, 1),
            expiration_date=date(2025, 3, 1),
            premium=Decimal("3000.00"),
            MNPID="C",
            producing_UW="bob marley",
        ),
        create_policy(
            db,
            policy_number="POL004",
            named_insured="Zeta Holdings",
            line_of_business=["Commercial Auto", "Property"],
            status="active",
            premium=Decimal("1200.50"),
            MNPID="A-2",
        ),
    ]
    return {policy.policy_number: policy for policy in created}
