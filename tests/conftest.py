"""
Pytest configuration and shared fixtures for the profit calculator tests.
"""

import os
from unittest.mock import patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("APP_ENV", "testing")

from profit_calculator import create_app  # noqa: E402
from profit_calculator.config import reset_global_settings  # noqa: E402
from profit_calculator.database.base import Base  # noqa: E402
from profit_calculator.database.models import ProfitCalculation  # noqa: E402,F401
from profit_calculator.models.projection import (  # noqa: E402
    FinancialInputs,
    compute_projection,
)


@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session for testing."""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(db_session):
    """Create a Flask app whose requests use the test database session."""
    reset_global_settings()
    flask_app = create_app("testing")
    with patch(
        "profit_calculator.blueprints.calculator.get_db",
        side_effect=lambda: iter([db_session]),
    ):
        yield flask_app
    reset_global_settings()


@pytest.fixture
def client(app):
    """Create a test client for the app."""
    return app.test_client()


@pytest.fixture
def valid_submission():
    """A complete, valid calculator form submission."""
    return {
        "user_name": "Jane Smith",
        "user_email": "jane@example.com",
        "company_name": "Acme Ltd",
        "initial_investment": "10000",
        "monthly_revenue": "3000",
        "monthly_costs": "2000",
        "growth_rate": "5",
    }


@pytest.fixture
def break_even_summary():
    """Projection that breaks even in month 3."""
    return compute_projection(
        FinancialInputs(
            initial_investment=1000,
            monthly_revenue=1000,
            monthly_costs=500,
            growth_rate=0,
        )
    )
