"""Shared pytest fixtures for inventory service tests."""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_service import models
from inventory_service.database import Base, get_db
from inventory_service.main import app


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads, with tables created."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session_ = sessionmaker(bind=engine)
    session = Session_()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    """TestClient whose get_db dependency is bound to the in-memory engine."""

    def override_get_db():
        with Session(engine) as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seed_items(session):
    """Insert two items and return their IDs."""
    milk = models.Item(name="Milk", quantity=2, price=Decimal("1.99"))
    eggs = models.Item(name="Eggs", quantity=12, price=Decimal("3.50"))
    session.add_all([milk, eggs])
    session.commit()
    return milk.id, eggs.id
