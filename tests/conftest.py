import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from services.feedback_service.app.main import create_app


@pytest.fixture
def engine():
    """
    In-memory SQLite engine shared by every thread of one test.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def app(engine):
    return create_app(engine=engine)


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan, which creates the schema
    with TestClient(app) as client:
        yield client
