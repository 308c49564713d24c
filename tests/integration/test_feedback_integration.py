import os
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from services.feedback_service.app.models.database import init_db
from services.feedback_service.app.models.feedback import Feedback
from services.feedback_service.app.schemas.feedback import FeedbackCreate
from services.feedback_service.app.services.feedback import FeedbackService

# Use a separate test database, e.g. postgresql://user:password@db:5432/feedback_db_test
TEST_DATABASE_URL = os.environ.get("FEEDBACK_DATABASE_URL")

pytestmark = pytest.mark.skipif(
    not TEST_DATABASE_URL, reason="FEEDBACK_DATABASE_URL is not set"
)


@pytest.fixture(scope="module")
def engine():
    engine = create_engine(TEST_DATABASE_URL)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    """
    Pytest fixture to provide a database session for each test function.
    """
    connection = engine.connect()
    transaction = connection.begin()
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=connection)
    session = TestingSessionLocal(join_transaction_mode="create_savepoint")

    yield session

    session.close()
    transaction.rollback()
    connection.close()


def test_create_and_get_feedback(db_session):
    """
    Test creating a feedback record and retrieving it.
    """
    service = FeedbackService(db_session)

    created = service.create_feedback(
        FeedbackCreate(contact="a@b.com", content="This is a test feedback.")
    )

    assert created.id is not None
    retrieved = db_session.query(Feedback).filter(Feedback.id == created.id).first()
    assert retrieved is not None
    assert retrieved.content == "This is a test feedback."
    assert retrieved.contact == "a@b.com"


def test_latest_is_highest_id(db_session):
    service = FeedbackService(db_session)

    first = service.create_feedback(FeedbackCreate(content="first"))
    second = service.create_feedback(FeedbackCreate(content="second"))

    assert second.id > first.id
    assert service.get_latest().id == second.id
    assert [f.id for f in service.get_all()][-2:] == [first.id, second.id]


def test_ping(db_session):
    FeedbackService(db_session).ping()
