from unittest.mock import patch

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from services.feedback_service.app.config.settings import Settings
from services.feedback_service.app.models.database import create_db_engine, init_db


def _settings(**overrides):
    values = dict(
        DB_HOST="localhost",
        DB_PORT=5432,
        DB_USER="user",
        DB_PASSWORD="password",
        DB_NAME="feedback_db",
        _env_file=None,
    )
    values.update(overrides)
    return Settings(**values)


def test_init_db_creates_feedback_table(engine):
    init_db(engine)

    columns = {c["name"]: c for c in inspect(engine).get_columns("feedback")}
    assert set(columns) == {"id", "contact", "content"}
    assert columns["contact"]["nullable"] is False
    assert columns["content"]["nullable"] is False


def test_init_db_is_repeatable(engine):
    init_db(engine)
    init_db(engine)

    assert inspect(engine).has_table("feedback")


def test_init_db_failure_propagates(engine):
    error = OperationalError("CREATE TABLE", {}, Exception("connection refused"))
    with patch(
        "services.feedback_service.app.models.database.Base.metadata.create_all",
        side_effect=error,
    ):
        with pytest.raises(OperationalError):
            init_db(engine)


def test_create_db_engine_pool():
    engine = create_db_engine(_settings(DB_POOL_SIZE=3))

    assert engine.url.host == "localhost"
    assert engine.url.database == "feedback_db"
    assert engine.pool.size() == 3
    engine.dispose()


def test_create_db_engine_statement_timeout():
    with patch("services.feedback_service.app.models.database.create_engine") as mock_create:
        create_db_engine(_settings(DB_STATEMENT_TIMEOUT_MS=2000))

    connect_args = mock_create.call_args.kwargs["connect_args"]
    assert connect_args == {"options": "-c statement_timeout=2000"}
