import logging
import sys

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from services.feedback_service.app.config.logging import configure_logging
from services.feedback_service.app.config.settings import get_settings
from services.feedback_service.app.models.database import create_db_engine, init_db

logger = logging.getLogger("init_db")


def main() -> int:
    configure_logging()
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.critical("Invalid or missing configuration: %s", e)
        return 1

    engine = create_db_engine(settings)
    try:
        # The service also does this at startup; this script lets a deploy run it ahead of time
        init_db(engine)
    except SQLAlchemyError:
        return 1
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
