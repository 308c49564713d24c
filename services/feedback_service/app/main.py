import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.engine import Engine

from .api import feedback, health
from .config.logging import configure_logging
from .config.settings import Settings, get_settings
from .models.database import create_db_engine, create_session_factory, init_db

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    if not loc:
        return first.get("msg", "Invalid request")
    return f"{'.'.join(loc)}: {first.get('msg', 'invalid')}"


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the feedback service application.

    Args:
        settings: Service settings. Loaded from the environment when omitted and
            no engine is given.
        engine: A pre-built engine, e.g. an in-memory SQLite engine in tests.
            When given, the application does not dispose it on shutdown.
    """

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        owns_engine = engine is None
        db_engine = create_db_engine(settings or get_settings()) if owns_engine else engine
        init_db(db_engine)

        fastapi_app.state.engine = db_engine
        fastapi_app.state.session_factory = create_session_factory(db_engine)

        yield

        if owns_engine:
            db_engine.dispose()

    app = FastAPI(
        title="Feedback Service",
        description="Collects free-text feedback and serves it back",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = (time.perf_counter() - start_time) * 1000
        logger.info(
            "%s %s %s | %.2f ms",
            request.method,
            request.url.path,
            response.status_code,
            process_time,
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _validation_message(exc)},
        )

    app.include_router(health.router, tags=["Health Check"])
    app.include_router(feedback.router, tags=["Feedback"])

    return app


def run() -> None:
    """Console entry point: validate configuration, then serve with uvicorn."""
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        logger.critical("Invalid or missing configuration: %s", ", ".join(missing))
        sys.exit(1)

    configure_logging(settings.LOG_LEVEL)

    import uvicorn
    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
