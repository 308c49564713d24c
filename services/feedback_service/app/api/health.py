from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..schemas.feedback import HealthResponse
from ..services.exceptions import StorageError
from ..services.feedback import FeedbackService
from .dependencies import get_feedback_service

router = APIRouter()


@router.get(
    "/ping",
    response_model=HealthResponse,
    responses={500: {"model": HealthResponse, "description": "Database unreachable"}},
)
def health_check(service: FeedbackService = Depends(get_feedback_service)):
    """
    Health check endpoint to verify that the service can reach its database.
    """
    try:
        service.ping()
    except StorageError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "message": "Database unreachable"},
        )
    return {
        "status": "ok",
        "message": "Service is healthy",
        "time": datetime.now(timezone.utc),
    }
