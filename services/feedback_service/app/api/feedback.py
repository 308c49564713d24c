from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..schemas.feedback import (
    ErrorResponse,
    FeedbackCreate,
    FeedbackEnvelope,
    FeedbackListEnvelope,
    MessageResponse,
)
from ..services.exceptions import FeedbackNotFoundError, StorageError
from ..services.feedback import FeedbackService
from .dependencies import get_feedback_service

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/saveFeedback",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Content missing or empty"},
        500: {"model": ErrorResponse, "description": "Storage error"},
    },
)
def save_feedback(
    feedback_data: FeedbackCreate,
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Save a new feedback submission.
    """
    try:
        service.create_feedback(feedback_data=feedback_data)
    except StorageError:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to save feedback")
    return {"message": "Feedback saved"}


@router.get(
    "/getLastFeedback",
    response_model=FeedbackEnvelope,
    responses={
        404: {"model": ErrorResponse, "description": "No feedback saved yet"},
        500: {"model": ErrorResponse, "description": "Storage error"},
    },
)
def get_last_feedback(
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Get the most recently saved feedback.
    """
    try:
        feedback = service.get_latest()
    except FeedbackNotFoundError:
        return _error(status.HTTP_404_NOT_FOUND, "No feedback found")
    except StorageError:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error")
    return {"feedback": feedback}


@router.get(
    "/getAllFeedback",
    response_model=FeedbackListEnvelope,
    responses={500: {"model": ErrorResponse, "description": "Storage error"}},
)
def get_all_feedback(
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Get every saved feedback, oldest first.
    """
    try:
        feedback = service.get_all()
    except StorageError:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error")
    return {"feedback": feedback}
