from sqlalchemy.orm import Session
from fastapi import Depends

from ..services.feedback import FeedbackService
from ..models.database import get_db

def get_feedback_service(db: Session = Depends(get_db)) -> FeedbackService:
    """One service per request, bound to that request's session."""
    return FeedbackService(db)
