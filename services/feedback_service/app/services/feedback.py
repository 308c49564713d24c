import logging
from typing import List

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.feedback import Feedback
from ..schemas.feedback import FeedbackCreate
from .exceptions import FeedbackNotFoundError, StorageError

logger = logging.getLogger(__name__)


class FeedbackService:
    def __init__(self, db: Session):
        self.db = db

    def create_feedback(self, feedback_data: FeedbackCreate) -> Feedback:
        """
        Creates a new feedback record.

        Args:
            feedback_data: The Pydantic schema containing contact and content.

        Returns:
            The newly created Feedback ORM object, with its assigned id.

        Raises:
            StorageError: If the insert could not be committed.
        """
        db_feedback = Feedback(
            contact=feedback_data.contact,
            content=feedback_data.content,
        )
        try:
            self.db.add(db_feedback)
            self.db.commit()
            self.db.refresh(db_feedback)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to save feedback")
            raise StorageError("Failed to save feedback") from e
        logger.debug("Saved feedback id=%s", db_feedback.id)
        return db_feedback

    def get_latest(self) -> Feedback:
        """
        Retrieves the most recent feedback, i.e. the one with the highest id.

        Raises:
            FeedbackNotFoundError: If no feedback has been saved yet.
            StorageError: If the query failed.
        """
        try:
            feedback = self.db.query(Feedback).order_by(Feedback.id.desc()).first()
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch latest feedback")
            raise StorageError("Failed to fetch latest feedback") from e
        if feedback is None:
            raise FeedbackNotFoundError("No feedback found")
        return feedback

    def get_all(self) -> List[Feedback]:
        """
        Retrieves every feedback record, oldest first.
        """
        try:
            return self.db.query(Feedback).order_by(Feedback.id.asc()).all()
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch feedback")
            raise StorageError("Failed to fetch feedback") from e

    def ping(self) -> None:
        try:
            self.db.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning("Database unreachable: %s", e)
            raise StorageError("Database unreachable") from e
