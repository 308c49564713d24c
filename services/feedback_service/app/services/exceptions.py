class FeedbackServiceError(Exception):
    """Base class for errors raised by the feedback persistence layer."""


class StorageError(FeedbackServiceError):
    """The database failed: connectivity, constraint or query error."""


class FeedbackNotFoundError(FeedbackServiceError):
    """A single-record query matched zero rows."""
