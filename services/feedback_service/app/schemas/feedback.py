from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FeedbackCreate(BaseModel):
    # No format validation on contact
    contact: Optional[str] = ""
    content: str = Field(min_length=1)

    @field_validator("contact")
    @classmethod
    def contact_defaults_to_empty(cls, value: Optional[str]) -> str:
        return value or ""


class FeedbackResponse(BaseModel):
    id: int
    contact: str
    content: str

    model_config = ConfigDict(from_attributes=True)


class FeedbackEnvelope(BaseModel):
    feedback: FeedbackResponse


class FeedbackListEnvelope(BaseModel):
    feedback: List[FeedbackResponse]


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    message: str
    time: Optional[datetime] = None
