# api/schemas/feedback.py
from datetime import datetime
from pydantic import BaseModel, Field


class FeedbackRequest(BaseModel):
    book_id: int
    note: float = Field(ge=0, le=5)
    comment: str = Field(min_length=1)


class FeedbackResponse(BaseModel):
    id: int
    note: float
    comment: str
    own_feedback: bool
    created_at: datetime
