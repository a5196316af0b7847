# File: feedback_ledger/schemas/feedback.py
from pydantic import BaseModel, Field
from typing import Dict, Optional
from feedback_ledger.core.config import settings

# Feedback kinds with a dedicated entry point
RATING = "rating"
REACTION = "reaction"
TEXT = "text"


class RatingFeedbackCreate(BaseModel):
    rating_value: int = Field(..., ge=0, le=settings.MAX_UINT)
    anonymous: bool = False


class ReactionFeedbackCreate(BaseModel):
    reaction_value: str = Field(..., max_length=settings.MAX_REACTION_LENGTH)
    anonymous: bool = False


class TextFeedbackCreate(BaseModel):
    text_value: str = Field(..., max_length=settings.MAX_TEXT_LENGTH)
    anonymous: bool = False


class FeedbackSubmission(BaseModel):
    event_id: int
    submission_id: int
    submitter: str
    feedback_type: str
    rating_value: Optional[int] = None
    reaction_value: Optional[str] = None
    text_value: Optional[str] = None
    submitted_at_height: int
    is_anonymous: bool

    class Config:
        from_attributes = True


class EventRatingStats(BaseModel):
    event_id: int
    total_ratings: int
    rating_sum: int
    rating_distribution: Dict[int, int] = {}
