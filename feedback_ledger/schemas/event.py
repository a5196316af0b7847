# File: feedback_ledger/schemas/event.py
from pydantic import BaseModel, Field, field_validator
from typing import List
from feedback_ledger.core.config import settings


class EventCreate(BaseModel):
    title: str = Field(..., max_length=settings.MAX_TITLE_LENGTH)
    description: str = Field("", max_length=settings.MAX_DESCRIPTION_LENGTH)
    duration: int = Field(..., ge=0, le=settings.MAX_UINT, description="Length of the active window in heights")
    # An empty list is allowed here; the lifecycle service rejects it with its own error
    feedback_types: List[str] = Field(..., max_length=settings.MAX_FEEDBACK_TYPES)
    min_rating: int = Field(..., ge=0, le=settings.MAX_UINT)
    max_rating: int = Field(..., ge=0, le=settings.MAX_UINT)
    requires_auth: bool = False
    incentive_enabled: bool = False

    @field_validator("feedback_types")
    @classmethod
    def validate_feedback_type_labels(cls, v):
        for label in v:
            if len(label) > settings.MAX_FEEDBACK_TYPE_LENGTH:
                raise ValueError(f"Feedback type label too long: {label}")
        return v


class EventExtend(BaseModel):
    additional_blocks: int = Field(..., ge=0, le=settings.MAX_UINT)


class Event(BaseModel):
    id: int
    creator: str
    title: str
    description: str
    start_height: int
    end_height: int
    feedback_types: List[str]
    min_rating: int
    max_rating: int
    requires_authentication: bool
    incentive_enabled: bool
    is_closed: bool

    class Config:
        from_attributes = True
