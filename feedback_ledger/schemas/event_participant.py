from pydantic import BaseModel, Field


class EventParticipantUpdate(BaseModel):
    participant: str = Field(..., min_length=1, max_length=255)


class EventParticipant(BaseModel):
    event_id: int
    participant: str
    allowed: bool

    class Config:
        from_attributes = True
