"""Pydantic schemas for Attendees."""
from pydantic import BaseModel

from eventboard.models.attendee import AttendeeAnswer


class AttendeeAnswerIn(BaseModel):
    answer: AttendeeAnswer


class AttendeeOut(BaseModel):
    id: int
    event_id: int
    user_id: int
    answer: AttendeeAnswer

    model_config = {"from_attributes": True}
