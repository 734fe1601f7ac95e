"""Pydantic schemas for Events."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from eventboard.services.time_window import WhenFilter


class ListEvents(BaseModel):
    """Listing filter — already validated by the router."""

    when: Optional[WhenFilter] = None
    page: int = 1


class EventCreate(BaseModel):
    name: str = Field(min_length=5, max_length=255)
    description: str = Field(min_length=5, max_length=255)
    when: datetime
    address: str = Field(min_length=5, max_length=255)


class EventUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=5, max_length=255)
    description: Optional[str] = Field(default=None, min_length=5, max_length=255)
    when: Optional[datetime] = None
    address: Optional[str] = Field(default=None, min_length=5, max_length=255)


class EventOut(BaseModel):
    id: int
    name: str
    description: str
    address: str
    when: datetime
    organizer_id: int

    model_config = {"from_attributes": True}


class EventWithCountsOut(EventOut):
    attendee_count: int = 0
    attendee_accepted: int = 0
    attendee_maybe: int = 0
    attendee_rejected: int = 0
