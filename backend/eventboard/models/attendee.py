"""Attendee ORM model — one response per (event, user) pair."""
import enum
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint, Enum as SAEnum
from sqlalchemy.orm import relationship
from eventboard.database import Base


class AttendeeAnswer(str, enum.Enum):
    accepted = "accepted"
    maybe = "maybe"
    rejected = "rejected"


class Attendee(Base):
    __tablename__ = "attendees"
    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_attendees_event_user"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    answer = Column(SAEnum(AttendeeAnswer), nullable=False, default=AttendeeAnswer.accepted)

    event = relationship("Event", back_populates="attendees")
