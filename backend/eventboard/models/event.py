"""Event ORM model.

Listing queries may attach four non-persisted attributes to each instance
(``attendee_count``, ``attendee_accepted``, ``attendee_maybe``,
``attendee_rejected``) — see ``services.attendee_counts``.
"""
from sqlalchemy import Column, String, DateTime, Integer, ForeignKey
from sqlalchemy.orm import relationship
from eventboard.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    when = Column(DateTime, nullable=False)  # wall-clock time in settings.EVENTS_TIMEZONE
    organizer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    attendees = relationship(
        "Attendee",
        back_populates="event",
        cascade="all, delete-orphan",
    )
