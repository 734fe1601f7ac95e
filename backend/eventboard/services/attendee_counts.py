"""Per-event attendee counts for listing queries.

Each count is a correlated scalar subquery, so an event row is never
multiplied by its attendees and a bucket with no matching rows reads 0.
"""
from typing import Optional

from sqlalchemy import Select, func, select
from sqlalchemy.engine import Row

from eventboard.models.attendee import Attendee, AttendeeAnswer
from eventboard.models.event import Event

# attribute name -> answer bucket (None counts every response)
COUNT_COLUMNS: dict[str, Optional[AttendeeAnswer]] = {
    "attendee_count": None,
    "attendee_accepted": AttendeeAnswer.accepted,
    "attendee_maybe": AttendeeAnswer.maybe,
    "attendee_rejected": AttendeeAnswer.rejected,
}


def attendee_count(answer: Optional[AttendeeAnswer] = None):
    """Scalar subquery counting the attendees of the enclosing event row."""
    stmt = select(func.count(Attendee.id)).where(Attendee.event_id == Event.id)
    if answer is not None:
        stmt = stmt.where(Attendee.answer == answer)
    return stmt.correlate(Event).scalar_subquery()


def with_attendee_counts(query: Select) -> Select:
    """Return ``query`` with the four labelled count columns added."""
    return query.add_columns(
        *(attendee_count(answer).label(name) for name, answer in COUNT_COLUMNS.items())
    )


def attach_counts(row: Row) -> Event:
    """Fold a ``(Event, counts...)`` row back into its Event instance."""
    event = row[0]
    mapping = row._mapping
    for name in COUNT_COLUMNS:
        setattr(event, name, mapping[name] or 0)
    return event
