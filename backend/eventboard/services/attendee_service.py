"""Attendee responses — lookup and upsert keyed on (event_id, user_id)."""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from eventboard.models.attendee import Attendee, AttendeeAnswer

logger = logging.getLogger(__name__)


def find_by_event(db: Session, event_id: int) -> list[Attendee]:
    stmt = select(Attendee).where(Attendee.event_id == event_id).order_by(Attendee.id)
    return list(db.scalars(stmt))


def find_one(db: Session, event_id: int, user_id: int) -> Optional[Attendee]:
    stmt = select(Attendee).where(Attendee.event_id == event_id, Attendee.user_id == user_id)
    return db.scalars(stmt).first()


def create_or_update(
    db: Session,
    event_id: int,
    user_id: int,
    answer: AttendeeAnswer,
) -> Attendee:
    """Record ``user_id``'s answer for ``event_id``, replacing any previous one."""
    attendee = find_one(db, event_id, user_id)
    if attendee is None:
        attendee = Attendee(event_id=event_id, user_id=user_id)
        db.add(attendee)

    attendee.answer = AttendeeAnswer(answer)
    db.commit()
    db.refresh(attendee)
    logger.info("User %s answered '%s' to event %s", user_id, attendee.answer.value, event_id)
    return attendee
