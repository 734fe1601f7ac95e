"""Core event service.

Responsibilities:
- Filtered, attendee-counted, paginated event listings
- Organizer / attendee scoped listings
- Event CRUD; only the organizer may update or delete
"""
import logging
from datetime import datetime
from typing import Any, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eventboard.config import settings
from eventboard.models.event import Event
from eventboard.models.user import User
from eventboard.schemas.event import ListEvents
from eventboard.services import query_composer
from eventboard.services.attendee_counts import attach_counts
from eventboard.services.pagination import PaginateOptions, PaginatedResult, paginate
from eventboard.services.time_window import local_now, to_calendar_time

logger = logging.getLogger(__name__)


def _check_authorization(event: Event, actor_user_id: int) -> None:
    """Only the organizer may change or remove an event."""
    if event.organizer_id != actor_user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not authorized to change this event.",
        )


def _get_or_404(db: Session, event_id: int) -> Event:
    event = find_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


# ── Listings ───────────────────────────────────────────────────────

def list_events(
    db: Session,
    list_filter: Optional[ListEvents] = None,
    now: Optional[datetime] = None,
) -> PaginatedResult[Event]:
    """One page of events matching ``list_filter``, each with attendee counts."""
    list_filter = list_filter or ListEvents()
    query = query_composer.filtered_events_query(list_filter, now or local_now())
    return paginate(
        db,
        query,
        PaginateOptions(page=list_filter.page, limit=settings.EVENTS_PAGE_SIZE, with_total=True),
        transform=attach_counts,
        operation="list_events(when=%s, page=%d)" % (
            list_filter.when.value if list_filter.when else None, list_filter.page,
        ),
    )


def get_event_with_counts(db: Session, event_id: int) -> Optional[Event]:
    """Single event with attendee counts, or None when it does not exist."""
    try:
        row = db.execute(query_composer.event_with_counts_query(event_id)).first()
    except SQLAlchemyError:
        logger.exception("get_event_with_counts(%s) failed", event_id)
        raise
    return attach_counts(row) if row else None


def list_organized_by(db: Session, user_id: int, page: int = 1) -> PaginatedResult[Event]:
    return paginate(
        db,
        query_composer.with_organizer(user_id),
        PaginateOptions(page=page, limit=settings.EVENTS_PAGE_SIZE, with_total=True),
        operation=f"list_organized_by(user_id={user_id})",
    )


def list_attended_by(db: Session, user_id: int, page: int = 1) -> PaginatedResult[Event]:
    return paginate(
        db,
        query_composer.with_attendee(user_id),
        PaginateOptions(page=page, limit=settings.EVENTS_PAGE_SIZE, with_total=True),
        operation=f"list_attended_by(user_id={user_id})",
    )


# ── CRUD ───────────────────────────────────────────────────────────

def find_event(db: Session, event_id: int) -> Optional[Event]:
    return db.get(Event, event_id)


def create_event(
    db: Session,
    organizer_id: int,
    name: str,
    description: str,
    address: str,
    when: datetime,
) -> Event:
    """Create an event owned by ``organizer_id``."""
    if db.get(User, organizer_id) is None:
        raise HTTPException(status_code=404, detail="Organizer not found")

    event = Event(
        name=name,
        description=description,
        address=address,
        when=to_calendar_time(when),
        organizer_id=organizer_id,
    )
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("Created event '%s' (%s) by organizer %s", name, event.id, organizer_id)
    return event


def update_event(
    db: Session,
    event_id: int,
    actor_user_id: int,
    updates: dict[str, Any],
) -> Event:
    """Partial update, organizer only."""
    event = _get_or_404(db, event_id)
    _check_authorization(event, actor_user_id)

    for field, value in updates.items():
        if value is None or field not in ("name", "description", "address", "when"):
            continue
        if field == "when":
            value = to_calendar_time(value)
        setattr(event, field, value)

    db.commit()
    db.refresh(event)
    logger.info("Updated event %s (%s)", event_id, ", ".join(sorted(updates)) or "no fields")
    return event


def delete_event(db: Session, event_id: int, actor_user_id: int) -> None:
    """Hard delete, organizer only. Attendee rows go with the event."""
    event = _get_or_404(db, event_id)
    _check_authorization(event, actor_user_id)
    db.delete(event)
    db.commit()
    logger.info("Deleted event %s by organizer %s", event_id, actor_user_id)
