"""Event listing statements.

Every function returns a new ``Select``; nothing here touches a session.
All listings share one order, newest id first, so page boundaries stay put
between two reads of unchanged data.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import Select, select

from eventboard.models.attendee import Attendee
from eventboard.models.event import Event
from eventboard.schemas.event import ListEvents
from eventboard.services import time_window
from eventboard.services.attendee_counts import with_attendee_counts


def base_query() -> Select:
    return select(Event).order_by(Event.id.desc())


def with_organizer(user_id: int) -> Select:
    """Events organized by ``user_id``."""
    return base_query().where(Event.organizer_id == user_id)


def with_attendee(user_id: int) -> Select:
    """Events ``user_id`` has responded to, whatever the answer."""
    return base_query().join(Attendee, Attendee.event_id == Event.id).where(
        Attendee.user_id == user_id
    )


def with_filter(query: Select, list_filter: Optional[ListEvents], now: datetime) -> Select:
    """Thread the optional time-window predicate onto ``query``."""
    if list_filter is None:
        return query
    predicate = time_window.resolve(list_filter.when, now)
    if predicate is not None:
        query = query.where(predicate)
    return query


def filtered_events_query(list_filter: Optional[ListEvents], now: datetime) -> Select:
    """Base order + attendee counts + time window."""
    return with_filter(with_attendee_counts(base_query()), list_filter, now)


def event_with_counts_query(event_id: int) -> Select:
    return with_attendee_counts(base_query()).where(Event.id == event_id)
