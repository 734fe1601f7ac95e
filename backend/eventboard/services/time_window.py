"""Symbolic time-window filters (today / tomorrow / this week / next week).

``resolve`` turns a ``WhenFilter`` into a SQL predicate over ``Event.when``.
It is a pure function of the window and ``now``; callers normally pass
``local_now()``, which reads the wall clock in ``settings.EVENTS_TIMEZONE``.

Week numbers count from January 1st: days 1-7 of the year are week 1,
days 8-14 week 2, and so on up to week 53. Comparisons are on the week
number only, so "next week" during the last week of the year matches
nothing (no rollover into week 1 of the following year).
"""
import enum
from datetime import datetime, timedelta
from typing import Callable, Optional

import pytz
from sqlalchemy import Integer, and_
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.sql.functions import FunctionElement

from eventboard.config import settings
from eventboard.models.event import Event


class WhenFilter(str, enum.Enum):
    today = "today"
    tomorrow = "tomorrow"
    this_week = "thisweek"
    next_week = "nextweek"


class week_of_year(FunctionElement):
    """``week_of_year(col)`` — 1-based week of the year, counted from Jan 1st."""

    type = Integer()
    inherit_cache = True
    name = "week_of_year"


@compiles(week_of_year)
def _week_of_year_default(element, compiler, **kw):
    return "CAST(TO_CHAR(%s, 'WW') AS INTEGER)" % compiler.process(element.clauses, **kw)


@compiles(week_of_year, "sqlite")
def _week_of_year_sqlite(element, compiler, **kw):
    return "((CAST(strftime('%%j', %s) AS INTEGER) - 1) / 7 + 1)" % compiler.process(
        element.clauses, **kw
    )


def week_number(moment: datetime) -> int:
    """Python twin of ``week_of_year`` for a single timestamp."""
    return (moment.timetuple().tm_yday - 1) // 7 + 1


def to_calendar_time(moment: datetime) -> datetime:
    """Convert an aware timestamp to tz-naive wall-clock time in the event calendar.

    Naive values are assumed to already be calendar time and pass through.
    """
    if moment.tzinfo is None:
        return moment
    tz = pytz.timezone(settings.EVENTS_TIMEZONE)
    return moment.astimezone(tz).replace(tzinfo=None)


def local_now() -> datetime:
    return to_calendar_time(datetime.now(pytz.utc))


def _start_of_day(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def _day_window(days_ahead: int) -> Callable[[datetime], ColumnElement]:
    def build(now: datetime) -> ColumnElement:
        start = _start_of_day(now) + timedelta(days=days_ahead)
        # Half-open so an event exactly at midnight lands in one day only
        return and_(Event.when >= start, Event.when < start + timedelta(days=1))

    return build


def _week_window(weeks_ahead: int) -> Callable[[datetime], ColumnElement]:
    def build(now: datetime) -> ColumnElement:
        return week_of_year(Event.when) == week_number(now) + weeks_ahead

    return build


_PREDICATE_BUILDERS: dict[WhenFilter, Callable[[datetime], ColumnElement]] = {
    WhenFilter.today: _day_window(0),
    WhenFilter.tomorrow: _day_window(1),
    WhenFilter.this_week: _week_window(0),
    WhenFilter.next_week: _week_window(1),
}


def resolve(window: Optional[WhenFilter], now: datetime) -> Optional[ColumnElement]:
    """Return the predicate for ``window``, or None when no window is set."""
    if window is None:
        return None
    return _PREDICATE_BUILDERS[WhenFilter(window)](to_calendar_time(now))
