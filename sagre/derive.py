# sagre/derive.py
"""
Derived views over an event collection.

Pure functions of (events, reference day, filter params). No side effects.

All date logic is calendar-day based: event dates are parsed as ISO calendar
dates and compared against a `date` "today", so DST / timezone offsets can
never shift a result by a day. Event dates that do not parse never satisfy a
comparison, which excludes them from current / upcoming / next.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from sagre.config import TIMEZONE
from sagre.models import Event

ALL_MONTHS = "all"
UPCOMING_WINDOW_DAYS = 7


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def parse_event_date(value: Optional[str]) -> Optional[date]:
    """ISO calendar date or None. Time-of-day suffixes are not accepted."""
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def today_in(tz_name: str = TIMEZONE, now: Optional[datetime] = None) -> date:
    """Calendar day of `now` (default: current instant) in the given timezone."""
    tz = ZoneInfo(tz_name)
    if now is None:
        return datetime.now(tz).date()
    if now.tzinfo is None:
        now = now.replace(tzinfo=tz)
    return now.astimezone(tz).date()


def days_until(event: Event, today: date) -> Optional[int]:
    """Whole days from today to the event start; None if the start does not parse."""
    start = parse_event_date(event.start_date)
    if start is None:
        return None
    return (start - today).days


def is_current(event: Event, today: date) -> bool:
    start = parse_event_date(event.start_date)
    end = parse_event_date(event.end_date)
    if start is None or end is None:
        return False
    return start <= today <= end


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------

def matches_search(event: Event, search: str) -> bool:
    """Case-insensitive substring match on title, location, description, tags."""
    if not search:
        return True
    needle = search.casefold()
    haystacks = [event.title, event.location, event.description, *event.tags]
    return any(needle in h.casefold() for h in haystacks)


def filter_events(
    events: Iterable[Event],
    search: str = "",
    month_filter: str = ALL_MONTHS,
    active_tab: str = "luglio",
) -> list[Event]:
    """
    Text search ∩ month filter ∩ active tab.
    The month filter is skipped when "all"; the tab always applies.
    """
    out = [e for e in events if matches_search(e, search)]
    if month_filter != ALL_MONTHS:
        out = [e for e in out if e.month == month_filter]
    return [e for e in out if e.month == active_tab]


def current_events(events: Iterable[Event], today: date) -> list[Event]:
    """Events running today: start <= today <= end, inclusive."""
    return [e for e in events if is_current(e, today)]


def _start_key(event: Event) -> date:
    # Only called on events whose start already parsed.
    return parse_event_date(event.start_date)  # type: ignore[return-value]


def upcoming_events(
    events: Iterable[Event],
    today: date,
    within_days: int = UPCOMING_WINDOW_DAYS,
) -> list[Event]:
    """Events starting 1..within_days days after today, soonest first."""
    out = []
    for e in events:
        diff = days_until(e, today)
        if diff is not None and 0 < diff <= within_days:
            out.append(e)
    return sorted(out, key=_start_key)


def next_event(events: Iterable[Event], today: date) -> Optional[Event]:
    """The soonest event starting strictly after today, or None."""
    future = [e for e in events if (days_until(e, today) or 0) > 0]
    if not future:
        return None
    return sorted(future, key=_start_key)[0]


def featured_events(events: Iterable[Event]) -> list[Event]:
    return [e for e in events if e.featured]


def sorted_by_start(events: Iterable[Event]) -> list[Event]:
    """Ascending by start date; events with an unparseable start go last."""
    def key(e: Event) -> tuple[int, date]:
        start = parse_event_date(e.start_date)
        return (0, start) if start else (1, date.max)

    return sorted(events, key=key)
