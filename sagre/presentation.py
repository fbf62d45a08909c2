from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from sagre.config import TIMEZONE
from sagre.derive import UPCOMING_WINDOW_DAYS, days_until, is_current, parse_event_date
from sagre.models import Event

_IT_MONTHS = (
    "gennaio", "febbraio", "marzo", "aprile", "maggio", "giugno",
    "luglio", "agosto", "settembre", "ottobre", "novembre", "dicembre",
)

_MONTH_COLORS: dict[str, str] = {
    "luglio": "bg-red-100 text-red-800 dark:bg-red-900 dark:text-red-300",
    "agosto": "bg-green-100 text-green-800 dark:bg-green-900 dark:text-green-300",
    "settembre": "bg-blue-100 text-blue-800 dark:bg-blue-900 dark:text-blue-300",
    "oltre": "bg-purple-100 text-purple-800 dark:bg-purple-900 dark:text-purple-300",
}
_DEFAULT_COLOR = "bg-gray-100 text-gray-800 dark:bg-gray-900 dark:text-gray-300"


def month_color(month: str) -> str:
    """Badge classes for a month tab; unknown months get the neutral gray badge."""
    return _MONTH_COLORS.get(month, _DEFAULT_COLOR)


def month_label(month: str) -> str:
    if month == "oltre":
        return "Oltre la Costiera"
    return month[:1].upper() + month[1:]


def format_day_month(value: str) -> str:
    """'2025-07-10' → '10 luglio'. Raw text if it does not parse."""
    d = parse_event_date(value)
    if d is None:
        return value
    return f"{d.day} {_IT_MONTHS[d.month - 1]}"


def format_date_range(start: str, end: str) -> str:
    if start == end:
        return format_day_month(start)
    return f"{format_day_month(start)} - {format_day_month(end)}"


def format_table_date(value: str) -> str:
    """'2025-07-10' → '10/07/2025'."""
    d = parse_event_date(value)
    if d is None:
        return value
    return d.strftime("%d/%m/%Y")


# Characteristic badges, in display order.
_FEATURE_LABELS: tuple[tuple[str, str], ...] = (
    ("has_food", "Cibo"),
    ("has_music", "Musica"),
    ("has_free_entry", "Ingresso Libero"),
    ("has_ticket_tasting", "Ticket Degustazione"),
    ("has_fireworks", "Fuochi"),
)


def event_features(event: Event) -> list[str]:
    return [label for field, label in _FEATURE_LABELS if getattr(event, field)]


# ---------------------------------------------------------------------------
# Date status badge
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DateStatus:
    status: str   # today | tomorrow | soon
    label: str


def date_status(event: Event, today: date) -> Optional[DateStatus]:
    if is_current(event, today):
        return DateStatus("today", "Oggi")
    diff = days_until(event, today)
    if diff == 1:
        return DateStatus("tomorrow", "Domani")
    if diff is not None and 1 < diff <= UPCOMING_WINDOW_DAYS:
        return DateStatus("soon", f"Tra {diff} giorni")
    return None


# ---------------------------------------------------------------------------
# Countdown
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Countdown:
    days: int
    hours: int
    minutes: int
    seconds: int


def countdown(target_date: str, now: datetime, tz_name: str = TIMEZONE) -> Optional[Countdown]:
    """
    Time left until local midnight of target_date.
    None once the target is reached or if target_date does not parse.
    """
    d = parse_event_date(target_date)
    if d is None:
        return None

    tz = ZoneInfo(tz_name)
    if now.tzinfo is None:
        now = now.replace(tzinfo=tz)
    target = datetime(d.year, d.month, d.day, tzinfo=tz)

    remaining = int((target.astimezone(timezone.utc) - now.astimezone(timezone.utc)).total_seconds())
    if remaining <= 0:
        return None

    days, rest = divmod(remaining, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return Countdown(days, hours, minutes, seconds)


def event_summary(event: Event, today: Optional[date] = None) -> dict:
    """Flat display record for one event (CLI / JSON output)."""
    status = date_status(event, today) if today else None
    return {
        "id": event.id,
        "title": event.title,
        "dates": format_date_range(event.start_date, event.end_date),
        "month": month_label(event.month),
        "monthColor": month_color(event.month),
        "location": event.location,
        "time": event.time,
        "cost": event.cost,
        "tags": list(event.tags),
        "features": event_features(event),
        "status": status.label if status else None,
    }
