"""
Top-level session: owns the event collection and the view state.

Every mutation builds a new list, swaps it in, and persists the whole
collection. Reads are recomputed from the current list on each call.
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional
from uuid import uuid4
from zoneinfo import ZoneInfo

from sagre import derive
from sagre.auth import check_credentials
from sagre.config import TIMEZONE
from sagre.errors import (
    DuplicateEventIdError,
    EventNotFoundError,
    InvalidCredentialsError,
    InvalidEventError,
    NothingToImportError,
    NotAuthenticatedError,
)
from sagre.importer.bulk_text import parse_import_text
from sagre.models import Event, EventForm, User
from sagre.presentation import Countdown, countdown
from sagre.storage import EventRepository

logger = logging.getLogger(__name__)


# Fields the add/edit dialogs mark as required (wire names, message order).
REQUIRED_FORM_FIELDS: tuple[str, ...] = (
    "title",
    "organizer",
    "startDate",
    "endDate",
    "time",
    "cost",
    "location",
    "address",
    "mapUrl",
    "description",
)


def _new_event_id() -> str:
    return f"event-{uuid4().hex}"


def missing_form_fields(event: Event) -> list[str]:
    wire = event.to_wire()
    return [f for f in REQUIRED_FORM_FIELDS if not str(wire.get(f) or "").strip()]


def _check_required(event: Event) -> None:
    missing = missing_form_fields(event)
    if missing:
        logger.info("[session] REJECT event id=%s missing=%s", event.id, ",".join(missing))
        raise InvalidEventError(missing)


def event_from_form(form: EventForm, event_id: Optional[str] = None) -> Event:
    """Build a new Event from the add form. Tags are comma-split and trimmed."""
    fields = form.model_dump()
    raw_tags = fields.pop("tags")
    tags = [t.strip() for t in raw_tags.split(",")] if raw_tags.strip() else []
    return Event(
        **fields,
        id=event_id or _new_event_id(),
        tags=tags,
        featured=False,
    )


class Session:
    def __init__(
        self,
        repository: EventRepository,
        clock: Optional[Callable[[], datetime]] = None,
        tz_name: str = TIMEZONE,
    ) -> None:
        self._repo = repository
        self._tz_name = tz_name
        self._clock = clock or (lambda: datetime.now(ZoneInfo(tz_name)))

        self.events: list[Event] = repository.load()
        self.is_dark = repository.load_theme() == "dark"
        self.user: Optional[User] = None

        self.search = ""
        self.month_filter = derive.ALL_MONTHS
        self.active_tab = "luglio"

    # ------------------------------------------------------------------
    # Clock
    # ------------------------------------------------------------------

    def now(self) -> datetime:
        return self._clock()

    def today(self) -> date:
        return derive.today_in(self._tz_name, self.now())

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    def login(self, email: str, password: str) -> User:
        user = check_credentials(email, password)
        if user is None:
            logger.info("[session] login rejected")
            raise InvalidCredentialsError()
        self.user = user
        return user

    def logout(self) -> None:
        self.user = None

    def _require_user(self) -> None:
        if self.user is None:
            raise NotAuthenticatedError()

    # ------------------------------------------------------------------
    # Mutations (whole-collection replace + persist)
    # ------------------------------------------------------------------

    def _replace(self, events: list[Event]) -> None:
        self.events = events
        self._repo.save(events)

    def add_event(self, form: EventForm) -> Event:
        self._require_user()
        event = event_from_form(form)
        _check_required(event)
        if any(e.id == event.id for e in self.events):
            raise DuplicateEventIdError(event.id)
        self._replace([*self.events, event])
        logger.info("[session] added event id=%s title=%r", event.id, event.title)
        return event

    def edit_event(self, updated: Event) -> Event:
        self._require_user()
        if not any(e.id == updated.id for e in self.events):
            raise EventNotFoundError(updated.id)
        _check_required(updated)
        self._replace([updated if e.id == updated.id else e for e in self.events])
        logger.info("[session] edited event id=%s", updated.id)
        return updated

    def delete_event(self, event_id: str) -> None:
        self._require_user()
        remaining = [e for e in self.events if e.id != event_id]
        if len(remaining) == len(self.events):
            raise EventNotFoundError(event_id)
        self._replace(remaining)
        logger.info("[session] deleted event id=%s", event_id)

    def bulk_import(self, text: str) -> list[Event]:
        """
        Parse and append. BulkImportError leaves the collection untouched;
        text without any event raises NothingToImportError.
        """
        self._require_user()
        imported = parse_import_text(text)
        if not imported:
            raise NothingToImportError()
        self._replace([*self.events, *imported])
        logger.info("[session] imported %d event(s)", len(imported))
        return imported

    def get_event(self, event_id: str) -> Event:
        for e in self.events:
            if e.id == event_id:
                return e
        raise EventNotFoundError(event_id)

    # ------------------------------------------------------------------
    # Theme
    # ------------------------------------------------------------------

    def set_theme(self, theme: str) -> None:
        self.is_dark = theme == "dark"
        self._repo.save_theme("dark" if self.is_dark else "light")

    def toggle_theme(self) -> str:
        self.set_theme("light" if self.is_dark else "dark")
        return "dark" if self.is_dark else "light"

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def filtered(self) -> list[Event]:
        return derive.filter_events(
            self.events,
            search=self.search,
            month_filter=self.month_filter,
            active_tab=self.active_tab,
        )

    def current(self) -> list[Event]:
        return derive.current_events(self.events, self.today())

    def upcoming(self) -> list[Event]:
        return derive.upcoming_events(self.events, self.today())

    def next(self) -> Optional[Event]:
        return derive.next_event(self.events, self.today())

    def next_countdown(self) -> Optional[Countdown]:
        nxt = self.next()
        if nxt is None:
            return None
        return countdown(nxt.start_date, self.now(), self._tz_name)

    def featured(self) -> list[Event]:
        return derive.featured_events(self.events)

    def table(self) -> list[Event]:
        return derive.sorted_by_start(self.events)
