# tests/test_derive.py
"""
Derived views (sagre/derive.py). Pure functions, reference day injected.

Covers:
  1. Text search / month filter / active tab intersection
  2. Current events (inclusive, date-only)
  3. Upcoming within 7 days (sorted)
  4. Next event selection
  5. Unparseable dates never match, never raise
"""
from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from sagre.derive import (
    current_events,
    days_until,
    featured_events,
    filter_events,
    next_event,
    parse_event_date,
    sorted_by_start,
    today_in,
    upcoming_events,
)
from sagre.models import Event

TODAY = date(2025, 7, 1)


def _make_event(**overrides) -> Event:
    defaults = {
        "id": "ev-1",
        "title": "Sagra del Limone",
        "startDate": "2025-07-10",
        "endDate": "2025-07-13",
        "location": "Massa Lubrense (NA)",
        "address": "Centro storico",
        "time": "19:00",
        "month": "luglio",
        "category": "penisola",
        "description": "Degustazioni nei limoneti",
        "cost": "Ingresso gratuito",
        "organizer": "Comune",
        "tags": ["Limoni IGP", "Artigianato"],
        "mapUrl": "https://maps.google.com/search/x",
    }
    defaults.update(overrides)
    return Event.model_validate(defaults)


# ---------------------------------------------------------------------------
# Filter
# ---------------------------------------------------------------------------

class TestFilterEvents:
    def setup_method(self):
        self.events = [
            _make_event(id="a", title="Sagra del Limone", month="luglio"),
            _make_event(id="b", title="Festa del Pesce", month="agosto",
                        location="Amalfi (SA)", tags=["Frittura"]),
            _make_event(id="c", title="Sagra della Castagna", month="oltre",
                        description="Caldarroste e trekking", tags=[]),
            _make_event(id="d", title="Festa delle Alici", month="luglio",
                        location="Cetara (SA)", description="Colatura", tags=["Pesce azzurro"]),
        ]

    def _ids(self, **kwargs):
        return [e.id for e in filter_events(self.events, **kwargs)]

    def test_tab_alone_selects_month(self):
        assert self._ids(active_tab="luglio") == ["a", "d"]
        assert self._ids(active_tab="oltre") == ["c"]

    @pytest.mark.parametrize("search, expected", [
        ("limone", ["a"]),          # title
        ("CETARA", ["d"]),          # location, case-insensitive
        ("colatura", ["d"]),        # description
        ("pesce azz", ["d"]),       # tag substring
        ("sagra", ["a"]),           # other sagra is not in the luglio tab
        ("", ["a", "d"]),
    ])
    def test_search_fields(self, search, expected):
        assert self._ids(search=search, active_tab="luglio") == expected

    def test_month_filter_and_tab_intersect(self):
        assert self._ids(month_filter="agosto", active_tab="luglio") == []
        assert self._ids(month_filter="agosto", active_tab="agosto") == ["b"]

    def test_all_month_filter_is_no_constraint(self):
        assert self._ids(month_filter="all", active_tab="agosto") == ["b"]

    def test_month_outside_enumeration_never_shows(self):
        events = [_make_event(id="x", month="ottobre")]
        for tab in ("luglio", "agosto", "settembre", "oltre"):
            assert filter_events(events, active_tab=tab) == []

    def test_accents_are_not_normalized(self):
        events = [_make_event(id="x", location="Località Bomerano")]
        assert filter_events(events, search="località") != []
        assert filter_events(events, search="localita") == []


# ---------------------------------------------------------------------------
# Current
# ---------------------------------------------------------------------------

class TestCurrentEvents:
    def test_single_day_event_today_is_current(self):
        ev = _make_event(startDate="2025-07-01", endDate="2025-07-01")
        assert current_events([ev], TODAY) == [ev]

    def test_event_ended_yesterday_is_not_current(self):
        ev = _make_event(startDate="2025-06-28", endDate="2025-06-30")
        assert current_events([ev], TODAY) == []

    def test_bounds_are_inclusive(self):
        started_today = _make_event(id="s", startDate="2025-07-01", endDate="2025-07-05")
        ends_today = _make_event(id="e", startDate="2025-06-25", endDate="2025-07-01")
        tomorrow = _make_event(id="t", startDate="2025-07-02", endDate="2025-07-05")
        ids = [e.id for e in current_events([started_today, ends_today, tomorrow], TODAY)]
        assert ids == ["s", "e"]

    def test_unparseable_dates_are_excluded(self):
        ev = _make_event(startDate="fine giugno", endDate="2025-07-05")
        assert current_events([ev], TODAY) == []


# ---------------------------------------------------------------------------
# Upcoming
# ---------------------------------------------------------------------------

class TestUpcomingEvents:
    def test_window_is_one_to_seven_days(self):
        events = [
            _make_event(id="today", startDate="2025-07-01"),
            _make_event(id="d1", startDate="2025-07-02"),
            _make_event(id="d7", startDate="2025-07-08"),
            _make_event(id="d8", startDate="2025-07-09"),
            _make_event(id="past", startDate="2025-06-20"),
        ]
        assert [e.id for e in upcoming_events(events, TODAY)] == ["d1", "d7"]

    def test_sorted_by_start(self):
        events = [
            _make_event(id="late", startDate="2025-07-06"),
            _make_event(id="early", startDate="2025-07-03"),
            _make_event(id="mid", startDate="2025-07-04"),
        ]
        assert [e.id for e in upcoming_events(events, TODAY)] == ["early", "mid", "late"]

    def test_crosses_month_boundary(self):
        ev = _make_event(startDate="2025-08-03")
        assert upcoming_events([ev], date(2025, 7, 30)) == [ev]

    def test_days_until(self):
        assert days_until(_make_event(startDate="2025-07-08"), TODAY) == 7
        assert days_until(_make_event(startDate="2025-06-30"), TODAY) == -1
        assert days_until(_make_event(startDate="boh"), TODAY) is None


# ---------------------------------------------------------------------------
# Next
# ---------------------------------------------------------------------------

class TestNextEvent:
    def test_picks_soonest_future_event(self):
        events = [
            _make_event(id="aug", startDate="2025-08-01"),
            _make_event(id="past", startDate="2025-07-05", endDate="2025-07-05"),
            _make_event(id="jul10", startDate="2025-07-10"),
        ]
        nxt = next_event(events, date(2025, 7, 6))
        assert nxt is not None and nxt.id == "jul10"

    def test_listing_order_does_not_matter(self):
        events = [
            _make_event(id="jul10", startDate="2025-07-10"),
            _make_event(id="jul05", startDate="2025-07-05"),
            _make_event(id="aug01", startDate="2025-08-01"),
        ]
        assert next_event(events, TODAY).id == "jul05"
        assert next_event(events, date(2025, 7, 5)).id == "jul10"

    def test_event_starting_today_is_not_next(self):
        ev = _make_event(startDate="2025-07-01")
        assert next_event([ev], TODAY) is None

    def test_none_when_collection_empty(self):
        assert next_event([], TODAY) is None


# ---------------------------------------------------------------------------
# Misc
# ---------------------------------------------------------------------------

class TestMisc:
    def test_featured(self):
        a = _make_event(id="a", featured=True)
        b = _make_event(id="b")
        assert featured_events([a, b]) == [a]

    def test_sorted_by_start_puts_unparseable_last(self):
        events = [
            _make_event(id="bad", startDate="da definire"),
            _make_event(id="aug", startDate="2025-08-01"),
            _make_event(id="jul", startDate="2025-07-01"),
        ]
        assert [e.id for e in sorted_by_start(events)] == ["jul", "aug", "bad"]

    @pytest.mark.parametrize("raw, expected", [
        ("2025-07-01", date(2025, 7, 1)),
        (" 2025-07-01 ", date(2025, 7, 1)),
        ("01/07/2025", None),
        ("", None),
        (None, None),
        ("2025-02-30", None),
    ])
    def test_parse_event_date(self, raw, expected):
        assert parse_event_date(raw) == expected

    def test_today_in_uses_local_calendar_day(self):
        # 23:30 UTC on June 30 is already July 1 in Rome (UTC+2 in summer).
        now = datetime(2025, 6, 30, 23, 30, tzinfo=timezone.utc)
        assert today_in("Europe/Rome", now) == date(2025, 7, 1)
