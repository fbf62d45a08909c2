#!/usr/bin/env python3
# sagre/cli.py
"""
Command-line front end for the sagre catalog.

Usage:
    sagre list --tab agosto --search pesce
    sagre today
    sagre next
    sagre import eventi.txt --email admin@sagrecampania.it --password ...
    sagre import --example
    sagre edit sagra-limone-massa-lubrense --set featured=true ...
    sagre theme toggle

Exit codes: 0 ok, 1 domain error (message printed), 2 usage error.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from datetime import datetime
from typing import Any, Optional

import dateparser
from pydantic import ValidationError

from sagre import config
from sagre.derive import ALL_MONTHS
from sagre.errors import DomainError
from sagre.importer.bulk_text import EXAMPLE_TEXT, FORMAT_TEMPLATE
from sagre.models import MONTHS, Event, EventForm
from sagre.presentation import event_summary, format_table_date
from sagre.seed import seed_events
from sagre.session import Session
from sagre.storage import EventRepository, JsonFileKeyValueStore

_BOOL_FIELDS = {"featured", "hasFood", "hasMusic", "hasFreeEntry", "hasTicketTasting", "hasFireworks"}


class UsageError(Exception):
    pass


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def parse_reference_time(text: str, tz_name: str = config.TIMEZONE) -> datetime:
    """
    Parse a --today override: '01/07/2025', '2025-07-01', '1 luglio 2025', 'domani'.
    Day-first, Italian or English. Returns a timezone-aware datetime.
    """
    dt = dateparser.parse(
        text,
        languages=["it", "en"],
        settings={
            "TIMEZONE": tz_name,
            "RETURN_AS_TIMEZONE_AWARE": True,
            "DATE_ORDER": "DMY",
        },
    )
    if dt is None:
        raise UsageError(f"data non riconosciuta: {text!r}")
    return dt


def parse_assignment(raw: str) -> tuple[str, Any]:
    """'field=value' → (field, typed value). Field names are the camelCase wire names."""
    if "=" not in raw:
        raise UsageError(f"atteso campo=valore, trovato {raw!r}")
    field, value = raw.split("=", 1)
    field = field.strip()
    if field == "id":
        raise UsageError("l'id di un evento non si può modificare")
    if field not in Event.model_fields and field not in {
        f.alias for f in Event.model_fields.values()
    }:
        raise UsageError(f"campo sconosciuto: {field}")
    if field in _BOOL_FIELDS:
        return field, value.strip().lower() in ("true", "1", "sì", "si", "yes")
    if field == "tags":
        return field, [t.strip() for t in value.split(",")] if value.strip() else []
    return field, value


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def resolve_log_level(name: str) -> int:
    """Level number for a name like 'info'; unknown names fall back to WARNING."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def _print_events(events: list[Event], session: Session, as_json: bool) -> None:
    today = session.today()
    rows = [event_summary(e, today) for e in events]
    if as_json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return
    if not rows:
        print("Nessun evento trovato per i criteri selezionati.")
        return
    for r in rows:
        status = f" [{r['status']}]" if r["status"] else ""
        print(f"{r['dates']:<26} {r['title']}{status} | {r['location']} | {r['time']} | id={r['id']}")


def _login(session: Session, args: argparse.Namespace) -> None:
    session.login(args.email or "", args.password or "")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_list(session: Session, args: argparse.Namespace) -> int:
    session.search = args.search
    session.month_filter = args.month
    session.active_tab = args.tab
    _print_events(session.filtered(), session, args.json)
    return 0


def cmd_today(session: Session, args: argparse.Namespace) -> int:
    current, upcoming = session.current(), session.upcoming()
    if args.json:
        today = session.today()
        print(json.dumps({
            "current": [event_summary(e, today) for e in current],
            "upcoming": [event_summary(e, today) for e in upcoming],
        }, ensure_ascii=False, indent=2))
        return 0
    print(f"In Corso Oggi ({len(current)})")
    _print_events(current, session, False)
    print(f"\nProssimi 7 Giorni ({len(upcoming)})")
    _print_events(upcoming, session, False)
    return 0


def cmd_next(session: Session, args: argparse.Namespace) -> int:
    nxt = session.next()
    if nxt is None:
        print("Nessun evento in programma.")
        return 0
    left = session.next_countdown()
    print(f"Prossimo evento: {nxt.title} ({nxt.location})")
    if left:
        print(f"Mancano {left.days}g {left.hours}h {left.minutes}m {left.seconds}s")
    return 0


def cmd_featured(session: Session, args: argparse.Namespace) -> int:
    _print_events(session.featured(), session, args.json)
    return 0


def cmd_table(session: Session, args: argparse.Namespace) -> int:
    for e in session.table():
        print(
            f"{format_table_date(e.start_date)} | {format_table_date(e.end_date)} | "
            f"{e.title} | {e.location} | {e.time} | {e.cost} | {e.map_url}"
        )
    return 0


def cmd_import(session: Session, args: argparse.Namespace) -> int:
    if args.example:
        print("Formato richiesto:\n")
        print(FORMAT_TEMPLATE)
        print("\nEsempio:\n")
        print(EXAMPLE_TEXT)
        return 0
    if not args.file:
        raise UsageError("indicare un file da importare (o - per stdin)")
    text = _read_input(args.file)
    _login(session, args)
    imported = session.bulk_import(text)
    print(f"{len(imported)} eventi importati con successo!")
    return 0


def cmd_add(session: Session, args: argparse.Namespace) -> int:
    data = json.loads(_read_input(args.file))
    form = EventForm.model_validate(data)
    _login(session, args)
    event = session.add_event(form)
    print(f"Evento aggiunto: {event.title} (id={event.id})")
    return 0


def cmd_edit(session: Session, args: argparse.Namespace) -> int:
    changes = dict(parse_assignment(a) for a in args.set)
    _login(session, args)
    current = session.get_event(args.event_id)
    updated = Event.model_validate({**current.to_wire(), **_to_wire_keys(changes)})
    session.edit_event(updated)
    print(f"Evento aggiornato: {updated.title}")
    return 0


def _to_wire_keys(changes: dict[str, Any]) -> dict[str, Any]:
    out = {}
    for key, value in changes.items():
        field = Event.model_fields.get(key)
        out[field.alias if field and field.alias else key] = value
    return out


def cmd_delete(session: Session, args: argparse.Namespace) -> int:
    _login(session, args)
    session.delete_event(args.event_id)
    print(f"Evento eliminato: {args.event_id}")
    return 0


def cmd_theme(session: Session, args: argparse.Namespace) -> int:
    if args.mode == "toggle":
        theme = session.toggle_theme()
    elif args.mode in ("dark", "light"):
        session.set_theme(args.mode)
        theme = args.mode
    else:
        theme = "dark" if session.is_dark else "light"
    print(f"Tema: {theme}")
    return 0


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sagre", description="Sagre ed Eventi in Campania.")
    parser.add_argument("--store", default=config.STORE_PATH, help="Path of the JSON store file.")
    parser.add_argument("--today", default=None, help="Override the reference day (e.g. 01/07/2025).")
    sub = parser.add_subparsers(dest="command", required=True)

    def admin(p: argparse.ArgumentParser) -> None:
        p.add_argument("--email", default=os.getenv("SAGRE_EMAIL"))
        p.add_argument("--password", default=os.getenv("SAGRE_PASSWORD"))

    p = sub.add_parser("list", help="Events of a month tab, filtered by text and month.")
    p.add_argument("--search", default="")
    p.add_argument("--month", default=ALL_MONTHS, choices=[ALL_MONTHS, *MONTHS])
    p.add_argument("--tab", default="luglio", choices=list(MONTHS))
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("today", help="Events running today and in the next 7 days.")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_today)

    p = sub.add_parser("next", help="Next event and countdown.")
    p.set_defaults(func=cmd_next)

    p = sub.add_parser("featured", help="Featured events.")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_featured)

    p = sub.add_parser("table", help="All events sorted by start date.")
    p.set_defaults(func=cmd_table)

    p = sub.add_parser("import", help="Bulk-import events from text.")
    p.add_argument("file", nargs="?", default=None, help="Text file, or - for stdin.")
    p.add_argument("--example", action="store_true", help="Print the import format and exit.")
    admin(p)
    p.set_defaults(func=cmd_import)

    p = sub.add_parser("add", help="Add one event from a JSON form.")
    p.add_argument("file", help="JSON file, or - for stdin.")
    admin(p)
    p.set_defaults(func=cmd_add)

    p = sub.add_parser("edit", help="Edit fields of an event.")
    p.add_argument("event_id")
    p.add_argument("--set", action="append", default=[], metavar="FIELD=VALUE")
    admin(p)
    p.set_defaults(func=cmd_edit)

    p = sub.add_parser("delete", help="Delete an event.")
    p.add_argument("event_id")
    admin(p)
    p.set_defaults(func=cmd_delete)

    p = sub.add_parser("theme", help="Show or change the theme preference.")
    p.add_argument("mode", nargs="?", default="show", choices=["show", "dark", "light", "toggle"])
    p.set_defaults(func=cmd_theme)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=resolve_log_level(config.LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        clock = None
        if args.today:
            reference = parse_reference_time(args.today)
            clock = lambda: reference  # noqa: E731
        repo = EventRepository(JsonFileKeyValueStore(args.store), seed=seed_events)
        session = Session(repo, clock=clock)
        return args.func(session, args)
    except UsageError as e:
        print(f"sagre: {e}", file=sys.stderr)
        return 2
    except DomainError as e:
        print(f"Errore: {e}", file=sys.stderr)
        return 1
    except (ValidationError, json.JSONDecodeError) as e:
        print(f"Errore: dati non validi: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Errore: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
