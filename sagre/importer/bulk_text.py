# sagre/importer/bulk_text.py
"""
Bulk import: freeform text → validated Event records.

Contract:
  - Blocks are separated by one or more blank (whitespace-only) lines.
  - Each block is classified line by line (see lines.py), then assembled
    into fields, validated, and defaulted.
  - Fail fast: the first block with missing required fields aborts the whole
    batch with BulkImportError. No partial success.
  - Empty / whitespace-only text yields [] (the caller decides what
    "nothing found" means).
"""
from __future__ import annotations

import logging
import re
from typing import Any, Callable, Optional
from uuid import uuid4

from sagre.errors import BulkImportError
from sagre.models import Event
from sagre.importer.lines import DESCRIPTION, TITLE, ClassifiedLine, classify_block

logger = logging.getLogger(__name__)

# A blank line is a newline, optional whitespace, newline.
_BLOCK_SPLIT_RE = re.compile(r"\n\s*\n")

REQUIRED_FIELDS: tuple[str, ...] = (
    "title",
    "organizer",
    "startDate",
    "endDate",
    "time",
    "month",
    "location",
    "address",
    "mapUrl",
    "description",
)

DEFAULT_COST = "Ingresso gratuito"

# Yes/no labels → field. Only "sì" (accented) is truthy.
_BOOLEAN_LABELS: dict[str, str] = {
    "Cibo:": "hasFood",
    "Musica:": "hasMusic",
    "Ingresso Libero:": "hasFreeEntry",
    "Ticket Degustazione:": "hasTicketTasting",
    "Fuochi d'Artificio:": "hasFireworks",
}

# Plain text labels → field.
_TEXT_LABELS: dict[str, str] = {
    TITLE: "title",
    DESCRIPTION: "description",
    "Organizzatore:": "organizer",
    "Orario:": "time",
    "Località:": "location",
    "Indirizzo:": "address",
    "URL Google Maps:": "mapUrl",
    "Costo:": "cost",
}

FORMAT_TEMPLATE = """[Titolo Evento]
Organizzatore: [Nome organizzatore/associazione]
Data Inizio: [gg/mm/aaaa]
Data Fine: [gg/mm/aaaa]
Orario: [orario di inizio/fine o "Tutte le sere dalle…"]
Mese: [luglio/agosto/settembre/oltre]
Categoria: [Penisola Sorrentina / Costiera Amalfitana / Altro]
Località: [Comune / frazione (sigla provincia)]
Indirizzo: [Indirizzo esatto o località]
URL Google Maps: https://maps.google.com/search/…
Costo: [Costo o "Ingresso gratuito"]
Tags: [Parole chiave separate da virgola]
Cibo: [Sì/No]
Musica: [Sì/No]
Ingresso Libero: [Sì/No]
Ticket Degustazione: [Sì/No]
Fuochi d'Artificio: [Sì/No]
Descrizione:
[Descrizione completa dell'evento]

[Prossimo Evento]
..."""

EXAMPLE_TEXT = """[Sagra del Limone di Esempio]
Organizzatore: Comune di Massa Lubrense
Data Inizio: 10/07/2025
Data Fine: 13/07/2025
Orario: 19:00
Mese: luglio
Categoria: Penisola Sorrentina
Località: Massa Lubrense (NA)
Indirizzo: Centro storico, Massa Lubrense
URL Google Maps: https://maps.google.com/search/Massa+Lubrense+centro+storico
Costo: Ingresso gratuito
Tags: Limoni IGP, Cucina tipica, Artigianato
Cibo: Sì
Musica: Sì
Ingresso Libero: Sì
Ticket Degustazione: No
Fuochi d'Artificio: Sì
Descrizione:
Quattro giorni dedicati al limone di Massa Lubrense IGP con percorsi degustativi nei limoneti, artigianato, dolci tipici, liquori, spettacoli folk, laboratori, show cooking e visite guidate."""


# ============================================================
# Value converters
# ============================================================

def parse_import_date(date_str: str) -> str:
    """
    dd/mm/yyyy → yyyy-mm-dd (zero padded).
    Anything that is not three "/"-separated parts is returned unchanged.
    """
    parts = date_str.split("/")
    if len(parts) == 3:
        day, month, year = parts
        return f"{year}-{month.rjust(2, '0')}-{day.rjust(2, '0')}"
    return date_str


def map_category(raw: str) -> str:
    if "Penisola Sorrentina" in raw:
        return "penisola"
    if "Costiera Amalfitana" in raw:
        return "costiera"
    return "oltre"


def parse_yes(raw: str) -> bool:
    return raw.strip().lower() == "sì"


def split_tags(raw: str) -> list[str]:
    return [tag.strip() for tag in raw.split(",")]


# ============================================================
# Block → fields
# ============================================================

def split_blocks(text: str) -> list[list[str]]:
    """Split text on blank lines; drop whitespace-only blocks."""
    return [
        block.split("\n")
        for block in _BLOCK_SPLIT_RE.split(text)
        if block.strip()
    ]


def assemble_fields(classified: list[ClassifiedLine]) -> dict[str, Any]:
    """Map classified lines onto event fields. Later labels overwrite earlier ones."""
    data: dict[str, Any] = {}
    for line in classified:
        label, value = line.label, line.value
        if label in _TEXT_LABELS:
            data[_TEXT_LABELS[label]] = value
        elif label in _BOOLEAN_LABELS:
            data[_BOOLEAN_LABELS[label]] = parse_yes(value)
        elif label == "Data Inizio:":
            data["startDate"] = parse_import_date(value)
        elif label == "Data Fine:":
            data["endDate"] = parse_import_date(value)
        elif label == "Mese:":
            data["month"] = value.lower()
        elif label == "Categoria:":
            data["category"] = map_category(value)
        elif label == "Tags:":
            data["tags"] = split_tags(value)
    return data


def missing_required(data: dict[str, Any]) -> list[str]:
    return [f for f in REQUIRED_FIELDS if not data.get(f)]


def _new_import_id() -> str:
    return f"imported-{uuid4().hex}"


def build_event(data: dict[str, Any], event_id: str) -> Event:
    """Apply import defaults and build the Event. `data` must already be validated."""
    return Event.model_validate(
        {
            **data,
            "id": event_id,
            "category": data.get("category", ""),
            "cost": data.get("cost") or DEFAULT_COST,
            "tags": data.get("tags") or [],
            "featured": False,
            "hasFood": data.get("hasFood", False),
            "hasMusic": data.get("hasMusic", False),
            "hasFreeEntry": data.get("hasFreeEntry", True),
            "hasTicketTasting": data.get("hasTicketTasting", False),
            "hasFireworks": data.get("hasFireworks", False),
        }
    )


# ============================================================
# Public API
# ============================================================

def parse_import_text(
    text: str,
    id_factory: Optional[Callable[[], str]] = None,
) -> list[Event]:
    """
    Parse a bulk-import text into events, in source order.

    Raises BulkImportError for the first block missing required fields.
    Returns [] for empty / whitespace-only input.
    """
    make_id = id_factory or _new_import_id
    blocks = split_blocks(text or "")

    parsed: list[dict[str, Any]] = []
    for index, lines in enumerate(blocks, start=1):
        data = assemble_fields(list(classify_block(lines)))
        missing = missing_required(data)
        if missing:
            logger.info(
                "[import] REJECT block=%d missing=%s title=%r",
                index, ",".join(missing), data.get("title"),
            )
            raise BulkImportError(index, missing)
        parsed.append(data)

    # Ids are only handed out once the whole batch validated.
    events = [build_event(data, make_id()) for data in parsed]
    logger.info("[import] parsed %d event(s)", len(events))
    return events
