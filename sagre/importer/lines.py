# sagre/importer/lines.py
"""
Line classifier for the bulk-import text format.

Turns one event block (list of lines) into a sequence of ClassifiedLine
(label, value) pairs. No field mapping and no validation happen here; that
is bulk_text.py's job.

Classification rules, first match wins:
  1. Line starts with "[" and contains "]"  → TITLE, value = text inside
  2. Line starts with "Descrizione:"        → DESCRIPTION, value = all
     following lines of the block joined with single spaces
  3. Line starts with a known label prefix  → that label, value = rest, trimmed
  4. Anything else                          → ignored (not emitted)

Labels are exact, case-sensitive prefixes including the colon.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Sequence

TITLE = "[titolo]"
DESCRIPTION = "Descrizione:"

LABELS: tuple[str, ...] = (
    "Organizzatore:",
    "Data Inizio:",
    "Data Fine:",
    "Orario:",
    "Mese:",
    "Categoria:",
    "Località:",
    "Indirizzo:",
    "URL Google Maps:",
    "Tags:",
    "Costo:",
    "Cibo:",
    "Musica:",
    "Ingresso Libero:",
    "Ticket Degustazione:",
    "Fuochi d'Artificio:",
)

_TITLE_BRACKETS_RE = re.compile(r"^\[|\]$")


@dataclass(frozen=True)
class ClassifiedLine:
    label: str
    value: str


def classify_block(lines: Sequence[str]) -> Iterator[ClassifiedLine]:
    """Yield (label, value) pairs for one block. Lines are trimmed first."""
    stripped = [line.strip() for line in lines]

    for i, line in enumerate(stripped):
        if line.startswith("[") and "]" in line:
            yield ClassifiedLine(TITLE, _TITLE_BRACKETS_RE.sub("", line))
            continue

        if line.startswith(DESCRIPTION):
            # Everything after the marker belongs to the description, so
            # nothing after it is classified.
            yield ClassifiedLine(DESCRIPTION, " ".join(stripped[i + 1:]).strip())
            return

        for label in LABELS:
            if line.startswith(label):
                yield ClassifiedLine(label, line[len(label):].strip())
                break
