from __future__ import annotations

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional, Sequence

from pydantic import ValidationError

from sagre.models import Event

logger = logging.getLogger(__name__)

EVENTS_KEY = "sagre-events"
THEME_KEY = "theme"


# -----------------------------------------------------------------------------
# Key-value backends
# -----------------------------------------------------------------------------

class KeyValueStore(ABC):
    """String-keyed store of string values (the browser localStorage contract)."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value for key, or None if absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...


class MemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileKeyValueStore(KeyValueStore):
    """
    All keys live in one JSON object on disk.
    Every set() rewrites the whole file via a temp file + rename.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("[storage] unreadable store file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("[storage] store file %s is not a JSON object; ignoring", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value

        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=".sagre-", suffix=".json", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        except Exception:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise


# -----------------------------------------------------------------------------
# Serialization (pure, no IO)
# -----------------------------------------------------------------------------

def dump_events(events: Sequence[Event]) -> str:
    return json.dumps([e.to_wire() for e in events], ensure_ascii=False)


def load_events_blob(blob: str) -> list[Event]:
    """Parse a stored blob. Raises ValueError / ValidationError on bad data."""
    data = json.loads(blob)
    if not isinstance(data, list):
        raise ValueError("events blob is not a JSON array")
    return [Event.model_validate(item) for item in data]


# -----------------------------------------------------------------------------
# Repository
# -----------------------------------------------------------------------------

class EventRepository:
    """
    Whole-collection persistence on top of a KeyValueStore.

    load() never fails: missing or corrupt data falls back to the seed.
    save() always writes the full collection.
    """

    def __init__(self, kv: KeyValueStore, seed: Callable[[], list[Event]]) -> None:
        self._kv = kv
        self._seed = seed

    def load(self) -> list[Event]:
        blob = self._kv.get(EVENTS_KEY)
        if blob is None:
            logger.info("[storage] no saved events; using seed data")
            return self._seed()
        try:
            return load_events_blob(blob)
        except (ValueError, ValidationError) as e:
            logger.warning("[storage] saved events unreadable, falling back to seed: %s", e)
            return self._seed()

    def save(self, events: Sequence[Event]) -> None:
        self._kv.set(EVENTS_KEY, dump_events(events))
        logger.debug("[storage] saved %d event(s)", len(events))

    def load_theme(self) -> str:
        return "dark" if self._kv.get(THEME_KEY) == "dark" else "light"

    def save_theme(self, theme: str) -> None:
        self._kv.set(THEME_KEY, "dark" if theme == "dark" else "light")
