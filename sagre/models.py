from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Month tabs shown on the site. Other month values are accepted on an event
# but never appear under a tab.
MONTHS: tuple[str, ...] = ("luglio", "agosto", "settembre", "oltre")

# Region categories produced by the importer and the add form.
CATEGORIES: tuple[str, ...] = ("penisola", "costiera", "oltre")


class Event(BaseModel):
    """A single sagra/event. Serialized with camelCase keys (startDate, mapUrl...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    start_date: str
    end_date: str
    location: str
    address: str
    time: str
    month: str
    category: str
    description: str
    cost: str
    organizer: str
    tags: List[str] = Field(default_factory=list)
    map_url: str
    featured: bool = False

    has_food: bool = False
    has_music: bool = False
    has_free_entry: bool = True
    has_ticket_tasting: bool = False
    has_fireworks: bool = False

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class EventForm(BaseModel):
    """
    Input of the single-add form.
    Defaults mirror the form's initial state; tags arrive as one comma-separated string.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    address: str = ""
    time: str = ""
    month: str = "luglio"
    category: str = "oltre"
    description: str = ""
    cost: str = ""
    organizer: str = ""
    tags: str = ""
    map_url: str = ""

    has_food: bool = True
    has_music: bool = False
    has_free_entry: bool = True
    has_ticket_tasting: bool = False
    has_fireworks: bool = False


class User(BaseModel):
    email: str
    name: str
