"""Shared test fixtures and helpers for the duckline test suite."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from duckline.layout.config import LayoutConfig
from duckline.layout.engine import TimelineLayout, compute_layout
from duckline.parser.loader import loads_items
from duckline.parser.model import Event, Note, Period, TimelineItem

# --- Item text constants ---

DUCK_DAY_JSON = """[
  {"id": "1", "label": "Alarm quacks", "type": "event", "date": "Jun 7, 2025 6:00 AM"},
  {"id": "2", "label": "Pond yoga", "type": "period",
   "startDate": "Jun 7, 2025 6:30 AM", "endDate": "Jun 7, 2025 7:15 AM"},
  {"id": "3", "label": "Bread heist at the park", "type": "event", "date": "Jun 7, 2025 8:00 AM"},
  {"id": "4", "label": "Food coma", "type": "note", "date": "Jun 7, 2025 9:00 AM"},
  {"id": "5", "label": "Nap on a lily pad", "type": "period",
   "startDate": "Jun 7, 2025 10:00 AM", "endDate": "Jun 7, 2025 1:00 PM"},
  {"id": "6", "label": "Synchronized swimming", "type": "event", "date": "Jun 7, 2025 2:30 PM"},
  {"id": "7", "label": "Sunset waddle", "type": "event", "date": "Jun 7, 2025 6:00 PM"},
  {"id": "8", "label": "Quack-aroke night", "type": "period",
   "startDate": "Jun 7, 2025 8:00 PM", "endDate": "Jun 7, 2025 11:00 PM"},
  {"id": "9", "label": "Zzz under the stars", "type": "event", "date": "Jun 7, 2025 11:30 PM"}
]"""

BASE = datetime(2025, 1, 1)


# --- Item/layout helpers ---


def event(item_id: str, when: datetime, label: str | None = None) -> Event:
    return Event(id=item_id, label=label or item_id.upper(), instant=when)


def note(item_id: str, when: datetime, label: str | None = None) -> Note:
    return Note(id=item_id, label=label or item_id.upper(), instant=when)


def period(
    item_id: str, start: datetime, end: datetime, label: str | None = None
) -> Period:
    return Period(id=item_id, label=label or item_id.upper(), start=start, end=end)


def hourly_events(count: int, start: datetime = BASE) -> list[TimelineItem]:
    """*count* events one hour apart."""
    return [event(f"e{i}", start + timedelta(hours=i)) for i in range(count)]


def layout_of(items: list[TimelineItem], **kwargs) -> TimelineLayout:
    """Run compute_layout with a LayoutConfig built from keyword arguments."""
    return compute_layout(items, LayoutConfig(**kwargs))


# --- Pytest fixtures ---


@pytest.fixture
def duck_day() -> list[TimelineItem]:
    """Nine items (events, periods, a note) all on Jun 7, 2025."""
    return loads_items(DUCK_DAY_JSON)


@pytest.fixture
def duck_day_file(tmp_path):
    path = tmp_path / "duck_day.json"
    path.write_text(DUCK_DAY_JSON)
    return path
