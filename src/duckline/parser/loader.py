"""Read and write timeline item lists as JSON.

Two layouts are accepted:

- the storage format, a list of objects::

      [{"id": "1", "label": "Alarm", "type": "event", "date": "Jun 7, 2025 6:00 AM"},
       {"id": "2", "label": "Yoga", "type": "period",
        "startDate": "Jun 7, 2025 6:30 AM", "endDate": "Jun 7, 2025 7:15 AM"}]

- the bulk-editor format, an object keyed by label::

      {"Alarm": {"type": "event", "date": "Jun 7, 2025 6:00 AM"}}

  Bulk entries get freshly generated ids, so loading the same bulk text
  twice yields different ids.
"""

from __future__ import annotations

__all__ = [
    "TimelineFormatError",
    "dump_bulk",
    "dump_items",
    "item_from_dict",
    "item_to_dict",
    "load_items",
    "loads_items",
]

import json
import uuid
from datetime import datetime
from pathlib import Path

from duckline.parser.dates import parse_date
from duckline.parser.model import Event, Note, Period, TimelineItem

_ID_LENGTH = 9


class TimelineFormatError(ValueError):
    """Raised when a JSON document does not describe timeline items."""


def _new_id() -> str:
    return uuid.uuid4().hex[:_ID_LENGTH]


def _date_field(data: dict, *names: str) -> str:
    for name in names:
        if name in data:
            return data[name]
    return ""


def item_from_dict(data: dict, label: str | None = None) -> TimelineItem:
    """Build an item from one JSON object.

    Unknown or missing ``type`` values fall back to an event.  Missing or
    unparseable dates resolve to the current instant (see ``parse_date``).
    """
    if not isinstance(data, dict):
        raise TimelineFormatError(
            f"Timeline item must be a JSON object, got {type(data).__name__}"
        )
    item_id = str(data.get("id") or _new_id())
    text = label if label is not None else str(data.get("label", ""))
    kind = data.get("type", "event")

    if kind == "period":
        return Period(
            id=item_id,
            label=text,
            start=parse_date(_date_field(data, "startDate", "start_date", "start")),
            end=parse_date(_date_field(data, "endDate", "end_date", "end")),
        )
    instant = parse_date(_date_field(data, "date", "instant"))
    if kind == "note":
        return Note(id=item_id, label=text, instant=instant)
    return Event(id=item_id, label=text, instant=instant)


def _format_instant(when: datetime) -> str:
    return when.isoformat(timespec="minutes")


def item_to_dict(item: TimelineItem) -> dict:
    """Storage-format JSON object for an item (ISO dates)."""
    data: dict = {"id": item.id, "label": item.label, "type": item.kind}
    if isinstance(item, Period):
        data["startDate"] = _format_instant(item.start)
        data["endDate"] = _format_instant(item.end)
    else:
        data["date"] = _format_instant(item.instant)
    return data


def loads_items(text: str) -> list[TimelineItem]:
    """Parse items from a JSON string in either supported layout."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TimelineFormatError(f"Invalid JSON: {e}") from e

    if isinstance(data, list):
        return [item_from_dict(entry) for entry in data]
    if isinstance(data, dict):
        return [
            item_from_dict(value, label=str(label)) for label, value in data.items()
        ]
    raise TimelineFormatError(
        "Expected a list of items or an object keyed by label, "
        f"got {type(data).__name__}"
    )


def load_items(path: str | Path) -> list[TimelineItem]:
    """Read items from a JSON file."""
    return loads_items(Path(path).read_text())


def dump_items(items: list[TimelineItem]) -> str:
    """Serialize items in the storage (list) format."""
    return json.dumps([item_to_dict(item) for item in items], indent=2)


def dump_bulk(items: list[TimelineItem]) -> str:
    """Serialize items in the bulk-editor format (keyed by label, no ids).

    Items sharing a label collapse to the last one, as in the editor.
    """
    data: dict[str, dict] = {}
    for item in items:
        entry = item_to_dict(item)
        del entry["id"]
        del entry["label"]
        data[item.label] = entry
    return json.dumps(data, indent=2)
