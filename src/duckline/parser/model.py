"""Data model for timeline items.

Three kinds of item share one id/label shape: instant events, date-ranged
periods and lightweight notes.  Dates are already parsed into naive
``datetime`` values here; turning strings into instants is the loader's
job so a layout pass never re-parses (and never re-reads the clock).
"""

from __future__ import annotations

__all__ = ["Event", "Note", "Period", "TimelineItem", "rename_item"]

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Union


@dataclass
class Event:
    """A single point in time, drawn as a dot with a boxed label."""

    id: str
    label: str
    instant: datetime
    kind: ClassVar[str] = "event"


@dataclass
class Period:
    """A span between two instants, drawn as a bar on the axis.

    ``end`` may precede ``start`` in raw input; the layout normalizes
    it according to ``LayoutConfig.invalid_period``.
    """

    id: str
    label: str
    start: datetime
    end: datetime
    kind: ClassVar[str] = "period"


@dataclass
class Note:
    """A point in time with a lighter, italic annotation."""

    id: str
    label: str
    instant: datetime
    kind: ClassVar[str] = "note"


TimelineItem = Union[Event, Period, Note]


def rename_item(items: list[TimelineItem], item_id: str, label: str) -> bool:
    """Change the label of the item with *item_id* in place.

    Whitespace is stripped and an empty label is ignored, matching an
    inline edit that is committed blank.  Returns True when a label
    changed.
    """
    label = label.strip()
    if not label:
        return False
    for item in items:
        if item.id == item_id:
            if item.label == label:
                return False
            item.label = label
            return True
    return False
