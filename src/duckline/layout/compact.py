"""Compact date labels.

When every item falls on one calendar day only times are worth printing
per item, with the shared date shown once as context.  Likewise for a
shared year.  The choice is all-or-nothing across the dataset.
"""

from __future__ import annotations

__all__ = ["DateSpan", "detect_span", "format_instant", "item_date_text"]

from dataclasses import dataclass
from datetime import datetime

from duckline.parser.dates import item_instants
from duckline.parser.model import Period, TimelineItem

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class DateSpan:
    """Detected compaction mode and the shared context label (if any)."""

    mode: str  # "time" | "monthday" | "full"
    context_label: str = ""


def _month_day(when: datetime) -> str:
    return f"{_MONTHS[when.month - 1]} {when.day}"


def format_instant(when: datetime, mode: str = "full") -> str:
    """Format an instant for a label in the given mode.

    ``time`` -> ``"6:00 AM"``, ``monthday`` -> ``"Jun 7"``,
    ``full`` -> ``"Jun 7, 2025"``.  Month names are fixed English
    abbreviations so output does not depend on the locale.
    """
    if mode == "time":
        hour = when.hour % 12 or 12
        suffix = "AM" if when.hour < 12 else "PM"
        return f"{hour}:{when.minute:02d} {suffix}"
    if mode == "monthday":
        return _month_day(when)
    return f"{_month_day(when)}, {when.year}"


def detect_span(items: list[TimelineItem], invalid_period: str = "clamp") -> DateSpan:
    """Pick the most compact date mode that fits every item."""
    instants = [t for item in items for t in item_instants(item, invalid_period)]
    if not instants:
        return DateSpan("full")

    first = instants[0]
    if all(t.date() == first.date() for t in instants):
        return DateSpan("time", format_instant(first, "full"))
    if all(t.year == first.year for t in instants):
        return DateSpan("monthday", str(first.year))
    return DateSpan("full")


def item_date_text(
    item: TimelineItem, mode: str = "full", invalid_period: str = "clamp"
) -> str:
    """Date line shown under an item's label."""
    instants = item_instants(item, invalid_period)
    if isinstance(item, Period):
        start, end = instants
        return f"{format_instant(start, mode)} - {format_instant(end, mode)}"
    return format_instant(instants[0], mode)
