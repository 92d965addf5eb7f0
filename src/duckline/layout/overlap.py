"""Detect temporal overlaps that make slide snapping unreliable.

Snapping moves each label on its own.  When periods overlap in time (or
a point item falls inside a period) their labels can push each other
back and forth across a boundary, so callers should turn snapping off
for such datasets.
"""

from __future__ import annotations

__all__ = ["has_temporal_overlap"]

from itertools import combinations

from duckline.parser.dates import period_bounds
from duckline.parser.model import Period, TimelineItem


def has_temporal_overlap(
    items: list[TimelineItem], invalid_period: str = "clamp"
) -> bool:
    """True if two periods overlap or an event/note lies within a period.

    Periods that only touch end-to-start do not count as overlapping;
    point items on a period's end do.
    """
    spans = [
        period_bounds(item, invalid_period)
        for item in items
        if isinstance(item, Period)
    ]
    for (a_start, a_end), (b_start, b_end) in combinations(spans, 2):
        if a_start < b_end and b_start < a_end:
            return True
        if a_start == a_end and b_start < a_start < b_end:
            return True
        if b_start == b_end and a_start < b_start < a_end:
            return True

    for item in items:
        if isinstance(item, Period):
            continue
        for start, end in spans:
            if start <= item.instant <= end:
                return True
    return False
