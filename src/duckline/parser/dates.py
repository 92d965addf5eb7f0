"""Date parsing and dataset time ranges.

Dates arrive as free-form, human-written strings ("Jun 7, 2025 6:00 AM",
"2025-06-07T06:00", ...).  Parsing never fails: a string that cannot be
read becomes the current instant so one bad date cannot abort the layout
of a whole timeline.
"""

from __future__ import annotations

__all__ = [
    "INVALID_PERIOD_POLICIES",
    "item_instants",
    "parse_date",
    "period_bounds",
    "range_of",
    "to_seconds",
]

import logging
from datetime import datetime, timedelta, timezone

from dateutil import parser as dateparser

from duckline.parser.model import Period, TimelineItem

logger = logging.getLogger(__name__)

# Fraction of the data span added on each side of the domain.
RANGE_PADDING_RATIO = 0.1
# Padding used instead when every item falls on the same instant.
ZERO_SPAN_PADDING = timedelta(days=30)

INVALID_PERIOD_POLICIES = ("clamp", "swap")

_EPOCH = datetime(1970, 1, 1)


def parse_date(value: str) -> datetime:
    """Parse a free-form date string into a naive datetime.

    Timezone-aware results are converted to UTC and made naive so all
    instants compare with each other.  Unparseable input returns
    ``datetime.now()``.
    """
    try:
        parsed = dateparser.parse(value)
    except (ValueError, OverflowError, TypeError):
        logger.warning("Could not parse date %r, using the current time", value)
        return datetime.now()
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def to_seconds(when: datetime) -> float:
    """Seconds since the (naive) Unix epoch, independent of local time zone."""
    return (when - _EPOCH).total_seconds()


def period_bounds(
    period: Period, invalid_period: str = "clamp"
) -> tuple[datetime, datetime]:
    """Return (start, end) for a period, normalizing ``end < start``.

    ``"clamp"`` collapses the period to zero width at ``start``;
    ``"swap"`` exchanges the two instants.
    """
    if period.end >= period.start:
        return period.start, period.end
    if invalid_period == "swap":
        return period.end, period.start
    return period.start, period.start


def item_instants(
    item: TimelineItem, invalid_period: str = "clamp"
) -> tuple[datetime, ...]:
    """All instants an item contributes to the time domain."""
    if isinstance(item, Period):
        return period_bounds(item, invalid_period)
    return (item.instant,)


def range_of(
    items: list[TimelineItem], invalid_period: str = "clamp"
) -> tuple[datetime, datetime]:
    """Padded (min, max) time domain over all item instants.

    Empty input gives ``(now, now)``.  Otherwise 10% of the span is added
    on each side, or 30 days when the span is zero, so the scale built
    from the result always has a non-degenerate domain.
    """
    if not items:
        now = datetime.now()
        return now, now

    instants = [t for item in items for t in item_instants(item, invalid_period)]
    lo = min(instants)
    hi = max(instants)

    padding = (hi - lo) * RANGE_PADDING_RATIO
    if not padding:
        padding = ZERO_SPAN_PADDING
    return lo - padding, hi + padding
