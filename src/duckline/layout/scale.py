"""Time to pixel scales.

A linear scale maps the padded time domain onto the axis.  The
gap-compressed scale is piecewise linear: consecutive item instants are
spaced by their real gap unless that gap is disproportionately long
(more than ``GAP_COMPRESS_RATIO`` times the median gap), in which case it
is shortened to exactly the threshold.  Each shortened gap produces a
break marker so the renderer can show the scale is interrupted.
"""

from __future__ import annotations

__all__ = ["TimeScale", "build_scale", "compress_gaps"]

from bisect import bisect_right
from dataclasses import dataclass, field
from datetime import datetime

from duckline.layout.constants import (
    GAP_COMPRESS_RATIO,
    RANGE_END_RATIO,
    RANGE_START_RATIO,
)
from duckline.parser.dates import item_instants, to_seconds
from duckline.parser.model import TimelineItem


@dataclass
class TimeScale:
    """Callable mapping a datetime to an x position.

    ``knots`` and ``positions`` hold the (seconds, cumulative) breakpoints
    of the piecewise map; a linear scale has exactly two.  ``breaks`` are
    x positions of compressed gaps.
    """

    range_start: float
    range_end: float
    knots: list[float]
    positions: list[float]
    breaks: list[float] = field(default_factory=list)

    def __call__(self, when: datetime) -> float:
        return self.at_seconds(to_seconds(when))

    def at_seconds(self, t: float) -> float:
        knots = self.knots
        if len(knots) < 2:
            return self.range_start
        total = self.positions[-1]
        if total == 0:
            return (self.range_start + self.range_end) / 2
        if t <= knots[0]:
            return self.range_start
        if t >= knots[-1]:
            return self.range_end

        seg = bisect_right(knots, t) - 1
        lo, hi = knots[seg], knots[seg + 1]
        frac = 0.0 if hi == lo else (t - lo) / (hi - lo)
        comp = self.positions[seg] + frac * (
            self.positions[seg + 1] - self.positions[seg]
        )
        return self._to_pixel(comp)

    def _to_pixel(self, comp: float) -> float:
        span = self.range_end - self.range_start
        return self.range_start + comp / self.positions[-1] * span


def compress_gaps(
    gaps: list[float], ratio: float = GAP_COMPRESS_RATIO
) -> tuple[list[float], list[int], float]:
    """Compress outlier gaps.

    Returns ``(cumulative, compressed_indices, threshold)`` where
    ``cumulative[i]`` is the compressed distance from the first instant
    to instant ``i``.  The threshold is ``ratio`` times the upper median
    (``sorted(gaps)[n // 2]``) so one huge gap cannot drag it upward.

    >>> compress_gaps([1, 1, 1, 100])
    ([0, 1, 2, 3, 6], [3], 3)
    """
    if not gaps:
        return [0], [], 0
    median = sorted(gaps)[len(gaps) // 2]
    threshold = median * ratio

    cum = 0
    cumulative = [0]
    compressed: list[int] = []
    for i, gap in enumerate(gaps):
        if threshold > 0 and gap > threshold:
            cum += threshold
            compressed.append(i)
        else:
            cum += gap
        cumulative.append(cum)
    return cumulative, compressed, threshold


def _linear_scale(
    domain: tuple[datetime, datetime], range_start: float, range_end: float
) -> TimeScale:
    lo, hi = to_seconds(domain[0]), to_seconds(domain[1])
    return TimeScale(
        range_start=range_start,
        range_end=range_end,
        knots=[lo, hi],
        positions=[0.0, hi - lo],
    )


def _compressed_scale(
    items: list[TimelineItem],
    domain: tuple[datetime, datetime],
    range_start: float,
    range_end: float,
    invalid_period: str,
) -> TimeScale:
    stamps = {to_seconds(domain[0]), to_seconds(domain[1])}
    for item in items:
        stamps.update(to_seconds(t) for t in item_instants(item, invalid_period))
    unique = sorted(stamps)

    if len(unique) < 2:
        return TimeScale(range_start, range_end, knots=unique, positions=[0.0])

    gaps = [unique[i] - unique[i - 1] for i in range(1, len(unique))]
    cumulative, compressed, _threshold = compress_gaps(gaps)

    scale = TimeScale(
        range_start=range_start,
        range_end=range_end,
        knots=unique,
        positions=[float(c) for c in cumulative],
    )
    if cumulative[-1] > 0:
        scale.breaks = [
            scale._to_pixel((cumulative[i] + cumulative[i + 1]) / 2)
            for i in compressed
        ]
    return scale


def build_scale(
    items: list[TimelineItem],
    domain: tuple[datetime, datetime],
    full_width: float,
    compress: bool = False,
    invalid_period: str = "clamp",
) -> TimeScale:
    """Build the time scale for a layout pass.

    The axis runs from 10% to 90% of *full_width*.  Compression only
    applies to two or more items; otherwise the linear scale is used.
    """
    range_start = full_width * RANGE_START_RATIO
    range_end = full_width * RANGE_END_RATIO
    if compress and len(items) >= 2:
        return _compressed_scale(
            items, domain, range_start, range_end, invalid_period
        )
    return _linear_scale(domain, range_start, range_end)
