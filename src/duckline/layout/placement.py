"""Label placement for timeline items.

Labels sit in bands above or below the axis.  Placement runs in stages:

1. Side assignment (alternating by chronological index by default;
   periods always above).
2. Per-side stacking: a single left-to-right sweep pushes a label
   outward when its horizontal span overlaps an earlier label whose band
   reaches into its own.
3. Period-bar avoidance (single canvas): point labels that would sit on
   an unrelated period bar are shifted just past the nearer bar end.
4. Slide snapping (carousel with ``avoid_split``): labels straddling a
   slide boundary move fully onto one slide.
5. Marker rebinding (carousel): a marker whose label moved onto another
   slide follows it, so a marker is never cut off from its label.

Stages 3 and 4 do not re-run stacking afterwards, so a horizontal shift
can bring two labels back into contact.  Stage 3 checks bars left to
right once, so a label pushed left off a later bar is not re-checked
against an earlier bar it may now overlap.
"""

from __future__ import annotations

__all__ = [
    "LayoutEntry",
    "Side",
    "assign_sides",
    "avoid_period_bars",
    "pack_labels",
    "rebind_markers",
    "slide_of",
    "snap_to_slides",
]

from dataclasses import dataclass
from enum import Enum

from duckline.layout.constants import (
    BAND_GAP,
    BAR_CLEARANCE,
    MAX_BAR_SHIFT_FACTOR,
    SLIDE_CLEARANCE,
)
from duckline.layout.labels import kind_band


class Side(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


@dataclass
class LayoutEntry:
    """Computed placement for one timeline item.

    All x values are in full-canvas pixels (across every slide).  Bands
    are distances outward from the axis, so a larger ``band_start`` is
    further from the line on either side.
    """

    item_id: str
    kind: str
    side: Side
    raw_x: float
    label_x: float
    half_width: float
    band_start: float
    band_height: float
    marker_x: float
    date_text: str = ""
    raw_x2: float | None = None  # period end (after minimum-width widening)
    vertical_offset: float = 0.0
    order: int = 0  # chronological index

    @property
    def stack_start(self) -> float:
        """Band start including the accumulated offset."""
        return self.band_start + self.vertical_offset

    @property
    def band_end(self) -> float:
        return self.band_start + self.vertical_offset + self.band_height

    @property
    def label_span(self) -> tuple[float, float]:
        return self.label_x - self.half_width, self.label_x + self.half_width

    @property
    def bar_span(self) -> tuple[float, float] | None:
        """Drawn (x1, x2) of a period bar, following any marker shift."""
        if self.raw_x2 is None:
            return None
        half = (self.raw_x2 - self.raw_x) / 2
        return self.marker_x - half, self.marker_x + half


def _spans_overlap(a: tuple[float, float], b: tuple[float, float]) -> bool:
    return a[0] < b[1] and b[0] < a[1]


def _set_side(entry: LayoutEntry, side: Side, scale: float) -> None:
    entry.side = side
    entry.band_start, entry.band_height = kind_band(
        entry.kind, side is Side.TOP, scale
    )


def _stack_against(
    entry: LayoutEntry,
    band_start: float,
    placed: list[LayoutEntry],
    gap: float,
) -> float:
    """Offset *entry* would need on a side already holding *placed*."""
    offset = 0.0
    for other in placed:
        if not _spans_overlap(other.label_span, entry.label_span):
            continue
        if other.band_end >= band_start + offset:
            offset = other.band_end + gap - band_start
    return offset


def assign_sides(
    entries: list[LayoutEntry],
    policy: str = "alternate",
    scale: float = 1.0,
    gap: float = BAND_GAP,
) -> None:
    """Assign TOP/BOTTOM to entries given in chronological order.

    ``alternate`` puts even chronological indices on top; ``top`` puts
    everything on top; ``balanced`` sends each item to the side where it
    would be pushed least by the items already assigned, falling back to
    alternation on ties.  Periods are always on top.
    """
    placed: dict[Side, list[LayoutEntry]] = {Side.TOP: [], Side.BOTTOM: []}

    for entry in entries:
        default = Side.TOP if entry.order % 2 == 0 else Side.BOTTOM
        if entry.kind == "period" or policy == "top":
            side = Side.TOP
        elif policy == "balanced":
            reach: dict[Side, float] = {}
            for candidate in (Side.TOP, Side.BOTTOM):
                start, height = kind_band(entry.kind, candidate is Side.TOP, scale)
                offset = _stack_against(entry, start, placed[candidate], gap)
                reach[candidate] = start + offset + height
            if reach[Side.TOP] == reach[Side.BOTTOM]:
                side = default
            else:
                side = min(reach, key=reach.__getitem__)
        else:
            side = default

        _set_side(entry, side, scale)
        if policy == "balanced":
            entry.vertical_offset = _stack_against(
                entry, entry.band_start, placed[side], gap
            )
        placed[side].append(entry)

    # Offsets above were only estimates used to compare sides.
    for entry in entries:
        entry.vertical_offset = 0.0


def _pack_side(entries: list[LayoutEntry], gap: float) -> None:
    ordered = sorted(entries, key=lambda e: (e.label_x, e.order))
    for j, b in enumerate(ordered):
        for a in ordered[:j]:
            if not _spans_overlap(a.label_span, b.label_span):
                continue
            if a.band_end >= b.stack_start:
                b.vertical_offset = a.band_end + gap - b.band_start


def pack_labels(entries: list[LayoutEntry], gap: float = BAND_GAP) -> None:
    """Stack overlapping labels outward, independently per side.

    One forward sweep by label center: a later label may be pushed by an
    earlier one, never the reverse.  Afterwards, for every overlapping
    pair on a side, the later label's band starts beyond the earlier
    label's band end.
    """
    for side in (Side.TOP, Side.BOTTOM):
        _pack_side([e for e in entries if e.side is side], gap)


def avoid_period_bars(
    entries: list[LayoutEntry],
    clearance: float = BAR_CLEARANCE,
    max_factor: float = MAX_BAR_SHIFT_FACTOR,
) -> int:
    """Move point labels off period bars they do not belong to.

    A label is shifted only when its own time lies outside the bar, and
    only if the new center stays within ``max_factor`` half widths of the
    label's true position.  Returns the number of labels moved.
    """
    bars = sorted(
        (e for e in entries if e.kind == "period"),
        key=lambda e: (e.raw_x, e.order),
    )
    moved = 0
    for entry in entries:
        if entry.kind == "period":
            continue
        for bar in bars:
            x1, x2 = bar.bar_span
            if not _spans_overlap(entry.label_span, (x1, x2)):
                continue
            if x1 <= entry.raw_x <= x2:
                continue
            if entry.raw_x < x1:
                target = x1 - entry.half_width - clearance
            else:
                target = x2 + entry.half_width + clearance
            if abs(target - entry.raw_x) <= max_factor * entry.half_width:
                entry.label_x = target
                moved += 1
    return moved


def slide_of(x: float, slide_width: float, total_slides: int) -> int:
    """Index of the slide containing *x* (clamped to valid slides)."""
    return min(max(int(x // slide_width), 0), total_slides - 1)


def _snap_extent(entry: LayoutEntry) -> float:
    if entry.raw_x2 is not None:
        return max((entry.raw_x2 - entry.raw_x) / 2, entry.half_width)
    return entry.half_width


def snap_to_slides(
    entries: list[LayoutEntry],
    slide_width: float,
    total_slides: int,
    clearance: float = SLIDE_CLEARANCE,
) -> int:
    """Push labels that straddle a slide boundary fully onto one slide.

    Each label moves to whichever side of the first boundary it crosses
    needs the smaller displacement (ties move left), ending *clearance*
    pixels from the boundary.  A period moves its bar with its label.
    Labels too wide for a single slide are left in place.  Decisions are
    per label; snapped labels are not re-checked against each other.
    Returns the number of labels moved.
    """
    moved = 0
    for entry in entries:
        extent = _snap_extent(entry)
        if 2 * (extent + clearance) > slide_width:
            continue
        center = entry.label_x
        left, right = center - extent, center + extent
        for i in range(1, total_slides):
            boundary = i * slide_width
            if not (left < boundary < right):
                continue
            if right - boundary <= boundary - left:
                target = boundary - extent - clearance
            else:
                target = boundary + extent + clearance
            shift = target - center
            entry.label_x += shift
            if entry.kind == "period":
                entry.marker_x += shift
            moved += 1
            break
    return moved


def rebind_markers(
    entries: list[LayoutEntry],
    slide_width: float,
    total_slides: int,
    clearance: float = SLIDE_CLEARANCE,
) -> int:
    """Move point markers onto their label's slide when they differ.

    The marker lands on the point of the label's span (restricted to the
    label's slide) nearest the item's true position.  Returns the number
    of markers moved.
    """
    moved = 0
    for entry in entries:
        if entry.kind == "period":
            continue
        label_slide = slide_of(entry.label_x, slide_width, total_slides)
        if label_slide == slide_of(entry.raw_x, slide_width, total_slides):
            continue
        lo = max(
            entry.label_x - entry.half_width, label_slide * slide_width + clearance
        )
        hi = min(
            entry.label_x + entry.half_width,
            (label_slide + 1) * slide_width - clearance,
        )
        if lo > hi:
            entry.marker_x = entry.label_x
        else:
            entry.marker_x = min(max(entry.raw_x, lo), hi)
        moved += 1
    return moved
