"""Layout coordinator: combines the time scale, label sizing and placement.

``compute_layout`` is a pure function of its inputs.  It keeps no state
between calls, so callers that want memoization key it on the items and
the configuration themselves.
"""

from __future__ import annotations

__all__ = ["TimelineLayout", "compute_layout"]

import logging
from dataclasses import asdict, dataclass, field

from duckline.layout.compact import DateSpan, detect_span, item_date_text
from duckline.layout.config import LayoutConfig
from duckline.layout.constants import (
    BAND_GAP,
    BAR_CLEARANCE,
    MIN_PERIOD_WIDTH,
    SLIDE_CLEARANCE,
)
from duckline.layout.labels import kind_band, label_half_width
from duckline.layout.placement import (
    LayoutEntry,
    Side,
    assign_sides,
    avoid_period_bars,
    pack_labels,
    rebind_markers,
    snap_to_slides,
)
from duckline.layout.scale import build_scale
from duckline.parser.dates import item_instants, range_of, to_seconds
from duckline.parser.model import TimelineItem

logger = logging.getLogger(__name__)


@dataclass
class TimelineLayout:
    """Result of a layout pass.

    ``entries`` maps item id to its placement, in input order.  ``breaks``
    are x positions of compressed gaps.  The axis is drawn at ``axis_y``
    from ``axis_x1`` to ``axis_x2``.
    """

    config: LayoutConfig
    entries: dict[str, LayoutEntry]
    span: DateSpan
    axis_x1: float
    axis_x2: float
    breaks: list[float] = field(default_factory=list)

    @property
    def width(self) -> float:
        return self.config.full_width

    @property
    def height(self) -> float:
        return self.config.canvas_height

    @property
    def axis_y(self) -> float:
        return self.config.canvas_height / 2

    def to_dict(self) -> dict:
        """JSON-ready summary of the layout."""
        return {
            "width": self.width,
            "height": self.height,
            "axis": {"y": self.axis_y, "x1": self.axis_x1, "x2": self.axis_x2},
            "breaks": list(self.breaks),
            "span": asdict(self.span),
            "entries": {
                item_id: {**asdict(entry), "side": entry.side.value}
                for item_id, entry in self.entries.items()
            },
        }


def _chronological(
    items: list[TimelineItem], invalid_period: str
) -> list[TimelineItem]:
    """Items sorted by first instant; input order breaks ties."""
    keyed = [
        (to_seconds(item_instants(item, invalid_period)[0]), i, item)
        for i, item in enumerate(items)
    ]
    keyed.sort(key=lambda k: (k[0], k[1]))
    return [item for _, _, item in keyed]


def compute_layout(
    items: list[TimelineItem],
    config: LayoutConfig | None = None,
) -> TimelineLayout:
    """Compute placements for every item.

    Args:
        items: Events, periods and notes in any order.
        config: Canvas and behavior settings (defaults to a single
            1200x800 canvas).

    Returns a ``TimelineLayout`` with exactly one entry per item.
    """
    cfg = config or LayoutConfig()
    s = cfg.content_scale
    policy = cfg.invalid_period

    domain = range_of(items, policy)
    scale = build_scale(items, domain, cfg.full_width, cfg.compress_gaps, policy)
    span = detect_span(items, policy) if cfg.compact_dates else DateSpan("full")

    ordered: list[LayoutEntry] = []
    for order, item in enumerate(_chronological(items, policy)):
        instants = item_instants(item, policy)
        raw_x = scale(instants[0])
        raw_x2 = None
        center = raw_x
        if item.kind == "period":
            end_x = scale(instants[1])
            raw_x2 = raw_x + max(end_x - raw_x, MIN_PERIOD_WIDTH * s)
            center = (raw_x + raw_x2) / 2

        date_text = item_date_text(item, span.mode, policy)
        band_start, band_height = kind_band(item.kind, True, s)
        ordered.append(
            LayoutEntry(
                item_id=item.id,
                kind=item.kind,
                side=Side.TOP,
                raw_x=raw_x,
                raw_x2=raw_x2,
                label_x=center,
                marker_x=center,
                half_width=label_half_width(item.kind, item.label, date_text, s),
                band_start=band_start,
                band_height=band_height,
                date_text=date_text,
                order=order,
            )
        )

    gap = BAND_GAP * s
    assign_sides(ordered, cfg.side_policy, s, gap)
    pack_labels(ordered, gap)

    if not cfg.carousel:
        moved = avoid_period_bars(ordered, BAR_CLEARANCE * s)
        logger.debug("Shifted %d label(s) off period bars", moved)
    else:
        if cfg.avoid_split:
            moved = snap_to_slides(
                ordered, cfg.canvas_width, cfg.total_slices, SLIDE_CLEARANCE * s
            )
            logger.debug("Snapped %d label(s) away from slide boundaries", moved)
        rebound = rebind_markers(
            ordered, cfg.canvas_width, cfg.total_slices, SLIDE_CLEARANCE * s
        )
        logger.debug("Rebound %d marker(s) to their label's slide", rebound)

    by_id = {entry.item_id: entry for entry in ordered}
    entries = {item.id: by_id[item.id] for item in items}

    logger.debug(
        "Laid out %d item(s): %d above, %d below, %d gap break(s), date mode %s",
        len(entries),
        sum(1 for e in ordered if e.side is Side.TOP),
        sum(1 for e in ordered if e.side is Side.BOTTOM),
        len(scale.breaks),
        span.mode,
    )

    return TimelineLayout(
        config=cfg,
        entries=entries,
        span=span,
        axis_x1=scale(domain[0]),
        axis_x2=scale(domain[1]),
        breaks=list(scale.breaks),
    )
