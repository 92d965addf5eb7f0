"""Per-slide viewports over a full-width layout.

All slides share one layout pass; a slide is only a horizontal crop of
it, so labels look the same on both sides of a seam.
"""

from __future__ import annotations

__all__ = ["Viewport", "slice_viewport", "visible_entries"]

from dataclasses import dataclass

from duckline.layout.engine import TimelineLayout
from duckline.layout.placement import LayoutEntry


@dataclass(frozen=True)
class Viewport:
    """The window ``[x0, x1)`` x ``[0, height)`` shown on one slide."""

    index: int
    x0: float
    x1: float
    height: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def view_box(self) -> tuple[float, float, float, float]:
        """SVG viewBox ``(min-x, min-y, width, height)``."""
        return (self.x0, 0.0, self.width, self.height)

    def to_local(self, x: float) -> float:
        """Convert a full-canvas x into this slide's coordinates."""
        return x - self.x0

    def intersects(self, lo: float, hi: float) -> bool:
        return lo < self.x1 and hi > self.x0


def slice_viewport(layout: TimelineLayout, index: int) -> Viewport:
    """Viewport for slide *index* of *layout*."""
    total = layout.config.total_slices
    if not 0 <= index < total:
        raise IndexError(f"Slide index {index} out of range for {total} slide(s)")
    width = layout.config.canvas_width
    return Viewport(
        index=index,
        x0=index * width,
        x1=(index + 1) * width,
        height=layout.height,
    )


def visible_entries(layout: TimelineLayout, index: int) -> list[LayoutEntry]:
    """Entries whose label, marker or bar is at least partly on a slide."""
    view = slice_viewport(layout, index)
    result = []
    for entry in layout.entries.values():
        bar = entry.bar_span
        if view.intersects(*entry.label_span):
            result.append(entry)
        elif bar is not None:
            if view.intersects(*bar):
                result.append(entry)
        elif view.x0 <= entry.marker_x < view.x1:
            result.append(entry)
    return result
