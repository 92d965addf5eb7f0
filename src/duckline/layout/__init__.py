"""Timeline layout engine.

Public API:
- compute_layout: full layout pass over a list of items
- LayoutConfig: canvas and behavior settings
- TimelineLayout / LayoutEntry: layout results
- slice_viewport: per-slide crop of a layout
- has_temporal_overlap: whether slide snapping is safe for a dataset
"""

from duckline.layout.config import LayoutConfig, canvas_size
from duckline.layout.engine import TimelineLayout, compute_layout
from duckline.layout.overlap import has_temporal_overlap
from duckline.layout.placement import LayoutEntry, Side
from duckline.layout.slices import Viewport, slice_viewport, visible_entries

__all__ = [
    "LayoutConfig",
    "LayoutEntry",
    "Side",
    "TimelineLayout",
    "Viewport",
    "canvas_size",
    "compute_layout",
    "has_temporal_overlap",
    "slice_viewport",
    "visible_entries",
]
