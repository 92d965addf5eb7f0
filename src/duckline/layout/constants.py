"""Geometry constants for the timeline layout.

Pixel values are at content scale 1.0; the engine multiplies them by
``LayoutConfig.content_scale``.
"""

from __future__ import annotations

# --- Canvas ---
DEFAULT_CANVAS_WIDTH = 1200
DEFAULT_CANVAS_HEIGHT = 800
BASE_CANVAS_EDGE = 1200  # long edge used when deriving a canvas from an aspect ratio
RANGE_START_RATIO = 0.1  # axis starts at 10% of the full width
RANGE_END_RATIO = 0.9  # ... and ends at 90%

# --- Gap compression ---
GAP_COMPRESS_RATIO = 3  # gaps above 3x the median gap are compressed

# --- Text estimation ---
CHAR_WIDTH_RATIO = 0.55  # average glyph advance / font size
BOLD_CHAR_WIDTH_RATIO = 0.62
LABEL_PADDING = 10.0  # added to each side of the widest text line

# --- Fonts ---
EVENT_LABEL_FONT = 14.0
EVENT_DATE_FONT = 11.0
PERIOD_LABEL_FONT = 14.0
PERIOD_DATE_FONT = 11.0
NOTE_LABEL_FONT = 12.0
NOTE_DATE_FONT = 9.0

# --- Minimum label half widths ---
EVENT_MIN_HALF_WIDTH = 75.0  # event boxes are at least 150px wide
PERIOD_MIN_HALF_WIDTH = 50.0
NOTE_MIN_HALF_WIDTH = 40.0

# --- Vertical bands (start, height) measured outward from the axis ---
EVENT_BAND = (110.0, 50.0)
PERIOD_BAND = (34.0, 46.0)
NOTE_TOP_BAND = (62.0, 36.0)
NOTE_BOTTOM_BAND = (70.0, 32.0)
BAND_GAP = 8.0  # clearance between stacked bands

# --- Periods ---
MIN_PERIOD_WIDTH = 60.0
PERIOD_BAR_HEIGHT = 60.0

# --- Horizontal shifting ---
BAR_CLEARANCE = 6.0  # gap between a shifted label and a period bar edge
MAX_BAR_SHIFT_FACTOR = 2.0  # bar avoidance moves a label at most 2 half widths
SLIDE_CLEARANCE = 4.0  # gap between a snapped label and a slide boundary
