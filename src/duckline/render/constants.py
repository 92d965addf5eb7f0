"""Drawing constants for the SVG renderer (at content scale 1.0)."""

from __future__ import annotations

AXIS_STROKE = 2.0
AXIS_DASH_STROKE = 4.0
AXIS_DASH = 8.0
BREAK_ZIGZAG = 8.0  # half size of the gap-break zigzag
EVENT_DOT_RADIUS = 8.0
EVENT_DOT_STROKE = 3.0
EVENT_BOX_RADIUS = 12.0
NOTE_DIAMOND = 5.0
PERIOD_BAR_RADIUS = 30.0
CONNECTOR_STROKE = 1.5
CONTEXT_LABEL_FONT = 16.0
CONTEXT_LABEL_MARGIN = 32.0  # distance of the shared date label from the top
TEXT_BASELINE = 0.35  # label baseline offset as a fraction of box height
