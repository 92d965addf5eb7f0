"""SVG rendering of a computed timeline layout.

The renderer only draws; every position comes from the layout.  A single
drawing covers the full (multi-slide) width, and a slide is rendered by
narrowing the SVG viewBox to that slide's window.
"""

from __future__ import annotations

__all__ = ["render_svg"]

import drawsvg as draw

from duckline.layout.constants import PERIOD_BAR_HEIGHT
from duckline.layout.engine import TimelineLayout
from duckline.layout.labels import kind_fonts
from duckline.layout.placement import LayoutEntry, Side
from duckline.layout.slices import slice_viewport, visible_entries
from duckline.parser.model import TimelineItem
from duckline.render.constants import (
    AXIS_DASH,
    AXIS_DASH_STROKE,
    AXIS_STROKE,
    BREAK_ZIGZAG,
    CONNECTOR_STROKE,
    CONTEXT_LABEL_FONT,
    CONTEXT_LABEL_MARGIN,
    EVENT_BOX_RADIUS,
    EVENT_DOT_RADIUS,
    EVENT_DOT_STROKE,
    NOTE_DIAMOND,
    PERIOD_BAR_RADIUS,
    TEXT_BASELINE,
)
from duckline.render.style import THEMES, Theme


def render_svg(
    items: list[TimelineItem],
    layout: TimelineLayout,
    theme: Theme = THEMES["modern"],
    slide: int | None = None,
) -> str:
    """Render *layout* to an SVG string.

    With *slide* set, the SVG is one canvas wide and shows only that
    slide's window of the full layout; only entries visible there are
    emitted.
    """
    s = layout.config.content_scale
    if slide is None:
        d = draw.Drawing(
            layout.width, layout.height, font_family=theme.font_family
        )
        entries = list(layout.entries.values())
    else:
        view = slice_viewport(layout, slide)
        d = draw.Drawing(
            view.width,
            view.height,
            origin=(view.x0, 0),
            font_family=theme.font_family,
        )
        entries = visible_entries(layout, slide)

    if theme.background != "none":
        d.append(
            draw.Rectangle(0, 0, layout.width, layout.height, fill=theme.background)
        )

    _draw_axis(d, layout, theme, s)
    _draw_context_label(d, layout, theme, s)

    labels = {item.id: item.label for item in items}
    # Bars first so point markers stay on top of them.
    for entry in entries:
        if entry.kind == "period":
            _draw_period(d, entry, labels.get(entry.item_id, ""), layout, theme, s)
    for entry in entries:
        if entry.kind == "event":
            _draw_event(d, entry, labels.get(entry.item_id, ""), layout, theme, s)
        elif entry.kind == "note":
            _draw_note(d, entry, labels.get(entry.item_id, ""), layout, theme, s)

    return d.as_svg()


def _solid_background(theme: Theme) -> str:
    """Opaque fill for shapes that must hide the axis behind them."""
    return theme.background if theme.background != "none" else "#ffffff"


def _draw_axis(d: draw.Drawing, layout: TimelineLayout, theme: Theme, s: float) -> None:
    y = layout.axis_y
    x1, x2 = layout.axis_x1, layout.axis_x2
    d.append(
        draw.Line(
            x1, y, x2, y,
            stroke=theme.primary,
            stroke_width=AXIS_DASH_STROKE * s,
            stroke_linecap="round",
            stroke_dasharray=f"{AXIS_DASH * s},{AXIS_DASH * s}",
            opacity=0.3,
        )
    )
    d.append(
        draw.Line(
            x1, y, x2, y,
            stroke=theme.primary,
            stroke_width=AXIS_STROKE * s,
            stroke_linecap="round",
        )
    )

    z = BREAK_ZIGZAG * s
    for bx in layout.breaks:
        # Mask the axis under the zigzag, then draw the zigzag itself.
        d.append(
            draw.Line(
                bx - z, y - z * 1.5, bx - z, y + z * 1.5,
                stroke=_solid_background(theme),
                stroke_width=z * 2.5,
            )
        )
        d.append(
            draw.Lines(
                bx - z, y - z,
                bx - z / 2, y - z / 2,
                bx, y,
                bx + z / 2, y + z / 2,
                bx + z, y + z,
                fill="none",
                stroke=theme.muted,
                stroke_width=1.5 * s,
                opacity=0.5,
            )
        )


def _draw_context_label(
    d: draw.Drawing, layout: TimelineLayout, theme: Theme, s: float
) -> None:
    """Shared date (or year) shown once per slide when dates are compacted."""
    text = layout.span.context_label
    if not text:
        return
    width = layout.config.canvas_width
    for i in range(layout.config.total_slices):
        d.append(
            draw.Text(
                text,
                CONTEXT_LABEL_FONT * s,
                i * width + width / 2,
                CONTEXT_LABEL_MARGIN * s,
                text_anchor="middle",
                font_weight="600",
                fill=theme.muted,
            )
        )


def _box(entry: LayoutEntry, axis_y: float) -> tuple[float, float]:
    """(top, bottom) y of an entry's stacked band."""
    if entry.side is Side.TOP:
        return axis_y - entry.band_end, axis_y - entry.stack_start
    return axis_y + entry.stack_start, axis_y + entry.band_end


def _near_edge(entry: LayoutEntry, axis_y: float) -> float:
    top, bottom = _box(entry, axis_y)
    return bottom if entry.side is Side.TOP else top


def _draw_event(
    d: draw.Drawing,
    entry: LayoutEntry,
    label: str,
    layout: TimelineLayout,
    theme: Theme,
    s: float,
) -> None:
    y = layout.axis_y
    top, bottom = _box(entry, y)
    label_font, date_font, _bold = kind_fonts("event", s)

    d.append(
        draw.Line(
            entry.marker_x, y, entry.label_x, _near_edge(entry, y),
            stroke=theme.primary,
            stroke_width=CONNECTOR_STROKE * s,
            opacity=0.5,
        )
    )
    d.append(
        draw.Circle(
            entry.marker_x, y, EVENT_DOT_RADIUS * s,
            fill=_solid_background(theme),
            stroke=theme.primary,
            stroke_width=EVENT_DOT_STROKE * s,
        )
    )
    d.append(
        draw.Rectangle(
            entry.label_x - entry.half_width, top,
            2 * entry.half_width, bottom - top,
            rx=EVENT_BOX_RADIUS * s,
            fill=_solid_background(theme),
            stroke=theme.secondary,
            stroke_width=1 * s,
        )
    )
    height = bottom - top
    d.append(
        draw.Text(
            label,
            label_font,
            entry.label_x,
            top + height * TEXT_BASELINE + label_font / 2,
            text_anchor="middle",
            font_weight="bold",
            fill=theme.text,
        )
    )
    d.append(
        draw.Text(
            entry.date_text,
            date_font,
            entry.label_x,
            bottom - height * 0.2,
            text_anchor="middle",
            fill=theme.muted,
        )
    )


def _stacked_text(
    entry: LayoutEntry,
    axis_y: float,
    label_font: float,
    date_font: float,
    s: float,
) -> tuple[float, float]:
    """Baselines (label, date) with the label nearest the axis."""
    top, bottom = _box(entry, axis_y)
    if entry.side is Side.TOP:
        return bottom - 4 * s, top + date_font
    return top + label_font, bottom - 2 * s


def _draw_note(
    d: draw.Drawing,
    entry: LayoutEntry,
    label: str,
    layout: TimelineLayout,
    theme: Theme,
    s: float,
) -> None:
    y = layout.axis_y
    x = entry.marker_x
    label_font, date_font, _bold = kind_fonts("note", s)
    k = NOTE_DIAMOND * s

    d.append(
        draw.Line(
            x, y, entry.label_x, _near_edge(entry, y),
            stroke=theme.muted,
            stroke_width=1 * s,
            stroke_dasharray=f"{3 * s},{3 * s}",
            opacity=0.6,
        )
    )
    d.append(
        draw.Lines(
            x, y - k, x + k, y, x, y + k, x - k, y,
            close=True,
            fill=theme.muted,
            opacity=0.7,
        )
    )

    label_y, date_y = _stacked_text(entry, y, label_font, date_font, s)
    d.append(
        draw.Text(
            label,
            label_font,
            entry.label_x,
            label_y,
            text_anchor="middle",
            font_style="italic",
            fill=theme.muted,
        )
    )
    d.append(
        draw.Text(
            entry.date_text,
            date_font,
            entry.label_x,
            date_y,
            text_anchor="middle",
            fill=theme.muted,
            opacity=0.6,
        )
    )


def _draw_period(
    d: draw.Drawing,
    entry: LayoutEntry,
    label: str,
    layout: TimelineLayout,
    theme: Theme,
    s: float,
) -> None:
    y = layout.axis_y
    x1, x2 = entry.bar_span
    bar_h = PERIOD_BAR_HEIGHT * s
    label_font, date_font, _bold = kind_fonts("period", s)

    d.append(
        draw.Rectangle(
            x1, y - bar_h / 2, x2 - x1, bar_h,
            rx=PERIOD_BAR_RADIUS * s,
            fill=theme.secondary,
            opacity=0.6,
        )
    )

    label_y, date_y = _stacked_text(entry, y, label_font, date_font, s)
    d.append(
        draw.Text(
            label,
            label_font,
            entry.label_x,
            label_y,
            text_anchor="middle",
            font_weight="600",
            fill=theme.accent,
        )
    )
    d.append(
        draw.Text(
            entry.date_text,
            date_font,
            entry.label_x,
            date_y,
            text_anchor="middle",
            fill=theme.muted,
        )
    )
