"""Label size estimation and vertical bands.

Widths are estimated from character counts rather than measured, so a
layout never needs font metrics or a drawing surface and is the same on
every machine.
"""

from __future__ import annotations

__all__ = [
    "estimate_text_width",
    "kind_band",
    "kind_fonts",
    "label_half_width",
]

from duckline.layout.constants import (
    BOLD_CHAR_WIDTH_RATIO,
    CHAR_WIDTH_RATIO,
    EVENT_BAND,
    EVENT_DATE_FONT,
    EVENT_LABEL_FONT,
    EVENT_MIN_HALF_WIDTH,
    LABEL_PADDING,
    NOTE_BOTTOM_BAND,
    NOTE_DATE_FONT,
    NOTE_LABEL_FONT,
    NOTE_MIN_HALF_WIDTH,
    NOTE_TOP_BAND,
    PERIOD_BAND,
    PERIOD_DATE_FONT,
    PERIOD_LABEL_FONT,
    PERIOD_MIN_HALF_WIDTH,
)

# kind -> (label font, date font, label is bold)
_FONTS: dict[str, tuple[float, float, bool]] = {
    "event": (EVENT_LABEL_FONT, EVENT_DATE_FONT, True),
    "period": (PERIOD_LABEL_FONT, PERIOD_DATE_FONT, True),
    "note": (NOTE_LABEL_FONT, NOTE_DATE_FONT, False),
}

_MIN_HALF_WIDTH: dict[str, float] = {
    "event": EVENT_MIN_HALF_WIDTH,
    "period": PERIOD_MIN_HALF_WIDTH,
    "note": NOTE_MIN_HALF_WIDTH,
}


def estimate_text_width(text: str, font_size: float, bold: bool = False) -> float:
    """Approximate pixel width of the widest line of *text*."""
    if not text:
        return 0.0
    ratio = BOLD_CHAR_WIDTH_RATIO if bold else CHAR_WIDTH_RATIO
    longest = max(len(line) for line in text.split("\n"))
    return longest * font_size * ratio


def kind_fonts(kind: str, scale: float = 1.0) -> tuple[float, float, bool]:
    """(label font size, date font size, bold) for an item kind."""
    label_font, date_font, bold = _FONTS[kind]
    return label_font * scale, date_font * scale, bold


def label_half_width(
    kind: str, label: str, date_text: str, scale: float = 1.0
) -> float:
    """Half width of an item's label box.

    The box holds the label and the date line below it; it is as wide as
    the wider of the two plus padding, and never narrower than the kind's
    minimum.
    """
    label_font, date_font, bold = kind_fonts(kind, scale)
    text_w = max(
        estimate_text_width(label, label_font, bold),
        estimate_text_width(date_text, date_font),
    )
    half = text_w / 2 + LABEL_PADDING * scale
    return max(half, _MIN_HALF_WIDTH[kind] * scale)


def kind_band(kind: str, top: bool, scale: float = 1.0) -> tuple[float, float]:
    """(start, height) of the band a kind's label occupies, from the axis."""
    if kind == "event":
        start, height = EVENT_BAND
    elif kind == "period":
        start, height = PERIOD_BAND
    elif top:
        start, height = NOTE_TOP_BAND
    else:
        start, height = NOTE_BOTTOM_BAND
    return start * scale, height * scale
