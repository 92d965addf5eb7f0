"""Tests for label size estimation and bands."""

import pytest

from duckline.layout.constants import (
    BOLD_CHAR_WIDTH_RATIO,
    CHAR_WIDTH_RATIO,
    EVENT_BAND,
    EVENT_MIN_HALF_WIDTH,
    LABEL_PADDING,
    NOTE_BOTTOM_BAND,
    NOTE_TOP_BAND,
)
from duckline.layout.labels import estimate_text_width, kind_band, label_half_width


def test_width_is_chars_times_font_times_ratio():
    assert estimate_text_width("abcd", 10) == pytest.approx(4 * 10 * CHAR_WIDTH_RATIO)


def test_bold_is_wider():
    assert estimate_text_width("abcd", 10, bold=True) == pytest.approx(
        4 * 10 * BOLD_CHAR_WIDTH_RATIO
    )
    assert estimate_text_width("abcd", 10, bold=True) > estimate_text_width("abcd", 10)


def test_multiline_uses_widest_line():
    assert estimate_text_width("ab\nabcdef\nabc", 10) == estimate_text_width(
        "abcdef", 10
    )


def test_empty_text_has_no_width():
    assert estimate_text_width("", 14) == 0.0


class TestLabelHalfWidth:
    def test_short_event_label_uses_minimum_box(self):
        assert label_half_width("event", "A", "Jun 7") == EVENT_MIN_HALF_WIDTH

    def test_long_label_grows_box(self):
        label = "A rather long event label that needs room"
        expected = estimate_text_width(label, 14, bold=True) / 2 + LABEL_PADDING
        assert label_half_width("event", label, "Jun 7") == pytest.approx(expected)

    def test_long_date_text_grows_box(self):
        date_text = "Jun 7, 2025 - Jun 30, 2026 and then some more"
        half = label_half_width("note", "x", date_text)
        assert half == pytest.approx(
            estimate_text_width(date_text, 9) / 2 + LABEL_PADDING
        )

    def test_scale_multiplies_minimum(self):
        assert label_half_width("event", "A", "", scale=2) == 2 * EVENT_MIN_HALF_WIDTH


def test_bands_per_kind():
    assert kind_band("event", True) == EVENT_BAND
    assert kind_band("event", False) == EVENT_BAND
    assert kind_band("note", True) == NOTE_TOP_BAND
    assert kind_band("note", False) == NOTE_BOTTOM_BAND
    assert kind_band("event", True, scale=2) == (EVENT_BAND[0] * 2, EVENT_BAND[1] * 2)
