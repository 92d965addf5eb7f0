"""Tests for the layout engine."""

import json
from datetime import timedelta

import pytest

from conftest import BASE, event, hourly_events, layout_of, period

from duckline.layout.config import LayoutConfig, canvas_size
from duckline.layout.constants import EVENT_MIN_HALF_WIDTH, MIN_PERIOD_WIDTH
from duckline.layout.engine import compute_layout
from duckline.layout.placement import Side


def test_layout_is_deterministic(duck_day):
    config = LayoutConfig(total_slices=3, avoid_split=True, compress_gaps=True)
    first = compute_layout(duck_day, config).to_dict()
    second = compute_layout(duck_day, config).to_dict()
    assert first == second


def test_one_entry_per_item_in_input_order(duck_day):
    layout = compute_layout(duck_day)
    assert list(layout.entries) == [item.id for item in duck_day]


def test_empty_timeline():
    layout = compute_layout([])
    assert layout.entries == {}
    assert layout.axis_x1 == layout.axis_x2 == pytest.approx(600)


def test_default_config():
    layout = compute_layout(hourly_events(2))
    assert layout.width == 1200
    assert layout.height == 800
    assert layout.axis_y == 400


def test_axis_spans_ten_to_ninety_percent(duck_day):
    layout = compute_layout(duck_day)
    assert layout.axis_x1 == pytest.approx(120)
    assert layout.axis_x2 == pytest.approx(1080)


def test_alternation_follows_chronology_not_input_order():
    items = list(reversed(hourly_events(4)))
    layout = compute_layout(items)
    sides = [layout.entries[f"e{i}"].side for i in range(4)]
    assert sides == [Side.TOP, Side.BOTTOM, Side.TOP, Side.BOTTOM]


def test_periods_always_on_top(duck_day):
    for policy in ("alternate", "balanced", "top"):
        layout = compute_layout(duck_day, LayoutConfig(side_policy=policy))
        for item in duck_day:
            if item.kind == "period":
                assert layout.entries[item.id].side is Side.TOP


def test_period_label_centered_on_bar(duck_day):
    layout = compute_layout(duck_day)
    entry = layout.entries["5"]
    assert entry.raw_x2 > entry.raw_x
    assert entry.label_x == pytest.approx((entry.raw_x + entry.raw_x2) / 2)


def test_short_period_gets_minimum_width():
    items = [
        period("p", BASE, BASE + timedelta(minutes=1)),
        event("a", BASE + timedelta(days=30)),
    ]
    entry = compute_layout(items).entries["p"]
    assert entry.raw_x2 - entry.raw_x == pytest.approx(MIN_PERIOD_WIDTH)


def test_x_positions_follow_time(duck_day):
    layout = compute_layout(duck_day)
    xs = [layout.entries[item.id].raw_x for item in duck_day]
    assert xs == sorted(xs)


class TestCompactDates:
    def test_same_day_prints_times(self, duck_day):
        layout = compute_layout(duck_day)
        assert layout.span.mode == "time"
        assert layout.span.context_label == "Jun 7, 2025"
        assert layout.entries["1"].date_text == "6:00 AM"
        assert layout.entries["2"].date_text == "6:30 AM - 7:15 AM"

    def test_disabled_prints_full_dates(self, duck_day):
        layout = layout_of(duck_day, compact_dates=False)
        assert layout.span.mode == "full"
        assert layout.span.context_label == ""
        assert layout.entries["1"].date_text == "Jun 7, 2025"


class TestCarousel:
    def test_full_width_spans_all_slides(self, duck_day):
        layout = layout_of(duck_day, total_slices=3)
        assert layout.width == 3600
        assert layout.axis_x1 == pytest.approx(360)
        assert layout.axis_x2 == pytest.approx(3240)

    def test_slide_width_follows_aspect(self):
        width, height = canvas_size("4:5")
        layout = layout_of(
            hourly_events(3), canvas_width=width, canvas_height=height, total_slices=2
        )
        assert (width, height) == (960, 1200)
        assert layout.width == 1920

    def test_snapping_keeps_labels_within_a_slide(self):
        items = [event(f"e{i}", BASE + timedelta(days=i)) for i in range(30)]
        layout = layout_of(items, total_slices=3, avoid_split=True)
        for entry in layout.entries.values():
            lo, hi = entry.label_span
            crosses = [b for b in (1200, 2400) if lo < b < hi]
            assert not crosses, entry.item_id


class TestPeriodBarAvoidance:
    """Point labels next to a period bar move off it on a single canvas only."""

    def _items(self):
        return [
            event("s", BASE),
            period("p", BASE + timedelta(days=10), BASE + timedelta(days=20)),
            event("e", BASE + timedelta(days=9)),
            event("z", BASE + timedelta(days=40)),
        ]

    def test_single_canvas_moves_label_off_bar(self):
        entry = layout_of(self._items()).entries["e"]
        assert entry.raw_x == pytest.approx(380)
        assert entry.label_x == pytest.approx(319)
        assert entry.marker_x == pytest.approx(380)

    def test_carousel_leaves_label_on_its_time(self):
        entry = layout_of(self._items(), total_slices=3).entries["e"]
        assert entry.raw_x == pytest.approx(1140)
        assert entry.label_x == entry.raw_x


class TestCompressGaps:
    def _items(self):
        return [
            event("a", BASE),
            event("b", BASE + timedelta(days=1)),
            event("c", BASE + timedelta(days=2)),
            event("d", BASE + timedelta(days=500)),
        ]

    def test_breaks_reported(self):
        layout = layout_of(self._items(), compress_gaps=True)
        assert len(layout.breaks) == 1
        entries = layout.entries
        assert entries["c"].raw_x < layout.breaks[0] < entries["d"].raw_x

    def test_no_breaks_without_compression(self):
        assert layout_of(self._items()).breaks == []


class TestInvalidPeriod:
    def _items(self):
        return [
            period("p", BASE, BASE - timedelta(days=3)),
            event("a", BASE + timedelta(days=10)),
        ]

    def test_clamp_collapses_to_start(self):
        entry = layout_of(self._items()).entries["p"]
        assert entry.raw_x2 - entry.raw_x == pytest.approx(MIN_PERIOD_WIDTH)
        assert entry.date_text == "Jan 1 - Jan 1"

    def test_swap_uses_reversed_bounds(self):
        entry = layout_of(self._items(), invalid_period="swap").entries["p"]
        assert entry.raw_x2 - entry.raw_x > MIN_PERIOD_WIDTH
        assert entry.date_text == "Dec 29, 2024 - Jan 1, 2025"


def test_content_scale_grows_labels():
    items = hourly_events(2)
    normal = layout_of(items).entries["e0"]
    scaled = layout_of(items, content_scale=2.0).entries["e0"]
    assert normal.half_width == EVENT_MIN_HALF_WIDTH
    assert scaled.half_width == 2 * EVENT_MIN_HALF_WIDTH
    assert scaled.band_start == 2 * normal.band_start


def test_to_dict_is_json_serializable(duck_day):
    data = compute_layout(duck_day).to_dict()
    text = json.dumps(data)
    assert json.loads(text)["entries"]["1"]["side"] == "top"
    assert data["span"] == {"mode": "time", "context_label": "Jun 7, 2025"}


class TestConfigValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"canvas_width": 0},
            {"total_slices": 0},
            {"content_scale": -1},
            {"side_policy": "left"},
            {"invalid_period": "ignore"},
        ],
    )
    def test_rejects_bad_values(self, kwargs):
        with pytest.raises(ValueError):
            LayoutConfig(**kwargs)

    def test_canvas_size_presets(self):
        assert canvas_size("16:9") == (1200, 675)
        assert canvas_size("1:1") == (1200, 1200)
        assert canvas_size("9:16") == (675, 1200)
        assert canvas_size("2:1") == (1200, 600)

    @pytest.mark.parametrize("aspect", ["wide", "3:0", "a:b"])
    def test_canvas_size_rejects_garbage(self, aspect):
        with pytest.raises(ValueError):
            canvas_size(aspect)
