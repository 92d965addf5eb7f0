"""Tests for linear and gap-compressed time scales."""

from datetime import timedelta

import pytest

from conftest import BASE, event, period

from duckline.layout.scale import TimeScale, build_scale, compress_gaps
from duckline.parser.dates import range_of


class TestCompressGaps:
    def test_outlier_gap_becomes_threshold(self):
        """Gaps [1, 1, 1, 100]: median 1, threshold 3, the 100 counts as 3."""
        cumulative, compressed, threshold = compress_gaps([1, 1, 1, 100])
        assert threshold == 3
        assert compressed == [3]
        assert cumulative == [0, 1, 2, 3, 6]

    def test_upper_median_on_even_length(self):
        # sorted [1, 2, 3, 4] -> index 2 -> 3, not the mean 2.5
        _cum, _compressed, threshold = compress_gaps([4, 1, 3, 2])
        assert threshold == 9

    def test_gap_at_threshold_is_kept(self):
        cumulative, compressed, _threshold = compress_gaps([1, 1, 3])
        assert compressed == []
        assert cumulative[-1] == 5

    def test_no_gaps(self):
        assert compress_gaps([]) == ([0], [], 0)


def _items_with_outlier_gap():
    return [
        event("a", BASE),
        event("b", BASE + timedelta(days=1)),
        event("c", BASE + timedelta(days=2)),
        event("d", BASE + timedelta(days=3)),
        event("e", BASE + timedelta(days=400)),
    ]


def test_linear_scale_spans_ten_to_ninety_percent():
    items = [event("a", BASE), event("b", BASE + timedelta(days=10))]
    domain = range_of(items)
    scale = build_scale(items, domain, 1200)
    assert scale(domain[0]) == pytest.approx(120)
    assert scale(domain[1]) == pytest.approx(1080)
    assert scale.breaks == []


def test_linear_scale_zero_domain_maps_to_midpoint():
    scale = build_scale([], (BASE, BASE), 1000)
    assert scale(BASE) == pytest.approx(500)


def test_compressed_scale_is_order_preserving():
    items = _items_with_outlier_gap()
    domain = range_of(items)
    for compress in (False, True):
        scale = build_scale(items, domain, 3600, compress=compress)
        xs = [scale(item.instant) for item in items]
        assert xs == sorted(xs)


def test_compressed_scale_reports_breaks_inside_axis():
    items = _items_with_outlier_gap()
    domain = range_of(items)
    scale = build_scale(items, domain, 1200, compress=True)
    assert len(scale.knots) > 2
    assert scale.breaks
    for bx in scale.breaks:
        assert 120 < bx < 1080


def test_compressed_scale_gives_dense_items_more_room():
    items = _items_with_outlier_gap()
    domain = range_of(items)
    linear = build_scale(items, domain, 1200)
    compressed = build_scale(items, domain, 1200, compress=True)
    dense_linear = linear(items[3].instant) - linear(items[0].instant)
    dense_compressed = compressed(items[3].instant) - compressed(items[0].instant)
    assert dense_compressed > dense_linear


def test_compression_needs_two_items():
    items = [event("a", BASE)]
    scale = build_scale(items, range_of(items), 1200, compress=True)
    assert len(scale.knots) == 2
    assert scale(BASE) == pytest.approx(600)


def test_compressed_scale_uses_period_bounds():
    items = [period("p", BASE, BASE + timedelta(days=5)), event("a", BASE)]
    scale = build_scale(items, range_of(items), 1200, compress=True)
    assert scale(BASE) < scale(BASE + timedelta(days=5))


def test_degenerate_scale_maps_everything_to_range_start():
    scale = TimeScale(range_start=10, range_end=90, knots=[0.0], positions=[0.0])
    assert scale.at_seconds(12345) == 10


def test_zero_cumulative_distance_maps_to_midpoint():
    scale = TimeScale(
        range_start=0, range_end=100, knots=[0.0, 0.0], positions=[0.0, 0.0]
    )
    assert scale.at_seconds(0) == 50
