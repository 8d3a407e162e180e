"""Tests for the oscillator table."""

import math

import pytest

from lissajous_table.core.layout import compute_layout
from lissajous_table.core.table import LissajousTable, axis_hues


class TestLissajousTable:
    def test_equal_axis_lengths(self, table_500):
        assert len(table_500.horizontal) == len(table_500.vertical) == 5
        assert table_500.count == 5

    def test_velocity_ladder(self):
        table = LissajousTable(compute_layout(500, 10, 5), base_increment=math.pi / 180)
        assert table.horizontal[2].angular_velocity == pytest.approx(3 * math.pi / 180)
        for i, osc in enumerate(table.vertical):
            assert osc.angular_velocity == pytest.approx((i + 1) * math.pi / 180)

    def test_hues_for_four(self):
        assert axis_hues(4) == [0, 90, 180, 270]
        table = LissajousTable(compute_layout(500, 10, 4))
        assert [o.hue for o in table.horizontal] == [0, 90, 180, 270]
        assert [o.hue for o in table.vertical] == [0, 90, 180, 270]

    def test_pair_hue_is_average(self):
        table = LissajousTable(compute_layout(500, 10, 4))
        assert table.pair_hue(0, 3) == pytest.approx(135)
        assert table.pair_hue(2, 2) == pytest.approx(180)

    def test_start_phase(self, table_500):
        for osc in table_500.oscillators():
            assert osc.phase == pytest.approx(-math.pi / 2)

    def test_oscillators_placed_on_axes(self, table_500, layout_500):
        for i in range(5):
            h = table_500.horizontal[i]
            v = table_500.vertical[i]
            assert (h.center_x, h.center_y) == pytest.approx(tuple(layout_500.horizontal_center(i)))
            assert (v.center_x, v.center_y) == pytest.approx(tuple(layout_500.vertical_center(i)))

    def test_pairs_enumerate_full_grid(self, table_500):
        pairs = list(table_500.pairs())
        assert len(pairs) == 25
        assert [(i, j) for i, j, _, _ in pairs[:6]] == [
            (0, 0), (0, 1), (0, 2), (0, 3), (0, 4), (1, 0),
        ]
        i, j, horizontal, vertical = pairs[7]
        assert horizontal is table_500.horizontal[j]
        assert vertical is table_500.vertical[i]

    def test_hundred_updates(self):
        start = 0.3
        table = LissajousTable(compute_layout(300, 6, 3), base_increment=0.01, start_phase=start)
        for _ in range(100):
            table.advance()
        assert table.horizontal[0].phase == pytest.approx(start + 100 * 0.01 * 1)
        assert table.horizontal[1].phase == pytest.approx(start + 100 * 0.01 * 2)
        assert table.vertical[2].phase == pytest.approx(start + 100 * 0.01 * 3)

    def test_reset(self, table_500):
        for _ in range(7):
            table_500.advance()
        table_500.reset()
        assert all(o.phase == table_500.start_phase for o in table_500.oscillators())
