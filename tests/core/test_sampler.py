"""Tests for the two curve sampling strategies."""

import math

import numpy as np
import pytest

from lissajous_table.core.oscillator import Point
from lissajous_table.core.sampler import (
    FadingTrailSampler,
    Trace,
    TrailHistorySampler,
    TrailSegment,
    curve_point,
    group_by_alpha,
)


class TestFadingTrailSampler:
    def test_segment_count(self, unit_pair):
        segments = FadingTrailSampler(180).sample(0, 0, *unit_pair)
        assert len(segments) == 180

    def test_starts_at_current_point(self, unit_pair):
        horizontal, vertical = unit_pair
        segments = FadingTrailSampler(60).sample(0, 0, horizontal, vertical)
        assert segments[0].start == pytest.approx(tuple(curve_point(horizontal, vertical)))

    def test_segments_connected(self, unit_pair):
        segments = FadingTrailSampler(30).sample(0, 0, *unit_pair)
        for a, b in zip(segments, segments[1:]):
            assert a.end == b.start

    def test_opacity_monotonic(self, unit_pair):
        segments = FadingTrailSampler(180).sample(0, 0, *unit_pair)
        alphas = [s.alpha for s in segments]
        assert alphas[0] == pytest.approx(1.0)
        assert all(a >= b for a, b in zip(alphas, alphas[1:]))
        assert alphas[-1] > 0

    def test_does_not_touch_phase(self, unit_pair):
        horizontal, vertical = unit_pair
        FadingTrailSampler(50).sample(0, 0, horizontal, vertical)
        assert horizontal.phase == pytest.approx(-math.pi / 2)
        assert vertical.phase == pytest.approx(-math.pi / 2)

    def test_sub_step_size(self, unit_pair):
        horizontal, _ = unit_pair
        sampler = FadingTrailSampler(180)
        phases = sampler.phases(horizontal)
        np.testing.assert_allclose(np.diff(phases), 0.01 * 2)

    def test_stateless_between_frames(self, unit_pair):
        sampler = FadingTrailSampler(20)
        first = sampler.sample(0, 0, *unit_pair)
        second = sampler.sample(0, 0, *unit_pair)
        assert first == second

    def test_points_stay_in_bounding_box(self, unit_pair):
        for seg in FadingTrailSampler(90).sample(0, 0, *unit_pair):
            for p in (seg.start, seg.end):
                assert -1 - 1e-9 <= p.x <= 1 + 1e-9
                assert -1 - 1e-9 <= p.y <= 1 + 1e-9


class TestTrace:
    def test_fifo_eviction(self):
        trace = Trace(5)
        points = [Point(float(k), 0.0) for k in range(10)]
        for p in points:
            trace.append(p)
        assert len(trace) == 5
        assert trace.points() == points[-5:]

    def test_segments_uniform(self):
        trace = Trace(4)
        for k in range(3):
            trace.append(Point(float(k), float(k)))
        segments = trace.segments()
        assert len(segments) == 2
        assert all(s.alpha == 1.0 for s in segments)

    def test_single_point_no_segments(self):
        trace = Trace(4)
        trace.append(Point(1.0, 1.0))
        assert trace.segments() == []


class TestTrailHistorySampler:
    def test_bounded_after_overflow(self, unit_pair):
        horizontal, vertical = unit_pair
        length = 361
        sampler = TrailHistorySampler(length)
        recorded = []
        for _ in range(length + 5):
            recorded.append(curve_point(horizontal, vertical))
            sampler.sample(0, 0, horizontal, vertical)
            horizontal.advance()
            vertical.advance()

        trace = sampler.trace(0, 0)
        assert len(trace) == length
        assert trace.points() == recorded[-length:]

    def test_traces_are_per_pair(self, unit_pair):
        sampler = TrailHistorySampler(10)
        sampler.sample(0, 0, *unit_pair)
        sampler.sample(0, 0, *unit_pair)
        sampler.sample(1, 0, *unit_pair)
        assert len(sampler.trace(0, 0)) == 2
        assert len(sampler.trace(1, 0)) == 1
        assert len(sampler.trace(0, 1)) == 0

    def test_full_opacity(self, unit_pair):
        horizontal, vertical = unit_pair
        sampler = TrailHistorySampler(10)
        for _ in range(4):
            segments = sampler.sample(0, 0, horizontal, vertical)
            horizontal.advance()
            vertical.advance()
        assert len(segments) == 3
        assert {s.alpha for s in segments} == {1.0}

    def test_reset_clears(self, unit_pair):
        sampler = TrailHistorySampler(10)
        sampler.sample(0, 0, *unit_pair)
        sampler.reset()
        assert len(sampler.trace(0, 0)) == 0


class TestGroupByAlpha:
    def test_merges_equal_alpha(self):
        pts = [Point(float(k), 0.0) for k in range(4)]
        segments = [TrailSegment(a, b, 1.0) for a, b in zip(pts, pts[1:])]
        runs = group_by_alpha(segments)
        assert runs == [(pts, 1.0)]

    def test_splits_on_alpha_change(self):
        pts = [Point(float(k), 0.0) for k in range(3)]
        segments = [TrailSegment(pts[0], pts[1], 1.0), TrailSegment(pts[1], pts[2], 0.5)]
        runs = group_by_alpha(segments)
        assert [alpha for _, alpha in runs] == [1.0, 0.5]
