"""
Curve sampling for every (horizontal, vertical) oscillator pair.

Two strategies trade CPU for memory:

- FadingTrailSampler recomputes the whole trail each frame by stepping both
  phases forward from their current values. No state is kept between frames,
  but every pair costs ``segments_per_frame`` evaluations per frame.
- TrailHistorySampler records only the pair's current point each frame into
  a bounded Trace and draws whatever is retained. O(1) new work per frame,
  O(trail_length) memory per pair.

Both return a list of TrailSegment so the renderer draws them the same way.
"""

import abc
from collections import deque
from typing import Dict, Iterable, Iterator, List, NamedTuple, Tuple

import numpy as np

from lissajous_table.core.oscillator import Oscillator, Point


class TrailSegment(NamedTuple):
    start: Point
    end: Point
    alpha: float


def curve_point(horizontal: Oscillator, vertical: Oscillator) -> Point:
    """Current curve point: x from the horizontal oscillator, y from the vertical."""
    return Point(horizontal.x_at(horizontal.phase), vertical.y_at(vertical.phase))


class CurveSampler(abc.ABC):
    """Produces the drawable trail for one pair per frame."""

    @abc.abstractmethod
    def sample(
        self, i: int, j: int, horizontal: Oscillator, vertical: Oscillator
    ) -> List[TrailSegment]:
        pass

    def reset(self):
        """Forget any state carried between frames."""


class FadingTrailSampler(CurveSampler):
    """
    Recompute a fading trail from the current phases.

    Segment ``k`` (0 at the current point) has opacity ``1 - k / segments``,
    so the trail is opaque at the current point and fades toward the far end.
    Each sub-step advances a phase by ``velocity * (360 / segments)``, which
    walks one full base period over the whole trail.
    """

    def __init__(self, segments: int = 180):
        self.segments = segments
        self.step_factor = 360 / segments

    def phases(self, osc: Oscillator) -> np.ndarray:
        steps = np.arange(self.segments + 1, dtype=np.float64)
        return osc.phase + steps * osc.angular_velocity * self.step_factor

    def opacities(self) -> np.ndarray:
        k = np.arange(self.segments, dtype=np.float64)
        return 1.0 - k / self.segments

    def sample(self, i, j, horizontal, vertical):
        xs = horizontal.center_x + horizontal.radius * np.cos(self.phases(horizontal))
        ys = vertical.center_y + vertical.radius * np.sin(self.phases(vertical))
        alphas = self.opacities()

        segments = []
        for k in range(self.segments):
            segments.append(
                TrailSegment(
                    Point(float(xs[k]), float(ys[k])),
                    Point(float(xs[k + 1]), float(ys[k + 1])),
                    float(alphas[k]),
                )
            )
        return segments


class Trace:
    """Bounded FIFO of recent points, oldest first."""

    def __init__(self, max_length: int):
        self.max_length = max_length
        self._points = deque(maxlen=max_length)

    def append(self, point: Point):
        self._points.append(point)

    def clear(self):
        self._points.clear()

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def points(self) -> List[Point]:
        return list(self._points)

    def segments(self, alpha: float = 1.0) -> List[TrailSegment]:
        pts = self.points()
        return [TrailSegment(a, b, alpha) for a, b in zip(pts, pts[1:])]


class TrailHistorySampler(CurveSampler):
    """
    Accumulate each pair's current point into a Trace.

    Every call to ``sample`` records one point. The trace holds at most
    ``trail_length`` points; older ones fall off the front.
    """

    def __init__(self, trail_length: int = 361):
        self.trail_length = trail_length
        self.traces: Dict[Tuple[int, int], Trace] = {}

    def trace(self, i: int, j: int) -> Trace:
        key = (i, j)
        if key not in self.traces:
            self.traces[key] = Trace(self.trail_length)
        return self.traces[key]

    def sample(self, i, j, horizontal, vertical):
        trace = self.trace(i, j)
        trace.append(curve_point(horizontal, vertical))
        return trace.segments()

    def reset(self):
        for trace in self.traces.values():
            trace.clear()


def group_by_alpha(segments: Iterable[TrailSegment]) -> List[Tuple[List[Point], float]]:
    """
    Merge consecutive connected segments of equal opacity into polylines.

    Returns:
        List of (points, alpha) runs, in drawing order.
    """
    runs: List[Tuple[List[Point], float]] = []
    for seg in segments:
        if runs and runs[-1][1] == seg.alpha and runs[-1][0][-1] == seg.start:
            runs[-1][0].append(seg.end)
        else:
            runs.append(([seg.start, seg.end], seg.alpha))
    return runs
