"""
Frame renderer for the Lissajous curve table.

Each tick, in order:
1. clear the surface to the background colour
2. draw every oscillator (circle outline + point handle)
3. for each vertical index i: draw the curve of every pair (i, j) in the
   pair's average hue, then the two dashed guide lines for index i
4. advance every oscillator's phase
5. ask the surface for the next frame

The renderer never loops on its own. ``tick`` re-registers itself with the
surface, and the surface's owner decides when to fire it.
"""

import enum
from typing import Iterator, Optional

import numpy as np

from lissajous_table.core.layout import AxisLayout, compute_layout
from lissajous_table.core.oscillator import Oscillator, Point
from lissajous_table.core.sampler import (
    CurveSampler,
    FadingTrailSampler,
    TrailHistorySampler,
    curve_point,
    group_by_alpha,
)
from lissajous_table.core.table import LissajousTable
from lissajous_table.errors import SurfaceUnavailable
from lissajous_table.render.config import TableConfig
from lissajous_table.render.palette import WHITE, hsl_to_rgb
from lissajous_table.render.surface import REQUIRED_PRIMITIVES, ImageSurface, Surface


class RenderState(enum.Enum):
    IDLE = "idle"
    RENDERING = "rendering"
    UPDATING = "updating"
    SCHEDULED = "scheduled"
    STOPPED = "stopped"


def make_sampler(config: TableConfig) -> CurveSampler:
    if config.trail_mode == "history":
        return TrailHistorySampler(config.trail_length)
    return FadingTrailSampler(config.segments_per_frame)


def _check_surface(surface):
    missing = [
        name for name in REQUIRED_PRIMITIVES
        if not callable(getattr(surface, name, None))
    ]
    if not hasattr(surface, "width") or not hasattr(surface, "height"):
        missing.append("width/height")
    if missing:
        raise SurfaceUnavailable(
            f"{type(surface).__name__} is missing drawing primitives: {', '.join(missing)}"
        )


class LissajousTableRenderer:
    """
    Draws and animates one Lissajous table on a Surface.

    The layout is derived once from the surface size: the table is the
    largest square that fits, anchored at the top-left corner.
    """

    def __init__(self, config: Optional[TableConfig] = None, surface: Optional[Surface] = None):
        self.cfg = config or TableConfig()
        self.cfg.validate()

        if surface is None:
            surface = ImageSurface(self.cfg.width, self.cfg.height, self.cfg.background_color)
        _check_surface(surface)
        self.surface = surface

        side = min(surface.width, surface.height)
        self.layout: AxisLayout = compute_layout(
            side, side * self.cfg.padding_fraction, self.cfg.circle_count
        )
        self.table = LissajousTable(
            self.layout,
            base_increment=self.cfg.base_increment,
            start_phase=self.cfg.start_phase,
        )
        self.sampler = make_sampler(self.cfg)

        self.state = RenderState.IDLE
        self.frame_count = 0

        # Line widths and sizes scale with the circle radius
        r = self.layout.radius
        self._circle_width = r / 10
        self._handle_radius = r / 10
        self._curve_width = r / 15
        self._head_radius = r / 15
        self._guide_dash = (r / 10, r / 10)

    def _color(self, hue: float) -> tuple[int, int, int]:
        return hsl_to_rgb(hue, self.cfg.saturation, self.cfg.lightness)

    # --- Drawing ---

    def _draw_oscillator(self, osc: Oscillator):
        self.surface.stroke_circle(
            osc.center, osc.radius, self._color(osc.hue), width=self._circle_width
        )
        self.surface.fill_circle(osc.position(), self._handle_radius, WHITE)

    def _draw_curve(self, i: int, j: int):
        horizontal = self.table.horizontal[j]
        vertical = self.table.vertical[i]
        color = self._color(self.table.pair_hue(i, j))

        segments = self.sampler.sample(i, j, horizontal, vertical)
        for points, alpha in group_by_alpha(segments):
            if alpha <= 0:
                continue
            self.surface.stroke_polyline(points, color, width=self._curve_width, alpha=alpha)

        self.surface.fill_circle(curve_point(horizontal, vertical), self._head_radius, WHITE)

    def _draw_guides(self, i: int):
        side = self.layout.side
        h = self.table.horizontal[i].position()
        v = self.table.vertical[i].position()
        self.surface.stroke_line(
            h, Point(h.x, side), WHITE, width=1, alpha=self.cfg.guide_alpha, dash=self._guide_dash
        )
        self.surface.stroke_line(
            v, Point(side, v.y), WHITE, width=1, alpha=self.cfg.guide_alpha, dash=self._guide_dash
        )

    def render_once(self):
        """Draw the current state. Does not move anything."""
        self.state = RenderState.RENDERING
        self.surface.clear(self.cfg.background_color)

        for osc in self.table.oscillators():
            self._draw_oscillator(osc)

        for i in range(self.table.count):
            for j in range(self.table.count):
                self._draw_curve(i, j)
            self._draw_guides(i)

    def update_once(self):
        """Advance every oscillator by one step."""
        self.state = RenderState.UPDATING
        self.table.advance()
        self.frame_count += 1

    # --- Frame loop ---

    def tick(self):
        """One full frame: render, update, then re-register for the next frame."""
        if self.state is RenderState.STOPPED:
            return
        self.render_once()
        self.update_once()
        self.state = RenderState.SCHEDULED
        self.surface.schedule_next_frame(self.tick)

    def start(self):
        self.state = RenderState.SCHEDULED
        self.surface.schedule_next_frame(self.tick)

    def stop(self):
        """Unregister the pending frame callback. Safe to call more than once."""
        self.surface.cancel_next_frame()
        self.state = RenderState.STOPPED

    def run(self, max_frames: Optional[int] = None) -> int:
        """
        Pump the surface until it stops firing callbacks.

        Args:
            max_frames: Stop after this many frames. None runs until the
                surface drops the pending callback (e.g. window closed). Zero or
                less renders nothing.

        Returns:
            Number of frames rendered.
        """
        frames = 0
        if max_frames is not None and max_frames < 1:
            return frames

        self.start()
        try:
            while (max_frames is None or frames < max_frames) and self.surface.run_pending():
                frames += 1
        finally:
            self.stop()
        return frames

    def reset(self):
        """Return every oscillator to the start phase and drop trail history."""
        self.table.reset()
        self.sampler.reset()
        self.frame_count = 0
        self.state = RenderState.IDLE

    def _require_pixels(self):
        to_array = getattr(self.surface, "to_array", None)
        if not callable(to_array):
            raise SurfaceUnavailable(
                f"{type(self.surface).__name__} cannot export pixel data"
            )
        return to_array

    def snapshot(self) -> np.ndarray:
        return self._require_pixels()()

    def render_frames(
        self,
        n_frames: int,
        progress_callback: callable = None,
    ) -> Iterator[np.ndarray]:
        """
        Render frames from the start phase as a generator.

        Args:
            n_frames: Number of frames to produce.
            progress_callback: Optional callback(current, total).

        Returns:
            Generator of (H, W, 3) uint8 RGB arrays, one per frame.

        Raises:
            SurfaceUnavailable: The surface cannot export pixels. Raised on
                the call, before any frame is drawn.
        """
        self._require_pixels()
        return self._frames(n_frames, progress_callback)

    def _frames(self, n_frames: int, progress_callback) -> Iterator[np.ndarray]:
        self.reset()

        for i in range(n_frames):
            self.render_once()
            frame = self.snapshot()
            self.update_once()
            yield frame

            if progress_callback:
                progress_callback(i + 1, n_frames)

        self.state = RenderState.IDLE
