"""
Drawing surfaces.

A Surface is the collaborator the renderer draws on: fixed pixel size,
a handful of stroke/fill primitives with opacity, and a one-shot
"call me on the next frame" slot. The renderer never loops by itself;
whoever owns the surface pumps ``run_pending`` once per display refresh.

- ImageSurface: off-screen Pillow image, for tests and frame capture.
- WindowSurface: the same image presented in a pygame window, paced by
  the window's clock.
"""

import abc
import math
from typing import Callable, Optional, Sequence

import numpy as np
import pygame
from PIL import Image, ImageDraw

from lissajous_table.core.oscillator import Point
from lissajous_table.errors import ConfigurationError, SurfaceUnavailable

Color = tuple[int, int, int]

# Primitives the renderer needs from any surface.
REQUIRED_PRIMITIVES = (
    "clear",
    "stroke_circle",
    "fill_circle",
    "stroke_line",
    "stroke_polyline",
    "schedule_next_frame",
    "cancel_next_frame",
)


def dash_segments(
    start: Point, end: Point, pattern: Optional[Sequence[float]]
) -> list[tuple[Point, Point]]:
    """
    Split a line into its visible dashes.

    Follows canvas semantics: entries alternate on/off starting with "on",
    and an odd-length pattern is effectively repeated twice.
    """
    dx, dy = end.x - start.x, end.y - start.y
    length = math.hypot(dx, dy)
    if not pattern or sum(pattern) <= 0 or length == 0:
        return [(start, end)]

    ux, uy = dx / length, dy / length
    dashes = []
    pos = 0.0
    idx = 0
    on = True
    while pos < length:
        stop = min(pos + max(pattern[idx % len(pattern)], 0.0), length)
        if on and stop > pos:
            dashes.append((
                Point(start.x + ux * pos, start.y + uy * pos),
                Point(start.x + ux * stop, start.y + uy * stop),
            ))
        pos = stop
        idx += 1
        on = not on
    return dashes


class Surface(abc.ABC):
    """Fixed-size drawing target with a single pending-frame slot."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"surface size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._pending: Optional[Callable[[], None]] = None

    # --- Scheduling ---

    def schedule_next_frame(self, callback: Callable[[], None]):
        """Register ``callback`` to run, with no arguments, on the next frame."""
        self._pending = callback

    def cancel_next_frame(self):
        self._pending = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def run_pending(self) -> bool:
        """
        Fire the pending callback, if any.

        Returns:
            True if a callback ran.
        """
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        callback()
        return True

    # --- Drawing ---

    @abc.abstractmethod
    def clear(self, color: Color):
        pass

    @abc.abstractmethod
    def stroke_circle(self, center: Point, radius: float, color: Color,
                      width: float = 1.0, alpha: float = 1.0):
        pass

    @abc.abstractmethod
    def fill_circle(self, center: Point, radius: float, color: Color, alpha: float = 1.0):
        pass

    @abc.abstractmethod
    def stroke_line(self, start: Point, end: Point, color: Color, width: float = 1.0,
                    alpha: float = 1.0, dash: Optional[Sequence[float]] = None):
        pass

    @abc.abstractmethod
    def stroke_polyline(self, points: Sequence[Point], color: Color,
                        width: float = 1.0, alpha: float = 1.0):
        pass


class ImageSurface(Surface):
    """Off-screen RGB image drawn with Pillow, blending by opacity."""

    def __init__(self, width: int, height: int, background: Color = (0, 0, 0)):
        super().__init__(width, height)
        self.image = Image.new("RGB", (self.width, self.height), background)
        # "RGBA" draw mode on an RGB image alpha-blends every primitive
        self.draw = ImageDraw.Draw(self.image, "RGBA")

    @staticmethod
    def _rgba(color: Color, alpha: float) -> tuple[int, int, int, int]:
        a = int(round(255 * min(max(alpha, 0.0), 1.0)))
        return (color[0], color[1], color[2], a)

    @staticmethod
    def _px(width: float) -> int:
        return max(1, int(round(width)))

    @staticmethod
    def _bbox(center: Point, radius: float) -> list[float]:
        return [center.x - radius, center.y - radius, center.x + radius, center.y + radius]

    def clear(self, color):
        self.image.paste(tuple(color), (0, 0, self.width, self.height))

    def stroke_circle(self, center, radius, color, width=1.0, alpha=1.0):
        self.draw.ellipse(
            self._bbox(center, radius), outline=self._rgba(color, alpha), width=self._px(width)
        )

    def fill_circle(self, center, radius, color, alpha=1.0):
        self.draw.ellipse(self._bbox(center, radius), fill=self._rgba(color, alpha))

    def stroke_line(self, start, end, color, width=1.0, alpha=1.0, dash=None):
        fill = self._rgba(color, alpha)
        px = self._px(width)
        for a, b in dash_segments(start, end, dash):
            self.draw.line([a, b], fill=fill, width=px)

    def stroke_polyline(self, points, color, width=1.0, alpha=1.0):
        if len(points) < 2:
            return
        self.draw.line(list(points), fill=self._rgba(color, alpha), width=self._px(width), joint="curve")

    def to_array(self) -> np.ndarray:
        """Current contents as an (H, W, 3) uint8 array."""
        return np.array(self.image, dtype=np.uint8)


class WindowSurface(ImageSurface):
    """
    ImageSurface presented in a pygame window.

    ``run_pending`` waits for the next refresh (``Clock.tick(fps)``), fires the
    pending callback, then flips the drawn image to the screen. Closing the
    window drops the pending callback, which ends the renderer's loop.
    """

    def __init__(
        self,
        width: int,
        height: int,
        fps: int = 60,
        background: Color = (0, 0, 0),
        title: str = "Lissajous Curve Table",
    ):
        super().__init__(width, height, background)
        self.fps = fps
        try:
            pygame.display.init()
            self.display = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(title)
        except pygame.error as exc:
            pygame.display.quit()
            raise SurfaceUnavailable(
                f"cannot open a {self.width}x{self.height} window: {exc}"
            ) from exc
        self.clock = pygame.time.Clock()

    def present(self):
        frame = pygame.image.frombuffer(self.image.tobytes(), self.image.size, "RGB")
        self.display.blit(frame, (0, 0))
        pygame.display.flip()

    def run_pending(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.cancel_next_frame()
        if not self.has_pending:
            return False
        self.clock.tick(self.fps)
        ran = super().run_pending()
        self.present()
        return ran

    def close(self):
        self.cancel_next_frame()
        pygame.display.quit()
