"""
Configuration for the Lissajous table renderer.

Every constant the animation depends on lives here, with the effect it has
on the picture.
"""

import math
from dataclasses import dataclass

from lissajous_table.core.layout import compute_layout
from lissajous_table.errors import ConfigurationError

TRAIL_MODES = ("fade", "history")


@dataclass
class TableConfig:
    """Fixed constants for one table."""

    # Surface size used when the renderer builds its own surface.
    # The table is the largest square in the top-left corner.
    width: int = 1080
    height: int = 1080
    fps: int = 60

    # Layout
    circle_count: int = 5  # circles per axis
    padding_fraction: float = 1 / 50  # padding = table side * fraction

    # Trail
    trail_mode: str = "fade"  # "fade" (recompute, fading) or "history" (accumulate, truncate)
    segments_per_frame: int = 180  # fade: segments drawn per curve per frame
    trail_length: int = 361  # history: points retained per curve

    # Motion
    start_phase: float = -math.pi / 2  # top of each circle
    base_increment: float = math.pi / 180  # radians per frame for circle 0

    # Colour
    background_color: tuple[int, int, int] = (51, 51, 51)  # hsl(0, 0%, 20%)
    saturation: float = 1.0
    lightness: float = 0.75
    guide_alpha: float = 0.75

    def validate(self):
        """
        Reject constants that would produce NaN or negative geometry.

        Raises:
            ConfigurationError: On the first invalid value found.
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"surface size must be positive, got {self.width}x{self.height}"
            )
        if self.fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {self.fps}")
        if self.circle_count < 1:
            raise ConfigurationError(
                f"circle_count must be at least 1, got {self.circle_count}"
            )
        if not 0 <= self.padding_fraction < 1:
            raise ConfigurationError(
                f"padding_fraction must be in [0, 1), got {self.padding_fraction}"
            )
        if self.trail_mode not in TRAIL_MODES:
            raise ConfigurationError(
                f"trail_mode must be one of {TRAIL_MODES}, got {self.trail_mode!r}"
            )
        if self.segments_per_frame < 1:
            raise ConfigurationError(
                f"segments_per_frame must be at least 1, got {self.segments_per_frame}"
            )
        if self.trail_length < 2:
            raise ConfigurationError(
                f"trail_length must be at least 2, got {self.trail_length}"
            )
        if not 0 <= self.guide_alpha <= 1:
            raise ConfigurationError(
                f"guide_alpha must be in [0, 1], got {self.guide_alpha}"
            )

        side = min(self.width, self.height)
        compute_layout(side, side * self.padding_fraction, self.circle_count)
