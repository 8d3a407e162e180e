"""
Circle placement along the top and left edges of a square table.

With ``N`` circles per axis the table is divided into ``N + 1`` cells per
side (the top-left cell stays empty), separated by ``padding``:

    radius    = (side - padding * (N + 2)) / (2 * (N + 1))
    offset(i) = (i + 1) * (padding + 2 * radius) + radius + padding
"""

from dataclasses import dataclass

import numpy as np

from lissajous_table.core.oscillator import Point
from lissajous_table.errors import ConfigurationError


@dataclass(frozen=True)
class AxisLayout:
    """Resolved geometry for one table. Computed once and cached by the table."""

    side: float
    padding: float
    count: int
    radius: float

    @property
    def spacing(self) -> float:
        """Distance between neighbouring circle centres on the same axis."""
        return self.padding + 2 * self.radius

    @property
    def edge(self) -> float:
        """Coordinate of the fixed axis: centre of the top row / left column."""
        return self.padding + self.radius

    def offset(self, index: int) -> float:
        if not 0 <= index < self.count:
            raise IndexError(f"circle index {index} outside [0, {self.count})")
        return (index + 1) * self.spacing + self.radius + self.padding

    def offsets(self) -> np.ndarray:
        """All offsets at once, shape (count,)."""
        idx = np.arange(self.count, dtype=np.float64)
        return (idx + 1) * self.spacing + self.radius + self.padding

    def horizontal_center(self, index: int) -> Point:
        return Point(self.offset(index), self.edge)

    def vertical_center(self, index: int) -> Point:
        return Point(self.edge, self.offset(index))


def compute_layout(side: float, padding: float, count: int) -> AxisLayout:
    """
    Compute circle radius and spacing for a square table.

    Args:
        side: Table side length in pixels.
        padding: Gap between circles and around the table edge.
        count: Circles per axis.

    Returns:
        AxisLayout with a strictly positive radius.

    Raises:
        ConfigurationError: If the inputs cannot fit ``count`` circles.
    """
    if side <= 0:
        raise ConfigurationError(f"table side must be positive, got {side}")
    if padding < 0:
        raise ConfigurationError(f"padding must not be negative, got {padding}")
    if count < 1:
        raise ConfigurationError(f"circle count must be at least 1, got {count}")

    radius = (side - padding * (count + 2)) / (2 * (count + 1))
    if radius <= 0:
        raise ConfigurationError(
            f"{count} circles with padding {padding:g} do not fit a side of {side:g}"
        )
    return AxisLayout(side=side, padding=padding, count=count, radius=radius)
