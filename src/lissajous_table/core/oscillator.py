"""
A single rotating point on a circle.

Each oscillator owns a mutable phase that is advanced once per frame by its
angular velocity. The phase is never wrapped; cos/sin take care of that.
"""

import math
from dataclasses import dataclass
from typing import NamedTuple, Optional


class Point(NamedTuple):
    x: float
    y: float


def advance_phase(phase: float, velocity: float) -> float:
    return phase + velocity


@dataclass
class Oscillator:
    """Point rotating around (center_x, center_y) at a fixed angular velocity."""

    center_x: float
    center_y: float
    radius: float
    angular_velocity: float
    hue: float  # degrees, [0, 360)
    phase: float = 0.0

    @property
    def center(self) -> Point:
        return Point(self.center_x, self.center_y)

    def x_at(self, phase: float) -> float:
        return self.center_x + self.radius * math.cos(phase)

    def y_at(self, phase: float) -> float:
        return self.center_y + self.radius * math.sin(phase)

    def position(self, phase: Optional[float] = None) -> Point:
        """
        Evaluate the point on the circle.

        Args:
            phase: Angle in radians. Defaults to the current phase.

        Returns:
            Point at distance ``radius`` from the centre.
        """
        if phase is None:
            phase = self.phase
        return Point(self.x_at(phase), self.y_at(phase))

    def advance(self):
        """Write the next phase back into this oscillator."""
        self.phase = advance_phase(self.phase, self.angular_velocity)
