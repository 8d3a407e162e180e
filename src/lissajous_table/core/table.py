"""
The table: two equal-length rows of oscillators and the pairs between them.
"""

import math
from typing import Iterator, List, Tuple

from lissajous_table.core.layout import AxisLayout
from lissajous_table.core.oscillator import Oscillator


def axis_hues(count: int) -> List[float]:
    """Evenly spaced colour wheel keyed to axis index."""
    return [(360 / count) * i for i in range(count)]


class LissajousTable:
    """
    Owns the horizontal-axis and vertical-axis oscillators.

    Oscillator ``i`` on either axis turns ``i + 1`` times as fast as
    oscillator ``0``, so pair ``(i, j)`` traces a ``(j + 1):(i + 1)`` figure.
    """

    def __init__(
        self,
        layout: AxisLayout,
        base_increment: float = math.pi / 180,
        start_phase: float = -math.pi / 2,
    ):
        self.layout = layout
        self.base_increment = base_increment
        self.start_phase = start_phase
        self.hues = axis_hues(layout.count)

        self.horizontal: List[Oscillator] = []
        self.vertical: List[Oscillator] = []
        for i in range(layout.count):
            h = layout.horizontal_center(i)
            v = layout.vertical_center(i)
            velocity = base_increment * (i + 1)
            self.horizontal.append(
                Oscillator(h.x, h.y, layout.radius, velocity, self.hues[i], start_phase)
            )
            self.vertical.append(
                Oscillator(v.x, v.y, layout.radius, velocity, self.hues[i], start_phase)
            )

    @property
    def count(self) -> int:
        return self.layout.count

    def oscillators(self) -> Iterator[Oscillator]:
        yield from self.horizontal
        yield from self.vertical

    def pairs(self) -> Iterator[Tuple[int, int, Oscillator, Oscillator]]:
        """Yield ``(i, j, horizontal[j], vertical[i])``, vertical index outermost."""
        for i, vertical in enumerate(self.vertical):
            for j, horizontal in enumerate(self.horizontal):
                yield i, j, horizontal, vertical

    def pair_hue(self, i: int, j: int) -> float:
        return (self.horizontal[j].hue + self.vertical[i].hue) / 2

    def advance(self):
        for osc in self.oscillators():
            osc.advance()

    def reset(self):
        for osc in self.oscillators():
            osc.phase = self.start_phase
