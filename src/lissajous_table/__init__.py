"""
Lissajous curve table.

An animated grid of oscillating circles along two axes, with a Lissajous
curve traced between every horizontal/vertical circle pair.
"""

__version__ = "0.1.0"

from lissajous_table.core import (
    AxisLayout,
    LissajousTable,
    Oscillator,
    Point,
    compute_layout,
)
from lissajous_table.errors import ConfigurationError, SurfaceUnavailable
from lissajous_table.render import (
    ImageSurface,
    LissajousTableRenderer,
    TableConfig,
)
