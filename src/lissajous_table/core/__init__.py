"""Generative geometry: oscillators, axis layout, and curve sampling."""

from lissajous_table.core.layout import AxisLayout, compute_layout
from lissajous_table.core.oscillator import Oscillator, Point, advance_phase
from lissajous_table.core.sampler import (
    CurveSampler,
    FadingTrailSampler,
    Trace,
    TrailHistorySampler,
    TrailSegment,
    curve_point,
)
from lissajous_table.core.table import LissajousTable
