"""Pytest configuration and shared fixtures."""

import math

import pytest

from lissajous_table.core.layout import compute_layout
from lissajous_table.core.oscillator import Oscillator
from lissajous_table.core.table import LissajousTable
from lissajous_table.render.config import TableConfig


@pytest.fixture
def small_config() -> TableConfig:
    """Small surface so frames render quickly."""
    return TableConfig(width=160, height=120, circle_count=3, segments_per_frame=24)


@pytest.fixture
def layout_500():
    """Table side 500, padding 10, five circles per axis."""
    return compute_layout(500, 10, 5)


@pytest.fixture
def table_500(layout_500) -> LissajousTable:
    return LissajousTable(layout_500)


@pytest.fixture
def unit_pair() -> tuple[Oscillator, Oscillator]:
    """
    A 1:2 horizontal/vertical pair around the origin.

    Returns:
        Tuple of (horizontal, vertical) oscillators.
    """
    horizontal = Oscillator(0.0, 0.0, 1.0, 0.01, 0.0, phase=-math.pi / 2)
    vertical = Oscillator(0.0, 0.0, 1.0, 0.02, 180.0, phase=-math.pi / 2)
    return horizontal, vertical
