"""Drawing surfaces and the per-frame renderer."""

from lissajous_table.render.config import TRAIL_MODES, TableConfig
from lissajous_table.render.renderer import (
    LissajousTableRenderer,
    RenderState,
    make_sampler,
)
from lissajous_table.render.surface import ImageSurface, Surface, WindowSurface
