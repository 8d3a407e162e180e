"""
CLI entry point for the Lissajous curve table.

Usage:
    lissajous-table [options]
    python -m lissajous_table [options]
"""

import argparse
import sys
import time

from lissajous_table.errors import ConfigurationError, SurfaceUnavailable
from lissajous_table.render.config import TRAIL_MODES, TableConfig
from lissajous_table.render.renderer import LissajousTableRenderer
from lissajous_table.render.surface import WindowSurface


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lissajous-table",
        description="Animated table of Lissajous curves",
    )
    parser.add_argument("--width", type=int, default=1080, help="Window width (default: 1080)")
    parser.add_argument("--height", type=int, default=1080, help="Window height (default: 1080)")
    parser.add_argument("-f", "--fps", type=int, default=60, help="Frames per second (default: 60)")
    parser.add_argument(
        "--trail", type=str, default="fade", choices=TRAIL_MODES,
        help="fade: recompute a fading trail each frame; "
             "history: accumulate points and truncate (default: fade)",
    )
    parser.add_argument(
        "-n", "--frames", type=int, default=None,
        help="Close after this many frames (default: run until the window is closed)",
    )
    return parser


def _live(config: TableConfig, max_frames: int | None):
    surface = WindowSurface(
        config.width, config.height, fps=config.fps, background=config.background_color
    )
    t0 = time.time()
    try:
        renderer = LissajousTableRenderer(config, surface)
        frames = renderer.run(max_frames=max_frames)
    finally:
        surface.close()

    elapsed = time.time() - t0
    print(f"Rendered {frames} frames in {elapsed:.1f}s ({frames / max(elapsed, 0.01):.1f} fps)")


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)

    config = TableConfig(
        width=args.width,
        height=args.height,
        fps=args.fps,
        trail_mode=args.trail,
    )

    try:
        config.validate()
        if args.frames is not None and args.frames < 1:
            raise ConfigurationError(f"--frames must be at least 1, got {args.frames}")
        _live(config, args.frames)
    except (ConfigurationError, SurfaceUnavailable) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
