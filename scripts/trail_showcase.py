"""
Trail Strategy Showcase
=======================
Renders the same table with both trail strategies and writes a contact
sheet: one row per strategy, one column per sampled frame. Also prints the
average render time per frame so the CPU/memory trade-off is visible.

Usage
-----
    python scripts/trail_showcase.py
    python scripts/trail_showcase.py --frames 720 --columns 6 --size 400
    python scripts/trail_showcase.py --output sheet.png
"""

import argparse
import time
from pathlib import Path

from PIL import Image

from lissajous_table.render.config import TRAIL_MODES, TableConfig
from lissajous_table.render.renderer import LissajousTableRenderer


def _render_row(mode: str, size: int, n_frames: int, columns: int):
    cfg = TableConfig(width=size, height=size, trail_mode=mode)
    renderer = LissajousTableRenderer(cfg)
    step = max(1, n_frames // columns)
    picks = {step * (c + 1) - 1 for c in range(columns)}

    tiles = []
    t0 = time.time()
    for i, frame in enumerate(renderer.render_frames(n_frames)):
        if i in picks:
            tiles.append(Image.fromarray(frame))
    elapsed = time.time() - t0
    return tiles, elapsed / max(n_frames, 1)


def main():
    parser = argparse.ArgumentParser(
        description="Render both trail strategies into one contact sheet.",
    )
    parser.add_argument("--frames", type=int, default=360, help="Frames per strategy (default: 360)")
    parser.add_argument("--columns", type=int, default=4, help="Tiles per row (default: 4)")
    parser.add_argument("--size", type=int, default=300, help="Tile side in pixels (default: 300)")
    parser.add_argument("--output", type=Path, default=Path("trail_showcase.png"))
    args = parser.parse_args()

    rows = []
    for mode in TRAIL_MODES:
        print(f"Rendering {args.frames} frames, trail={mode}")
        tiles, per_frame = _render_row(mode, args.size, args.frames, args.columns)
        print(f"  {per_frame * 1000:.1f} ms/frame")
        rows.append(tiles)

    sheet = Image.new("RGB", (args.size * args.columns, args.size * len(rows)))
    for r, tiles in enumerate(rows):
        for c, tile in enumerate(tiles):
            sheet.paste(tile, (c * args.size, r * args.size))
    sheet.save(args.output)
    print(f"Output: {args.output}")


if __name__ == "__main__":
    main()
