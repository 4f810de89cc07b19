#!/usr/bin/env python3
# Render a generated grid to a PNG using Pillow.
# Palette: stone dark grey, wall blue, floor green.

import argparse, logging, os
from PIL import Image, ImageDraw

from dungen.cells import FLOOR, STONE, WALL
from dungen.mapgen.generator import PRESETS, generate

PALETTE = {
    STONE: (32, 32, 32, 255),
    WALL: (32, 32, 128, 255),
    FLOOR: (32, 128, 32, 255),
}


def render_image(grid, tile_size=8, margin=0, outline=False):
    w, h = grid.width * tile_size + 2*margin, grid.height * tile_size + 2*margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 255))
    draw = ImageDraw.Draw(canvas)

    def paint(x, y, kind):
        x0 = margin + x * tile_size
        y0 = margin + y * tile_size
        box = (x0, y0, x0 + tile_size - 1, y0 + tile_size - 1)
        # The demo drew hollow rects; filled is easier to read at small sizes
        if outline:
            draw.rectangle(box, outline=PALETTE[kind])
        else:
            draw.rectangle(box, fill=PALETTE[kind])

    grid.each(paint)
    return canvas


def render_grid(grid, out_png, tile_size=8, margin=0, outline=False):
    canvas = render_image(grid, tile_size=tile_size, margin=margin, outline=outline)
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    canvas.save(out_png)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--preset", choices=sorted(PRESETS), default="dungeon")
    ap.add_argument("--width", type=int, default=80)
    ap.add_argument("--height", type=int, default=80)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    ap.add_argument("--outline", action="store_true", help="Draw cells as hollow outlines")
    ap.add_argument("--out", type=str, default="out/png/dungeon.png", help="PNG path")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    grid = generate(args.width, args.height, preset=args.preset, seed=args.seed)
    render_grid(grid, args.out, tile_size=args.tile, outline=args.outline)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
