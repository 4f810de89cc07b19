#!/usr/bin/env python3
# Minimal interactive viewer that animates generation through the step hook.
# - Closing the window mid-generation cancels the grid's token; the generator
#   returns a partial grid instead of the process exiting from the callback.
# - R: regenerate with a fresh seed   N: next preset   ESC: quit
# - 60 Hz loop once generation is done

import argparse, logging, random
import pygame

from dungen.cells import FLOOR, STONE, WALL
from dungen.grid import Grid
from dungen.hooks import StepResult
from dungen.mapgen.generator import PRESETS, preset_steps, run_pipeline

COLORS = {
    STONE: (32, 32, 32),
    WALL: (32, 32, 128),
    FLOOR: (32, 128, 32),
}


def draw_grid(screen, grid, tile):
    screen.fill((0, 0, 0))
    def paint(x, y, kind):
        pygame.draw.rect(screen, COLORS[kind], pygame.Rect(x * tile, y * tile, tile, tile), 1)
    grid.each(paint)
    pygame.display.flip()


class Viewer:
    def __init__(self, screen, tile, every, delay_ms):
        self.screen = screen
        self.tile = tile
        self.every = max(1, every)
        self.delay_ms = delay_ms
        self.quit = False

    def poll(self):
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.quit = True
            elif ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                self.quit = True

    def on_step(self, grid, step):
        self.poll()
        if self.quit:
            return StepResult.CANCEL
        if step % self.every == 0:
            draw_grid(self.screen, grid, self.tile)
            pygame.time.delay(self.delay_ms)
        return StepResult.CONTINUE

    def build(self, width, height, preset, seed):
        grid = Grid(width, height, self.on_step, seed=seed)
        status = run_pipeline(grid, preset_steps(preset))
        logging.info("preset=%s seed=%s status=%s steps=%d", preset, seed, status.value, grid.steps)
        return grid


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("width", type=int, nargs="?", default=80)
    ap.add_argument("height", type=int, nargs="?", default=80)
    ap.add_argument("--preset", choices=sorted(PRESETS), default="dungeon")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    ap.add_argument("--every", type=int, default=8, help="Redraw every N hook steps")
    ap.add_argument("--delay", type=int, default=10, help="Milliseconds to pause per redraw")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    pygame.init()
    pygame.display.set_caption("dungen")
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((args.width * args.tile, args.height * args.tile))

    presets = sorted(PRESETS)
    preset = args.preset
    seed = args.seed if args.seed is not None else random.randrange(1 << 31)
    viewer = Viewer(screen, args.tile, args.every, args.delay)
    grid = viewer.build(args.width, args.height, preset, seed)

    while not viewer.quit:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                viewer.quit = True
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    viewer.quit = True
                elif ev.key == pygame.K_r:
                    seed = random.randrange(1 << 31)
                    grid = viewer.build(args.width, args.height, preset, seed)
                elif ev.key == pygame.K_n:
                    preset = presets[(presets.index(preset) + 1) % len(presets)]
                    grid = viewer.build(args.width, args.height, preset, seed)
        if viewer.quit:
            break
        draw_grid(screen, grid, args.tile)
        pygame.display.set_caption(f"dungen: {preset}  seed {seed}  gen {grid.generations}")
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
