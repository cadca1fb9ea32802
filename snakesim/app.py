"""Window, input handling and drawing for the snake simulation."""

from __future__ import annotations

import argparse
import math
import random
import time
from collections.abc import Sequence

import pygame

from .simulation import (
    COLLISION_TIME,
    DIGESTION,
    GOLD,
    World,
    body_width,
)
from .vector import Vector

BACKGROUND = (43, 60, 80)
WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
SPINE = (255, 255, 255, 153)
SLOW_COLOR = (0, 191, 255, 153)
LINE_THICKNESS = 6
TARGET_FPS = 60

_fonts: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    font = _fonts.get(size)
    if font is None:
        font = _fonts[size] = pygame.font.Font(None, size)
    return font


def _text(surface: pygame.Surface, text: str, x: float, y: float, size: int, color) -> None:
    surface.blit(_font(size).render(text, False, color), (int(x), int(y)))


def _circle(surface: pygame.Surface, color, center: Vector, radius: float) -> None:
    if radius <= 0:
        return
    r = int(math.ceil(radius))
    layer = pygame.Surface((2 * r + 1, 2 * r + 1), pygame.SRCALPHA)
    pygame.draw.circle(layer, color, (r, r), radius)
    surface.blit(layer, (int(center.x) - r, int(center.y) - r))


def _polygon(surface: pygame.Surface, color, points: list[Vector]) -> None:
    left = math.floor(min(p.x for p in points))
    top = math.floor(min(p.y for p in points))
    right = math.ceil(max(p.x for p in points))
    bottom = math.ceil(max(p.y for p in points))
    layer = pygame.Surface((right - left + 1, bottom - top + 1), pygame.SRCALPHA)
    pygame.draw.polygon(layer, color, [(p.x - left, p.y - top) for p in points])
    surface.blit(layer, (left, top))


def _line(surface: pygame.Surface, color, start: Vector, end: Vector, width: int) -> None:
    pad = width
    left = math.floor(min(start.x, end.x)) - pad
    top = math.floor(min(start.y, end.y)) - pad
    w = math.ceil(max(start.x, end.x)) + pad - left + 1
    h = math.ceil(max(start.y, end.y)) + pad - top + 1
    layer = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.line(
        layer, color, (start.x - left, start.y - top), (end.x - left, end.y - top), width
    )
    surface.blit(layer, (left, top))


def _rotated_square(surface: pygame.Surface, color, center: Vector, size: float, angle: float) -> None:
    if size <= 0:
        return
    half = size / 2
    corners = [Vector(-half, -half), Vector(half, -half), Vector(half, half), Vector(-half, half)]
    _polygon(surface, color, [center + corner.rotate(angle) for corner in corners])


def draw_world(surface: pygame.Surface, world: World, now: float) -> None:
    """Render the food, all snakes and the status lines onto the surface."""
    surface.fill(BACKGROUND)
    _circle(surface, GOLD, world.food.pos, world.food.radius)

    for snake in world.snakes:
        chain = snake.chain
        factor = snake.body_factor
        skin = (*snake.color[:3], 102)

        for i, joint in enumerate(chain.joints[1:], start=1):
            _circle(surface, skin, joint, body_width(i, factor))

        for i, (joint, angle) in enumerate(zip(chain.joints, chain.angles)):
            _rotated_square(surface, skin, joint, body_width(i, factor) * 1.1, angle)

        head = chain.joints[0]
        head_size = body_width(0, factor)
        _circle(surface, (*snake.color[:3], 204), head, head_size)

        if snake.ate_time > 0 and now - snake.ate_time < DIGESTION:
            _circle(surface, SLOW_COLOR, head, head_size * 1.4)
        if snake.collision_time > 0 and now - snake.collision_time < COLLISION_TIME:
            _circle(surface, snake.collision_color, head, head_size * 1.5)

        for i, (joint, angle) in enumerate(zip(chain.joints, chain.angles)):
            _rotated_square(surface, SPINE, joint, body_width(i, factor) / 2.0, angle)

        for start, end in zip(chain.joints, chain.joints[1:]):
            _line(surface, SPINE, start, end, LINE_THICKNESS)

        _text(surface, snake.name, head.x, head.y, 32, BLACK)

    joints_line, factor_line = world.status_lines()
    _text(surface, joints_line, 10, world.height - 55, 20, WHITE)
    _text(surface, factor_line, 10, world.height - 25, 20, WHITE)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snakesim", description="Snakes chasing food.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--frames", type=int, default=0, help="stop after this many frames (0 runs until closed)"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the simulation until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        world = World(random.Random(args.seed))
        screen = pygame.display.set_mode((world.width, world.height))
        pygame.display.set_caption("Snakes")
        clock = pygame.time.Clock()
        start = time.monotonic()
        paused = False
        frames = 0

        while True:
            dt = clock.tick(TARGET_FPS) / 1000.0
            now = time.monotonic() - start

            quit_requested = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quit_requested = True
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_r:
                        world.reset()
                    elif event.key in (pygame.K_p, pygame.K_SPACE):
                        paused = not paused
            if quit_requested:
                break

            if not paused:
                world.step(dt, now)

            draw_world(screen, world, now)
            _text(screen, f"{clock.get_fps():.0f} FPS", 10, 10, 20, (0, 228, 48, 255))
            pygame.display.flip()

            frames += 1
            if args.frames and frames >= args.frames:
                break
    finally:
        _fonts.clear()
        pygame.quit()
    return 0