"""Snake world state: spawning, movement, feeding and collisions."""

from __future__ import annotations

import itertools
import math
import random
from dataclasses import dataclass

from .chain import Chain
from .vector import Vector

Color = tuple[int, int, int, int]

SCREEN_WIDTH = 1600
SCREEN_HEIGHT = 1200
MIN_SPEED = 100.0
MAX_SPEED = 200.0
NUM_SNAKES = 7

COLLISION_TIME = 1.5
HEALTH_CHECK = 5.0
DIGESTION = 3.0

SMELL_DISTANCE = 500.0
FOOD_BORDER = 100.0

GOLD: Color = (255, 203, 0, 255)
COLLISION_ADD_COLOR: Color = (0, 255, 0, 153)
COLLISION_DELETE_COLOR: Color = (255, 0, 0, 153)


@dataclass
class Snake:
    """A snake: a moving head position dragging a chain of joints."""

    name: str
    pos: Vector
    vel: Vector
    chain: Chain
    color: Color
    body_factor: float
    radius: float
    collision_time: float = 0.0
    collision_color: Color = (0, 0, 0, 0)
    ate_time: float = 0.0


@dataclass
class Food:
    """A piece of food lying in the world."""

    pos: Vector
    radius: float


def clamp_speed(v: float, lo: float, hi: float) -> float:
    """Clamp the magnitude of v into [lo, hi], keeping its sign (zero counts as positive)."""
    sign = -1.0 if v < 0 else 1.0
    magnitude = abs(v)
    if magnitude < lo:
        return lo * sign
    if magnitude > hi:
        return hi * sign
    return magnitude * sign


def body_width(index: int, body_factor: float) -> float:
    """Width of the body at the given joint index."""
    if index == 0:
        size = 74.0
    elif index == 1:
        size = 80.0
    else:
        size = float(64 - index)
    return size * body_factor


def random_color(rng: random.Random) -> Color:
    """An opaque colour with random channels."""
    return (rng.randrange(255), rng.randrange(255), rng.randrange(255), 255)


def resolve_collision_with_mass(
    s1: Snake, s2: Snake, dx: float, dy: float, distance: float
) -> None:
    """Push two overlapping snakes apart and exchange momentum by their masses."""
    nx = dx / distance
    ny = dy / distance

    mass1 = math.pi * s1.radius * s1.radius
    mass2 = math.pi * s2.radius * s2.radius
    total = mass1 + mass2

    overlap = s1.radius + s2.radius - distance
    sep1 = overlap * (mass2 / total)
    sep2 = overlap * (mass1 / total)

    s1.pos = Vector(s1.pos.x - nx * sep1, s1.pos.y - ny * sep1)
    s2.pos = Vector(s2.pos.x + nx * sep2, s2.pos.y + ny * sep2)

    rel_x = s2.vel.x - s1.vel.x
    rel_y = s2.vel.y - s1.vel.y
    speed = rel_x * nx + rel_y * ny
    if speed > 0:
        return

    restitution = 1.0
    impulse = (1.0 + restitution) * speed / (1.0 / mass1 + 1.0 / mass2)
    impulse_x = impulse * nx
    impulse_y = impulse * ny

    s1.vel = Vector(s1.vel.x + impulse_x / mass1, s1.vel.y + impulse_y / mass1)
    s2.vel = Vector(s2.vel.x, s2.vel.y - impulse_x / mass2 - impulse_y / mass2)


class World:
    """All snakes and the food, advanced one frame at a time."""

    def __init__(
        self,
        rng: random.Random | None = None,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height
        self.snakes: list[Snake] = []
        self.food = Food(Vector(0.0, 0.0), 0.0)
        self.health_ticker = 0.0
        self.reset()

    def reset(self) -> None:
        """Spawn a fresh set of snakes and a new piece of food."""
        self.spawn_snakes()
        self.spawn_food()

    def spawn_food(self) -> None:
        """Place food of random size away from the borders."""
        rng = self.rng
        radius = rng.random() * 30 + 10
        pos = Vector(
            FOOD_BORDER + rng.random() * (self.width - 2 * FOOD_BORDER),
            FOOD_BORDER + rng.random() * (self.height - 2 * FOOD_BORDER),
        )
        self.food = Food(pos, radius)

    def spawn_snakes(self) -> None:
        """Replace all snakes with newly generated ones."""
        rng = self.rng
        snakes = []
        for i in range(NUM_SNAKES):
            factor = rng.random() * 0.4 + 0.15
            radius = body_width(0, factor)
            speed = MIN_SPEED + rng.random() * (MAX_SPEED - MIN_SPEED)
            angle = rng.random() * math.pi * 2
            pos = Vector(
                radius + (rng.random() * self.width - 2 * radius),
                radius + (rng.random() * self.height - 2 * radius),
            )
            vel = Vector(math.cos(angle) * speed, math.sin(angle) * speed)
            chain = Chain(
                pos,
                rng.randrange(18) + 12,
                rng.randrange(24) + 12,
                math.pi / (rng.random() * 4 + 4),
            )
            chain.resolve(pos)
            snakes.append(
                Snake(
                    name=str(i),
                    pos=pos,
                    vel=vel,
                    chain=chain,
                    color=random_color(rng),
                    body_factor=factor,
                    radius=radius,
                )
            )
        self.snakes = snakes

    def smells_food(self, snake: Snake) -> None:
        """Steer a snake that is near the food straight at it, 50% faster."""
        delta = self.food.pos - snake.chain.joints[0]
        distance = delta.magnitude()
        if 0 < distance < SMELL_DISTANCE:
            direction = delta / distance
            snake.vel = direction * (snake.vel.magnitude() * 1.5)

    def update(self, dt: float, now: float) -> None:
        """Move every snake by its velocity and bounce it off the walls."""
        for snake in self.snakes:
            if now - snake.collision_time > COLLISION_TIME:
                self.smells_food(snake)

        for snake in self.snakes:
            factor = 1.0
            if snake.ate_time > 0 and now - snake.ate_time < HEALTH_CHECK:
                factor = 0.5

            x = snake.pos.x + snake.vel.x * factor * dt
            y = snake.pos.y + snake.vel.y * factor * dt
            vx, vy = snake.vel.x, snake.vel.y
            r = snake.radius

            if x - r <= 0:
                x, vx = r, -vx
            elif x + r >= self.width:
                x, vx = self.width - r, -vx

            if y - r <= 0:
                y, vy = r, -vy
            elif y + r >= self.height:
                y, vy = self.height - r, -vy

            snake.pos = Vector(x, y)
            snake.vel = Vector(
                clamp_speed(vx, MIN_SPEED, MAX_SPEED),
                clamp_speed(vy, MIN_SPEED, MAX_SPEED),
            )
            snake.chain.resolve(snake.pos)

    def check_picnic(self, now: float) -> None:
        """Let any snake whose head touches the food eat it and grow."""
        for snake in self.snakes:
            distance = (self.food.pos - snake.chain.joints[0]).magnitude()
            if 0 < distance < snake.radius + self.food.radius:
                snake.collision_color = GOLD
                snake.collision_time = now
                snake.ate_time = now
                gain = math.sqrt(self.food.radius) / 100.0
                snake.body_factor += gain
                print(f"{snake.name} ate food f={gain:.2f}")
                self.spawn_food()

    def check_collisions(self, now: float) -> None:
        """Remove one unhealthy snake, then resolve head-on collisions between snakes."""
        delete_index = None
        for index, snake in enumerate(self.snakes):
            n = len(snake.chain.joints)
            f = snake.body_factor
            if n < 6 or n > 50 or f < 0.1 or f > 0.75:
                print(f"Deleting {snake.name}, f={f:.2f}, joints={n}")
                delete_index = index
        if delete_index is not None:
            del self.snakes[delete_index]

        for s1, s2 in itertools.combinations(self.snakes, 2):
            delta = s2.chain.joints[0] - s1.chain.joints[0]
            distance = delta.magnitude()
            if not 0 < distance < s1.radius + s2.radius:
                continue

            if now - s1.collision_time > COLLISION_TIME and now - s2.collision_time > COLLISION_TIME:
                s1.collision_time = now
                s2.collision_time = now
                if s1.vel.magnitude() > s2.vel.magnitude():
                    winner, loser = s1, s2
                else:
                    winner, loser = s2, s1

                count = max(1, math.floor(0.05 * len(winner.chain.joints) + 0.5))
                print(f"Exchange {count} joints between {winner.name} (winner) and {loser.name}")
                for _ in range(count):
                    winner.chain.add_joint()
                    loser.chain.delete_joint()

                winner.collision_color = COLLISION_ADD_COLOR
                loser.collision_color = COLLISION_DELETE_COLOR

            resolve_collision_with_mass(s1, s2, delta.x, delta.y, distance)
            s1.chain.resolve(s1.pos)
            s2.chain.resolve(s2.pos)

    def health_check(self) -> None:
        """Starve every snake a little."""
        print(f"Health check: {self.food.pos}, {self.food.radius:.1f}")
        for snake in self.snakes:
            snake.body_factor *= 0.95

    def step(self, dt: float, now: float) -> None:
        """Advance the world by one frame."""
        self.update(dt, now)
        self.check_picnic(now)
        self.check_collisions(now)
        if now - self.health_ticker > HEALTH_CHECK:
            self.health_ticker = now
            self.health_check()

    def status_lines(self) -> tuple[str, str]:
        """The joint-count line and the body-factor line shown at the bottom."""
        joints = "Joints:  " + "".join(
            f"[{s.name}]: {len(s.chain.joints):3d}  " for s in self.snakes
        )
        factors = "Factor:  " + "".join(
            f"[{s.name}]: {int(s.body_factor * 100):3d}  " for s in self.snakes
        )
        return joints, factors