# snakesim

A small 2D simulation of snakes. Every snake's body is a chain of joints. The
head eases towards a moving point. Each joint after it stays one link length
from the joint before it and can bend only a limited angle. Snakes wander
around the window and bounce off its edges. A snake within 500 pixels of the
food turns towards it and speeds up. A snake that eats the food grows and then
moves at half speed for a while. When two snake heads collide, the snakes swap
joints: the faster one gains joints and the slower one loses them. Every five
seconds all snakes lose some body mass. A snake whose joint count or body
factor goes out of bounds is removed.

## Installation

```
pip install .
```

This installs pygame as well.

## Running

```
snakesim
```

Options:

- `--seed N` seeds the random generator, so the same snakes and food appear
  each run.
- `--frames N` stops after N frames. The default of 0 runs until the window
  is closed.

Keys:

- `R` starts again with new snakes and new food.
- `P` or `Space` pauses and resumes.
- Close the window to quit.

The frame rate is shown in the top-left corner. Each snake's joint count and
body factor appear along the bottom of the window. Eating, joint exchanges,
removals and the periodic health check are printed to standard output.

## Using the pieces

The geometry and the simulation do not need a window:

```python
import random

from snakesim.vector import Vector
from snakesim.chain import Chain
from snakesim.simulation import World

chain = Chain(Vector(100, 100), 10, 20, 0.5)
chain.resolve(Vector(150, 120))

world = World(random.Random(1), 1600, 1200)
world.step(1 / 60, 0.0)
print("\n".join(world.status_lines()))
```

- `snakesim.vector` has the immutable `Vector` class, with arithmetic
  operators, `magnitude`, `normalize`, `set_mag`, `angle`, `rotate`, `lerp`
  and related methods. It also has `from_angle`, `constrain_distance`,
  `constrain_distance_symmetric` and `vector_demo`, which prints a short
  demonstration.
- `snakesim.angles` has the angle helpers that the chain uses:
  `simplify_angle`, `relative_angle_diff` and `constrain_angle`.
- `snakesim.chain` has `Chain`, with `resolve`, `add_joint` and
  `delete_joint`.
- `snakesim.simulation` has `World`, `Snake` and `Food`, and the helpers
  `clamp_speed`, `body_width`, `resolve_collision_with_mass` and
  `random_color`. `World` creates its snakes and food when it is made.
  `World.step(dt, now)` advances it by one frame. `World.reset()` starts it
  again.
- `snakesim.app` has `draw_world`, which renders a world onto a pygame
  surface, and `main`, which the `snakesim` command runs.

## Tests

```
pip install .[test]
pytest
```