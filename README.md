# radiant

Building blocks for small games and simulations, in pure Python with no
third-party dependencies.

## Modules

- `radiant.fastmath`: `fast_inverse_square_root` and `fast_square_root`
  give bit-level approximations refined by one Newton step.
  `degrees_to_radians` and `radians_to_degrees` convert angles.
- `radiant.vector`: immutable `Vector2`, `Vector3` and `Vector4`. They support
  `+`, `-`, scalar `*`, `dot`, `piecewise_multiply`, `magnitude`, `normalized`
  and `angle_between`. `Vector2` also supports `abs()`, and `Vector3` adds
  `cross`. `magnitude` and `normalized` use the fast approximations, so their
  results are close to exact but not equal to it.
- `radiant.matrix`: an immutable, row-major `Matrix(rows, columns, values)`.
  - It supports `+`, `-`, `@`, scalar `*`, `add_scalar`, `subtract_scalar` and
    `multiply_piecewise`.
  - Indexing works as `m[i]` or `m[row, column]`.
  - `cut(width, stride, offset)` returns a tuple of runs taken out of the
    packed values.
  - `str()` formats each element with three decimals.
  - Builders: `identity`, `zeros`, `ones`, `translation`, `rotation`, `scale`,
    `perspective_projection` (field of view in degrees) and
    `orthographic_projection`.
- `radiant.physics`: a `PhysicsWorld` of axis-aligned `BBox2D` boxes made of a
  `PhysicsMaterial` (name, density, restitution).
  - `add_box` gives a box a mass equal to its area times the material's density.
  - `update(dt)` integrates each box's acceleration and velocity. It then pushes
    apart overlapping boxes and exchanges impulses between them.
  - A pass ends early as soon as a checked pair of boxes is found apart.
  - The `gravity` value is stored but `update` does not apply it. To make a box
    fall, set its `acceleration`.
- `radiant.events`: `Event`, `EventType` and `ButtonMapping` records, plus
  `is_button_down(state)`. `EventQueue` is a bounded queue with a default
  capacity of 64. Adding to a full queue raises `EventQueueFullError`.
  `next_event()` returns events in order. Once the queue has been read to the
  end, `next_event()` returns `None` and empties it.
- `radiant.clock`: `time_nanos`, `time_millis` and `time_seconds` read the wall
  clock. `Clock` counts ticks and measures the time between them. It reads
  milliseconds from `time_millis` unless you pass a `time_source`.
- `radiant.linkedlist`: a doubly linked `LinkedList` of `LinkedNode`s. It has
  `append`, `remove(node)`, indexing, `len()` and iteration.
- `radiant.textfile`: `TextFile(path, mode)` is a context manager that works
  byte by byte.
  - Methods: `read_line`, `read_character`, `peek_character`, `rewind`,
    `position`, `at_end`, `size` and `read_all`.
  - `read_all` refuses files larger than 4096 bytes.
  - Each byte is read as one character.
- `radiant.logger`: a `Logger` that writes `[Info]`, `[Warning]` and `[Error]`
  lines, with `%`-style arguments. Output goes to a file, to standard output,
  or to both.
- `radiant.strings`: `string_to_int` accepts digits only and raises
  `ValueError` for anything else. Each digit is added before the total is
  multiplied by ten, so `string_to_int("12")` returns `120`.

## Example

```python
from radiant.matrix import perspective_projection, translation
from radiant.physics import BBoxType, PhysicsMaterial, PhysicsWorld
from radiant.vector import Vector2, Vector3

world = PhysicsWorld()
light = PhysicsMaterial("light", density=0.1, restitution=0.9)
heavy = PhysicsMaterial("immovable", density=10.0, restitution=0.5)

box_a = world.add_box(BBoxType.AXIS_ALIGNED, light, (-0.5, 0.75), (0.1, 0.1), 0.0)
box_a.velocity = Vector2(1.5, 0.05)
box_a.acceleration = Vector2(0.0, -0.98)
box_b = world.add_box(BBoxType.AXIS_ALIGNED, heavy, (0.8, 0.35), (0.1, 0.1), 0.0)

for _ in range(500):
    world.update(0.01)

projection = perspective_projection(90.0, 800 / 600, 0.01, 1000.0)
model = translation(Vector3(0.0, 0.0, -1.0))
print(projection @ model)
```

## What it does not do

The package opens no window and draws nothing. It reads no keyboard or mouse
itself: events have to be created and put on an `EventQueue` by your own code.
There is no command-line program.

## Installation and tests

```
pip install .[test]
pytest
```