"""Axis-aligned 2D box physics with impulse-based collision response."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Iterable

from radiant.vector import Vector2

_log = logging.getLogger(__name__)


class BBoxType(enum.IntEnum):
    """Kinds of bounding box."""

    AXIS_ALIGNED = 0
    NON_AXIS_ALIGNED = 1


@dataclass
class PhysicsMaterial:
    """Named material giving a box its density and bounciness."""

    name: str
    density: float
    restitution: float


@dataclass(eq=False)
class BBox2D:
    """A simulated 2D box; compared by identity."""

    type: BBoxType
    id: int
    center: Vector2
    size: Vector2
    mass: float
    theta: float
    material: PhysicsMaterial
    velocity: Vector2 = field(default_factory=Vector2)
    acceleration: Vector2 = field(default_factory=Vector2)
    gravity_scale: float = 1.0


def _vec2(values: Iterable[float], what: str) -> Vector2:
    if isinstance(values, Vector2):
        return values
    items = tuple(values)
    if len(items) != 2:
        raise ValueError(f"{what} needs 2 components, got {len(items)}")
    return Vector2(float(items[0]), float(items[1]))


class PhysicsWorld:
    """A set of boxes stepped forward in time together."""

    def __init__(self, gravity: float = 0.0) -> None:
        self.gravity = gravity
        self.time = 0.0
        self._boxes: list[BBox2D] = []

    def set_gravity(self, acceleration: float) -> None:
        """Set the world's gravity acceleration."""
        self.gravity = acceleration

    def add_box(
        self,
        box_type: BBoxType,
        material: PhysicsMaterial,
        center: Iterable[float],
        size: Iterable[float],
        theta: float = 0.0,
    ) -> BBox2D:
        """Create a box at rest, with mass from its area and the material density."""
        center_v = _vec2(center, "center")
        size_v = _vec2(size, "size")
        box = BBox2D(
            type=BBoxType(box_type),
            id=len(self._boxes),
            center=center_v,
            size=size_v,
            mass=(size_v.x * size_v.y) * material.density,
            theta=theta,
            material=material,
        )
        self._boxes.append(box)
        return box

    def remove_box(self, box: BBox2D) -> None:
        """Remove a box from the world; ValueError if it is not in it."""
        for index, candidate in enumerate(self._boxes):
            if candidate is box:
                del self._boxes[index]
                return
        raise ValueError("box is not part of this world")

    def boxes(self) -> tuple[BBox2D, ...]:
        """The boxes in the order they were added."""
        return tuple(self._boxes)

    def update(self, dt: float) -> None:
        """Advance the simulation by dt.

        Each box is integrated in turn and then checked against every box
        before it. The pass ends as soon as a checked pair is found apart,
        leaving later boxes untouched for this step.
        """
        self.time += dt
        for i, a in enumerate(self._boxes):
            a.velocity = a.velocity + a.acceleration * dt
            a.center = a.center + a.velocity * dt

            for b in self._boxes[:i]:
                distance = b.center - a.center
                abs_distance = abs(distance)
                region = a.size + b.size

                if abs_distance.x > region.x or abs_distance.y > region.y:
                    return

                relative_velocity = b.velocity - a.velocity

                if abs_distance.x >= abs_distance.y:
                    push = region.x - abs_distance.x
                    if distance.x < 0:
                        normal, offset = Vector2(1.0, 0.0), Vector2(-push, 0.0)
                    else:
                        normal, offset = Vector2(-1.0, 0.0), Vector2(push, 0.0)
                else:
                    push = region.y - abs_distance.y
                    if distance.y < 0:
                        normal, offset = Vector2(0.0, 1.0), Vector2(0.0, -push)
                    else:
                        normal, offset = Vector2(0.0, -1.0), Vector2(0.0, push)

                _log.debug("collision normal: %f, %f", normal.x, normal.y)

                b.center = b.center + offset

                along_normal = relative_velocity.dot(normal)
                if (along_normal > 0 and distance.x < 0) or (
                    along_normal < 0 and distance.x > 0
                ):
                    epsilon = min(a.material.restitution, b.material.restitution)
                    coefficient = -(1 + epsilon) * along_normal
                    coefficient /= (1 / a.mass) + (1 / b.mass)
                    _log.debug("impulse coefficient=%f", coefficient)
                    impulse = normal * coefficient
                    a.velocity = a.velocity - impulse * (1 / a.mass)
                    b.velocity = b.velocity + impulse * (1 / b.mass)