"""Small immutable 2, 3 and 4 component float vectors."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from radiant.fastmath import fast_inverse_square_root, fast_square_root


def _require_same(a: Any, b: Any) -> None:
    if not isinstance(b, type(a)):
        raise TypeError(f"expected {type(a).__name__}, got {type(b).__name__}")


def _combine(a: Any, b: Any, op: Callable[[float, float], float]) -> Any:
    return type(a)(*map(op, a, b))


def _scaled(v: Any, scalar: float) -> Any:
    return type(v)(*(c * scalar for c in v))


def _dot(a: Any, b: Any) -> float:
    _require_same(a, b)
    return sum(x * y for x, y in zip(a, b))


def _magnitude(v: Any) -> float:
    return fast_square_root(sum(c * c for c in v))


def _normalized(v: Any) -> Any:
    return _scaled(v, fast_inverse_square_root(sum(c * c for c in v)))


def _angle(a: Any, b: Any) -> float:
    _require_same(a, b)
    cosine = _dot(a, b) * _magnitude(a) * _magnitude(b)
    if not -1.0 <= cosine <= 1.0:
        return math.nan
    return math.acos(cosine)


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float))


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return _combine(self, other, operator.add)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return _combine(self, other, operator.sub)

    def __mul__(self, scalar: object) -> Vector2:
        if not _is_scalar(scalar):
            return NotImplemented
        return _scaled(self, scalar)  # type: ignore[arg-type]

    __rmul__ = __mul__

    def __abs__(self) -> Vector2:
        return Vector2(abs(self.x), abs(self.y))

    def dot(self, other: Vector2) -> float:
        """Dot product."""
        return _dot(self, other)

    def piecewise_multiply(self, other: Vector2) -> Vector2:
        """Component-wise product."""
        _require_same(self, other)
        return _combine(self, other, operator.mul)

    def magnitude(self) -> float:
        """Approximate length using the fast square root."""
        return _magnitude(self)

    def normalized(self) -> Vector2:
        """Approximate unit vector using the fast inverse square root."""
        return _normalized(self)

    def angle_between(self, other: Vector2) -> float:
        """Arc cosine of the dot product times both magnitudes; NaN outside [-1, 1]."""
        return _angle(self, other)


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return _combine(self, other, operator.add)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return _combine(self, other, operator.sub)

    def __mul__(self, scalar: object) -> Vector3:
        if not _is_scalar(scalar):
            return NotImplemented
        return _scaled(self, scalar)  # type: ignore[arg-type]

    __rmul__ = __mul__

    def dot(self, other: Vector3) -> float:
        """Dot product."""
        return _dot(self, other)

    def piecewise_multiply(self, other: Vector3) -> Vector3:
        """Component-wise product."""
        _require_same(self, other)
        return _combine(self, other, operator.mul)

    def magnitude(self) -> float:
        """Approximate length using the fast square root."""
        return _magnitude(self)

    def normalized(self) -> Vector3:
        """Approximate unit vector using the fast inverse square root."""
        return _normalized(self)

    def cross(self, other: Vector3) -> Vector3:
        """Cross product."""
        _require_same(self, other)
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def angle_between(self, other: Vector3) -> float:
        """Arc cosine of the dot product times both magnitudes; NaN outside [-1, 1]."""
        return _angle(self, other)


@dataclass(frozen=True)
class Vector4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __add__(self, other: object) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return _combine(self, other, operator.add)

    def __sub__(self, other: object) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return _combine(self, other, operator.sub)

    def __mul__(self, scalar: object) -> Vector4:
        if not _is_scalar(scalar):
            return NotImplemented
        return _scaled(self, scalar)  # type: ignore[arg-type]

    __rmul__ = __mul__

    def dot(self, other: Vector4) -> float:
        """Dot product."""
        return _dot(self, other)

    def piecewise_multiply(self, other: Vector4) -> Vector4:
        """Component-wise product."""
        _require_same(self, other)
        return _combine(self, other, operator.mul)

    def magnitude(self) -> float:
        """Approximate length using the fast square root."""
        return _magnitude(self)

    def normalized(self) -> Vector4:
        """Approximate unit vector using the fast inverse square root."""
        return _normalized(self)

    def angle_between(self, other: Vector4) -> float:
        """Arc cosine of the dot product times both magnitudes; NaN outside [-1, 1]."""
        return _angle(self, other)