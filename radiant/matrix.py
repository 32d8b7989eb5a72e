"""Row-major float matrices with 4x4 transform and projection builders."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, Union

from radiant.fastmath import PI_OVER_180

Index = Union[int, "tuple[int, int]"]


@dataclass(frozen=True)
class Matrix:
    """An immutable rows x columns matrix stored in row-major order."""

    rows: int
    columns: int
    values: Sequence[float]

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.columns <= 0:
            raise ValueError("matrix dimensions must be positive")
        values = tuple(float(v) for v in self.values)
        if len(values) != self.rows * self.columns:
            raise ValueError(
                f"expected {self.rows * self.columns} values, got {len(values)}"
            )
        object.__setattr__(self, "values", values)

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    def _require_same_shape(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            raise TypeError(f"expected Matrix, got {type(other).__name__}")
        if other.shape != self.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")
        return other

    def _elementwise(self, other: "Matrix", op: Callable[[float, float], float]) -> "Matrix":
        return Matrix(
            self.rows, self.columns, [op(a, b) for a, b in zip(self.values, other.values)]
        )

    def _map(self, op: Callable[[float], float]) -> "Matrix":
        return Matrix(self.rows, self.columns, [op(a) for a in self.values])

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(self._require_same_shape(other), lambda a, b: a + b)

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(self._require_same_shape(other), lambda a, b: a - b)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.columns != other.rows:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        a_rows = [self.values[r * self.columns:(r + 1) * self.columns] for r in range(self.rows)]
        b_cols = [other.values[c::other.columns] for c in range(other.columns)]
        return Matrix(
            self.rows,
            other.columns,
            [sum(x * y for x, y in zip(row, col)) for row in a_rows for col in b_cols],
        )

    def __mul__(self, scalar: object) -> "Matrix":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self._map(lambda a: a * scalar)

    __rmul__ = __mul__

    def __getitem__(self, index: Index) -> float:
        if isinstance(index, tuple):
            row, column = index
            if not (0 <= row < self.rows and 0 <= column < self.columns):
                raise IndexError(f"index {index} out of range for shape {self.shape}")
            return self.values[row * self.columns + column]
        return self.values[index]

    def __str__(self) -> str:
        lines = []
        for r in range(self.rows):
            row = self.values[r * self.columns:(r + 1) * self.columns]
            lines.append(" " + "".join(f" {value:.3f} " for value in row) + "\n")
        return "".join(lines)

    def add_scalar(self, scalar: float) -> "Matrix":
        """Add a scalar to every element."""
        return self._map(lambda a: a + scalar)

    def subtract_scalar(self, scalar: float) -> "Matrix":
        """Subtract a scalar from every element."""
        return self._map(lambda a: a - scalar)

    def multiply_piecewise(self, other: "Matrix") -> "Matrix":
        """Element-wise product with a matrix of the same shape."""
        return self._elementwise(self._require_same_shape(other), lambda a, b: a * b)

    def cut(self, width: int, stride: int, offset: int) -> tuple[float, ...]:
        """Take runs of `width` elements every `stride` elements, starting at `offset`."""
        if width <= 0 or stride <= 0:
            raise ValueError("width and stride must be positive")
        if width > stride:
            raise ValueError("width must not exceed stride")
        if offset < 0:
            raise ValueError("offset must not be negative")
        count = len(self.values)
        result: list[float] = []
        for start in range(offset, count, stride):
            if start + width > count:
                raise IndexError("cut runs past the end of the matrix")
            result.extend(self.values[start:start + width])
        return tuple(result)


def _three(values: Iterable[float], what: str) -> tuple[float, float, float]:
    items = tuple(values)
    if len(items) != 3:
        raise ValueError(f"{what} needs 3 components, got {len(items)}")
    return items[0], items[1], items[2]


def identity(size: int) -> Matrix:
    """Square identity matrix."""
    return Matrix(
        size, size, [1.0 if r == c else 0.0 for r in range(size) for c in range(size)]
    )


def zeros(rows: int, columns: int) -> Matrix:
    """Matrix filled with zeros."""
    return Matrix(rows, columns, [0.0] * (rows * columns))


def ones(rows: int, columns: int) -> Matrix:
    """Matrix filled with ones."""
    return Matrix(rows, columns, [1.0] * (rows * columns))


def perspective_projection(fov: float, aspect_ratio: float, near: float, far: float) -> Matrix:
    """4x4 perspective projection from a vertical field of view in degrees."""
    top = near * math.tan((fov / 2.0) * PI_OVER_180)
    right = top * aspect_ratio
    depth = far - near
    return Matrix(4, 4, [
        near / right, 0.0, 0.0, 0.0,
        0.0, near / top, 0.0, 0.0,
        0.0, 0.0, -(far + near) / depth, -(2.0 * far * near) / depth,
        0.0, 0.0, -1.0, 0.0,
    ])


def orthographic_projection(
    left: float, right: float, top: float, bottom: float, near: float, far: float
) -> Matrix:
    """4x4 orthographic projection."""
    return Matrix(4, 4, [
        2.0 / (right - left), 0.0, 0.0, -(right + left) / (right - left),
        0.0, 2.0 / (top - bottom), 0.0, -(top + bottom) / (top - bottom),
        0.0, 0.0, -2.0 / (far - near), -(far + near) / (far - near),
        0.0, 0.0, 0.0, 1.0,
    ])


def translation(offset: Iterable[float]) -> Matrix:
    """4x4 translation by a 3-component offset."""
    x, y, z = _three(offset, "translation")
    return Matrix(4, 4, [
        1.0, 0.0, 0.0, x,
        0.0, 1.0, 0.0, y,
        0.0, 0.0, 1.0, z,
        0.0, 0.0, 0.0, 1.0,
    ])


def rotation(angles: Iterable[float]) -> Matrix:
    """4x4 rotation from three angles in radians (about x, y and z)."""
    theta, phi, omega = _three(angles, "rotation")
    sin_t, cos_t = math.sin(theta), math.cos(theta)
    sin_p, cos_p = math.sin(phi), math.cos(phi)
    sin_o, cos_o = math.sin(omega), math.cos(omega)
    return Matrix(4, 4, [
        cos_p * cos_o,
        sin_p * cos_o * sin_t - sin_o * cos_t,
        -sin_p * cos_o * cos_t - sin_o * sin_t,
        0.0,
        cos_p * sin_o,
        cos_o * cos_t + sin_p * sin_o * sin_t,
        cos_o * sin_t - sin_p * sin_o * cos_t,
        0.0,
        sin_p,
        -cos_p * sin_t,
        cos_p * cos_t,
        0.0,
        0.0, 0.0, 0.0, 1.0,
    ])


def scale(factors: Iterable[float]) -> Matrix:
    """4x4 scaling by three factors."""
    x, y, z = _three(factors, "scale")
    return Matrix(4, 4, [
        x, 0.0, 0.0, 0.0,
        0.0, y, 0.0, 0.0,
        0.0, 0.0, z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ])