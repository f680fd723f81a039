"""3x3 affine transformation matrices for 2D work."""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Union

from .vec2 import IVec2, Vec2

_IDENTITY = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


class TransformationMatrix:
    """A 3x3 matrix acting on 2D points in homogeneous coordinates."""

    def __init__(self, rows: Iterable[Sequence[float]] | None = None) -> None:
        if rows is None:
            self.reset()
            return
        self._rows = [[float(value) for value in row] for row in rows]
        if len(self._rows) != 3 or any(len(row) != 3 for row in self._rows):
            raise ValueError("a transformation matrix needs 3 rows of 3 values")

    def reset(self) -> None:
        """Set this matrix to the identity."""
        self._rows = [list(row) for row in _IDENTITY]

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return tuple(self._rows[index])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        self._rows[row][col] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransformationMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rows!r})"

    def __mul__(self, other: object) -> Union[TransformationMatrix, Vec2]:
        if isinstance(other, TransformationMatrix):
            columns = list(zip(*other._rows))
            return TransformationMatrix(
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self._rows
            )
        if isinstance(other, IVec2):
            other = other.to_vec2()
        if isinstance(other, Vec2):
            (m00, m01, m02), (m10, m11, m12), _ = self._rows
            return Vec2(
                m00 * other.x + m01 * other.y + m02,
                m10 * other.x + m11 * other.y + m12,
            )
        return NotImplemented

    def __imul__(self, other: object) -> TransformationMatrix:
        if not isinstance(other, TransformationMatrix):
            return NotImplemented
        product = self * other
        self._rows = product._rows
        return self


def translation_matrix(translate: Vec2 | IVec2) -> TransformationMatrix:
    """Return a matrix that moves points by ``translate``."""
    matrix = TransformationMatrix()
    matrix[0, 2] = translate.x
    matrix[1, 2] = translate.y
    return matrix


def scale_matrix(scale: float | Vec2) -> TransformationMatrix:
    """Return a matrix that scales uniformly or per axis."""
    if isinstance(scale, (int, float)):
        sx = sy = scale
    else:
        sx, sy = scale.x, scale.y
    matrix = TransformationMatrix()
    matrix[0, 0] = sx
    matrix[1, 1] = sy
    return matrix


def rotation_matrix(theta: float) -> TransformationMatrix:
    """Return a matrix rotating counter-clockwise by ``theta`` radians."""
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    matrix = TransformationMatrix()
    matrix[0, 0] = cos_t
    matrix[0, 1] = -sin_t
    matrix[1, 0] = sin_t
    matrix[1, 1] = cos_t
    return matrix