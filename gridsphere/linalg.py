"""Three-component vectors, 4x4 row-major matrices and the usual transform builders.

Vectors are treated as row vectors: a point is transformed by ``v @ M``, so
composite transforms read left to right (scale, rotate, translate).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

_SIZE = 4


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: Vector3) -> float:
        """Return the scalar product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Return the vector product with ``other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Return the Euclidean length."""
        squared = self.dot(self)
        return math.sqrt(squared) if squared > 0.0 else squared

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length > 0.0:
            return self / length
        return Vector3()


@dataclass(frozen=True)
class Matrix4x4:
    """An immutable 4x4 matrix stored as a tuple of four row tuples."""

    rows: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
            raise ValueError("a Matrix4x4 needs exactly four rows of four values")
        object.__setattr__(self, "rows", rows)

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self.rows[index]

    def __add__(self, other: Matrix4x4) -> Matrix4x4:
        return Matrix4x4(
            tuple(a + b for a, b in zip(row_a, row_b))
            for row_a, row_b in zip(self.rows, other.rows)
        )

    def __sub__(self, other: Matrix4x4) -> Matrix4x4:
        return Matrix4x4(
            tuple(a - b for a, b in zip(row_a, row_b))
            for row_a, row_b in zip(self.rows, other.rows)
        )

    def __matmul__(self, other: Matrix4x4) -> Matrix4x4:
        columns = tuple(zip(*other.rows))
        return Matrix4x4(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in self.rows
        )

    def inverse(self) -> Matrix4x4:
        """Return the inverse matrix; raise ValueError when the matrix is singular."""
        work = [list(row) + [1.0 if i == j else 0.0 for j in range(_SIZE)]
                for i, row in enumerate(self.rows)]
        for col in range(_SIZE):
            pivot = max(range(col, _SIZE), key=lambda r: abs(work[r][col]))
            if work[pivot][col] == 0.0:
                raise ValueError("matrix is singular and has no inverse")
            work[col], work[pivot] = work[pivot], work[col]
            pivot_value = work[col][col]
            work[col] = [value / pivot_value for value in work[col]]
            for r, row in enumerate(work):
                if r != col and row[col] != 0.0:
                    factor = row[col]
                    work[r] = [value - factor * p for value, p in zip(row, work[col])]
        return Matrix4x4(row[_SIZE:] for row in work)

    def transpose(self) -> Matrix4x4:
        """Return the transposed matrix."""
        return Matrix4x4(zip(*self.rows))


def _matrix(rows: Iterable[Sequence[float]]) -> Matrix4x4:
    return Matrix4x4(tuple(tuple(row) for row in rows))


def make_identity() -> Matrix4x4:
    """Return the 4x4 identity matrix."""
    return _matrix(
        [1.0 if i == j else 0.0 for j in range(_SIZE)] for i in range(_SIZE)
    )


def make_translate_matrix(translate: Vector3) -> Matrix4x4:
    """Return a translation matrix."""
    return _matrix([
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (translate.x, translate.y, translate.z, 1.0),
    ])


def make_scale_matrix(scale: Vector3) -> Matrix4x4:
    """Return a scale matrix."""
    return _matrix([
        (scale.x, 0.0, 0.0, 0.0),
        (0.0, scale.y, 0.0, 0.0),
        (0.0, 0.0, scale.z, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    ])


def make_rotate_x_matrix(radian: float) -> Matrix4x4:
    """Return a rotation about the X axis."""
    c, s = math.cos(radian), math.sin(radian)
    return _matrix([
        (1.0, 0.0, 0.0, 0.0),
        (0.0, c, s, 0.0),
        (0.0, -s, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    ])


def make_rotate_y_matrix(radian: float) -> Matrix4x4:
    """Return a rotation about the Y axis."""
    c, s = math.cos(radian), math.sin(radian)
    return _matrix([
        (c, 0.0, -s, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (s, 0.0, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    ])


def make_rotate_z_matrix(radian: float) -> Matrix4x4:
    """Return a rotation about the Z axis."""
    c, s = math.cos(radian), math.sin(radian)
    return _matrix([
        (c, s, 0.0, 0.0),
        (-s, c, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    ])


def make_affine_matrix(scale: Vector3, rotate: Vector3, translate: Vector3) -> Matrix4x4:
    """Return scale, then rotation (X @ (Y @ Z)), then translation, combined."""
    rotation = make_rotate_x_matrix(rotate.x) @ (
        make_rotate_y_matrix(rotate.y) @ make_rotate_z_matrix(rotate.z)
    )
    return make_scale_matrix(scale) @ rotation @ make_translate_matrix(translate)


def make_perspective_fov_matrix(
    fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Return a left-handed perspective projection with depth mapped to [0, 1]."""
    cot = 1.0 / math.tan(fov_y / 2.0)
    depth = far_clip - near_clip
    return _matrix([
        (cot / aspect_ratio, 0.0, 0.0, 0.0),
        (0.0, cot, 0.0, 0.0),
        (0.0, 0.0, far_clip / depth, 1.0),
        (0.0, 0.0, -near_clip * far_clip / depth, 0.0),
    ])


def make_orthographic_matrix(
    left: float, top: float, right: float, bottom: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Return an orthographic projection onto normalised device coordinates."""
    return _matrix([
        (2.0 / (right - left), 0.0, 0.0, 0.0),
        (0.0, 2.0 / (top - bottom), 0.0, 0.0),
        (0.0, 0.0, 1.0 / (far_clip - near_clip), 0.0),
        (
            (right + left) / (left - right),
            (top + bottom) / (bottom - top),
            near_clip / (near_clip - far_clip),
            1.0,
        ),
    ])


def make_viewport_matrix(
    left: float, top: float, width: float, height: float, min_depth: float, max_depth: float
) -> Matrix4x4:
    """Return the matrix that maps device coordinates to screen coordinates."""
    return _matrix([
        (width / 2.0, 0.0, 0.0, 0.0),
        (0.0, -height / 2.0, 0.0, 0.0),
        (0.0, 0.0, max_depth - min_depth, 0.0),
        (left + width / 2.0, top + height / 2.0, min_depth, 1.0),
    ])


def transform(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point by ``matrix`` and divide by the resulting w."""
    homogeneous = (vector.x, vector.y, vector.z, 1.0)
    x, y, z, w = (
        sum(component * value for component, value in zip(homogeneous, column))
        for column in zip(*matrix.rows)
    )
    if w == 0.0:
        raise ValueError("transformed point has w == 0")
    return Vector3(x / w, y / w, z / w)


def format_matrix(matrix: Matrix4x4, label: str) -> str:
    """Render a matrix as a label line followed by four rows of fixed-width values."""
    lines = [label]
    lines.extend("".join(f"{value:6.2f}" for value in row) for row in matrix.rows)
    return "\n".join(lines)


def format_vector(vector: Vector3, label: str) -> str:
    """Render a vector's components to two decimals, followed by its label."""
    return f"{vector.x:.2f} {vector.y:.2f} {vector.z:.2f} {label}"