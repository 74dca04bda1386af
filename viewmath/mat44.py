"""4x4 float matrices laid out for OpenGL-style transforms."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from viewmath.vec3 import Vec3f
from viewmath.vec4 import Vec4f

__all__ = ["Mat44f", "SingularMatrixError"]

_SINGULAR_THRESHOLD = 0.00001

Row = Tuple[float, float, float, float]


class SingularMatrixError(ValueError):
    """Raised when a matrix cannot be inverted."""


def _det3(m: Sequence[Sequence[float]]) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


class Mat44f:
    """A 4x4 matrix indexed as ``m[row, col]`` from zero.

    Arithmetic methods modify the matrix in place; constructors such as
    :meth:`identity` or :meth:`translation` return new matrices.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Optional[Iterable[Iterable[float]]] = None) -> None:
        if rows is None:
            self._rows = [[0.0] * 4 for _ in range(4)]
            return
        parsed = [[float(v) for v in row] for row in rows]
        if len(parsed) != 4 or any(len(row) != 4 for row in parsed):
            raise ValueError("a Mat44f needs exactly 4 rows of 4 values")
        self._rows = parsed

    @property
    def rows(self) -> Tuple[Row, ...]:
        """The rows as nested tuples."""
        return tuple(tuple(row) for row in self._rows)  # type: ignore[misc]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __getitem__(self, key: Tuple[int, int]) -> float:
        row, col = key
        return self._rows[row][col]

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        row, col = key
        self._rows[row][col] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat44f):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Mat44f({self.rows!r})"

    def __matmul__(self, other: Mat44f) -> Mat44f:
        result = self.copy()
        result.multiply(other)
        return result

    def set_row(self, row: int, a: float, b: float, c: float, d: float) -> None:
        """Replace row ``row`` (0 to 3) with the given values."""
        if not 0 <= row < 4:
            raise IndexError(f"row index {row} out of range 0..3")
        self._rows[row] = [float(a), float(b), float(c), float(d)]

    def clear(self) -> None:
        """Set every element to zero."""
        self._rows = [[0.0] * 4 for _ in range(4)]

    def add(self, other: Mat44f) -> None:
        """Add ``other`` element by element."""
        self._rows = [[a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]

    def subtract(self, other: Mat44f) -> None:
        """Subtract ``other`` element by element."""
        self._rows = [[a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]

    def multiply(self, other: Mat44f) -> None:
        """Replace this matrix with the product ``self x other``."""
        columns = list(zip(*other._rows))
        self._rows = [
            [sum(a * b for a, b in zip(row, col)) for col in columns] for row in self._rows
        ]

    def product_by_scalar(self, scalar: float) -> None:
        """Multiply every element by ``scalar``."""
        self._rows = [[v * scalar for v in row] for row in self._rows]

    def product_vector(self, vector: Vec4f) -> Vec4f:
        """Return the product of this matrix with the column vector ``vector``."""
        components = tuple(vector)
        return Vec4f(*(sum(a * b for a, b in zip(row, components)) for row in self._rows))

    def transpose(self) -> None:
        """Transpose in place."""
        self._rows = [list(col) for col in zip(*self._rows)]

    def set_identity(self) -> None:
        """Turn this matrix into the identity."""
        self._rows = [[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)]

    def _minor(self, row: int, col: int) -> float:
        sub = [
            [v for j, v in enumerate(r) if j != col]
            for i, r in enumerate(self._rows)
            if i != row
        ]
        return _det3(sub)

    def determinant(self) -> float:
        """Determinant, expanded along the first column."""
        return sum(
            (-1.0) ** i * self._rows[i][0] * self._minor(i, 0) for i in range(4)
        )

    def inverse(self) -> Mat44f:
        """Return the inverse matrix.

        Raises :class:`SingularMatrixError` when the absolute determinant
        is not above 1e-5.
        """
        det = self.determinant()
        if abs(det) <= _SINGULAR_THRESHOLD:
            raise SingularMatrixError(f"matrix is singular (determinant {det!r})")
        inv_det = 1.0 / det
        return Mat44f(
            [
                [(-1.0) ** (i + j) * inv_det * self._minor(j, i) for j in range(4)]
                for i in range(4)
            ]
        )

    @classmethod
    def identity(cls) -> Mat44f:
        """Return a new identity matrix."""
        matrix = cls()
        matrix.set_identity()
        return matrix

    @classmethod
    def translation(cls, tx: float, ty: float, tz: float) -> Mat44f:
        """Return a translation by ``(tx, ty, tz)``."""
        return cls(
            [
                [1.0, 0.0, 0.0, tx],
                [0.0, 1.0, 0.0, ty],
                [0.0, 0.0, 1.0, tz],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def scale(cls, sx: float, sy: float, sz: float) -> Mat44f:
        """Return a scaling by ``(sx, sy, sz)``."""
        return cls(
            [
                [sx, 0.0, 0.0, 0.0],
                [0.0, sy, 0.0, 0.0],
                [0.0, 0.0, sz, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotate_x(cls, theta: float) -> Mat44f:
        """Return a rotation of ``theta`` radians about the X axis."""
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, -s, 0.0],
                [0.0, s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotate_y(cls, theta: float) -> Mat44f:
        """Return a rotation of ``theta`` radians about the Y axis."""
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            [
                [c, 0.0, s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [-s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotate_z(cls, theta: float) -> Mat44f:
        """Return a rotation of ``theta`` radians about the Z axis."""
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            [
                [c, -s, 0.0, 0.0],
                [s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def perspective(cls, fovy: float, aspect: float, near: float, far: float) -> Mat44f:
        """Return a perspective projection; ``fovy`` is the vertical field of view in radians."""
        sy = 1.0 / math.tan(fovy / 2.0)
        sx = sy / aspect
        sz = (far + near) / (near - far)
        pz = (2.0 * far * near) / (near - far)
        return cls(
            [
                [sx, 0.0, 0.0, 0.0],
                [0.0, sy, 0.0, 0.0],
                [0.0, 0.0, sz, pz],
                [0.0, 0.0, -1.0, 0.0],
            ]
        )

    @classmethod
    def orthogonal(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> Mat44f:
        """Return an orthographic projection of the given box."""
        return cls(
            [
                [2.0 / (right - left), 0.0, 0.0, -((right + left) / (right - left))],
                [0.0, 2.0 / (top - bottom), 0.0, -((top + bottom) / (top - bottom))],
                [0.0, 0.0, -2.0 / (far - near), -((far + near) / (far - near))],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    def apply_transformation(self, vector: Vec3f, direction: bool = False) -> Vec3f:
        """Transform ``vector`` and return the result.

        As a point (the default) the vector gets ``w = 1``; as a direction it
        gets ``w = 0`` and the result is normalized.
        """
        homogeneous = Vec4f(vector.x, vector.y, vector.z, 0.0 if direction else 1.0)
        product = self.product_vector(homogeneous)
        result = Vec3f(product.x, product.y, product.z)
        if direction:
            result.normalize()
        return result

    def column_major(self) -> Tuple[float, ...]:
        """The 16 elements in column-major order, as a graphics API expects."""
        return tuple(v for col in zip(*self._rows) for v in col)

    def copy(self) -> Mat44f:
        """Return an independent copy."""
        return Mat44f(self._rows)