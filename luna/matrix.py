"""
4x4 matrices for affine transforms and their primitive builders.

Matrices act on column vectors: `m @ v`. Composition is left to the
caller, so `translate(...) @ scale(...)` scales first, then translates.
All rotations are right-handed and take angles in radians.
"""

from __future__ import annotations
import math
from typing import Optional, Sequence, Tuple, Union
import numpy as np

from .vec4 import Vec4

_AFFINE_ROW = np.array([0.0, 0.0, 0.0, 1.0])


class Mat4x4:
    """A 4x4 float64 matrix."""

    __slots__ = ('_m',)

    def __init__(self, rows: Optional[Sequence[Sequence[float]]] = None):
        if rows is None:
            self._m = np.eye(4, dtype=np.float64)
        else:
            self._m = np.array(rows, dtype=np.float64).reshape(4, 4)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Mat4x4:
        """Create Mat4x4 from a 4x4 numpy array."""
        m = cls.__new__(cls)
        m._m = np.array(arr, dtype=np.float64)
        return m

    @classmethod
    def from_rows(cls, *rows: Sequence[float]) -> Mat4x4:
        return cls(rows)

    def __getitem__(self, index) -> float:
        row, col = index
        return float(self._m[row, col])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4x4):
            return NotImplemented
        return np.allclose(self._m, other._m)

    __hash__ = None

    def __repr__(self) -> str:
        rows = ["  [" + ", ".join(f"{c:8.3f}" for c in row) + "]" for row in self._m]
        return "Mat4x4(\n" + ",\n".join(rows) + "\n)"

    def __matmul__(self, other: Union[Mat4x4, Vec4]) -> Union[Mat4x4, Vec4]:
        """Compose with another matrix, or apply to a Vec4."""
        if isinstance(other, Mat4x4):
            return Mat4x4.from_array(self._m @ other._m)
        if isinstance(other, Vec4):
            return Vec4.from_array(self._m @ other._data)
        return NotImplemented

    def transpose(self) -> Mat4x4:
        return Mat4x4.from_array(self._m.T)

    def determinant(self) -> float:
        return float(np.dot(self._m[0], _cofactors(self._m)[0]))

    def inverse(self) -> Mat4x4:
        """Return the inverse as adjugate / determinant.

        A singular matrix is not rejected: dividing by a zero determinant
        fills the result with inf and nan.
        """
        return self.inverse_with_determinant()[0]

    def inverse_with_determinant(self) -> Tuple[Mat4x4, float]:
        """Return the inverse together with the determinant it divided by.

        An affine input (last row exactly [0, 0, 0, 1]) gets an inverse
        whose last row is exactly [0, 0, 0, 1] too, so points keep w = 1.
        """
        cof = _cofactors(self._m)
        det = np.dot(self._m[0], cof[0])
        with np.errstate(divide='ignore', invalid='ignore'):
            inv = cof.T / det
        if np.array_equal(self._m[3], _AFFINE_ROW):
            inv[3] = _AFFINE_ROW
        return Mat4x4.from_array(inv), float(det)

    def approx_equal(self, other: Mat4x4, threshold: float = 1e-6) -> bool:
        return bool(np.all(np.abs(self._m - other._m) <= threshold))

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._m.copy()


def _cofactors(a: np.ndarray) -> np.ndarray:
    cof = np.empty((4, 4), dtype=np.float64)
    for i in range(4):
        for j in range(4):
            minor = np.delete(np.delete(a, i, axis=0), j, axis=1)
            cof[i, j] = (-1.0) ** (i + j) * np.linalg.det(minor)
    return cof


def identity() -> Mat4x4:
    return Mat4x4()


def translate(tx: float, ty: float, tz: float) -> Mat4x4:
    m = np.eye(4, dtype=np.float64)
    m[:3, 3] = [tx, ty, tz]
    return Mat4x4.from_array(m)


def scale(sx: float, sy: float, sz: float) -> Mat4x4:
    return Mat4x4.from_array(np.diag([sx, sy, sz, 1.0]))


def rotate_x(angle: float) -> Mat4x4:
    c, s = math.cos(angle), math.sin(angle)
    return Mat4x4([[1, 0, 0, 0], [0, c, -s, 0], [0, s, c, 0], [0, 0, 0, 1]])


def rotate_y(angle: float) -> Mat4x4:
    c, s = math.cos(angle), math.sin(angle)
    return Mat4x4([[c, 0, s, 0], [0, 1, 0, 0], [-s, 0, c, 0], [0, 0, 0, 1]])


def rotate_z(angle: float) -> Mat4x4:
    c, s = math.cos(angle), math.sin(angle)
    return Mat4x4([[c, -s, 0, 0], [s, c, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])
