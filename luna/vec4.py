"""
Homogeneous 4-component vectors for points and directions.

The fourth component `w` tells the two apart:
- points have w = 1, so translations move them
- vectors (directions, normals) have w = 0, so translations do not

Arithmetic keeps the convention on its own: point - point is a vector,
point + vector is a point, and vector + vector is a vector.
"""

from __future__ import annotations
import numpy as np

# Default tolerance for approximate comparisons
EPSILON = 1e-6


class Vec4:
    """A homogeneous vector (x, y, z, w) backed by a float64 numpy array.

    Use `point()` and `vector()` to build values; the raw constructor
    exists for matrix results and tests that need an explicit w.
    """

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0):
        self._data = np.array([x, y, z, w], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec4:
        """Create Vec4 from a numpy array of length 4."""
        v = cls.__new__(cls)
        v._data = np.asarray(arr, dtype=np.float64)
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return float(self._data[3])

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __repr__(self) -> str:
        if self.is_point():
            kind = "Point"
        elif self.is_vector():
            kind = "Vector"
        else:
            return f"Vec4({self.x:.4f}, {self.y:.4f}, {self.z:.4f}, {self.w:.4f})"
        return f"{kind}({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec4):
            return NotImplemented
        return np.allclose(self._data, other._data)

    # Tolerant equality has no matching hash
    __hash__ = None

    def __neg__(self) -> Vec4:
        return Vec4.from_array(-self._data)

    def __add__(self, other: Vec4) -> Vec4:
        return Vec4.from_array(self._data + other._data)

    def __sub__(self, other: Vec4) -> Vec4:
        return Vec4.from_array(self._data - other._data)

    def __mul__(self, scalar: float) -> Vec4:
        return Vec4.from_array(self._data * scalar)

    def __rmul__(self, scalar: float) -> Vec4:
        return Vec4.from_array(scalar * self._data)

    def __truediv__(self, scalar: float) -> Vec4:
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vec4.from_array(self._data / scalar)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def dot(self, other: Vec4) -> float:
        """Dot product over x, y, z; w does not take part."""
        return float(np.dot(self._data[:3], other._data[:3]))

    def cross(self, other: Vec4) -> Vec4:
        """Cross product over x, y, z. The result is always a vector."""
        c = np.cross(self._data[:3], other._data[:3])
        return Vec4(c[0], c[1], c[2], 0.0)

    def length(self) -> float:
        """Euclidean length of the x, y, z part."""
        return float(np.linalg.norm(self._data[:3]))

    def length_squared(self) -> float:
        return self.dot(self)

    def normalize(self) -> Vec4:
        """Return a unit-length copy, w unchanged.

        A zero-length input divides by zero and comes back as NaN.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            out = self._data / np.linalg.norm(self._data[:3])
        out[3] = self._data[3]
        return Vec4.from_array(out)

    def with_w(self, w: float) -> Vec4:
        """Copy with the homogeneous component replaced."""
        out = self._data.copy()
        out[3] = w
        return Vec4.from_array(out)

    def approx_equal(self, other: Vec4, threshold: float = EPSILON) -> bool:
        """True if every component differs by at most `threshold`."""
        return bool(np.all(np.abs(self._data - other._data) <= threshold))

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


def point(x: float, y: float, z: float) -> Vec4:
    """A position in space (w = 1)."""
    return Vec4(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Vec4:
    """A direction or displacement (w = 0)."""
    return Vec4(x, y, z, 0.0)
