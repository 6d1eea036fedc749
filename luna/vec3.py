"""
Three-component values used for colors.

Colors carry no homogeneous coordinate, so they live apart from the
point/vector algebra in `vec4`. Combining a surface color with a light
color is done componentwise (the Hadamard product).
"""

from __future__ import annotations
from typing import Union
import numpy as np


class Vec3:
    """An RGB triple backed by a float64 numpy array."""

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create Vec3 from numpy array."""
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

    # Color channel aliases
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __repr__(self) -> str:
        return f"Color({self.r:.4f}, {self.g:.4f}, {self.b:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return np.allclose(self._data, other._data)

    # Tolerant equality has no matching hash
    __hash__ = None

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3.from_array(self._data + other._data)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3.from_array(self._data - other._data)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return self.hadamard(other)
        return Vec3.from_array(self._data * other)

    def __rmul__(self, other: float) -> Vec3:
        return Vec3.from_array(other * self._data)

    def __truediv__(self, other: float) -> Vec3:
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vec3.from_array(self._data / other)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def hadamard(self, other: Vec3) -> Vec3:
        """Multiply componentwise, e.g. surface color by light color."""
        return Vec3.from_array(self._data * other._data)

    def approx_equal(self, other: Vec3, threshold: float = 1e-6) -> bool:
        """True if every channel differs by at most `threshold`."""
        return bool(np.all(np.abs(self._data - other._data) <= threshold))

    def clamp(self, min_val: float = 0.0, max_val: float = 1.0) -> Vec3:
        """Clamp all channels to the given range."""
        return Vec3.from_array(np.clip(self._data, min_val, max_val))

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


Color = Vec3
