"""Free-function forms of the vector operations."""

from __future__ import annotations

from .vec3 import Color
from .vec4 import Vec4


def dot(u: Vec4, v: Vec4) -> float:
    return u.dot(v)


def cross(u: Vec4, v: Vec4) -> Vec4:
    return u.cross(v)


def hadamard(c1: Color, c2: Color) -> Color:
    """Elementwise product of two colors."""
    return c1.hadamard(c2)


def normalize(v: Vec4) -> Vec4:
    return v.normalize()


def reflect(v: Vec4, n: Vec4) -> Vec4:
    """Mirror `v` about the unit normal `n`: v - 2(v.n)n."""
    return v - n * (2.0 * v.dot(n))
