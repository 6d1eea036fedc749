"""
Ray class for representing rays in homogeneous space.

A ray is defined by an origin point and a direction vector.
Ray(t) = origin + t * direction
"""

from __future__ import annotations
from .vec4 import Vec4
from .matrix import Mat4x4


class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction
    where t >= 0 lies in front of the origin. Rays are immutable.
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Vec4, direction: Vec4):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray (w = 1)
            direction: The direction vector (w = 0); need not be unit length
        """
        object.__setattr__(self, 'origin', origin)
        object.__setattr__(self, 'direction', direction)

    def __setattr__(self, name, value):
        raise AttributeError(f"Ray is immutable, cannot set {name!r}")

    def at(self, t: float) -> Vec4:
        """Get the point along the ray at parameter t.

        Args:
            t: The parameter value (distance if direction is normalized)

        Returns:
            The point at origin + t * direction
        """
        return self.origin + self.direction * t

    def transform(self, m: Mat4x4) -> Ray:
        """Return this ray mapped through `m`.

        The direction has w = 0, so any translation in `m` leaves it alone.
        """
        return Ray(m @ self.origin, m @ self.direction)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
