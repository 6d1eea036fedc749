"""
Ray-shape intersection records and selection of the visible one.

Interactions are short-lived: a shape's `intersect` creates them and
`hit` or shading code consumes them right away.
"""

from __future__ import annotations
import weakref
from typing import Iterable, Optional, TYPE_CHECKING

from .vec4 import Vec4

if TYPE_CHECKING:
    from .shapes import Shape


class Interaction:
    """A single ray-shape intersection.

    Attributes:
        point: Intersection point in world space
        normal: Unit surface normal in world space
        time: Ray parameter of the intersection; negative means behind the origin
        shape: The shape that was hit, or None once that shape is gone
    """

    __slots__ = ('point', 'normal', 'time', '_shape')

    def __init__(self, point: Vec4, normal: Vec4, time: float, shape: Shape):
        object.__setattr__(self, 'point', point)
        object.__setattr__(self, 'normal', normal)
        object.__setattr__(self, 'time', time)
        # Weak so an interaction never keeps its shape alive
        object.__setattr__(self, '_shape', weakref.ref(shape))

    def __setattr__(self, name, value):
        raise AttributeError(f"Interaction is immutable, cannot set {name!r}")

    @property
    def shape(self) -> Optional[Shape]:
        return self._shape()

    def __repr__(self) -> str:
        return f"Interaction(time={self.time}, point={self.point}, normal={self.normal})"


def hit(interactions: Iterable[Interaction]) -> Optional[Interaction]:
    """Return the visible interaction: the lowest non-negative time.

    Intersections at negative times lie behind the ray origin. The sort is
    stable, so equal times keep their input order.

    Returns:
        The nearest interaction with time >= 0, or None if there is none
    """
    for interaction in sorted(interactions, key=lambda i: i.time):
        if interaction.time >= 0:
            return interaction
    return None
