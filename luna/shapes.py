"""
Geometric shapes for the ray tracer.

Every shape implements the `Shape` contract: it owns one material and one
transform, reports all intersections of a ray as `Interaction`s, and gives
the world-space normal at a surface point. Shapes are defined in their own
local space; the transform places them in the world.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import List, Optional
import numpy as np

from .vec4 import Vec4, point
from .ray import Ray
from .transform import Transform
from .materials import Material
from .interactions import Interaction

logger = logging.getLogger(__name__)

LOCAL_ORIGIN = point(0, 0, 0)


class Shape(ABC):
    """Abstract base class for everything a ray can intersect.

    Reads (`intersect`, `normal_at`) may run from many threads at once as
    long as nobody replaces the material or transform meanwhile.
    """

    def __init__(self, material: Optional[Material] = None, transform: Optional[Transform] = None):
        self._material = material if material is not None else Material()
        self._transform = transform if transform is not None else Transform.identity()

    @property
    def material(self) -> Material:
        return self._material

    @material.setter
    def material(self, material: Material) -> None:
        self.set_material(material)

    def set_material(self, material: Material) -> None:
        logger.debug("Replacing material of %r", self)
        self._material = material

    @property
    def transform(self) -> Transform:
        return self._transform

    def set_transform(self, transform: Transform) -> None:
        """Replace the whole (m, inv, inv_t) triple in one assignment."""
        logger.debug("Replacing transform of %r", self)
        self._transform = transform

    @abstractmethod
    def intersect(self, ray: Ray) -> List[Interaction]:
        """Find every intersection of a world-space ray with this shape.

        Interactions behind the ray origin are included; use `hit` to
        pick the visible one.

        Args:
            ray: The ray to test, in world space

        Returns:
            Interactions in ascending time order
        """
        pass

    @abstractmethod
    def normal_at(self, world_point: Vec4) -> Vec4:
        """Get the unit world-space normal at a point on the surface.

        Args:
            world_point: A point on the shape's surface, in world space

        Returns:
            Unit normal vector (w = 0) in world space
        """
        pass


class Sphere(Shape):
    """A unit sphere centered at the local origin.

    Size and position come entirely from the transform, e.g.
    `Transform.compose(translate(0, 1, 0), scale(2, 2, 2))` for a sphere of
    radius 2 centered at (0, 1, 0).
    """

    def intersect(self, ray: Ray) -> List[Interaction]:
        """Test ray-sphere intersection using the quadratic formula.

        In local space the equation |O + tD|² = 1 expands to
        t²(D·D) + 2t(D·O) + O·O - 1 = 0. A tangent ray gives two
        coincident roots and both are reported, so the result always has
        either zero or two entries.
        """
        local_ray = ray.transform(self._transform.inv)
        sphere_to_ray = local_ray.origin - LOCAL_ORIGIN
        direction = local_ray.direction

        a = np.float64(direction.dot(direction))
        b = 2.0 * direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        # A degenerate direction (a == 0) yields nan/inf times, not an error
        with np.errstate(divide='ignore', invalid='ignore'):
            discriminant = b * b - 4.0 * a * c
            if discriminant < 0:
                return []

            sqrtd = np.sqrt(discriminant)
            t0 = float((-b - sqrtd) / (2.0 * a))
            t1 = float((-b + sqrtd) / (2.0 * a))

        return [self._interaction_at(local_ray, t) for t in (t0, t1)]

    def _interaction_at(self, local_ray: Ray, t: float) -> Interaction:
        world_point = self._transform.m @ local_ray.at(t)
        return Interaction(world_point, self.normal_at(world_point), t, self)

    def normal_at(self, world_point: Vec4) -> Vec4:
        """Radial normal carried to world space by the inverse-transpose.

        Using `m` or `inv` here instead of `inv_t` would skew normals
        under non-uniform scale.
        """
        local_point = self._transform.inv @ world_point
        local_normal = local_point - LOCAL_ORIGIN
        world_normal = self._transform.inv_t @ local_normal
        # inv_t can leak translation into w
        return world_normal.with_w(0.0).normalize()

    def __repr__(self) -> str:
        return f"Sphere(material={self._material})"
