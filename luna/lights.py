"""Light sources handed to shading code."""

from __future__ import annotations
from dataclasses import dataclass

from .vec3 import Color
from .vec4 import Vec4


@dataclass(frozen=True)
class PointLight:
    """A point light source with no size.

    Attributes:
        position: Where the light sits (a point, w = 1)
        intensity: Color and brightness of the emitted light
    """
    position: Vec4
    intensity: Color
