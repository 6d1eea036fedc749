"""Surface material parameters."""

from __future__ import annotations
from dataclasses import dataclass, field

from .vec3 import Color


@dataclass
class Material:
    """Phong-style surface parameters.

    Attributes:
        color: Base surface color
        ambient: Fraction of ambient light reflected, in [0, 1]
    """
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
