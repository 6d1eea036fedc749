"""
Luna - the geometric core of a ray tracer

Transforms rays between world and object space, intersects them with
shapes, and picks the visible intersection:
- Homogeneous point/vector algebra
- Affine transforms with cached inverse and inverse-transpose
- Shape contract with a transformable unit sphere
- Intersection records and hit selection
"""

__version__ = "0.1.0"

from .vec3 import Vec3, Color
from .vec4 import Vec4, point, vector
from .vecmath import dot, cross, hadamard, normalize, reflect
from .matrix import Mat4x4, identity, translate, scale, rotate_x, rotate_y, rotate_z
from .transform import Transform
from .ray import Ray
from .materials import Material
from .lights import PointLight
from .interactions import Interaction, hit
from .shapes import Shape, Sphere
