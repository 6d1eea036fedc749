"""
Cached affine transforms.

Every intersection query needs the inverse (to bring the ray into object
space) and the inverse-transpose (to bring normals back out). Both are
computed once here, so a query never inverts a matrix.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from functools import reduce

from .matrix import Mat4x4, identity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transform:
    """An immutable (m, inv, inv_t) triple.

    Attributes:
        m: Object-to-world matrix
        inv: World-to-object matrix, the inverse of `m`
        inv_t: Transpose of `inv`, used to carry normals to world space
    """
    m: Mat4x4
    inv: Mat4x4
    inv_t: Mat4x4

    @classmethod
    def from_matrix(cls, m: Mat4x4) -> Transform:
        """Build a transform, inverting `m` once.

        `m` should be invertible. A singular matrix is accepted and its
        inverse comes out as inf/nan.
        """
        inv, det = m.inverse_with_determinant()
        if det == 0.0:
            logger.debug("Building transform from a singular matrix")
        return cls(m, inv, inv.transpose())

    @classmethod
    def from_matrices(cls, m: Mat4x4, inv: Mat4x4) -> Transform:
        """Build a transform from a matrix and its already known inverse."""
        return cls(m, inv, inv.transpose())

    @classmethod
    def compose(cls, *matrices: Mat4x4) -> Transform:
        """Multiply the matrices left to right and build a transform.

        The rightmost matrix is applied to points first.
        """
        return cls.from_matrix(reduce(lambda a, b: a @ b, matrices, identity()))

    @classmethod
    def identity(cls) -> Transform:
        return cls.from_matrices(identity(), identity())
