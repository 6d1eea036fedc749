"""Tests for color values."""

import pytest
from luna.vec3 import Vec3, Color
from luna.vecmath import hadamard


class TestColor:
    """Test Color construction and arithmetic."""

    def test_channels(self):
        c = Color(-0.5, 0.4, 1.7)
        assert c.r == -0.5
        assert c.g == 0.4
        assert c.b == 1.7

    def test_alias(self):
        assert Color is Vec3

    def test_add(self):
        assert Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25) == Color(1.6, 0.7, 1.0)

    def test_subtract(self):
        assert (Color(0.9, 0.6, 0.75) - Color(0.7, 0.1, 0.25)).approx_equal(Color(0.2, 0.5, 0.5))

    def test_scalar_multiply(self):
        assert Color(0.2, 0.3, 0.4) * 2 == Color(0.4, 0.6, 0.8)
        assert 2 * Color(0.2, 0.3, 0.4) == Color(0.4, 0.6, 0.8)

    def test_clamp(self):
        c = Color(-0.5, 0.5, 1.5).clamp()
        assert c.r == 0
        assert c.g == 0.5
        assert c.b == 1


class TestHadamard:
    """Test the componentwise color product."""

    def test_hadamard(self):
        result = hadamard(Color(1, 0.2, 0.4), Color(0.9, 1, 0.1))
        assert result.approx_equal(Color(0.9, 0.2, 0.04), 1e-8)

    def test_multiply_operator_is_hadamard(self):
        assert Color(1, 0.2, 0.4) * Color(0.9, 1, 0.1) == hadamard(Color(1, 0.2, 0.4), Color(0.9, 1, 0.1))

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Color(1, 2, 3))
