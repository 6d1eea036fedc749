"""Tests for materials and lights."""

import pytest
import dataclasses

from luna.vec3 import Color
from luna.vec4 import point
from luna.materials import Material
from luna.lights import PointLight


class TestMaterial:
    """Test Material defaults."""

    def test_defaults(self):
        m = Material()
        assert m.color == Color(1, 1, 1)
        assert m.ambient == 0.1

    def test_defaults_are_not_shared(self):
        assert Material().color is not Material().color

    def test_custom(self):
        m = Material(Color(0.2, 0.4, 0.6), 0.5)
        assert m.color == Color(0.2, 0.4, 0.6)
        assert m.ambient == 0.5


class TestPointLight:
    """Test the point light value type."""

    def test_position_and_intensity(self):
        light = PointLight(point(0, 0, 0), Color(1, 1, 1))
        assert light.position == point(0, 0, 0)
        assert light.intensity == Color(1, 1, 1)

    def test_is_immutable(self):
        light = PointLight(point(0, 0, 0), Color(1, 1, 1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            light.position = point(1, 1, 1)
