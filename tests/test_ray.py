"""Tests for Ray class."""

import pytest
from luna.vec4 import point, vector
from luna.matrix import translate, scale
from luna.ray import Ray


class TestRayCreation:
    """Test Ray construction."""

    def test_stores_origin(self):
        origin = point(1, 2, 3)
        ray = Ray(origin, vector(4, 5, 6))
        assert ray.origin == origin

    def test_stores_direction(self):
        direction = vector(4, 5, 6)
        ray = Ray(point(1, 2, 3), direction)
        assert ray.direction == direction

    def test_is_immutable(self):
        ray = Ray(point(1, 2, 3), vector(4, 5, 6))
        with pytest.raises(AttributeError):
            ray.origin = point(0, 0, 0)


class TestRayAt:
    """Test Ray.at() method."""

    @pytest.mark.parametrize("t, expected", [
        (0, point(2, 3, 4)),
        (1, point(3, 3, 4)),
        (-1, point(1, 3, 4)),
        (2.5, point(4.5, 3, 4)),
    ])
    def test_at(self, t, expected):
        ray = Ray(point(2, 3, 4), vector(1, 0, 0))
        assert ray.at(t).approx_equal(expected)

    def test_at_returns_point(self):
        ray = Ray(point(2, 3, 4), vector(1, 0, 0))
        assert ray.at(2.5).is_point()


class TestRayTransform:
    """Test Ray.transform() method."""

    def test_translate(self):
        ray = Ray(point(1, 2, 3), vector(0, 1, 0))
        moved = ray.transform(translate(3, 4, 5))
        assert moved.origin == point(4, 6, 8)
        assert moved.direction == vector(0, 1, 0)

    def test_scale(self):
        ray = Ray(point(1, 2, 3), vector(0, 1, 0))
        scaled = ray.transform(scale(2, 3, 4))
        assert scaled.origin == point(2, 6, 12)
        assert scaled.direction == vector(0, 3, 0)

    def test_original_unchanged(self):
        ray = Ray(point(1, 2, 3), vector(0, 1, 0))
        ray.transform(translate(3, 4, 5))
        assert ray.origin == point(1, 2, 3)


class TestRayRepr:
    """Test Ray string representation."""

    def test_repr(self):
        s = repr(Ray(point(1, 2, 3), vector(0, 1, 0)))
        assert "Ray" in s
        assert "origin" in s
        assert "direction" in s
