"""Tests for the Vector3 value type."""

import math

import numpy as np
import pytest

from meshtracer.core.vector import Ray, Vector3, ZeroVectorError


def random_vectors(count, seed=7):
    rng = np.random.default_rng(seed)
    return [Vector3.from_array(v) for v in rng.uniform(-10, 10, size=(count, 3))]


class TestVector3:
    """Arithmetic and algebraic laws."""

    def test_basic_operators(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, -5.0, 6.0)
        assert a + b == Vector3(5.0, -3.0, 9.0)
        assert a - b == Vector3(-3.0, 7.0, -3.0)
        assert -a == Vector3(-1.0, -2.0, -3.0)
        assert a * 2 == Vector3(2.0, 4.0, 6.0)
        assert 2 * a == a * 2
        assert a.dot(b) == pytest.approx(4.0 - 10.0 + 18.0)

    def test_cross_product_of_axes(self):
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)
        assert x.cross(y) == Vector3(0.0, 0.0, 1.0)

    def test_addition_laws(self):
        a, b, c = random_vectors(3)
        assert a + b == b + a
        left = (a + b) + c
        right = a + (b + c)
        assert left.x == pytest.approx(right.x)
        assert left.y == pytest.approx(right.y)
        assert left.z == pytest.approx(right.z)

    def test_cross_is_anticommutative(self):
        for a, b in zip(random_vectors(10, seed=1), random_vectors(10, seed=2)):
            assert a.cross(b) == -(b.cross(a))

    def test_normalize_gives_unit_length(self):
        for v in random_vectors(20):
            n = v.normalize()
            assert n.dot(n) == pytest.approx(1.0)

    def test_normalize_zero_vector_raises(self):
        with pytest.raises(ZeroVectorError):
            Vector3.zero().normalize()
        assert issubclass(ZeroVectorError, ValueError)

    def test_component_max(self):
        a = Vector3(1.0, 5.0, -2.0)
        b = Vector3(3.0, 0.0, -4.0)
        assert a.max(b) == Vector3(3.0, 5.0, -2.0)

    def test_immutable(self):
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0

    def test_array_conversion(self):
        v = Vector3(1.5, -2.0, 0.25)
        np.testing.assert_array_equal(v.to_array(), [1.5, -2.0, 0.25])
        assert Vector3.from_array(v.to_array()) == v


class TestReflection:
    """Mirror reflection about a unit normal."""

    def test_reflect_off_floor(self):
        d = Vector3(1.0, -1.0, 0.0)
        assert d.reflect(Vector3(0.0, 1.0, 0.0)) == Vector3(1.0, 1.0, 0.0)

    def test_reflection_preserves_length(self):
        directions = random_vectors(50, seed=3)
        normals = [n.normalize() for n in random_vectors(50, seed=4)]
        for d, n in zip(directions, normals):
            assert d.reflect(n).length() == pytest.approx(d.length(), rel=1e-9)


def test_ray_at():
    ray = Ray(Vector3(0.0, 1.0, 0.0), Vector3(0.0, -2.0, 0.0))
    assert ray.at(0.25) == Vector3(0.0, 0.5, 0.0)
    assert math.isclose(ray.direction.length(), 2.0)
