import math

import pytest

from noripath.ray import EPSILON, Ray


def test_default_segment():
    ray = Ray((0, 0, 0), (0, 0, 1))
    assert ray.mint == EPSILON
    assert ray.maxt == math.inf


def test_reciprocal_direction():
    ray = Ray((0, 0, 0), (2.0, 4.0, -0.5))
    for d, rcp in zip(ray.direction, ray.direction_rcp):
        assert d * rcp == pytest.approx(1.0)


def test_zero_component_gives_infinity():
    ray = Ray((0, 0, 0), (0.0, -0.0, 1.0))
    assert ray.direction_rcp[0] == math.inf
    assert ray.direction_rcp[1] == -math.inf


def test_at_follows_direction():
    ray = Ray((1.0, 2.0, 3.0), (0.5, -1.0, 2.0))
    assert ray.at(0) == ray.origin
    assert ray.at(1) == tuple(o + d for o, d in zip(ray.origin, ray.direction))
    assert ray.at(2) == tuple(o + 2 * d for o, d in zip(ray.origin, ray.direction))


def test_reverse():
    ray = Ray((1, 2, 3), (1.0, 0.0, -2.0), 0.5, 10.0)
    back = ray.reverse()
    assert back.origin == ray.origin
    assert back.direction == tuple(-c for c in ray.direction)
    assert back.direction_rcp == tuple(-c for c in ray.direction_rcp)
    assert (back.mint, back.maxt) == (0.5, 10.0)
    assert back.reverse() == ray


def test_with_segment_keeps_geometry():
    ray = Ray((0, 0, 0), (1.0, 2.0, 4.0))
    part = ray.with_segment(1.0, 5.0)
    assert part.origin == ray.origin
    assert part.direction == ray.direction
    assert part.direction_rcp == ray.direction_rcp
    assert (part.mint, part.maxt) == (1.0, 5.0)
    assert ray.maxt == math.inf


def test_update_after_changing_direction():
    ray = Ray((0, 0, 0), (1.0, 1.0, 1.0))
    ray.direction = (4.0, 8.0, 0.25)
    ray.update()
    for d, rcp in zip(ray.direction, ray.direction_rcp):
        assert d * rcp == pytest.approx(1.0)


def test_mismatched_dimensions_rejected():
    with pytest.raises(ValueError):
        Ray((0, 0), (1, 0, 0))


def test_two_dimensional_ray():
    ray = Ray((0.0, 1.0), (2.0, 0.0))
    assert ray.at(3) == (6.0, 1.0)


def test_string_summary():
    text = str(Ray((0, 0, 0), (0, 0, 1), 1.0, 2.0))
    assert text.startswith("Ray[\n")
    assert "  mint = 1.000000,\n" in text
    assert "  maxt = 2.000000\n" in text