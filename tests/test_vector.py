import math

import pytest

from snakesim.vector import (
    Vector,
    constrain_distance,
    constrain_distance_symmetric,
    from_angle,
    vector_demo,
)


def test_add_then_subtract_round_trip():
    a = Vector(3, 4)
    b = Vector(1, 2)
    assert (a + b) - b == a


def test_multiply_then_divide_round_trip():
    a = Vector(3, 4)
    assert (a * 2.5) / 2.5 == a


def test_divide_by_zero_returns_same_vector():
    a = Vector(3, 4)
    assert a / 0 == a


def test_magnitude_of_three_four():
    assert Vector(3, 4).magnitude() == pytest.approx(5.0)


def test_magnitude_squared_matches_magnitude():
    v = Vector(1.5, -2.5)
    assert v.magnitude_squared() == pytest.approx(v.magnitude() ** 2)


def test_normalize_has_unit_length():
    assert Vector(3, 4).normalize().magnitude() == pytest.approx(1.0)


def test_normalize_zero_vector():
    assert Vector(0, 0).normalize() == Vector(0, 0)


def test_set_mag_keeps_direction():
    v = Vector(3, 4)
    scaled = v.set_mag(7)
    assert scaled.magnitude() == pytest.approx(7)
    assert v.cross(scaled) == pytest.approx(0.0, abs=1e-9)
    assert v.dot(scaled) > 0


def test_distance_symmetric_and_consistent():
    a = Vector(3, 4)
    b = Vector(1, 2)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance_squared(b) == pytest.approx(a.distance(b) ** 2)


def test_cross_with_self_is_zero():
    v = Vector(2, 5)
    assert v.cross(v) == 0


def test_angle_of_from_angle():
    for a in (0.3, 1.2, -2.0):
        assert from_angle(a).angle() == pytest.approx(a)
        assert from_angle(a).magnitude() == pytest.approx(1.0)


def test_rotate_quarter_turn_is_perpendicular():
    v = Vector(3, 4)
    r = v.rotate(math.pi / 2)
    assert r.dot(v) == pytest.approx(0.0, abs=1e-9)
    assert r.magnitude() == pytest.approx(v.magnitude())


def test_lerp_endpoints():
    a = Vector(1, 2)
    b = Vector(5, -3)
    assert a.lerp(b, 0) == a
    assert a.lerp(b, 1) == b


def test_str_format():
    assert str(Vector(3, 4)) == "(3.00, 4.00)"


def test_constrain_distance_too_far():
    p1 = Vector(0, 0)
    result = constrain_distance(p1, Vector(10, 0), 3, 6)
    assert p1.distance(result) == pytest.approx(6)


def test_constrain_distance_too_close():
    p1 = Vector(0, 0)
    result = constrain_distance(p1, Vector(1, 1), 3, 6)
    assert p1.distance(result) == pytest.approx(3)


def test_constrain_distance_within_bounds():
    p2 = Vector(4, 0)
    assert constrain_distance(Vector(0, 0), p2, 3, 6) == p2


def test_constrain_distance_same_point():
    p1 = Vector(2, 2)
    assert constrain_distance(p1, p1, 3, 6) == p1 + Vector(3, 0)


def test_constrain_distance_symmetric_keeps_midpoint():
    p3 = Vector(-2, 0)
    p4 = Vector(2, 0)
    a, b = constrain_distance_symmetric(p3, p4, 6, 10)
    assert a.distance(b) == pytest.approx(6)
    mid = (a + b) / 2
    assert mid.x == pytest.approx(0)
    assert mid.y == pytest.approx(0)


def test_constrain_distance_symmetric_within_bounds():
    p3 = Vector(-4, 0)
    p4 = Vector(4, 0)
    assert constrain_distance_symmetric(p3, p4, 6, 10) == (p3, p4)


def test_vector_demo_output(capsys):
    vector_demo()
    out = capsys.readouterr().out
    assert "Vector Animation Utilities Demo" in out
    assert "v1: (3.00, 4.00)" in out