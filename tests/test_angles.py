import math

import pytest

from snakesim.angles import (
    TWO_PI,
    constrain_angle,
    relative_angle_diff,
    simplify_angle,
)


@pytest.mark.parametrize("angle", [-10.0, -0.5, 0.0, 1.0, 7.0, 50.0])
def test_simplify_angle_in_range(angle):
    result = simplify_angle(angle)
    assert 0 <= result < TWO_PI
    assert math.cos(result) == pytest.approx(math.cos(angle))
    assert math.sin(result) == pytest.approx(math.sin(angle))


def test_simplify_angle_periodic():
    assert simplify_angle(1.0 + TWO_PI) == pytest.approx(simplify_angle(1.0))


def test_relative_angle_diff_same_angle_is_zero():
    assert relative_angle_diff(1.3, 1.3) == pytest.approx(0.0)


def test_relative_angle_diff_sign():
    assert relative_angle_diff(1.0 + 0.2, 1.0) == pytest.approx(-0.2)
    assert relative_angle_diff(1.0 - 0.2, 1.0) == pytest.approx(0.2)


def test_relative_angle_diff_wraps():
    assert relative_angle_diff(0.1, TWO_PI - 0.1) == pytest.approx(-0.2)


def test_constrain_angle_within_limit_unchanged():
    assert constrain_angle(1.1, 1.0, 0.5) == pytest.approx(1.1)


def test_constrain_angle_below_anchor():
    assert constrain_angle(1.0 - 1.0, 1.0, 0.5) == pytest.approx(simplify_angle(1.0 - 0.5))


def test_constrain_angle_above_anchor():
    assert constrain_angle(1.0 + 1.0, 1.0, 0.5) == pytest.approx(simplify_angle(1.0 + 0.5))


@pytest.mark.parametrize("angle", [-3.0, 0.0, 2.0, 5.5])
def test_constrain_angle_result_within_constraint(angle):
    result = constrain_angle(angle, 0.7, 0.4)
    assert abs(relative_angle_diff(result, 0.7)) <= 0.4 + 1e-9
    assert 0 <= result < TWO_PI