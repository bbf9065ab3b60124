import math

import pytest

from okinawa.geometry import direction_vector_to_angles, look_at
from okinawa.point import Point

TOL = 1e-4


def test_direction_forward():
    pitch, yaw = direction_vector_to_angles(Point(0.0, 0.0, -1.0))
    assert pitch == pytest.approx(0.0, abs=TOL)
    assert yaw == pytest.approx(0.0, abs=TOL)


def test_direction_right():
    pitch, yaw = direction_vector_to_angles(Point(1.0, 0.0, 0.0))
    assert pitch == pytest.approx(0.0, abs=TOL)
    assert yaw == pytest.approx(math.pi / 2, abs=TOL)


def test_direction_down_forward():
    pitch, yaw = direction_vector_to_angles(Point(0.0, -1.0, -1.0))
    assert pitch == pytest.approx(-math.pi / 4, abs=TOL)
    assert yaw == pytest.approx(0.0, abs=TOL)


def test_direction_scale_does_not_matter():
    assert direction_vector_to_angles(Point(2.0, 1.0, -3.0)) == pytest.approx(
        direction_vector_to_angles(Point(4.0, 2.0, -6.0))
    )


def test_direction_zero_raises():
    with pytest.raises(ValueError):
        direction_vector_to_angles(Point(0.0, 0.0, 0.0))


def test_look_at_along_z():
    rot = look_at(Point(0.0, 0.0, 0.0), Point(0.0, 0.0, 1.0))
    assert rot.angles == pytest.approx((0.0, 0.0, 0.0), abs=TOL)


def test_look_at_along_x():
    rot = look_at(Point(0.0, 0.0, 0.0), Point(1.0, 0.0, 0.0))
    assert rot.pitch == pytest.approx(0.0, abs=TOL)
    assert rot.yaw == pytest.approx(math.pi / 2, abs=TOL)
    assert rot.roll == pytest.approx(0.0, abs=TOL)


def test_look_at_depends_only_on_direction():
    a = look_at(Point(1.0, 2.0, 3.0), Point(4.0, 3.0, 7.0))
    b = look_at(Point(0.0, 0.0, 0.0), Point(3.0, 1.0, 4.0))
    assert a.angles == pytest.approx(b.angles, abs=1e-9)


def test_look_at_straight_up_uses_fallback_up():
    rot = look_at(Point(0.0, 0.0, 0.0), Point(0.0, 5.0, 0.0), Point(0.0, 1.0, 0.0))
    assert rot.pitch == pytest.approx(-math.pi / 2, abs=TOL)


def test_look_at_same_point_raises():
    with pytest.raises(ValueError):
        look_at(Point(1.0, 1.0, 1.0), Point(1.0, 1.0, 1.0))


def test_look_at_zero_up_raises():
    with pytest.raises(ValueError):
        look_at(Point(0.0, 0.0, 0.0), Point(0.0, 0.0, 1.0), Point(0.0, 0.0, 0.0))