import math

import numpy as np
import pytest

from okinawa.point import Point
from okinawa.rotation import Rotation

TOL = 1e-4


def test_default_constructor_is_zero():
    rot = Rotation()
    assert rot.angles == pytest.approx((0.0, 0.0, 0.0), abs=TOL)


def test_constructor_with_angles():
    pitch, yaw, roll = math.radians(30), math.radians(45), math.radians(60)
    rot = Rotation(pitch, yaw, roll)
    assert rot.pitch == pytest.approx(pitch, abs=TOL)
    assert rot.yaw == pytest.approx(yaw, abs=TOL)
    assert rot.roll == pytest.approx(roll, abs=TOL)


def test_identity_matrix():
    assert np.allclose(Rotation().matrix, np.eye(4))


def test_transform_point_identity():
    transformed = Rotation().transform_point(Point(1.0, 0.0, 0.0))
    assert transformed.to_tuple() == pytest.approx((1.0, 0.0, 0.0), abs=TOL)


def test_transform_point_90_degree_yaw():
    rot = Rotation(0.0, math.pi / 2, 0.0)
    transformed = rot.transform_point(Point(1.0, 0.0, 0.0))
    assert transformed.to_tuple() == pytest.approx((0.0, 0.0, 1.0), abs=TOL)


def test_transform_preserves_length():
    rot = Rotation(0.4, -1.2, 0.9)
    p = Point(1.0, 2.0, 3.0)
    assert rot.transform_point(p).magnitude() == pytest.approx(p.magnitude())


def test_rotate_incrementally():
    rot = Rotation()
    rot.rotate(0.1, 0.2, 0.3)
    assert rot.pitch == pytest.approx(0.1, abs=TOL)
    assert rot.yaw == pytest.approx(0.2, abs=TOL)
    assert rot.roll == pytest.approx(0.3, abs=TOL)


def test_rotate_updates_matrix():
    rot = Rotation()
    rot.rotate(0.0, math.pi / 2, 0.0)
    assert np.allclose(rot.matrix, Rotation(0.0, math.pi / 2, 0.0).matrix)


def test_set_absolute_rotation():
    rot = Rotation()
    rot.set_rotation(0.5, 1.0, 1.5)
    assert rot.pitch == pytest.approx(0.5, abs=TOL)
    assert rot.yaw == pytest.approx(1.0, abs=TOL)
    assert rot.roll == pytest.approx(1.5, abs=TOL)


def test_equal_rotations():
    first = Rotation(0.1, 0.2, 0.3)
    second = Rotation(0.1, 0.2, 0.3)
    assert (first == second) is True
    assert first.angles == second.angles


def test_different_rotations():
    assert not (Rotation(0.1, 0.2, 0.3) == Rotation(0.1, 0.2, 0.4))


def test_default_to_string():
    assert str(Rotation()) == "(0, 0, 0)"


def test_custom_to_string():
    assert str(Rotation(1.0, 2.0, 3.0)) == "(1, 2, 3)"


def test_forward_vector_no_rotation():
    assert Rotation().forward_vector().to_tuple() == pytest.approx((0.0, 0.0, -1.0), abs=TOL)


def test_right_vector_no_rotation():
    assert Rotation().right_vector().to_tuple() == pytest.approx((1.0, 0.0, 0.0), abs=TOL)


def test_up_vector_no_rotation():
    assert Rotation().up_vector().to_tuple() == pytest.approx((0.0, 1.0, 0.0), abs=TOL)


def test_vectors_are_orthogonal():
    rot = Rotation(0.5, 1.0, 0.0)
    forward, right, up = rot.forward_vector(), rot.right_vector(), rot.up_vector()
    assert forward.dot(right) == pytest.approx(0.0, abs=TOL)
    assert forward.dot(up) == pytest.approx(0.0, abs=TOL)
    assert right.dot(up) == pytest.approx(0.0, abs=TOL)


def test_forward_vector_negative_45_pitch():
    forward = Rotation(-math.pi / 4, 0.0, 0.0).forward_vector()
    expected = 1.0 / math.sqrt(2.0)
    assert forward.to_tuple() == pytest.approx((0.0, -expected, -expected), abs=TOL)


@pytest.mark.parametrize("angles", [(0.0, 0.5, 0.0), (0.3, 0.0, 0.0)])
def test_combine_with_identity_keeps_angles(angles):
    combined = Rotation().combine(Rotation(*angles))
    assert combined.angles == pytest.approx(angles, abs=TOL)


def test_combine_matrix_matches_product():
    first = Rotation(0.2, 0.4, 0.1)
    second = Rotation(-0.3, 0.7, 0.2)
    combined = first.combine(second)
    product = second.matrix @ first.matrix
    assert np.allclose(combined.matrix, product, atol=1e-6)


def test_matrix_is_a_copy():
    rot = Rotation(0.2, 0.3, 0.4)
    m = rot.matrix
    m[0, 0] = 42.0
    assert rot.matrix[0, 0] != pytest.approx(42.0)
    assert rot.matrix[0, 0] == pytest.approx(Rotation(0.2, 0.3, 0.4).matrix[0, 0])


def test_copy_is_independent():
    rot = Rotation(0.1, 0.2, 0.3)
    clone = rot.copy()
    clone.rotate(1.0, 0.0, 0.0)
    assert rot.pitch == pytest.approx(0.1)
    assert clone.pitch == pytest.approx(1.1)