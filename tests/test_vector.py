import math

import pytest

from radiant.vector import Vector2, Vector3, Vector4


def test_vector2_add_and_subtract_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(0.25, 4.0)
    assert (a + b) - b == a


def test_vector2_add_components():
    assert Vector2(1.0, 2.0) + Vector2(3.0, 4.0) == Vector2(4.0, 6.0)


def test_vector2_scale_both_sides():
    v = Vector2(1.0, -3.0)
    assert v * 2.0 == Vector2(2.0, -6.0)
    assert 2.0 * v == v * 2.0


def test_vector2_absolute_value():
    assert abs(Vector2(-1.5, 2.0)) == Vector2(1.5, 2.0)


def test_vector2_dot_and_piecewise():
    a = Vector2(2.0, 3.0)
    b = Vector2(4.0, -1.0)
    assert a.dot(b) == 2.0 * 4.0 + 3.0 * -1.0
    assert a.piecewise_multiply(b) == Vector2(8.0, -3.0)


def test_vector2_magnitude_approximate():
    assert Vector2(3.0, 4.0).magnitude() == pytest.approx(5.0, rel=0.002)


def test_vector2_normalized_is_near_unit():
    n = Vector2(10.0, -7.0).normalized()
    assert math.hypot(n.x, n.y) == pytest.approx(1.0, rel=0.002)


def test_vector2_orthogonal_unit_angle():
    assert Vector2(1.0, 0.0).angle_between(Vector2(0.0, 1.0)) == pytest.approx(math.pi / 2)


def test_vector2_angle_outside_domain_is_nan():
    result = Vector2(3.0, 0.0).angle_between(Vector2(3.0, 0.0))
    assert str(result) == "nan"


def test_vector2_type_mismatch():
    with pytest.raises(TypeError):
        Vector2(1.0, 1.0) + Vector3(1.0, 1.0, 1.0)
    with pytest.raises(TypeError):
        Vector2(1.0, 1.0).dot(Vector3(1.0, 1.0, 1.0))


def test_vector3_arithmetic():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-1.0, 0.5, 2.0)
    assert a + b == Vector3(0.0, 2.5, 5.0)
    assert (a - b) + b == a
    assert a * -1.0 == Vector3(-1.0, -2.0, -3.0)
    assert a.piecewise_multiply(b) == Vector3(-1.0, 1.0, 6.0)


def test_vector3_cross_of_axes():
    assert Vector3(1.0, 0.0, 0.0).cross(Vector3(0.0, 1.0, 0.0)) == Vector3(0.0, 0.0, 1.0)


def test_vector3_cross_is_orthogonal():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert b.cross(a) == c * -1.0


def test_vector3_magnitude_and_normalize():
    v = Vector3(2.0, 3.0, 6.0)
    assert v.magnitude() == pytest.approx(7.0, rel=0.002)
    n = v.normalized()
    assert math.sqrt(n.dot(n)) == pytest.approx(1.0, rel=0.002)


def test_vector3_orthogonal_unit_angle():
    angle = Vector3(0.0, 0.0, 1.0).angle_between(Vector3(1.0, 0.0, 0.0))
    assert angle == pytest.approx(math.pi / 2)


def test_vector4_scales_every_component():
    assert Vector4(1.0, 2.0, 3.0, 4.0) * 3.0 == Vector4(3.0, 6.0, 9.0, 12.0)


def test_vector4_add_subtract_dot():
    a = Vector4(1.0, 2.0, 3.0, 4.0)
    b = Vector4(0.5, 0.5, -1.0, 2.0)
    assert (a + b) - b == a
    assert a.dot(b) == 0.5 + 1.0 - 3.0 + 8.0
    assert a.piecewise_multiply(b) == Vector4(0.5, 1.0, -3.0, 8.0)


def test_vector4_magnitude_and_normalize():
    v = Vector4(1.0, 1.0, 1.0, 1.0)
    assert v.magnitude() == pytest.approx(2.0, rel=0.002)
    n = v.normalized()
    assert math.sqrt(n.dot(n)) == pytest.approx(1.0, rel=0.002)


def test_vector4_orthogonal_unit_angle():
    angle = Vector4(0.0, 0.0, 0.0, 1.0).angle_between(Vector4(0.0, 1.0, 0.0, 0.0))
    assert angle == pytest.approx(math.pi / 2)


def test_vectors_are_immutable():
    v = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0  # type: ignore[misc]
    assert tuple(v) == (1.0, 2.0, 3.0)