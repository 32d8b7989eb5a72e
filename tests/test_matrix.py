import math

import pytest

from radiant.matrix import (
    Matrix,
    identity,
    ones,
    orthographic_projection,
    perspective_projection,
    rotation,
    scale,
    translation,
    zeros,
)
from radiant.vector import Vector3


def sequential(rows=4, columns=4):
    return Matrix(rows, columns, range(rows * columns))


def transpose(m):
    return Matrix(m.columns, m.rows, [m[r, c] for c in range(m.columns) for r in range(m.rows)])


def test_wrong_value_count_rejected():
    with pytest.raises(ValueError):
        Matrix(2, 2, [1, 2, 3])


def test_identity_diagonal():
    m = identity(3)
    assert m[0, 0] == 1.0 and m[1, 1] == 1.0 and m[2, 2] == 1.0
    assert m[0, 1] == 0.0 and m[2, 0] == 0.0


def test_identity_is_multiplicative_neutral():
    m = sequential()
    assert identity(4) @ m == m
    assert m @ identity(4) == m


def test_zeros_and_ones():
    assert all(v == 0.0 for v in zeros(2, 3).values)
    assert all(v == 1.0 for v in ones(3, 2).values)
    assert ones(3, 2).shape == (3, 2)


def test_add_and_subtract_round_trip():
    a = sequential()
    b = ones(4, 4) * 2.5
    assert (a + b) - b == a


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        ones(2, 2) + ones(3, 3)


def test_scalar_operations():
    m = sequential(2, 2)
    assert m.add_scalar(3).subtract_scalar(3) == m
    assert (m * 2)[1, 1] == m[1, 1] * 2
    assert 2 * m == m * 2


def test_multiply_piecewise_with_ones_is_neutral():
    m = sequential(3, 3)
    assert m.multiply_piecewise(ones(3, 3)) == m
    assert m.multiply_piecewise(zeros(3, 3)) == zeros(3, 3)


def test_matmul_shape_and_mismatch():
    product = ones(2, 3) @ ones(3, 4)
    assert product.shape == (2, 4)
    assert all(v == 3.0 for v in product.values)
    with pytest.raises(ValueError):
        ones(2, 3) @ ones(2, 3)


def test_matmul_associative():
    a, b, c = sequential(), sequential() * 0.5, identity(4).add_scalar(1)
    left = (a @ b) @ c
    right = a @ (b @ c)
    assert left.shape == right.shape == (4, 4)
    assert list(left.values) == pytest.approx(list(right.values), abs=1e-9)


def test_getitem_out_of_range():
    with pytest.raises(IndexError):
        identity(2)[2, 0]


def test_str_of_identity():
    expected = (
        "  1.000  0.000  0.000  0.000 \n"
        "  0.000  1.000  0.000  0.000 \n"
        "  0.000  0.000  1.000  0.000 \n"
        "  0.000  0.000  0.000  1.000 \n"
    )
    assert str(identity(4)) == expected


def test_str_non_square_uses_row_width():
    text = str(ones(2, 3))
    assert text.count("\n") == 2
    assert text.count("1.000") == 6


def test_cut_columns():
    m = sequential()
    assert m.cut(2, 4, 0) == (0, 1, 4, 5, 8, 9, 12, 13)
    assert m.cut(1, 4, 3) == (3, 7, 11, 15)


def test_cut_invalid():
    with pytest.raises(ValueError):
        sequential().cut(0, 4, 0)
    with pytest.raises(IndexError):
        sequential().cut(3, 4, 2)


def test_translation_places_offset_in_last_column():
    m = translation(Vector3(1.5, -2.0, 3.0))
    assert (m[0, 3], m[1, 3], m[2, 3]) == (1.5, -2.0, 3.0)
    assert translation((1.5, -2.0, 3.0)) @ translation((-1.5, 2.0, -3.0)) == identity(4)


def test_translation_needs_three_components():
    with pytest.raises(ValueError):
        translation((1.0, 2.0))


def test_scale_diagonal_and_inverse():
    m = scale((2.0, 4.0, 0.5))
    assert (m[0, 0], m[1, 1], m[2, 2], m[3, 3]) == (2.0, 4.0, 0.5, 1.0)
    product = m @ scale((0.5, 0.25, 2.0))
    assert list(product.values) == pytest.approx(list(identity(4).values), abs=1e-9)


def test_rotation_zero_is_identity():
    r = rotation((0.0, 0.0, 0.0))
    assert r.shape == (4, 4)
    assert list(r.values) == pytest.approx(list(identity(4).values), abs=1e-9)


@pytest.mark.parametrize("angles", [(0.3, 0.0, 0.0), (0.0, 1.1, 0.0), (0.0, 0.0, -0.7)])
def test_single_axis_rotation_is_orthogonal(angles):
    r = rotation(angles)
    product = r @ transpose(r)
    assert list(product.values) == pytest.approx(list(identity(4).values), abs=1e-9)


def test_perspective_projection_structure():
    p = perspective_projection(90.0, 800 / 600, 0.01, 1000.0)
    assert p[3, 2] == -1.0
    assert p[3, 3] == 0.0
    assert math.isclose(p[0, 0] * (800 / 600), p[1, 1])
    # Near plane maps to -1 and far plane to +1 in normalised depth.
    for z, expected in ((-0.01, -1.0), (-1000.0, 1.0)):
        clip_z = p[2, 2] * z + p[2, 3]
        clip_w = p[3, 2] * z
        assert math.isclose(clip_z / clip_w, expected, rel_tol=1e-6)


def test_orthographic_projection_maps_bounds():
    o = orthographic_projection(-3.0, 5.0, 2.0, -6.0, 0.5, 10.0)
    assert math.isclose(o[0, 0] * 5.0 + o[0, 3], 1.0)
    assert math.isclose(o[0, 0] * -3.0 + o[0, 3], -1.0)
    assert math.isclose(o[1, 1] * 2.0 + o[1, 3], 1.0)
    assert math.isclose(o[1, 1] * -6.0 + o[1, 3], -1.0)
    assert o[3, 3] == 1.0