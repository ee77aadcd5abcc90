import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ifsevo.core.algebra import (
    MatrixParams,
    decompose_matrix,
    determinant3x3,
    enforce_contractivity,
    enforce_transform_contractivity,
    is_contractive,
    reconstruct_matrix,
    rotation_matrix,
    spectral_radius,
)
from ifsevo.core.transform import Transform

matrices = st.lists(
    st.floats(min_value=-3.0, max_value=3.0, allow_nan=False, allow_infinity=False),
    min_size=9,
    max_size=9,
).map(tuple)


def test_spectral_radius_and_determinant_of_scaled_identity():
    m = (0.5, 0, 0, 0, 0.5, 0, 0, 0, 0.5)
    assert spectral_radius(m) == pytest.approx(0.5)
    assert determinant3x3(m) == pytest.approx(0.125)
    assert is_contractive(Transform(m=m))
    assert not is_contractive(Transform(m=(1, 0, 0, 0, 1, 0, 0, 0, 1)))


@settings(max_examples=200, deadline=None)
@given(matrices)
def test_enforce_contractivity_bounds_spectral_radius(m):
    result = enforce_contractivity(m, 0.85)
    r = spectral_radius(m)
    if r > 0.85:
        assert spectral_radius(result) == pytest.approx(0.85, rel=1e-9)
    else:
        # untouched, same object
        assert result is m


@settings(max_examples=100, deadline=None)
@given(matrices)
def test_enforce_contractivity_is_idempotent(m):
    once = enforce_contractivity(m, 0.85)
    twice = enforce_contractivity(once, 0.85)
    assert twice == pytest.approx(once)


def test_enforce_transform_contractivity_keeps_other_fields():
    t = Transform(m=(2, 0, 0, 0, 2, 0, 0, 0, 2), tx=0.1, ty=0.2, tz=0.3, probability=0.4, color=(1, 2, 3))
    scaled = enforce_transform_contractivity(t)
    assert spectral_radius(scaled.m) == pytest.approx(0.85)
    assert scaled.translation == t.translation
    assert scaled.probability == t.probability
    assert scaled.color == t.color

    small = Transform(m=(0.1, 0, 0, 0, 0.1, 0, 0, 0, 0.1))
    assert enforce_transform_contractivity(small) is small


def test_decompose_scaled_identity():
    params = decompose_matrix((0.5, 0, 0, 0, 0.4, 0, 0, 0, 0.3))
    assert params.scale_x == pytest.approx(0.5)
    assert params.scale_y == pytest.approx(0.4)
    assert params.scale_z == pytest.approx(0.3)
    assert params.rotation_x == pytest.approx(0.0)
    assert params.rotation_y == pytest.approx(0.0)
    assert params.rotation_z == pytest.approx(0.0)
    assert (params.shear_xy, params.shear_xz, params.shear_yz) == pytest.approx((0.0, 0.0, 0.0))


def test_decompose_zero_columns_does_not_divide_by_zero():
    params = decompose_matrix((0,) * 9)
    assert params.scale_x == 0.0
    assert all(math.isfinite(v) for v in vars(params).values())


def test_reconstruct_diagonal():
    m = reconstruct_matrix(MatrixParams(0.5, 0.4, 0.3, 0, 0, 0, 0, 0, 0))
    assert m == pytest.approx((0.5, 0, 0, 0, 0.4, 0, 0, 0, 0.3))


def test_decompose_recovers_rotation_about_z():
    angle = 0.3
    c, s = math.cos(angle), math.sin(angle)
    params = decompose_matrix((0.6 * c, -0.6 * s, 0, 0.6 * s, 0.6 * c, 0, 0, 0, 0.6))
    assert params.rotation_z == pytest.approx(angle)
    assert params.scale_x == pytest.approx(0.6)


def test_rotation_matrix_is_scaled_orthogonal():
    m = rotation_matrix(0.3, -1.1, 2.0, scale=0.4)
    # columns have norm == scale
    for col in range(3):
        norm = math.sqrt(sum(m[row * 3 + col] ** 2 for row in range(3)))
        assert norm == pytest.approx(0.4)
    assert abs(determinant3x3(m)) == pytest.approx(0.4 ** 3)
