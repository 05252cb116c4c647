import math

import pytest

from minish.math3d import (
    mat44_filled,
    mat44_identity,
    mat44_inverse,
    mat44_mult,
    mat44_point_trans,
    mat44_transpose,
    mat44_vec3_trans,
    vec3_add,
    vec3_cross,
    vec3_dot,
    vec3_len,
    vec3_mult,
    vec3_normalize,
    vec3_sub,
)

A = (1.5, -2.0, 3.25)
B = (-4.0, 0.5, 2.0)

INVERTIBLE = (
    (2.0, 0.0, 1.0, 0.0),
    (1.0, 3.0, 0.0, 0.0),
    (0.0, 1.0, 4.0, 0.0),
    (5.0, -2.0, 7.0, 1.0),
)

SCALE = (
    (2.0, 0.0, 0.0, 0.0),
    (0.0, 3.0, 0.0, 0.0),
    (0.0, 0.0, 4.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def assert_matrix_close(left, right):
    for row_l, row_r in zip(left, right):
        assert row_l == pytest.approx(row_r, abs=1e-9)


def test_dot_with_self_is_squared_length():
    assert vec3_dot(A, A) == pytest.approx(vec3_len(A) ** 2)


def test_dot_is_symmetric():
    assert vec3_dot(A, B) == pytest.approx(vec3_dot(B, A))


def test_len_of_zero_vector():
    assert vec3_len((0, 0, 0)) == 0.0


def test_add_then_sub_round_trip():
    assert vec3_sub(vec3_add(A, B), B) == pytest.approx(A)


def test_sub_self_is_zero():
    assert vec3_sub(A, A) == (0.0, 0.0, 0.0)


def test_mult_scales_length():
    assert vec3_len(vec3_mult(A, 3.0)) == pytest.approx(3.0 * vec3_len(A))


def test_mult_by_one_is_identity():
    assert vec3_mult(B, 1.0) == pytest.approx(B)


def test_normalize_gives_unit_length():
    assert vec3_len(vec3_normalize(A)) == pytest.approx(1.0)


def test_normalize_keeps_direction():
    unit = vec3_normalize(B)
    assert vec3_mult(unit, vec3_len(B)) == pytest.approx(B)


def test_normalize_zero_vector_unchanged():
    assert vec3_normalize((0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)


def test_cross_of_unit_axes():
    assert vec3_cross((1, 0, 0), (0, 1, 0)) == pytest.approx((0, 0, 1))


def test_cross_is_orthogonal_to_inputs():
    product = vec3_cross(A, B)
    assert vec3_dot(product, A) == pytest.approx(0.0, abs=1e-9)
    assert vec3_dot(product, B) == pytest.approx(0.0, abs=1e-9)


def test_cross_is_anticommutative():
    assert vec3_cross(A, B) == pytest.approx(vec3_mult(vec3_cross(B, A), -1.0))


def test_vector_with_wrong_size_rejected():
    with pytest.raises(ValueError):
        vec3_dot((1, 2), (3, 4))


def test_identity_has_ones_on_diagonal():
    identity = mat44_identity()
    for i in range(4):
        for j in range(4):
            assert identity[i][j] == (1.0 if i == j else 0.0)


def test_filled_sets_every_entry():
    matrix = mat44_filled(7.5)
    assert all(value == 7.5 for row in matrix for value in row)


def test_mult_by_identity_leaves_matrix():
    assert_matrix_close(mat44_mult(mat44_identity(), INVERTIBLE), INVERTIBLE)
    assert_matrix_close(mat44_mult(INVERTIBLE, mat44_identity()), INVERTIBLE)


def test_mult_is_associative():
    left = mat44_mult(mat44_mult(INVERTIBLE, SCALE), mat44_transpose(INVERTIBLE))
    right = mat44_mult(INVERTIBLE, mat44_mult(SCALE, mat44_transpose(INVERTIBLE)))
    assert_matrix_close(left, right)


def test_transpose_twice_is_identity():
    assert_matrix_close(mat44_transpose(mat44_transpose(INVERTIBLE)), INVERTIBLE)


def test_transpose_swaps_entries():
    transposed = mat44_transpose(INVERTIBLE)
    for i in range(4):
        for j in range(4):
            assert transposed[i][j] == INVERTIBLE[j][i]


def test_inverse_round_trip():
    inverse = mat44_inverse(INVERTIBLE)
    assert_matrix_close(mat44_mult(INVERTIBLE, inverse), mat44_identity())
    assert_matrix_close(mat44_mult(inverse, INVERTIBLE), mat44_identity())


def test_inverse_of_identity():
    assert_matrix_close(mat44_inverse(mat44_identity()), mat44_identity())


def test_inverse_twice_returns_original():
    assert_matrix_close(mat44_inverse(mat44_inverse(INVERTIBLE)), INVERTIBLE)


def test_inverse_of_singular_matrix_raises():
    with pytest.raises(ValueError):
        mat44_inverse(mat44_filled(1.0))


def test_point_trans_identity_keeps_point():
    assert mat44_point_trans(mat44_identity(), A) == pytest.approx(A)


def test_point_trans_inverse_round_trip_for_scale():
    moved = mat44_point_trans(SCALE, A)
    assert mat44_point_trans(mat44_inverse(SCALE), moved) == pytest.approx(A)


def test_vec3_trans_identity_keeps_vector():
    assert mat44_vec3_trans(mat44_identity(), B) == pytest.approx(B)


def test_vec3_trans_ignores_translation_row():
    moved = [list(row) for row in mat44_identity()]
    moved[3] = [10.0, 20.0, 30.0, 1.0]
    assert mat44_vec3_trans(moved, B) == pytest.approx(B)


def test_vec3_trans_is_linear():
    combined = mat44_vec3_trans(INVERTIBLE, vec3_add(A, B))
    separate = vec3_add(mat44_vec3_trans(INVERTIBLE, A), mat44_vec3_trans(INVERTIBLE, B))
    assert combined == pytest.approx(separate)


def test_matrix_with_wrong_shape_rejected():
    with pytest.raises(ValueError):
        mat44_transpose(((1, 2, 3), (4, 5, 6), (7, 8, 9)))


def test_len_matches_math_hypot():
    assert vec3_len(A) == pytest.approx(math.sqrt(sum(x * x for x in A)))