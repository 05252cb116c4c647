"""Three-component vectors and 4x4 matrices.

Vectors are 3-tuples of floats and matrices are 4-tuples of 4-tuples of
floats, indexed ``matrix[row][column]``.  Points are transformed as row
vectors, so the translation lives in row 3.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

Vec3 = Tuple[float, float, float]
Row4 = Tuple[float, float, float, float]
Mat44 = Tuple[Row4, Row4, Row4, Row4]

# For each row/column index, the three indices that remain once it is removed.
_OTHERS = ((1, 2, 3), (0, 2, 3), (0, 1, 3), (0, 1, 2))


def _vec(values: Iterable[float]) -> Vec3:
    items = tuple(float(value) for value in values)
    if len(items) != 3:
        raise ValueError(f"a vector needs 3 components, got {len(items)}")
    return items  # type: ignore[return-value]


def _mat(rows: Iterable[Iterable[float]]) -> Mat44:
    matrix = tuple(tuple(float(value) for value in row) for row in rows)
    if len(matrix) != 4 or any(len(row) != 4 for row in matrix):
        raise ValueError("a matrix must have 4 rows of 4 values")
    return matrix  # type: ignore[return-value]


def vec3_dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Scalar product of a and b."""
    return sum(x * y for x, y in zip(_vec(a), _vec(b)))


def vec3_len(vec: Sequence[float]) -> float:
    """Euclidean length of vec."""
    x, y, z = _vec(vec)
    return math.sqrt(x * x + y * y + z * z)


def vec3_add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Component-wise sum a + b."""
    return _vec(x + y for x, y in zip(_vec(a), _vec(b)))


def vec3_sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Component-wise difference a - b."""
    return _vec(x - y for x, y in zip(_vec(a), _vec(b)))


def vec3_mult(vec: Sequence[float], factor: float) -> Vec3:
    """vec scaled by factor."""
    return _vec(x * factor for x in _vec(vec))


def vec3_normalize(vec: Sequence[float]) -> Vec3:
    """vec scaled to unit length; the zero vector is returned unchanged."""
    components = _vec(vec)
    squared = sum(x * x for x in components)
    if squared > 0:
        scale = 1 / math.sqrt(squared)
        return _vec(x * scale for x in components)
    return components


def vec3_cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Cross product a x b."""
    ax, ay, az = _vec(a)
    bx, by, bz = _vec(b)
    return (ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def mat44_identity() -> Mat44:
    """The 4x4 identity matrix."""
    return _mat((1.0 if row == col else 0.0 for col in range(4)) for row in range(4))


def mat44_filled(value: float) -> Mat44:
    """A 4x4 matrix with every entry set to value."""
    return _mat((value,) * 4 for _ in range(4))


def _det33(a: Vec3, b: Vec3, c: Vec3) -> float:
    return (
        a[0] * (b[1] * c[2] - b[2] * c[1])
        - b[0] * (a[1] * c[2] - a[2] * c[1])
        + c[0] * (a[1] * b[2] - a[2] * b[1])
    )


def _adjoint(matrix: Mat44) -> Mat44:
    adjoint = [[0.0] * 4 for _ in range(4)]
    for i, rows in enumerate(_OTHERS):
        for j, cols in enumerate(_OTHERS):
            minor = _det33(*(tuple(matrix[r][c] for c in cols) for r in rows))
            adjoint[j][i] = -minor if (i + j) % 2 else minor
    return _mat(adjoint)


def mat44_inverse(matrix: Sequence[Sequence[float]]) -> Mat44:
    """Inverse of matrix.

    Raises ValueError when the matrix is singular.
    """
    source = _mat(matrix)
    adjoint = _adjoint(source)
    determinant = sum(source[k][0] * adjoint[0][k] for k in range(4))
    if determinant == 0.0:
        raise ValueError("matrix is singular and has no inverse")
    scale = 1 / determinant
    return _mat((value * scale for value in row) for row in adjoint)


def mat44_mult(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Mat44:
    """Compose two transforms: the result applies a first, then b."""
    left = _mat(a)
    right = _mat(b)
    return _mat(
        (sum(right[i][k] * left[k][j] for k in range(4)) for j in range(4))
        for i in range(4)
    )


def mat44_transpose(matrix: Sequence[Sequence[float]]) -> Mat44:
    """Rows and columns of matrix swapped."""
    source = _mat(matrix)
    return _mat((source[j][i] for j in range(4)) for i in range(4))


def mat44_point_trans(matrix: Sequence[Sequence[float]], point: Sequence[float]) -> Vec3:
    """Transform a point, translation included, with a perspective divide."""
    m = _mat(matrix)
    x, y, z = _vec(point)
    out = [x * m[0][i] + y * m[1][i] + z * m[2][i] + m[3][i] for i in range(3)]
    w = x * m[3][0] + y * m[3][1] + z * m[3][2] + m[3][3]
    if w != 1.0 and w != 0.0:
        inverse_w = 1 / w
        out = [value * inverse_w for value in out]
    return _vec(out)


def mat44_vec3_trans(matrix: Sequence[Sequence[float]], vec: Sequence[float]) -> Vec3:
    """Transform a direction, ignoring translation."""
    m = _mat(matrix)
    x, y, z = _vec(vec)
    return _vec(x * m[0][i] + y * m[1][i] + z * m[2][i] for i in range(3))