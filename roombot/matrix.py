"""Small dense matrix helpers for covariance propagation."""

from collections.abc import Sequence

Matrix = tuple[tuple[float, ...], ...]


def _check_shape(m: Sequence[Sequence[float]], rows: int, cols: int, name: str) -> None:
    if len(m) != rows or any(len(row) != cols for row in m):
        raise ValueError(f"{name} must be a {rows}x{cols} matrix")


def _transpose(m: Sequence[Sequence[float]]) -> Matrix:
    return tuple(tuple(col) for col in zip(*m))


def _matmul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    if len(a[0]) != len(b):
        raise ValueError("inner matrix dimensions do not agree")
    cols = list(zip(*b))
    return tuple(
        tuple(sum((x * y for x, y in zip(row, col)), 0.0) for col in cols)
        for row in a
    )


def matrix3_to_covar(m: Sequence[Sequence[float]]) -> list[float]:
    """Flatten a 3x3 matrix row by row into nine values."""
    _check_shape(m, 3, 3, "m")
    return [float(value) for row in m for value in row]


def covar_to_matrix3(cov: Sequence[float]) -> Matrix:
    """Build a 3x3 matrix from nine values given row by row."""
    if len(cov) != 9:
        raise ValueError("covariance must hold exactly 9 values")
    return tuple(tuple(float(v) for v in cov[row * 3:row * 3 + 3]) for row in range(3))


def mat_multiply_3x2_2x2_2x3(
    jacob: Sequence[Sequence[float]], covar: Sequence[Sequence[float]]
) -> Matrix:
    """Compute J * (C * J^T) for a 3x2 Jacobian and a 2x2 covariance."""
    _check_shape(jacob, 3, 2, "jacob")
    _check_shape(covar, 2, 2, "covar")
    return _matmul(jacob, _matmul(covar, _transpose(jacob)))


def mat_multiply_3x3_3x3_3x3(
    jacob: Sequence[Sequence[float]], covar: Sequence[Sequence[float]]
) -> Matrix:
    """Compute J * (C * J^T) for 3x3 matrices."""
    _check_shape(jacob, 3, 3, "jacob")
    _check_shape(covar, 3, 3, "covar")
    return _matmul(jacob, _matmul(covar, _transpose(jacob)))