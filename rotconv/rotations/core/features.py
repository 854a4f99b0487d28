"""
Predicates and small measures on raw rotation components.

Nothing here depends on the other rotation modules so every converter can use these freely.
"""

import numpy as np


__all__ = ['contains_nan', 'contains_non_finite', 'norm', 'determinant', 'is_rotation_matrix', 'is_zero_rotation']


EPS_CHECK_ROTATION = 1e-7
"""
Default tolerance of :func:`is_rotation_matrix`.
"""

EPS_CHECK_ZERO_ROTATION = 1e-10
"""
Default tolerance of :func:`is_zero_rotation`.
"""


def contains_nan(*values: float) -> bool:
    """
    Return ``True`` if any of the given values is NaN.
    """
    return any(np.isnan(value) for value in values)


def contains_non_finite(*values: float) -> bool:
    """
    Return ``True`` if any of the given values is NaN or infinite.
    """
    return not all(np.isfinite(value) for value in values)


def norm(*values: float) -> float:
    """
    The euclidean norm of the given components.
    """
    return np.sqrt(sum(value * value for value in values))


def determinant(m00: float, m01: float, m02: float,
                m10: float, m11: float, m12: float,
                m20: float, m21: float, m22: float) -> float:
    """
    The determinant of the 3x3 matrix given in row-major order.
    """
    return m00 * (m11 * m22 - m21 * m12) - m01 * (m10 * m22 - m20 * m12) + m02 * (m10 * m21 - m20 * m11)


def is_rotation_matrix(m00: float, m01: float, m02: float,
                       m10: float, m11: float, m12: float,
                       m20: float, m21: float, m22: float,
                       epsilon: float = EPS_CHECK_ROTATION) -> bool:
    """
    Check whether the given entries form a rotation matrix.

    The matrix is considered a rotation if:

    * the length of each row is 1 +/- epsilon,
    * the dot product of each pair of rows is 0 +/- epsilon,
    * the determinant is 1 +/- epsilon.

    :param epsilon: the tolerance applied to each of the checks above
    :return: ``True`` if the matrix is a rotation matrix, ``False`` otherwise (including when it contains NaN)
    """

    rows = ((m00, m01, m02), (m10, m11, m12), (m20, m21, m22))

    for row in rows:
        if not abs(norm(*row) - 1.0) <= epsilon:
            return False

    for first, second in ((0, 1), (0, 2), (1, 2)):
        dot = sum(a * b for a, b in zip(rows[first], rows[second]))
        if not abs(dot) <= epsilon:
            return False

    return abs(determinant(m00, m01, m02, m10, m11, m12, m20, m21, m22) - 1.0) <= epsilon


def is_zero_rotation(m00: float, m01: float, m02: float,
                     m10: float, m11: float, m12: float,
                     m20: float, m21: float, m22: float,
                     epsilon: float = EPS_CHECK_ZERO_ROTATION) -> bool:
    """
    Check whether the given rotation matrix is the identity.

    Only the trace and the symmetry of the off-diagonal terms are checked, so this is only meaningful for matrices that
    are already known to be rotations.
    """
    return (abs(m00 + m11 + m22 - 3.0) < epsilon and abs(m01 - m10) < epsilon and abs(m02 - m20) < epsilon and
            abs(m12 - m21) < epsilon)
