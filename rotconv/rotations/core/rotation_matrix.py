r"""
Synthesis of rotation matrices from the other rotation representations.

The matrices are returned as a :class:`.RotationMatrix` named tuple of the 9 entries in row-major order.  Use
:meth:`.RotationMatrix.as_array` to get a 3x3 numpy array.  Every rotation can be represented as a matrix, so the only
special cases are NaN or infinite input (all entries NaN) and degenerate input (the identity).
"""

from rotconv._typing import OUT
from rotconv.rotations.core._helpers import _nan_like, _pack, _tolerances
from rotconv.rotations.core.elementals import axis_angle_matrix_entries, yaw_pitch_roll_matrix_entries
from rotconv.rotations.core.features import contains_non_finite, norm
from rotconv.rotations.core.representations import RotationMatrix
from rotconv.rotations.core.tolerances import ConversionTolerances


__all__ = ['IDENTITY_MATRIX', 'matrix_from_axis_angle', 'matrix_from_quaternion', 'matrix_from_yaw_pitch_roll',
           'matrix_from_rotation_vector']


IDENTITY_MATRIX = RotationMatrix(1.0, 0.0, 0.0,
                                 0.0, 1.0, 0.0,
                                 0.0, 0.0, 1.0)
"""
The matrix of the zero rotation.
"""


def matrix_from_axis_angle(ux: float, uy: float, uz: float, angle: float,
                           out: OUT = None,
                           tolerances: ConversionTolerances | None = None) -> RotationMatrix:
    r"""
    This function converts an axis-angle into a rotation matrix using Rodrigues' formula.

    .. math::
        \mathbf{T} = \text{cos}(\theta)\mathbf{I}_{3\times 3}+\text{sin}(\theta)\left[\hat{\mathbf{x}}\times\right]+
        (1-\text{cos}(\theta))\hat{\mathbf{x}}\hat{\mathbf{x}}^T

    The axis is normalized first.  An axis shorter than ``tolerances.zero_epsilon`` gives the identity matrix.

    :param ux: the x component of the rotation axis
    :param uy: the y component of the rotation axis
    :param uz: the z component of the rotation axis
    :param angle: the rotation angle in radians
    :param out: optional length 9 (or 3x3) container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation matrix equivalent to the axis-angle
    """

    tolerances = _tolerances(tolerances)

    if contains_non_finite(ux, uy, uz, angle):
        return _pack(_nan_like(RotationMatrix), out)

    axis_norm = norm(ux, uy, uz)

    if axis_norm < tolerances.zero_epsilon:
        return _pack(IDENTITY_MATRIX, out)

    return _pack(axis_angle_matrix_entries(ux / axis_norm, uy / axis_norm, uz / axis_norm, angle), out)


def matrix_from_rotation_vector(rx: float, ry: float, rz: float,
                                out: OUT = None,
                                tolerances: ConversionTolerances | None = None) -> RotationMatrix:
    """
    This function converts a rotation vector into a rotation matrix.

    The angle is the length of the vector.  A vector shorter than ``tolerances.zero_epsilon`` gives the identity.

    :param out: optional length 9 (or 3x3) container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation matrix equivalent to the rotation vector
    """

    return matrix_from_axis_angle(rx, ry, rz, norm(rx, ry, rz), out=out, tolerances=tolerances)


def matrix_from_quaternion(qx: float, qy: float, qz: float, qs: float,
                           out: OUT = None,
                           tolerances: ConversionTolerances | None = None) -> RotationMatrix:
    r"""
    This function converts a quaternion into a rotation matrix.

    The quaternion does not need to be unit length.  With :math:`s = 2/\left\|\mathbf{q}\right\|^2` the matrix is

    .. math::
        \mathbf{T} = \left[\begin{array}{ccc}
        1 - s(q_y^2+q_z^2) & s(q_xq_y - q_sq_z) & s(q_xq_z + q_sq_y) \\
        s(q_xq_y + q_sq_z) & 1 - s(q_x^2+q_z^2) & s(q_yq_z - q_sq_x) \\
        s(q_xq_z - q_sq_y) & s(q_yq_z + q_sq_x) & 1 - s(q_x^2+q_y^2) \end{array}\right]

    A quaternion whose norm is below ``tolerances.zero_epsilon`` gives the identity matrix.

    :param out: optional length 9 (or 3x3) container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation matrix equivalent to the quaternion
    """

    tolerances = _tolerances(tolerances)

    if contains_non_finite(qx, qy, qz, qs):
        return _pack(_nan_like(RotationMatrix), out)

    norm_squared = qx * qx + qy * qy + qz * qz + qs * qs

    if norm_squared < tolerances.zero_epsilon ** 2:
        return _pack(IDENTITY_MATRIX, out)

    s = 2.0 / norm_squared

    xx = s * qx * qx
    yy = s * qy * qy
    zz = s * qz * qz
    xy = s * qx * qy
    xz = s * qx * qz
    yz = s * qy * qz
    sx = s * qs * qx
    sy = s * qs * qy
    sz = s * qs * qz

    return _pack(RotationMatrix(1.0 - yy - zz, xy - sz, xz + sy,
                                xy + sz, 1.0 - xx - zz, yz - sx,
                                xz - sy, yz + sx, 1.0 - xx - yy), out)


def matrix_from_yaw_pitch_roll(yaw: float, pitch: float, roll: float, out: OUT = None) -> RotationMatrix:
    r"""
    This function converts yaw-pitch-roll angles into a rotation matrix.

    The matrix is :math:`\mathbf{R}_z(\psi)\mathbf{R}_y(\theta)\mathbf{R}_x(\phi)` expanded in closed form (see
    :func:`.yaw_pitch_roll_matrix_entries`).

    :param yaw: the rotation about z in radians
    :param pitch: the rotation about y in radians
    :param roll: the rotation about x in radians
    :param out: optional length 9 (or 3x3) container to receive the result
    :return: the rotation matrix equivalent to the yaw-pitch-roll angles
    """

    if contains_non_finite(yaw, pitch, roll):
        return _pack(_nan_like(RotationMatrix), out)

    return _pack(yaw_pitch_roll_matrix_entries(yaw, pitch, roll), out)
