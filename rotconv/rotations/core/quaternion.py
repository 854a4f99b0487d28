# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Conversions of any rotation representation into a unit rotation quaternion.

Quaternions are stored vector first, :math:`\mathbf{q}=[q_x, q_y, q_z, q_s]^T`, where
:math:`\mathbf{q}_v=\text{sin}(\theta/2)\hat{\mathbf{x}}` and :math:`q_s=\text{cos}(\theta/2)`.  If any of the
components consumed by a conversion is NaN or infinite then every component of the result is NaN.
"""

import numpy as np

from rotconv._typing import OUT
from rotconv.rotations.core._helpers import _nan_like, _pack, _tolerances
from rotconv.rotations.core.axis_angle import axis_angle_from_rotation_vector
from rotconv.rotations.core.features import contains_non_finite, norm
from rotconv.rotations.core.representations import Quaternion
from rotconv.rotations.core.tolerances import ConversionTolerances


__all__ = ['IDENTITY_QUATERNION', 'quaternion_normalize', 'quaternion_from_axis_angle', 'quaternion_from_matrix',
           'quaternion_from_rotation_vector', 'quaternion_from_yaw_pitch_roll']


IDENTITY_QUATERNION = Quaternion(0.0, 0.0, 0.0, 1.0)
"""
The quaternion of the zero rotation.
"""


def quaternion_normalize(qx: float, qy: float, qz: float, qs: float,
                         out: OUT = None,
                         tolerances: ConversionTolerances | None = None) -> Quaternion:
    """
    Normalizes the quaternion such that the scalar term is non-negative and the length is 1.

    A quaternion whose norm is below ``tolerances.zero_epsilon`` is replaced by the identity quaternion.

    :param out: optional length 4 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :returns: The normalized quaternion
    """

    tolerances = _tolerances(tolerances)

    if contains_non_finite(qx, qy, qz, qs):
        return _pack(_nan_like(Quaternion), out)

    quaternion_norm = norm(qx, qy, qz, qs)

    if quaternion_norm < tolerances.zero_epsilon:
        return _pack(IDENTITY_QUATERNION, out)

    scale = (-1.0 if qs < 0 else 1.0) / quaternion_norm

    return _pack(Quaternion(qx * scale, qy * scale, qz * scale, qs * scale), out)


def quaternion_from_axis_angle(ux: float, uy: float, uz: float, angle: float,
                               out: OUT = None,
                               tolerances: ConversionTolerances | None = None) -> Quaternion:
    r"""
    This function converts an axis-angle into a rotation quaternion.

    The axis does not need to be unit length, it is normalized internally:

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\frac{\mathbf{u}}{\left\|\mathbf{u}\right\|} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    An axis shorter than ``tolerances.zero_epsilon`` gives the identity quaternion.

    :param ux: the x component of the rotation axis
    :param uy: the y component of the rotation axis
    :param uz: the z component of the rotation axis
    :param angle: the rotation angle in radians
    :param out: optional length 4 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation quaternion equivalent to the axis-angle
    """

    tolerances = _tolerances(tolerances)

    if contains_non_finite(ux, uy, uz, angle):
        return _pack(_nan_like(Quaternion), out)

    axis_norm = norm(ux, uy, uz)

    if axis_norm < tolerances.zero_epsilon:
        return _pack(IDENTITY_QUATERNION, out)

    half_angle = 0.5 * angle
    sin_half_angle = np.sin(half_angle) / axis_norm

    return _pack(Quaternion(ux * sin_half_angle, uy * sin_half_angle, uz * sin_half_angle, np.cos(half_angle)), out)


def quaternion_from_matrix(m00: float, m01: float, m02: float,
                           m10: float, m11: float, m12: float,
                           m20: float, m21: float, m22: float,
                           out: OUT = None,
                           tolerances: ConversionTolerances | None = None) -> Quaternion:
    r"""
    This function converts a rotation matrix into a rotation quaternion.

    Each formula for the quaternion recovers one component from the diagonal and the other three by dividing
    off-diagonal sums or differences by it.  To avoid dividing by a small number the pivot component is chosen as:

    * :math:`q_s` if the trace is positive, :math:`q_s=\frac{1}{2}\sqrt{1+\text{Tr}(\mathbf{T})}`
    * otherwise the vector component of the largest diagonal entry, for instance
      :math:`q_x=\frac{1}{2}\sqrt{1+t_{00}-t_{11}-t_{22}}`

    The result is normalized and its scalar term made non-negative.

    :param out: optional length 4 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation quaternion equivalent to the rotation matrix
    """

    if contains_non_finite(m00, m01, m02, m10, m11, m12, m20, m21, m22):
        return _pack(_nan_like(Quaternion), out)

    trace = m00 + m11 + m22

    if trace > 0:
        # s = 4*qs
        s = 2.0 * np.sqrt(trace + 1.0)
        qs = 0.25 * s
        qx = (m21 - m12) / s
        qy = (m02 - m20) / s
        qz = (m10 - m01) / s
    elif m00 >= m11 and m00 >= m22:
        # s = 4*qx
        s = 2.0 * np.sqrt(1.0 + m00 - m11 - m22)
        qs = (m21 - m12) / s
        qx = 0.25 * s
        qy = (m01 + m10) / s
        qz = (m02 + m20) / s
    elif m11 >= m22:
        # s = 4*qy
        s = 2.0 * np.sqrt(1.0 + m11 - m00 - m22)
        qs = (m02 - m20) / s
        qx = (m01 + m10) / s
        qy = 0.25 * s
        qz = (m12 + m21) / s
    else:
        # s = 4*qz
        s = 2.0 * np.sqrt(1.0 + m22 - m00 - m11)
        qs = (m10 - m01) / s
        qx = (m02 + m20) / s
        qy = (m12 + m21) / s
        qz = 0.25 * s

    return quaternion_normalize(qx, qy, qz, qs, out=out, tolerances=tolerances)


def quaternion_from_rotation_vector(rx: float, ry: float, rz: float,
                                    out: OUT = None,
                                    tolerances: ConversionTolerances | None = None) -> Quaternion:
    """
    This function converts a rotation vector into a rotation quaternion.

    The rotation vector is first converted into an axis-angle with :func:`.axis_angle_from_rotation_vector` which is
    then passed to :func:`quaternion_from_axis_angle`.  A zero rotation vector gives the identity quaternion.

    :param rx: the x component of the rotation vector
    :param ry: the y component of the rotation vector
    :param rz: the z component of the rotation vector
    :param out: optional length 4 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation quaternion equivalent to the rotation vector
    """

    axis_angle = axis_angle_from_rotation_vector(rx, ry, rz, tolerances=tolerances)

    return quaternion_from_axis_angle(*axis_angle, out=out, tolerances=tolerances)


def quaternion_from_yaw_pitch_roll(yaw: float, pitch: float, roll: float,
                                   out: OUT = None) -> Quaternion:
    r"""
    This function converts yaw-pitch-roll angles into a rotation quaternion.

    The result is the product of the elementary quaternions
    :math:`\mathbf{q}_z(\psi)\otimes\mathbf{q}_y(\theta)\otimes\mathbf{q}_x(\phi)` expanded in closed form.  This is the
    same rotation that composing through the axis-angle would give, without the round off of forming the matrix first.
    Like :func:`quaternion_from_matrix` the scalar term of the result is non-negative.

    :param yaw: the rotation about z in radians
    :param pitch: the rotation about y in radians
    :param roll: the rotation about x in radians
    :param out: optional length 4 container to receive the result
    :return: the rotation quaternion equivalent to the yaw-pitch-roll angles
    """

    if contains_non_finite(yaw, pitch, roll):
        return _pack(_nan_like(Quaternion), out)

    half_yaw = 0.5 * yaw
    cos_yaw = np.cos(half_yaw)
    sin_yaw = np.sin(half_yaw)

    half_pitch = 0.5 * pitch
    cos_pitch = np.cos(half_pitch)
    sin_pitch = np.sin(half_pitch)

    half_roll = 0.5 * roll
    cos_roll = np.cos(half_roll)
    sin_roll = np.sin(half_roll)

    qs = cos_yaw * cos_pitch * cos_roll + sin_yaw * sin_pitch * sin_roll
    qx = cos_yaw * cos_pitch * sin_roll - sin_yaw * sin_pitch * cos_roll
    qy = sin_yaw * cos_pitch * sin_roll + cos_yaw * sin_pitch * cos_roll
    qz = sin_yaw * cos_pitch * cos_roll - cos_yaw * sin_pitch * sin_roll

    if qs < 0:
        qx, qy, qz, qs = -qx, -qy, -qz, -qs

    return _pack(Quaternion(qx, qy, qz, qs), out)
