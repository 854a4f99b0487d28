r"""
Conversions of any rotation representation into a rotation vector.

A rotation vector is :math:`\mathbf{v}=\theta\hat{\mathbf{x}}`, the rotation axis scaled by the rotation angle.  The
zero rotation is the zero vector.  If any of the components consumed by a conversion is NaN or infinite then every
component of the result is NaN.
"""

from rotconv._typing import OUT
from rotconv.rotations.core._helpers import _nan_like, _pack, _tolerances
from rotconv.rotations.core.axis_angle import axis_angle_from_matrix, axis_angle_from_quaternion
from rotconv.rotations.core.features import contains_non_finite, norm
from rotconv.rotations.core.quaternion import quaternion_from_yaw_pitch_roll
from rotconv.rotations.core.representations import AxisAngle, RotationVector
from rotconv.rotations.core.tolerances import ConversionTolerances


__all__ = ['ZERO_ROTATION_VECTOR', 'rotation_vector_from_axis_angle', 'rotation_vector_from_quaternion',
           'rotation_vector_from_matrix', 'rotation_vector_from_yaw_pitch_roll']


ZERO_ROTATION_VECTOR = RotationVector(0.0, 0.0, 0.0)
"""
The rotation vector of the zero rotation.
"""


def _scale(axis_angle: AxisAngle, out: OUT) -> RotationVector:
    # the canonical zero axis-angle has a unit axis so the zero rotation falls out as the zero vector
    return _pack(RotationVector(axis_angle.x * axis_angle.angle,
                                axis_angle.y * axis_angle.angle,
                                axis_angle.z * axis_angle.angle), out)


def rotation_vector_from_axis_angle(ux: float, uy: float, uz: float, angle: float,
                                    out: OUT = None,
                                    tolerances: ConversionTolerances | None = None) -> RotationVector:
    """
    This function converts an axis-angle into a rotation vector.

    The axis does not need to be unit length, it is normalized before being scaled by the angle.  An axis shorter than
    ``tolerances.zero_epsilon`` gives the zero vector.

    :param ux: the x component of the rotation axis
    :param uy: the y component of the rotation axis
    :param uz: the z component of the rotation axis
    :param angle: the rotation angle in radians
    :param out: optional length 3 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation vector equivalent to the axis-angle
    """

    tolerances = _tolerances(tolerances)

    if contains_non_finite(ux, uy, uz, angle):
        return _pack(_nan_like(RotationVector), out)

    axis_norm = norm(ux, uy, uz)

    if axis_norm < tolerances.zero_epsilon:
        return _pack(ZERO_ROTATION_VECTOR, out)

    scale = angle / axis_norm

    return _pack(RotationVector(ux * scale, uy * scale, uz * scale), out)


def rotation_vector_from_quaternion(qx: float, qy: float, qz: float, qs: float,
                                    out: OUT = None,
                                    tolerances: ConversionTolerances | None = None) -> RotationVector:
    """
    This function converts a quaternion (not necessarily unit length) into a rotation vector.

    The angle and axis are found with :func:`.axis_angle_from_quaternion` so the resulting vector has a length of at most
    pi.

    :param out: optional length 3 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation vector equivalent to the quaternion
    """

    return _scale(axis_angle_from_quaternion(qx, qy, qz, qs, tolerances=tolerances), out)


def rotation_vector_from_matrix(m00: float, m01: float, m02: float,
                                m10: float, m11: float, m12: float,
                                m20: float, m21: float, m22: float,
                                out: OUT = None,
                                tolerances: ConversionTolerances | None = None) -> RotationVector:
    """
    This function converts a rotation matrix into a rotation vector.

    The angle and axis are found with :func:`.axis_angle_from_matrix`, including its handling of rotations close to pi.

    :param out: optional length 3 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation vector equivalent to the rotation matrix
    """

    return _scale(axis_angle_from_matrix(m00, m01, m02, m10, m11, m12, m20, m21, m22, tolerances=tolerances), out)


def rotation_vector_from_yaw_pitch_roll(yaw: float, pitch: float, roll: float,
                                        out: OUT = None,
                                        tolerances: ConversionTolerances | None = None) -> RotationVector:
    """
    This function converts yaw-pitch-roll angles into a rotation vector.

    This is done through :func:`.quaternion_from_yaw_pitch_roll` followed by :func:`rotation_vector_from_quaternion`.

    :param yaw: the rotation about z in radians
    :param pitch: the rotation about y in radians
    :param roll: the rotation about x in radians
    :param out: optional length 3 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation vector equivalent to the yaw-pitch-roll angles
    """

    return rotation_vector_from_quaternion(*quaternion_from_yaw_pitch_roll(yaw, pitch, roll), out=out,
                                           tolerances=tolerances)
