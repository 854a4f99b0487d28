# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Decomposition of any rotation representation into yaw-pitch-roll (Z-Y-X Euler) angles.

The angles are defined such that the rotation matrix is

.. math::
    \mathbf{T} = \mathbf{R}_z(\psi)\mathbf{R}_y(\theta)\mathbf{R}_x(\phi)

where :math:`\psi` is the yaw, :math:`\theta` the pitch and :math:`\phi` the roll.  They are recovered from 5 entries
of this matrix

.. math::
    \theta = \text{asin}(-t_{20}) \qquad \psi = \text{atan2}(t_{10}, t_{00}) \qquad \phi = \text{atan2}(t_{21}, t_{22})

which are computed in closed form from the source representation, so no intermediate matrix is ever formed.

Close to a pitch of :math:`\pm\pi/2` yaw and roll describe the same motion and cannot be separated (gimbal lock).  If
the pitch falls outside of :data:`.MIN_PITCH_ANGLE`, :data:`.MAX_PITCH_ANGLE` then all three angles are NaN.  The same
is true when any consumed input component is NaN or infinite.  The zero rotation gives :math:`(0, 0, 0)`.
"""

from typing import NamedTuple

import numpy as np

from rotconv._typing import OUT
from rotconv.rotations.core._helpers import _nan_like, _pack, _tolerances
from rotconv.rotations.core.features import contains_non_finite, norm
from rotconv.rotations.core.representations import YawPitchRoll
from rotconv.rotations.core.tolerances import ConversionTolerances, MAX_PITCH_ANGLE, MIN_PITCH_ANGLE


__all__ = ['MIN_PITCH_ANGLE', 'MAX_PITCH_ANGLE', 'ZERO_YAW_PITCH_ROLL',
           'yaw_pitch_roll_from_matrix', 'yaw_pitch_roll_from_quaternion', 'yaw_pitch_roll_from_axis_angle',
           'yaw_pitch_roll_from_rotation_vector',
           'compute_yaw_from_matrix', 'compute_pitch_from_matrix', 'compute_roll_from_matrix',
           'compute_yaw_from_quaternion', 'compute_pitch_from_quaternion', 'compute_roll_from_quaternion',
           'compute_yaw_from_axis_angle', 'compute_pitch_from_axis_angle', 'compute_roll_from_axis_angle',
           'compute_yaw_from_rotation_vector', 'compute_pitch_from_rotation_vector',
           'compute_roll_from_rotation_vector']


ZERO_YAW_PITCH_ROLL = YawPitchRoll(0.0, 0.0, 0.0)
"""
The yaw-pitch-roll angles of the zero rotation.
"""


class _DecompositionEntries(NamedTuple):
    """
    The matrix entries needed to recover the three angles.
    """

    m00: float
    m10: float
    m20: float
    m21: float
    m22: float


_IDENTITY_ENTRIES = _DecompositionEntries(1.0, 0.0, 0.0, 0.0, 1.0)


def _pitch(m20: float, tolerances: ConversionTolerances) -> float:
    """
    asin(-m20), or NaN when the result is outside of the pitch bounds.
    """

    pitch = np.arcsin(np.clip(-m20, -1.0, 1.0))

    if abs(pitch) > tolerances.max_pitch_angle + tolerances.pitch_boundary_tolerance:
        return np.nan

    return pitch


def _decompose(entries: _DecompositionEntries, tolerances: ConversionTolerances) -> YawPitchRoll:
    if contains_non_finite(*entries):
        return _nan_like(YawPitchRoll)

    pitch = _pitch(entries.m20, tolerances)

    if np.isnan(pitch):
        # gimbal lock
        return _nan_like(YawPitchRoll)

    return YawPitchRoll(np.arctan2(entries.m10, entries.m00), pitch, np.arctan2(entries.m21, entries.m22))


def _quaternion_scale(qx: float, qy: float, qz: float, qs: float, tolerances: ConversionTolerances) -> float | None:
    """
    2/|q|^2, which removes the need for a unit quaternion in the matrix entries.

    Returns 0 for the zero quaternion (every entry is then that of the identity) and None for non-finite input.
    """

    if contains_non_finite(qx, qy, qz, qs):
        return None

    norm_squared = qx * qx + qy * qy + qz * qz + qs * qs

    if norm_squared < tolerances.zero_epsilon ** 2:
        return 0.0

    return 2.0 / norm_squared


def _quaternion_entries(qx: float, qy: float, qz: float, qs: float,
                        tolerances: ConversionTolerances) -> _DecompositionEntries | None:
    """
    Returns None for NaN or infinite input.
    """

    s = _quaternion_scale(qx, qy, qz, qs, tolerances)

    if s is None:
        return None

    if s == 0.0:
        return _IDENTITY_ENTRIES

    return _DecompositionEntries(1.0 - s * (qy * qy + qz * qz),
                                 s * (qx * qy + qs * qz),
                                 s * (qx * qz - qs * qy),
                                 s * (qy * qz + qs * qx),
                                 1.0 - s * (qx * qx + qy * qy))


def _axis_angle_terms(ux: float, uy: float, uz: float, angle: float,
                      tolerances: ConversionTolerances) -> tuple[float, float, float, float, float] | None:
    """
    The unit axis with the sine and cosine of the angle.

    A zero axis gives the terms of the zero rotation and non-finite input gives None.
    """

    if contains_non_finite(ux, uy, uz, angle):
        return None

    axis_norm = norm(ux, uy, uz)

    if axis_norm < tolerances.zero_epsilon:
        return 0.0, 0.0, 0.0, 0.0, 1.0

    return ux / axis_norm, uy / axis_norm, uz / axis_norm, np.sin(angle), np.cos(angle)


def _axis_angle_entries(ux: float, uy: float, uz: float, angle: float,
                        tolerances: ConversionTolerances) -> _DecompositionEntries | None:
    """
    Returns None for NaN or infinite input.
    """

    terms = _axis_angle_terms(ux, uy, uz, angle, tolerances)

    if terms is None:
        return None

    ux, uy, uz, sin_angle, cos_angle = terms

    if sin_angle == 0.0 and cos_angle == 1.0:
        return _IDENTITY_ENTRIES

    t = 1.0 - cos_angle

    return _DecompositionEntries(t * ux * ux + cos_angle,
                                 t * ux * uy + sin_angle * uz,
                                 t * ux * uz - sin_angle * uy,
                                 t * uy * uz + sin_angle * ux,
                                 t * uz * uz + cos_angle)


def _rotation_vector_entries(rx: float, ry: float, rz: float,
                             tolerances: ConversionTolerances) -> _DecompositionEntries | None:
    return _axis_angle_entries(rx, ry, rz, norm(rx, ry, rz), tolerances)


def _from_entries(entries: _DecompositionEntries | None, out: OUT, tolerances: ConversionTolerances) -> YawPitchRoll:
    if entries is None:
        return _pack(_nan_like(YawPitchRoll), out)

    if entries is _IDENTITY_ENTRIES:
        return _pack(ZERO_YAW_PITCH_ROLL, out)

    return _pack(_decompose(entries, tolerances), out)


def yaw_pitch_roll_from_matrix(m00: float, m01: float, m02: float,
                               m10: float, m11: float, m12: float,
                               m20: float, m21: float, m22: float,
                               out: OUT = None,
                               tolerances: ConversionTolerances | None = None) -> YawPitchRoll:
    """
    This function decomposes a rotation matrix into yaw, pitch, and roll angles.

    Only the entries ``m00``, ``m10``, ``m20``, ``m21``, and ``m22`` are consumed.  The matrix is assumed to be a valid
    rotation matrix; this is not checked (see :func:`.is_rotation_matrix`).

    :param out: optional length 3 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the yaw, pitch, and roll angles in radians, or all NaN at gimbal lock
    """

    return _pack(_decompose(_DecompositionEntries(m00, m10, m20, m21, m22), _tolerances(tolerances)), out)


def yaw_pitch_roll_from_quaternion(qx: float, qy: float, qz: float, qs: float,
                                   out: OUT = None,
                                   tolerances: ConversionTolerances | None = None) -> YawPitchRoll:
    r"""
    This function decomposes a quaternion (not necessarily unit length) into yaw, pitch, and roll angles.

    With :math:`s = 2/\left\|\mathbf{q}\right\|^2` the pitch is

    .. math::
        \theta = \text{asin}(s(q_sq_y - q_xq_z))

    and the yaw and roll follow from the equivalent closed-form matrix entries.  A zero quaternion gives the zero
    rotation.

    :param out: optional length 3 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the yaw, pitch, and roll angles in radians, or all NaN at gimbal lock
    """

    tolerances = _tolerances(tolerances)

    return _from_entries(_quaternion_entries(qx, qy, qz, qs, tolerances), out, tolerances)


def yaw_pitch_roll_from_axis_angle(ux: float, uy: float, uz: float, angle: float,
                                   out: OUT = None,
                                   tolerances: ConversionTolerances | None = None) -> YawPitchRoll:
    """
    This function decomposes an axis-angle into yaw, pitch, and roll angles.

    The axis is normalized first.  An axis shorter than ``tolerances.zero_epsilon`` gives the zero rotation.

    :param out: optional length 3 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the yaw, pitch, and roll angles in radians, or all NaN at gimbal lock
    """

    tolerances = _tolerances(tolerances)

    return _from_entries(_axis_angle_entries(ux, uy, uz, angle, tolerances), out, tolerances)


def yaw_pitch_roll_from_rotation_vector(rx: float, ry: float, rz: float,
                                        out: OUT = None,
                                        tolerances: ConversionTolerances | None = None) -> YawPitchRoll:
    """
    This function decomposes a rotation vector into yaw, pitch, and roll angles.

    :param out: optional length 3 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the yaw, pitch, and roll angles in radians, or all NaN at gimbal lock
    """

    tolerances = _tolerances(tolerances)

    return _from_entries(_rotation_vector_entries(rx, ry, rz, tolerances), out, tolerances)


def compute_yaw_from_matrix(m00: float, m10: float, m20: float,
                            tolerances: ConversionTolerances | None = None) -> float:
    """
    Compute only the yaw angle of a rotation matrix.

    ``m20`` is needed to detect gimbal lock, in which case NaN is returned.
    """

    if contains_non_finite(m00, m10, m20) or np.isnan(_pitch(m20, _tolerances(tolerances))):
        return np.nan

    return np.arctan2(m10, m00)


def compute_pitch_from_matrix(m20: float, tolerances: ConversionTolerances | None = None) -> float:
    """
    Compute only the pitch angle of a rotation matrix, NaN at gimbal lock.
    """

    if contains_non_finite(m20):
        return np.nan

    return _pitch(m20, _tolerances(tolerances))


def compute_roll_from_matrix(m20: float, m21: float, m22: float,
                             tolerances: ConversionTolerances | None = None) -> float:
    """
    Compute only the roll angle of a rotation matrix.

    ``m20`` is needed to detect gimbal lock, in which case NaN is returned.
    """

    if contains_non_finite(m20, m21, m22) or np.isnan(_pitch(m20, _tolerances(tolerances))):
        return np.nan

    return np.arctan2(m21, m22)


def compute_yaw_from_quaternion(qx: float, qy: float, qz: float, qs: float,
                                tolerances: ConversionTolerances | None = None) -> float:
    """
    Compute only the yaw angle of a quaternion.

    Only the matrix entries ``m00``, ``m10``, and ``m20`` are formed.
    """

    s = _quaternion_scale(qx, qy, qz, qs, _tolerances(tolerances))

    if s is None:
        return np.nan

    return compute_yaw_from_matrix(1.0 - s * (qy * qy + qz * qz), s * (qx * qy + qs * qz), s * (qx * qz - qs * qy),
                                   tolerances=tolerances)


def compute_pitch_from_quaternion(qx: float, qy: float, qz: float, qs: float,
                                  tolerances: ConversionTolerances | None = None) -> float:
    """
    Compute only the pitch angle of a quaternion.
    """

    s = _quaternion_scale(qx, qy, qz, qs, _tolerances(tolerances))

    if s is None:
        return np.nan

    return compute_pitch_from_matrix(s * (qx * qz - qs * qy), tolerances=tolerances)


def compute_roll_from_quaternion(qx: float, qy: float, qz: float, qs: float,
                                 tolerances: ConversionTolerances | None = None) -> float:
    """
    Compute only the roll angle of a quaternion.

    Only the matrix entries ``m20``, ``m21``, and ``m22`` are formed.
    """

    s = _quaternion_scale(qx, qy, qz, qs, _tolerances(tolerances))

    if s is None:
        return np.nan

    return compute_roll_from_matrix(s * (qx * qz - qs * qy), s * (qy * qz + qs * qx), 1.0 - s * (qx * qx + qy * qy),
                                    tolerances=tolerances)


def compute_yaw_from_axis_angle(ux: float, uy: float, uz: float, angle: float,
                                tolerances: ConversionTolerances | None = None) -> float:
    terms = _axis_angle_terms(ux, uy, uz, angle, _tolerances(tolerances))

    if terms is None:
        return np.nan

    ux, uy, uz, sin_angle, cos_angle = terms
    t = 1.0 - cos_angle

    return compute_yaw_from_matrix(t * ux * ux + cos_angle, t * ux * uy + sin_angle * uz, t * ux * uz - sin_angle * uy,
                                   tolerances=tolerances)


def compute_pitch_from_axis_angle(ux: float, uy: float, uz: float, angle: float,
                                  tolerances: ConversionTolerances | None = None) -> float:
    terms = _axis_angle_terms(ux, uy, uz, angle, _tolerances(tolerances))

    if terms is None:
        return np.nan

    ux, uy, uz, sin_angle, cos_angle = terms

    return compute_pitch_from_matrix((1.0 - cos_angle) * ux * uz - sin_angle * uy, tolerances=tolerances)


def compute_roll_from_axis_angle(ux: float, uy: float, uz: float, angle: float,
                                 tolerances: ConversionTolerances | None = None) -> float:
    terms = _axis_angle_terms(ux, uy, uz, angle, _tolerances(tolerances))

    if terms is None:
        return np.nan

    ux, uy, uz, sin_angle, cos_angle = terms
    t = 1.0 - cos_angle

    return compute_roll_from_matrix(t * ux * uz - sin_angle * uy, t * uy * uz + sin_angle * ux, t * uz * uz + cos_angle,
                                    tolerances=tolerances)


def compute_yaw_from_rotation_vector(rx: float, ry: float, rz: float,
                                     tolerances: ConversionTolerances | None = None) -> float:
    return compute_yaw_from_axis_angle(rx, ry, rz, norm(rx, ry, rz), tolerances=tolerances)


def compute_pitch_from_rotation_vector(rx: float, ry: float, rz: float,
                                       tolerances: ConversionTolerances | None = None) -> float:
    return compute_pitch_from_axis_angle(rx, ry, rz, norm(rx, ry, rz), tolerances=tolerances)


def compute_roll_from_rotation_vector(rx: float, ry: float, rz: float,
                                      tolerances: ConversionTolerances | None = None) -> float:
    return compute_roll_from_axis_angle(rx, ry, rz, norm(rx, ry, rz), tolerances=tolerances)
