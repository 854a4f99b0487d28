# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Conversions of any rotation representation into an axis-angle.

The axis-angle produced by these routines always has a unit axis, except for the canonical zero rotation
:math:`(1, 0, 0, 0)` which is returned whenever the source describes no rotation.  If any of the components consumed by
a conversion is NaN or infinite then every component of the result is NaN.

All routines operate on raw components and return an :class:`.AxisAngle`.  If ``out`` is supplied the result is also
written into it.
"""

from enum import Enum, auto

import numpy as np

from rotconv._typing import OUT
from rotconv.rotations.core._helpers import _nan_like, _pack, _tolerances
from rotconv.rotations.core.elementals import yaw_pitch_roll_matrix_entries
from rotconv.rotations.core.features import contains_non_finite, norm
from rotconv.rotations.core.representations import AxisAngle
from rotconv.rotations.core.tolerances import ConversionTolerances


__all__ = ['MatrixRegime', 'ZERO_AXIS_ANGLE', 'classify_matrix',
           'axis_angle_from_quaternion', 'axis_angle_from_rotation_vector', 'axis_angle_from_matrix',
           'axis_angle_from_yaw_pitch_roll']


ZERO_AXIS_ANGLE = AxisAngle(1.0, 0.0, 0.0, 0.0)
"""
The canonical axis-angle of the zero rotation.
"""


class MatrixRegime(Enum):
    """
    The numerical regimes of the rotation matrix to axis-angle decomposition.

    Use :func:`classify_matrix` to determine which regime a matrix falls in.
    """

    IDENTITY = auto()
    """
    The rotation angle is (numerically) zero.  The canonical zero rotation is returned.
    """

    GENERIC = auto()
    """
    The axis is recovered from the skew symmetric part of the matrix.
    """

    ANTIPODAL = auto()
    """
    The rotation angle is close to pi, where the skew symmetric part vanishes.  The axis is recovered from the diagonal.
    """

    INVALID = auto()
    """
    The matrix contains NaN or infinite entries.
    """


def classify_matrix(m00: float, m01: float, m02: float,
                    m10: float, m11: float, m12: float,
                    m20: float, m21: float, m22: float,
                    tolerances: ConversionTolerances | None = None) -> MatrixRegime:
    """
    Determine which decomposition :func:`axis_angle_from_matrix` applies to the given matrix.

    * :attr:`~MatrixRegime.ANTIPODAL` when ``trace + 1`` is less than ``tolerances.antipodal_trace_margin``
    * :attr:`~MatrixRegime.GENERIC` when the norm of the skew symmetric part is larger than ``tolerances.zero_epsilon``
    * :attr:`~MatrixRegime.IDENTITY` otherwise

    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the regime of the matrix
    """

    tolerances = _tolerances(tolerances)

    if contains_non_finite(m00, m01, m02, m10, m11, m12, m20, m21, m22):
        return MatrixRegime.INVALID

    if m00 + m11 + m22 + 1.0 < tolerances.antipodal_trace_margin:
        return MatrixRegime.ANTIPODAL

    if norm(m21 - m12, m02 - m20, m10 - m01) > tolerances.zero_epsilon:
        return MatrixRegime.GENERIC

    return MatrixRegime.IDENTITY


def axis_angle_from_quaternion(qx: float, qy: float, qz: float, qs: float,
                               out: OUT = None,
                               tolerances: ConversionTolerances | None = None) -> AxisAngle:
    r"""
    This function converts a quaternion into an axis-angle.

    The quaternion does not need to be unit length.  The conversion is computed as

    .. math::
        \theta = 2\text{atan2}(\left\|\mathbf{q}_v\right\|, q_s) \\
        \hat{\mathbf{x}} = \frac{\mathbf{q}_v}{\left\|\mathbf{q}_v\right\|}

    which is invariant to the scale of the quaternion.  The angle is then wrapped into :math:`[-\pi, \pi]`, so a
    quaternion with a negative scalar part yields a negative angle.

    If the vector portion is zero (relative to the norm of the whole quaternion, this includes the all zero quaternion)
    the canonical zero rotation is returned.

    :param qx: the x component of the quaternion vector portion
    :param qy: the y component of the quaternion vector portion
    :param qz: the z component of the quaternion vector portion
    :param qs: the scalar portion of the quaternion
    :param out: optional length 4 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the axis-angle equivalent to the quaternion
    """

    tolerances = _tolerances(tolerances)

    if contains_non_finite(qx, qy, qz, qs):
        return _pack(_nan_like(AxisAngle), out)

    vector_norm = norm(qx, qy, qz)

    if vector_norm <= tolerances.zero_epsilon * norm(qx, qy, qz, qs):
        return _pack(ZERO_AXIS_ANGLE, out)

    angle = 2.0 * np.arctan2(vector_norm, qs)

    if angle > np.pi:
        angle -= 2.0 * np.pi

    return _pack(AxisAngle(qx / vector_norm, qy / vector_norm, qz / vector_norm, angle), out)


def axis_angle_from_rotation_vector(rx: float, ry: float, rz: float,
                                    out: OUT = None,
                                    tolerances: ConversionTolerances | None = None) -> AxisAngle:
    """
    This function converts a rotation vector into an axis-angle.

    The angle is the length of the rotation vector and the axis its direction.  A rotation vector shorter than
    ``tolerances.zero_epsilon`` gives the canonical zero rotation.

    :param rx: the x component of the rotation vector
    :param ry: the y component of the rotation vector
    :param rz: the z component of the rotation vector
    :param out: optional length 4 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the axis-angle equivalent to the rotation vector
    """

    tolerances = _tolerances(tolerances)

    if contains_non_finite(rx, ry, rz):
        return _pack(_nan_like(AxisAngle), out)

    angle = norm(rx, ry, rz)

    if angle < tolerances.zero_epsilon:
        return _pack(ZERO_AXIS_ANGLE, out)

    return _pack(AxisAngle(rx / angle, ry / angle, rz / angle, angle), out)


def axis_angle_from_matrix(m00: float, m01: float, m02: float,
                           m10: float, m11: float, m12: float,
                           m20: float, m21: float, m22: float,
                           out: OUT = None,
                           tolerances: ConversionTolerances | None = None) -> AxisAngle:
    r"""
    This function converts a rotation matrix into an axis-angle.

    The conversion depends on the regime of the matrix (see :func:`classify_matrix`).  With
    :math:`c = (\text{Tr}(\mathbf{T}) - 1)/2` clamped to :math:`[-1, 1]` and the skew vector
    :math:`\mathbf{d} = [t_{21}-t_{12}, t_{02}-t_{20}, t_{10}-t_{01}]^T`:

    * generic: :math:`\hat{\mathbf{x}}=\mathbf{d}/\left\|\mathbf{d}\right\|` and
      :math:`\theta=\text{atan2}(\left\|\mathbf{d}\right\|/2, c)`
    * antipodal: :math:`\hat{x}_i^2 = (t_{ii} - c)/(1 - c)` is computed for the largest diagonal entry, whose sign is
      taken from :math:`d_i`.  The other two components come from the symmetric sums
      :math:`t_{ij} + t_{ji} = 2(1-c)\hat{x}_i\hat{x}_j`.  This avoids dividing by the vanishing
      :math:`\text{sin}(\theta)`.
    * identity: the canonical zero rotation

    The resulting angle is in :math:`[0, \pi]`.

    :param out: optional length 4 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the axis-angle equivalent to the rotation matrix
    """

    regime = classify_matrix(m00, m01, m02, m10, m11, m12, m20, m21, m22, tolerances=tolerances)

    if regime is MatrixRegime.INVALID:
        return _pack(_nan_like(AxisAngle), out)

    if regime is MatrixRegime.IDENTITY:
        return _pack(ZERO_AXIS_ANGLE, out)

    x = m21 - m12
    y = m02 - m20
    z = m10 - m01

    cos_angle = np.clip(0.5 * (m00 + m11 + m22 - 1.0), -1.0, 1.0)

    if regime is MatrixRegime.GENERIC:
        skew_norm = norm(x, y, z)
        angle = np.arctan2(0.5 * skew_norm, cos_angle)
        return _pack(AxisAngle(x / skew_norm, y / skew_norm, z / skew_norm, angle), out)

    one_minus_cos = 1.0 - cos_angle

    xx = (m00 - cos_angle) / one_minus_cos
    yy = (m11 - cos_angle) / one_minus_cos
    zz = (m22 - cos_angle) / one_minus_cos

    half_inverse = 0.5 / one_minus_cos
    xy = (m01 + m10) * half_inverse
    xz = (m02 + m20) * half_inverse
    yz = (m12 + m21) * half_inverse

    if xx >= yy and xx >= zz:
        # m00 is the largest diagonal term
        ux = np.sqrt(max(xx, 0.0))
        if x < 0:
            ux = -ux
        uy = xy / ux
        uz = xz / ux
    elif yy >= zz:
        # m11 is the largest diagonal term
        uy = np.sqrt(max(yy, 0.0))
        if y < 0:
            uy = -uy
        ux = xy / uy
        uz = yz / uy
    else:
        # m22 is the largest diagonal term
        uz = np.sqrt(max(zz, 0.0))
        if z < 0:
            uz = -uz
        ux = xz / uz
        uy = yz / uz

    axis_norm = norm(ux, uy, uz)
    ux /= axis_norm
    uy /= axis_norm
    uz /= axis_norm

    sin_angle = 0.5 * abs(x * ux + y * uy + z * uz)

    return _pack(AxisAngle(ux, uy, uz, np.arctan2(sin_angle, cos_angle)), out)


def axis_angle_from_yaw_pitch_roll(yaw: float, pitch: float, roll: float,
                                   out: OUT = None,
                                   tolerances: ConversionTolerances | None = None) -> AxisAngle:
    """
    This function converts yaw-pitch-roll angles into an axis-angle.

    The Z-Y-X rotation matrix entries are formed in closed form (see :func:`.yaw_pitch_roll_matrix_entries`) and
    decomposed with :func:`axis_angle_from_matrix`.

    :param yaw: the rotation about z in radians
    :param pitch: the rotation about y in radians
    :param roll: the rotation about x in radians
    :param out: optional length 4 container to receive the result
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the axis-angle equivalent to the yaw-pitch-roll angles
    """

    if contains_non_finite(yaw, pitch, roll):
        return _pack(_nan_like(AxisAngle), out)

    return axis_angle_from_matrix(*yaw_pitch_roll_matrix_entries(yaw, pitch, roll), out=out, tolerances=tolerances)
