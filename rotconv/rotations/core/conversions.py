# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Array-like conversion routines for rotation representations

This module wraps the component level kernels so that each rotation can be supplied as a single numpy array (or array
like object) and is returned as a numpy array of doubles.  The shape of every input is checked and a ``ValueError`` is
raised if it does not match the representation:

* quaternions and axis-angles have shape (4,) or (4, 1), ``[x, y, z, s]`` and ``[ux, uy, uz, angle]``
* rotation vectors and yaw-pitch-roll angles have shape (3,) or (3, 1)
* rotation matrices are 3x3 (a flat, row-major, 9 element input is also accepted) and are always returned as 3x3
"""

import numpy as np

from rotconv._typing import ARRAY_LIKE, DOUBLE_ARRAY

from rotconv.rotations.core._helpers import (_check_axis_angle_array_and_shape, _check_matrix_array_and_shape,
                                             _check_quaternion_array_and_shape, _check_vector_array_and_shape)
from rotconv.rotations.core.axis_angle import (axis_angle_from_matrix, axis_angle_from_quaternion,
                                               axis_angle_from_rotation_vector, axis_angle_from_yaw_pitch_roll)
from rotconv.rotations.core.quaternion import (quaternion_from_axis_angle, quaternion_from_matrix,
                                               quaternion_from_rotation_vector, quaternion_from_yaw_pitch_roll)
from rotconv.rotations.core.rotation_matrix import (matrix_from_axis_angle, matrix_from_quaternion,
                                                    matrix_from_rotation_vector, matrix_from_yaw_pitch_roll)
from rotconv.rotations.core.rotation_vector import (rotation_vector_from_axis_angle, rotation_vector_from_matrix,
                                                    rotation_vector_from_quaternion,
                                                    rotation_vector_from_yaw_pitch_roll)
from rotconv.rotations.core.tolerances import ConversionTolerances
from rotconv.rotations.core.yaw_pitch_roll import (yaw_pitch_roll_from_axis_angle, yaw_pitch_roll_from_matrix,
                                                   yaw_pitch_roll_from_quaternion,
                                                   yaw_pitch_roll_from_rotation_vector)


__all__ = ['quaternion_to_axis_angle', 'quaternion_to_rotvec', 'quaternion_to_rotmat', 'quaternion_to_ypr',
           'axis_angle_to_quaternion', 'axis_angle_to_rotvec', 'axis_angle_to_rotmat', 'axis_angle_to_ypr',
           'rotvec_to_axis_angle', 'rotvec_to_quaternion', 'rotvec_to_rotmat', 'rotvec_to_ypr',
           'rotmat_to_axis_angle', 'rotmat_to_quaternion', 'rotmat_to_rotvec', 'rotmat_to_ypr',
           'ypr_to_axis_angle', 'ypr_to_quaternion', 'ypr_to_rotvec', 'ypr_to_rotmat']


def _as_matrix(entries: tuple) -> DOUBLE_ARRAY:
    return np.array(entries, dtype=np.float64).reshape(3, 3)


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts a quaternion into an axis-angle ``[ux, uy, uz, angle]``.

    See :func:`.axis_angle_from_quaternion` for details.

    :param quaternion: the quaternion to convert, vector part first
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the axis-angle as a length 4 array
    """

    return np.array(axis_angle_from_quaternion(*_check_quaternion_array_and_shape(quaternion), tolerances=tolerances))


def quaternion_to_rotvec(quaternion: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts a quaternion into a rotation vector.

    :param quaternion: the quaternion to convert, vector part first
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation vector as a length 3 array
    """

    return np.array(rotation_vector_from_quaternion(*_check_quaternion_array_and_shape(quaternion),
                                                    tolerances=tolerances))


def quaternion_to_rotmat(quaternion: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts a quaternion (which does not need to be unit length) into a 3x3 rotation matrix.

    For example::

        >>> from rotconv.rotations import quaternion_to_rotmat
        >>> quaternion_to_rotmat([0, 1, 0, 0])
        array([[-1.,  0.,  0.],
               [ 0.,  1.,  0.],
               [ 0.,  0., -1.]])

    :param quaternion: the quaternion to convert, vector part first
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation matrix
    """

    return _as_matrix(matrix_from_quaternion(*_check_quaternion_array_and_shape(quaternion), tolerances=tolerances))


def quaternion_to_ypr(quaternion: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts a quaternion into ``[yaw, pitch, roll]``, all NaN at gimbal lock.

    :param quaternion: the quaternion to convert, vector part first
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the yaw-pitch-roll angles as a length 3 array
    """

    return np.array(yaw_pitch_roll_from_quaternion(*_check_quaternion_array_and_shape(quaternion),
                                                   tolerances=tolerances))


def axis_angle_to_quaternion(axis_angle: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts an axis-angle ``[ux, uy, uz, angle]`` into a quaternion ``[qx, qy, qz, qs]``.

    :param axis_angle: the axis-angle to convert.  The axis does not need to be unit length
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the quaternion as a length 4 array
    """

    return np.array(quaternion_from_axis_angle(*_check_axis_angle_array_and_shape(axis_angle), tolerances=tolerances))


def axis_angle_to_rotvec(axis_angle: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts an axis-angle into a rotation vector.

    :param axis_angle: the axis-angle to convert.  The axis does not need to be unit length
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation vector as a length 3 array
    """

    return np.array(rotation_vector_from_axis_angle(*_check_axis_angle_array_and_shape(axis_angle),
                                                    tolerances=tolerances))


def axis_angle_to_rotmat(axis_angle: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts an axis-angle into a 3x3 rotation matrix.

    :param axis_angle: the axis-angle to convert.  The axis does not need to be unit length
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation matrix
    """

    return _as_matrix(matrix_from_axis_angle(*_check_axis_angle_array_and_shape(axis_angle), tolerances=tolerances))


def axis_angle_to_ypr(axis_angle: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts an axis-angle into ``[yaw, pitch, roll]``, all NaN at gimbal lock.

    :param axis_angle: the axis-angle to convert.  The axis does not need to be unit length
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the yaw-pitch-roll angles as a length 3 array
    """

    return np.array(yaw_pitch_roll_from_axis_angle(*_check_axis_angle_array_and_shape(axis_angle),
                                                   tolerances=tolerances))


def rotvec_to_axis_angle(vector: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts a rotation vector into an axis-angle.

    :param vector: the rotation vector to convert
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the axis-angle as a length 4 array
    """

    return np.array(axis_angle_from_rotation_vector(*_check_vector_array_and_shape(vector), tolerances=tolerances))


def rotvec_to_quaternion(vector: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation vector into a rotation quaternion.

    .. math::
        \theta=\left\|\mathbf{v}\right\| \\
        \mathbf{q} = \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\frac{\mathbf{v}}{\theta} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    :param vector: the rotation vector to convert
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the quaternion as a length 4 array
    """

    return np.array(quaternion_from_rotation_vector(*_check_vector_array_and_shape(vector), tolerances=tolerances))


def rotvec_to_rotmat(vector: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts a rotation vector into a 3x3 rotation matrix.

    :param vector: the rotation vector to convert
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation matrix
    """

    return _as_matrix(matrix_from_rotation_vector(*_check_vector_array_and_shape(vector), tolerances=tolerances))


def rotvec_to_ypr(vector: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts a rotation vector into ``[yaw, pitch, roll]``, all NaN at gimbal lock.

    :param vector: the rotation vector to convert
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the yaw-pitch-roll angles as a length 3 array
    """

    return np.array(yaw_pitch_roll_from_rotation_vector(*_check_vector_array_and_shape(vector),
                                                        tolerances=tolerances))


def rotmat_to_axis_angle(matrix: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts a rotation matrix into an axis-angle with an angle in ``[0, pi]``.

    :param matrix: the 3x3 (or flat row-major 9 element) rotation matrix to convert
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the axis-angle as a length 4 array
    """

    return np.array(axis_angle_from_matrix(*_check_matrix_array_and_shape(matrix), tolerances=tolerances))


def rotmat_to_quaternion(matrix: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts a rotation matrix into a unit quaternion with a non-negative scalar part.

    :param matrix: the 3x3 (or flat row-major 9 element) rotation matrix to convert
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the quaternion as a length 4 array
    """

    return np.array(quaternion_from_matrix(*_check_matrix_array_and_shape(matrix), tolerances=tolerances))


def rotmat_to_rotvec(matrix: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts a rotation matrix into a rotation vector.

    :param matrix: the 3x3 (or flat row-major 9 element) rotation matrix to convert
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation vector as a length 3 array
    """

    return np.array(rotation_vector_from_matrix(*_check_matrix_array_and_shape(matrix), tolerances=tolerances))


def rotmat_to_ypr(matrix: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts a rotation matrix into ``[yaw, pitch, roll]``, all NaN at gimbal lock.

    :param matrix: the 3x3 (or flat row-major 9 element) rotation matrix to convert
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the yaw-pitch-roll angles as a length 3 array
    """

    return np.array(yaw_pitch_roll_from_matrix(*_check_matrix_array_and_shape(matrix), tolerances=tolerances))


def ypr_to_axis_angle(ypr: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts ``[yaw, pitch, roll]`` into an axis-angle.

    :param ypr: the yaw, pitch, and roll angles in radians
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the axis-angle as a length 4 array
    """

    return np.array(axis_angle_from_yaw_pitch_roll(*_check_vector_array_and_shape(ypr), tolerances=tolerances))


def ypr_to_quaternion(ypr: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts ``[yaw, pitch, roll]`` into a unit quaternion.

    :param ypr: the yaw, pitch, and roll angles in radians
    :return: the quaternion as a length 4 array
    """

    return np.array(quaternion_from_yaw_pitch_roll(*_check_vector_array_and_shape(ypr)))


def ypr_to_rotvec(ypr: ARRAY_LIKE, tolerances: ConversionTolerances | None = None) -> DOUBLE_ARRAY:
    """
    This function converts ``[yaw, pitch, roll]`` into a rotation vector.

    :param ypr: the yaw, pitch, and roll angles in radians
    :param tolerances: the thresholds to use.  ``None`` uses the defaults
    :return: the rotation vector as a length 3 array
    """

    return np.array(rotation_vector_from_yaw_pitch_roll(*_check_vector_array_and_shape(ypr), tolerances=tolerances))


def ypr_to_rotmat(ypr: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts ``[yaw, pitch, roll]`` into the 3x3 rotation matrix
    :math:`\mathbf{R}_z(\psi)\mathbf{R}_y(\theta)\mathbf{R}_x(\phi)`.

    :param ypr: the yaw, pitch, and roll angles in radians
    :return: the rotation matrix
    """

    return _as_matrix(matrix_from_yaw_pitch_roll(*_check_vector_array_and_shape(ypr)))
