"""
This module contains the conversion kernels between the rotation representations.

The kernels work on raw float components (never on container types) and return named tuples, so each one can be used
and tested on its own.  :mod:`.conversions` wraps them for numpy arrays.  :mod:`.elementals` and :mod:`.features` have
no dependencies on the other rotation modules.
"""

import rotconv.rotations.core.axis_angle
import rotconv.rotations.core.conversions
import rotconv.rotations.core.elementals
import rotconv.rotations.core.features
import rotconv.rotations.core.quaternion
import rotconv.rotations.core.representations
import rotconv.rotations.core.rotation_matrix
import rotconv.rotations.core.rotation_vector
import rotconv.rotations.core.tolerances
import rotconv.rotations.core.yaw_pitch_roll

from rotconv.rotations.core.representations import AxisAngle, Quaternion, RotationVector, YawPitchRoll, RotationMatrix

from rotconv.rotations.core.tolerances import (ConversionTolerances, DEFAULT_TOLERANCES, SAFE_THRESHOLD_PITCH,
                                               MAX_PITCH_ANGLE, MIN_PITCH_ANGLE)

from rotconv.rotations.core.features import (contains_nan, contains_non_finite, determinant, is_rotation_matrix,
                                             is_zero_rotation)

from rotconv.rotations.core.elementals import (yaw_matrix, pitch_matrix, roll_matrix,
                                               yaw_quaternion, pitch_quaternion, roll_quaternion)

from rotconv.rotations.core.axis_angle import (MatrixRegime, ZERO_AXIS_ANGLE, classify_matrix,
                                               axis_angle_from_quaternion, axis_angle_from_rotation_vector,
                                               axis_angle_from_matrix, axis_angle_from_yaw_pitch_roll)

from rotconv.rotations.core.quaternion import (IDENTITY_QUATERNION, quaternion_normalize, quaternion_from_axis_angle,
                                               quaternion_from_matrix, quaternion_from_rotation_vector,
                                               quaternion_from_yaw_pitch_roll)

from rotconv.rotations.core.rotation_vector import (ZERO_ROTATION_VECTOR, rotation_vector_from_axis_angle,
                                                    rotation_vector_from_quaternion, rotation_vector_from_matrix,
                                                    rotation_vector_from_yaw_pitch_roll)

from rotconv.rotations.core.rotation_matrix import (IDENTITY_MATRIX, matrix_from_axis_angle, matrix_from_quaternion,
                                                    matrix_from_yaw_pitch_roll, matrix_from_rotation_vector)

from rotconv.rotations.core.yaw_pitch_roll import (ZERO_YAW_PITCH_ROLL,
                                                   yaw_pitch_roll_from_matrix, yaw_pitch_roll_from_quaternion,
                                                   yaw_pitch_roll_from_axis_angle,
                                                   yaw_pitch_roll_from_rotation_vector,
                                                   compute_yaw_from_matrix, compute_pitch_from_matrix,
                                                   compute_roll_from_matrix,
                                                   compute_yaw_from_quaternion, compute_pitch_from_quaternion,
                                                   compute_roll_from_quaternion,
                                                   compute_yaw_from_axis_angle, compute_pitch_from_axis_angle,
                                                   compute_roll_from_axis_angle,
                                                   compute_yaw_from_rotation_vector,
                                                   compute_pitch_from_rotation_vector,
                                                   compute_roll_from_rotation_vector)

from rotconv.rotations.core.conversions import (quaternion_to_axis_angle, quaternion_to_rotvec, quaternion_to_rotmat,
                                                quaternion_to_ypr,
                                                axis_angle_to_quaternion, axis_angle_to_rotvec, axis_angle_to_rotmat,
                                                axis_angle_to_ypr,
                                                rotvec_to_axis_angle, rotvec_to_quaternion, rotvec_to_rotmat,
                                                rotvec_to_ypr,
                                                rotmat_to_axis_angle, rotmat_to_quaternion, rotmat_to_rotvec,
                                                rotmat_to_ypr,
                                                ypr_to_axis_angle, ypr_to_quaternion, ypr_to_rotvec, ypr_to_rotmat)

__all__ = ['AxisAngle', 'Quaternion', 'RotationVector', 'YawPitchRoll', 'RotationMatrix',
           'ConversionTolerances', 'DEFAULT_TOLERANCES', 'SAFE_THRESHOLD_PITCH', 'MAX_PITCH_ANGLE', 'MIN_PITCH_ANGLE',
           'contains_nan', 'contains_non_finite', 'determinant', 'is_rotation_matrix', 'is_zero_rotation',
           'yaw_matrix', 'pitch_matrix', 'roll_matrix', 'yaw_quaternion', 'pitch_quaternion', 'roll_quaternion',
           'MatrixRegime', 'ZERO_AXIS_ANGLE', 'classify_matrix',
           'axis_angle_from_quaternion', 'axis_angle_from_rotation_vector', 'axis_angle_from_matrix',
           'axis_angle_from_yaw_pitch_roll',
           'IDENTITY_QUATERNION', 'quaternion_normalize', 'quaternion_from_axis_angle', 'quaternion_from_matrix',
           'quaternion_from_rotation_vector', 'quaternion_from_yaw_pitch_roll',
           'ZERO_ROTATION_VECTOR', 'rotation_vector_from_axis_angle', 'rotation_vector_from_quaternion',
           'rotation_vector_from_matrix', 'rotation_vector_from_yaw_pitch_roll',
           'IDENTITY_MATRIX', 'matrix_from_axis_angle', 'matrix_from_quaternion', 'matrix_from_yaw_pitch_roll',
           'matrix_from_rotation_vector',
           'ZERO_YAW_PITCH_ROLL', 'yaw_pitch_roll_from_matrix', 'yaw_pitch_roll_from_quaternion',
           'yaw_pitch_roll_from_axis_angle', 'yaw_pitch_roll_from_rotation_vector',
           'compute_yaw_from_matrix', 'compute_pitch_from_matrix', 'compute_roll_from_matrix',
           'compute_yaw_from_quaternion', 'compute_pitch_from_quaternion', 'compute_roll_from_quaternion',
           'compute_yaw_from_axis_angle', 'compute_pitch_from_axis_angle', 'compute_roll_from_axis_angle',
           'compute_yaw_from_rotation_vector', 'compute_pitch_from_rotation_vector',
           'compute_roll_from_rotation_vector',
           'quaternion_to_axis_angle', 'quaternion_to_rotvec', 'quaternion_to_rotmat', 'quaternion_to_ypr',
           'axis_angle_to_quaternion', 'axis_angle_to_rotvec', 'axis_angle_to_rotmat', 'axis_angle_to_ypr',
           'rotvec_to_axis_angle', 'rotvec_to_quaternion', 'rotvec_to_rotmat', 'rotvec_to_ypr',
           'rotmat_to_axis_angle', 'rotmat_to_quaternion', 'rotmat_to_rotvec', 'rotmat_to_ypr',
           'ypr_to_axis_angle', 'ypr_to_quaternion', 'ypr_to_rotvec', 'ypr_to_rotmat']
