r"""
The value types returned by the rotation conversion kernels.

Each representation is a plain named tuple of floats so it can be unpacked straight into the next conversion::

    >>> from rotconv.rotations import quaternion_from_axis_angle, matrix_from_quaternion
    >>> q = quaternion_from_axis_angle(0, 0, 1, 0.5)
    >>> matrix_from_quaternion(*q)
"""

from typing import NamedTuple

import numpy as np

from rotconv._typing import DOUBLE_ARRAY


__all__ = ['AxisAngle', 'Quaternion', 'RotationVector', 'YawPitchRoll', 'RotationMatrix']


class AxisAngle(NamedTuple):
    x: float
    """
    The x component of the unit rotation axis.
    """

    y: float
    """
    The y component of the unit rotation axis.
    """

    z: float
    """
    The z component of the unit rotation axis.
    """

    angle: float
    """
    The rotation angle about the axis in radians.
    """


class Quaternion(NamedTuple):
    x: float
    r"""
    The x component of the vector portion, :math:`\text{sin}(\theta/2)\hat{x}_1`.
    """

    y: float
    r"""
    The y component of the vector portion, :math:`\text{sin}(\theta/2)\hat{x}_2`.
    """

    z: float
    r"""
    The z component of the vector portion, :math:`\text{sin}(\theta/2)\hat{x}_3`.
    """

    s: float
    r"""
    The scalar portion, :math:`\text{cos}(\theta/2)`.
    """


class RotationVector(NamedTuple):
    x: float
    y: float
    z: float


class YawPitchRoll(NamedTuple):
    yaw: float
    """
    The rotation about the z axis, applied last.
    """

    pitch: float
    """
    The rotation about the y axis.
    """

    roll: float
    """
    The rotation about the x axis, applied first.
    """


class RotationMatrix(NamedTuple):
    """
    The 9 entries of a rotation matrix in row-major order.
    """

    m00: float
    m01: float
    m02: float
    m10: float
    m11: float
    m12: float
    m20: float
    m21: float
    m22: float

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Return the entries as a 3x3 numpy array.
        """
        return np.array(self, dtype=np.float64).reshape(3, 3)
