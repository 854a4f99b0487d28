import numpy as np

from rotconv.rotations.core.representations import Quaternion, RotationMatrix


__all__ = ["yaw_matrix", "pitch_matrix", "roll_matrix", "yaw_quaternion", "pitch_quaternion", "roll_quaternion",
           "axis_angle_matrix_entries", "yaw_pitch_roll_matrix_entries"]


def yaw_matrix(yaw: float) -> RotationMatrix:
    r"""
    This function forms a right handed rotation about the z axis by angle yaw.

    Mathematically this rotation is defined as:

    .. math::
        \mathbf{R}_z(\psi)=\left[\begin{array}{ccc} \text{cos}(\psi) & -\text{sin}(\psi) & 0 \\
        \text{sin}(\psi) & \text{cos}(\psi) & 0 \\
        0 & 0 & 1 \end{array}\right]

    :param yaw: The angle to rotate about z in radians
    :return: The rotation matrix corresponding to the rotation angle
    """

    cos_yaw = np.cos(yaw)
    sin_yaw = np.sin(yaw)

    return RotationMatrix(cos_yaw, -sin_yaw, 0.0,
                          sin_yaw, cos_yaw, 0.0,
                          0.0, 0.0, 1.0)


def pitch_matrix(pitch: float) -> RotationMatrix:
    r"""
    This function forms a right handed rotation about the y axis by angle pitch.

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    :param pitch: The angle to rotate about y in radians
    :return: The rotation matrix corresponding to the rotation angle
    """

    cos_pitch = np.cos(pitch)
    sin_pitch = np.sin(pitch)

    return RotationMatrix(cos_pitch, 0.0, sin_pitch,
                          0.0, 1.0, 0.0,
                          -sin_pitch, 0.0, cos_pitch)


def roll_matrix(roll: float) -> RotationMatrix:
    r"""
    This function forms a right handed rotation about the x axis by angle roll.

    .. math::
        \mathbf{R}_x(\phi)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\phi) & -\text{sin}(\phi) \\
        0 & \text{sin}(\phi) & \text{cos}(\phi) \end{array}\right]

    :param roll: The angle to rotate about x in radians
    :return: The rotation matrix corresponding to the rotation angle
    """

    cos_roll = np.cos(roll)
    sin_roll = np.sin(roll)

    return RotationMatrix(1.0, 0.0, 0.0,
                          0.0, cos_roll, -sin_roll,
                          0.0, sin_roll, cos_roll)


def yaw_quaternion(yaw: float) -> Quaternion:
    """
    The quaternion of a counter clockwise rotation about the z axis by angle yaw.
    """
    half_yaw = 0.5 * yaw
    return Quaternion(0.0, 0.0, np.sin(half_yaw), np.cos(half_yaw))


def pitch_quaternion(pitch: float) -> Quaternion:
    """
    The quaternion of a counter clockwise rotation about the y axis by angle pitch.
    """
    half_pitch = 0.5 * pitch
    return Quaternion(0.0, np.sin(half_pitch), 0.0, np.cos(half_pitch))


def roll_quaternion(roll: float) -> Quaternion:
    """
    The quaternion of a counter clockwise rotation about the x axis by angle roll.
    """
    half_roll = 0.5 * roll
    return Quaternion(np.sin(half_roll), 0.0, 0.0, np.cos(half_roll))


def axis_angle_matrix_entries(ux: float, uy: float, uz: float, angle: float) -> RotationMatrix:
    r"""
    Rodrigues' rotation formula expanded into the 9 matrix entries.

    .. math::
        \mathbf{T} = \text{cos}(\theta)\mathbf{I}_{3\times 3}+\text{sin}(\theta)\left[\hat{\mathbf{x}}\times\right]+
        (1-\text{cos}(\theta))\hat{\mathbf{x}}\hat{\mathbf{x}}^T

    The axis must already be a unit vector.  No checks are performed.
    """

    sin_theta = np.sin(angle)
    cos_theta = np.cos(angle)
    t = 1.0 - cos_theta

    xy = t * ux * uy
    xz = t * ux * uz
    yz = t * uy * uz

    return RotationMatrix(t * ux * ux + cos_theta, xy - sin_theta * uz, xz + sin_theta * uy,
                          xy + sin_theta * uz, t * uy * uy + cos_theta, yz - sin_theta * ux,
                          xz - sin_theta * uy, yz + sin_theta * ux, t * uz * uz + cos_theta)


def yaw_pitch_roll_matrix_entries(yaw: float, pitch: float, roll: float) -> RotationMatrix:
    r"""
    The product :math:`\mathbf{R}_z(\psi)\mathbf{R}_y(\theta)\mathbf{R}_x(\phi)` expanded into the 9 matrix entries.
    """

    cos_yaw = np.cos(yaw)
    sin_yaw = np.sin(yaw)

    cos_pitch = np.cos(pitch)
    sin_pitch = np.sin(pitch)

    cos_roll = np.cos(roll)
    sin_roll = np.sin(roll)

    return RotationMatrix(cos_yaw * cos_pitch,
                          cos_yaw * sin_pitch * sin_roll - sin_yaw * cos_roll,
                          cos_yaw * sin_pitch * cos_roll + sin_yaw * sin_roll,
                          sin_yaw * cos_pitch,
                          sin_yaw * sin_pitch * sin_roll + cos_yaw * cos_roll,
                          sin_yaw * sin_pitch * cos_roll - cos_yaw * sin_roll,
                          -sin_pitch,
                          cos_pitch * sin_roll,
                          cos_pitch * cos_roll)
