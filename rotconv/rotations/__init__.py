r"""
This package defines routines for converting a single 3D rotation between its different representations.

There are five rotation representations used in this package and their format is described as follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
axis-angle         A unit rotation axis :math:`\hat{\mathbf{x}}` and the angle :math:`\theta` in radians to rotate about
                   it, stored as :math:`[x, y, z, \theta]`.  The zero rotation is canonically :math:`[1, 0, 0, 0]`.
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`.
                   Note that quaternions are not unique in that the rotation represented by :math:`\mathbf{q}` is the
                   same rotation represented by :math:`-\mathbf{q}`.  Inputs do not need to be unit length.
rotation vector    A 3 element rotation vector of the form :math:`\mathbf{v}=\theta\hat{\mathbf{x}}`.  The zero rotation
                   is the zero vector.
rotation matrix    A :math:`3\times 3` orthonormal matrix with a determinant of 1.  The kernels take and return the 9
                   entries in row-major order :math:`t_{00}, t_{01}, \ldots, t_{22}`.
yaw-pitch-roll     The Z-Y-X euler angles such that
                   :math:`\mathbf{T}=\mathbf{R}_z(\psi)\mathbf{R}_y(\theta)\mathbf{R}_x(\phi)`.  The pitch must lie
                   within :data:`.MIN_PITCH_ANGLE` and :data:`.MAX_PITCH_ANGLE`, slightly inside of
                   :math:`\pm\pi/2`.  Outside of these bounds (gimbal lock) all three angles are NaN.
=================  =====================================================================================================

Every conversion is a pure function.  A NaN or infinite value in any consumed input component makes every output
component NaN, and degenerate inputs (zero axis, zero quaternion, zero rotation vector, identity matrix) give the
canonical zero rotation.  The thresholds used to detect these cases can be adjusted by passing a
:class:`.ConversionTolerances` instance.
"""

import rotconv.rotations.core

from rotconv.rotations.core import *
from rotconv.rotations.core import __all__ as _core_all

__all__ = list(_core_all)
