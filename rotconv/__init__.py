# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
rotconv converts 3D rotations between axis-angle, quaternion, rotation matrix, rotation vector, and yaw-pitch-roll
representations.

See :mod:`rotconv.rotations` for the conventions used by each representation.
"""

import rotconv.rotations
import rotconv.utilities

from rotconv.rotations.core.tolerances import ConversionTolerances, MAX_PITCH_ANGLE, MIN_PITCH_ANGLE

__all__ = ['ConversionTolerances', 'MAX_PITCH_ANGLE', 'MIN_PITCH_ANGLE']

__version__ = '1.0.0'
