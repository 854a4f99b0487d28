"""
Tolerances shared by the rotation conversion kernels.

The defaults are what every conversion uses when no ``tolerances`` keyword is supplied.  They may be overridden per
call by passing a :class:`ConversionTolerances` instance.
"""

import warnings

from dataclasses import dataclass

import numpy as np

from rotconv.utilities.options import UserOptions


__all__ = ['ConversionTolerances', 'DEFAULT_TOLERANCES', 'SAFE_THRESHOLD_PITCH', 'MAX_PITCH_ANGLE', 'MIN_PITCH_ANGLE']


SAFE_THRESHOLD_PITCH: float = np.deg2rad(1.82)
"""
The margin kept between the largest allowed pitch and pi/2.
"""

MAX_PITCH_ANGLE: float = np.pi / 2 - SAFE_THRESHOLD_PITCH
"""
The largest pitch angle (in radians) for which a yaw-pitch-roll decomposition is considered well defined.
"""

MIN_PITCH_ANGLE: float = -MAX_PITCH_ANGLE
"""
The smallest pitch angle (in radians) for which a yaw-pitch-roll decomposition is considered well defined.
"""


@dataclass
class ConversionTolerances(UserOptions):
    """
    The thresholds used to detect the singular and degenerate cases of the rotation conversions.
    """

    zero_epsilon: float = 1e-12
    """
    Norms below this value (axes, rotation vectors, quaternion vector parts, matrix skew parts) are treated as zero and
    produce the canonical zero rotation.
    """

    antipodal_trace_margin: float = 0.5
    """
    A matrix whose trace is less than ``-1 + antipodal_trace_margin`` is decomposed through its diagonal (rotations close
    to pi) instead of through its skew symmetric part.
    """

    safe_pitch_threshold: float = SAFE_THRESHOLD_PITCH
    """
    The margin between the largest allowed pitch and pi/2.
    """

    pitch_boundary_tolerance: float = 1e-12
    """
    Round-off allowance used when checking a computed pitch against the pitch bounds.
    """

    def override_options(self):
        for name in ('zero_epsilon', 'pitch_boundary_tolerance'):
            if getattr(self, name) < 0:
                raise ValueError(f'{name} must be non-negative, got {getattr(self, name)}')

        if not 0 < self.antipodal_trace_margin <= 2:
            raise ValueError(f'antipodal_trace_margin must be in (0, 2], got {self.antipodal_trace_margin}')

        if not 0 < self.safe_pitch_threshold < np.pi / 2:
            raise ValueError(f'safe_pitch_threshold must be in (0, pi/2), got {self.safe_pitch_threshold}')

        if self.zero_epsilon > 1e-6:
            warnings.warn(f'A zero_epsilon of {self.zero_epsilon} will treat small rotations as the identity')

    @property
    def max_pitch_angle(self) -> float:
        """
        The largest pitch for which yaw and roll can be uniquely recovered.
        """
        return np.pi / 2 - self.safe_pitch_threshold

    @property
    def min_pitch_angle(self) -> float:
        """
        The smallest pitch for which yaw and roll can be uniquely recovered.
        """
        return -self.max_pitch_angle


DEFAULT_TOLERANCES = ConversionTolerances()
"""
The tolerances used when a conversion is called without the ``tolerances`` keyword.
"""
