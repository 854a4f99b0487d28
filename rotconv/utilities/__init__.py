"""
This package provides utility routines that support the rest of rotconv.

Currently this is the :class:`.UserOptions` base class used to define configurable tolerances.
"""

from rotconv.utilities.options import UserOptions

__all__ = ['UserOptions']
