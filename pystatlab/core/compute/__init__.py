"""
Shared compute infrastructure for PyStatLab.

Submodules:
    timing: Execution timing utilities
    tolerances: Documented accuracy of each closed-form approximation
"""

from pystatlab.core.compute.timing import Timer, timed
from pystatlab.core.compute.tolerances import ToleranceTier, tier_for

__all__ = [
    "Timer",
    "timed",
    "ToleranceTier",
    "tier_for",
]
