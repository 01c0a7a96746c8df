"""
Shared compute infrastructure for pymtrs.

Submodules:
    tolerances: Tolerance tiers for approximate comparison
    timing: Repeat-and-average benchmark timer
"""

from pymtrs.core.compute.timing import Timer
from pymtrs.core.compute.tolerances import (
    EXACT,
    FP32,
    FP64,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP32",
    "select_tolerance",
]
