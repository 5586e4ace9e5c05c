"""
Shared compute infrastructure for PyMatCalc.

IMPORTANT: This is NOT where the algebra backends live. Those go in
algebra/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for comparing computed matrices
"""

from pymatcalc.core.compute.timing import Timer
from pymatcalc.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    CONDITION_THRESHOLD,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "CONDITION_THRESHOLD",
    "select_tolerance",
]
