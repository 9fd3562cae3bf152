"""
Shared compute infrastructure for pydense.

This module provides timing utilities and tolerance tiers that are shared
across the containers and the elimination backends.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and machine epsilon lookup
"""

from pydense.core.compute.timing import Timer, timed
from pydense.core.compute.tolerances import (
    ToleranceTier,
    FLOAT64_TIGHT,
    FLOAT64_LOOSE,
    FLOAT32_RELAXED,
    machine_epsilon,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "FLOAT64_TIGHT",
    "FLOAT64_LOOSE",
    "FLOAT32_RELAXED",
    "machine_epsilon",
    "select_tolerance",
]
