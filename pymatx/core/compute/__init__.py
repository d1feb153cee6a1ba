"""
Shared compute utilities for pymatx.

Submodules:
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatx.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    FLOAT64,
    FLOAT64_ACCUMULATED,
    select_tolerance,
)

__all__ = [
    "ToleranceTier",
    "EXACT",
    "FLOAT64",
    "FLOAT64_ACCUMULATED",
    "select_tolerance",
]
