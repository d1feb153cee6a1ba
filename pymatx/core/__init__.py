"""
Core infrastructure for pymatx.

This module provides shared abstractions and utilities used by the
matrix package.

Key components:
    protocols: Scalar capability and Backend protocols
    exceptions: Exception hierarchy
    validation: Shape, index and divisor validators
    compute: Tolerance tiers
"""

from pymatx.core.protocols import Scalar, Backend
from pymatx.core.exceptions import (
    MatxError,
    ValidationError,
    ShapeError,
    DimensionMismatch,
    IndexOutOfBounds,
    NumericalError,
    DivisionByZero,
)

__all__ = [
    # Protocols
    "Scalar",
    "Backend",
    # Exceptions
    "MatxError",
    "ValidationError",
    "ShapeError",
    "DimensionMismatch",
    "IndexOutOfBounds",
    "NumericalError",
    "DivisionByZero",
]
