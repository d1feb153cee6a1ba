"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations for different cell types and backends:
- exact: integer, Fraction and Decimal cells compare exactly
- float64: python and numpy backends on double-precision cells
- float64 accumulated: results of long reductions (products, sums)

Used by Matrix.allclose() and by the test suite.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def close(self, a, b) -> bool:
        """Whether a and b agree within this tier (|a - b| <= atol + rtol * |b|)."""
        return abs(a - b) <= self.atol + self.rtol * abs(b)


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact equality, for integer and rational cells',
)

FLOAT64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='float64',
    description='Double precision, single operation',
)

# Products and sums accumulate rounding error along the inner dimension
FLOAT64_ACCUMULATED = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='float64_accumulated',
    description='Double precision after a reduction (matmul, sum)',
)


def select_tolerance(accumulated: bool = False) -> ToleranceTier:
    """Select the tolerance tier for comparing float results."""
    if accumulated:
        return FLOAT64_ACCUMULATED
    return FLOAT64
