"""
Tolerance tiers and numeric configuration.

Defines the comparison tolerances used by matrix equality and the
thresholds at which the numerical kernels emit warnings:
- EXACT: cell values must match bit for bit
- APPROXIMATE: cell values may differ by up to 1e-3 in absolute value

Used by Matrix.equal / Matrix.approximately_equal, the linalg kernels,
and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Absolute tolerance specification for cellwise comparison."""
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    atol=0.0,
    name='exact',
    description='Exact equality, no tolerance',
)

APPROXIMATE = ToleranceTier(
    atol=1e-3,
    name='approximate',
    description='Cells may differ by at most 1e-3',
)

# Pivot magnitude (relative to the largest input magnitude) below which
# Gauss-Jordan inversion warns. Singularity itself is only ever an exact zero.
PIVOT_WARNING_RATIO = 1e-12

# Cofactor expansion is O(n!); above this dimension the kernel warns.
COFACTOR_WARNING_DIMENSION = 8

# Half-open interval [minimum, maximum) used by random fill.
DEFAULT_RANDOM_RANGE = (-1.0, 1.0)
