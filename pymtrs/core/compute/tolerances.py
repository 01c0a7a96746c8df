"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations per element type:
- EXACT: integers, Fraction, Decimal (no rounding, compare exactly)
- FP64: double precision floats and complex
- FP32: single and half precision floats

Used by Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass

import numpy as np

from pymtrs.core.elements import is_integral


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact arithmetic: no tolerance
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer or rational elements — results must match exactly',
)

# Double precision
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision — a few ulps of accumulated rounding',
)

# Single (or half) precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision — relaxed for float32 accumulation',
)


def select_tolerance(dtype: type) -> ToleranceTier:
    """Select the tolerance tier for an element type."""
    if is_integral(dtype):
        return EXACT
    if issubclass(dtype, (np.floating, np.complexfloating)):
        if np.finfo(dtype).bits < 64:
            return FP32
        return FP64
    if issubclass(dtype, (float, complex)):
        return FP64
    return EXACT
