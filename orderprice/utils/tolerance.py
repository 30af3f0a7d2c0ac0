from __future__ import annotations

import math
from typing import Final

# Default absolute tolerance for money comparisons
PRICE_EPS: Final[float] = 0.001

# Relative / absolute tolerance for comparing equivalent float computations
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


def are_equal(d1: float, d2: float, diff: float = PRICE_EPS) -> bool:
    """True when both prices differ by at most `diff` (absolute)."""
    return abs(d1 - d2) <= diff


def is_close(a: float, b: float, rel: float = EPS_FLOAT_COMPARE_REL, abs_: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Relative comparison for results of the same computation done in a
    different order (floating point rounding only).
    """
    return math.isclose(a, b, rel_tol=rel, abs_tol=abs_)
