"""
Core math modules

Float-примитивы для конверсий единиц: конечность, epsilon-сравнения,
обратимость, физические границы.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_BOUND_ABS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_ROUNDTRIP_ABS,
    EPS_ROUNDTRIP_REL,
    # NaN/Inf checks
    is_valid_float,
    require_finite,
    # Epsilon comparisons
    is_close,
    is_non_decreasing,
    is_roundtrip_close,
    # Validation
    require_at_least,
    snap_to_bound,
)

__all__ = [
    "EPS_BOUND_ABS",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_ROUNDTRIP_ABS",
    "EPS_ROUNDTRIP_REL",
    "is_valid_float",
    "require_finite",
    "is_close",
    "is_non_decreasing",
    "is_roundtrip_close",
    "require_at_least",
    "snap_to_bound",
]
