"""
Core math modules для bonding curve engine

Целочисленные примитивы фиксированной разрядности с гарантией отсутствия wrap.
"""

# Numerical Safeguards (uint128 / uint256)
from src.core.math.numerical_safeguards import (
    # Width constants
    AMOUNT_BITS,
    AMOUNT_MAX,
    WIDE_BITS,
    WIDE_MAX,
    # Validation
    is_amount,
    validate_amount,
    # Checked / saturating
    checked_add,
    checked_sub,
    saturating_add,
    saturating_mul,
    saturating_sub,
    # Widening
    narrow,
    wide_multiply,
)

__all__ = [
    # Numerical Safeguards — Width constants
    "AMOUNT_BITS",
    "AMOUNT_MAX",
    "WIDE_BITS",
    "WIDE_MAX",
    # Numerical Safeguards — Validation
    "is_amount",
    "validate_amount",
    # Numerical Safeguards — Checked / saturating
    "checked_add",
    "checked_sub",
    "saturating_add",
    "saturating_mul",
    "saturating_sub",
    # Numerical Safeguards — Widening
    "narrow",
    "wide_multiply",
]
