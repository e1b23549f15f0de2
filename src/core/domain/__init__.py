"""
Domain models and value objects.

Contains the bonding curve configuration, reserve snapshots and fill results.
"""

from src.core.domain.curve_models import (
    CurveConfig,
    CurveSnapshot,
    MintFill,
    MintResult,
)

__all__ = [
    # Curve models
    "CurveConfig",
    "CurveSnapshot",
    "MintResult",
    "MintFill",
]
