"""
Bonding curve engine: model, fills and analytics.

Все операции — чистые функции от (Curve, step, amount).
"""

# Curve Model
from src.core.curve.model import Curve, build_curve

# Fills
from src.core.curve.fills import (
    asset_out_given_quote_in,
    mint,
    quote_in_given_asset_out,
    simulate_mints,
)

# Analytics
from src.core.curve.analytics import (
    PROGRESS_SCALE,
    avg_progess,
    cumulative_quote_to_step,
    final_mc_sats,
    mc_sats_at_step,
    progress_at_step,
    total_raise_sats,
)

__all__ = [
    # Model
    "Curve",
    "build_curve",
    # Fills
    "mint",
    "asset_out_given_quote_in",
    "quote_in_given_asset_out",
    "simulate_mints",
    # Analytics — Constants
    "PROGRESS_SCALE",
    # Analytics — Functions
    "cumulative_quote_to_step",
    "total_raise_sats",
    "mc_sats_at_step",
    "final_mc_sats",
    "progress_at_step",
    "avg_progess",
]
