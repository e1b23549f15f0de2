"""
Contract Validation Module

Модуль для валидации host-facing JSON контрактов bonding curve engine.
"""

from .validators import (
    ContractValidator,
    CurveConfigValidator,
    CurveErrorValidator,
    CurveSnapshotValidator,
    MintResultValidator,
    SchemaLoader,
    validate_curve_config,
    validate_curve_error,
    validate_curve_snapshot,
    validate_mint_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CurveConfigValidator",
    "CurveSnapshotValidator",
    "MintResultValidator",
    "CurveErrorValidator",
    # Functions
    "validate_curve_config",
    "validate_curve_snapshot",
    "validate_mint_result",
    "validate_curve_error",
]
