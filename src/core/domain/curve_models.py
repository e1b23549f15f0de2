"""
Curve Models — Конфигурация и снапшоты bonding curve

Immutable Pydantic модели входной конфигурации и состояния резервов,
плюс лёгкие NamedTuple результаты fill-операций.

Все amount — int в диапазоне [0, 2**128 - 1] (strict, без коэрции из str/float).
Нулевые значения конфигурации модель пропускает: их отвергает построение
Curve с ошибкой InvalidConfig.
"""

from typing import NamedTuple

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import AMOUNT_MAX


# =============================================================================
# CURVE CONFIG
# =============================================================================


class CurveConfig(BaseModel):
    """
    Конфигурация кривой.

    Создаётся вызывающей стороной один раз и никогда не изменяется.
    sell_amount <= total_supply концептуально ожидается, но не проверяется.
    """

    total_supply: int = Field(
        ..., ge=0, le=AMOUNT_MAX, strict=True, description="Полный supply токена"
    )
    sell_amount: int = Field(
        ..., ge=0, le=AMOUNT_MAX, strict=True, description="Токены, продаваемые через кривую"
    )
    vt: int = Field(
        ..., ge=0, le=AMOUNT_MAX, strict=True, description="Виртуальный резерв токенов"
    )
    mc_target_sats: int = Field(
        ...,
        ge=0,
        le=AMOUNT_MAX,
        strict=True,
        description="Целевая FDV на завершении кривой (sats)",
    )

    model_config = {"frozen": True}  # Immutable


# =============================================================================
# CURVE SNAPSHOT
# =============================================================================


class CurveSnapshot(BaseModel):
    """
    Состояние резервов на заданном step.

    y = vt + (sell_amount - step), x = floor(k / y).
    Вычисляется по запросу, не хранится.
    """

    step: int = Field(..., ge=0, le=AMOUNT_MAX, strict=True, description="Продано токенов")
    x: int = Field(..., ge=0, le=AMOUNT_MAX, strict=True, description="Sats-side резерв")
    y: int = Field(
        ..., ge=0, le=AMOUNT_MAX, strict=True, description="Token-side резерв (vt + остаток)"
    )

    model_config = {"frozen": True}

    def price_num(self) -> int:
        """Числитель цены X / Y (sats за базовую единицу токена)."""
        return self.x

    def price_den(self) -> int:
        """Знаменатель цены X / Y."""
        return self.y


# =============================================================================
# FILL RESULTS
# =============================================================================


class MintResult(NamedTuple):
    """Результат mint: новый step и полученные токены."""

    new_step: int
    asset_out: int


class MintFill(NamedTuple):
    """Элемент batch-симуляции: step до mint и полученные токены."""

    step: int
    asset_out: int
