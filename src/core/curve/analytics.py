"""
Curve Analytics — Read-only метрики кривой

- cumulative_quote_to_step: sats, собранные до step
- total_raise_sats: sats, собранные при полной продаже [0 -> sell_amount]
- mc_sats_at_step: приблизительная FDV на step (price * total_supply)
- final_mc_sats: FDV на sell_amount
- progress_at_step: прогресс в процентах
- avg_progess: product(steps) / sum(steps)

ФОРМУЛЫ:
    X_final = floor(k / vt)
    total_raise = X_final - X0
    mc(step) = floor(X(step) * total_supply / Y(step))
    progress(step) = step * 100 / total_supply
"""

from typing import Final, Sequence

from src.core.curve.model import Curve
from src.core.errors import InvalidConfig, ZeroInput
from src.core.math.numerical_safeguards import (
    checked_add,
    narrow,
    saturating_mul,
    saturating_sub,
    validate_amount,
    wide_multiply,
)

# Шкала прогресса (проценты)
PROGRESS_SCALE: Final[int] = 100


# =============================================================================
# RAISE
# =============================================================================


def cumulative_quote_to_step(curve: Curve, step: int) -> int:
    """
    Всего sats, собранных до заданного step.

    Raises:
        OutOfRange: Если step > sell_amount
    """
    snap = curve.snapshot(step)
    return saturating_sub(snap.x, curve.x0)


def total_raise_sats(curve: Curve) -> int:
    """Sats, собранные при продаже всего окна: floor(k / vt) - X0."""
    x_final = curve.k // curve.vt
    return saturating_sub(x_final, curve.x0)


# =============================================================================
# MARKET CAP
# =============================================================================


def mc_sats_at_step(curve: Curve, step: int) -> int:
    """
    Приблизительная FDV (sats) на step: price(step) * total_supply.

    Произведение X * total_supply считается в 256 битах, затем сужается.

    Raises:
        OutOfRange: Если step > sell_amount
        InvalidConfig: Если Y == 0 или результат не помещается в 128 бит
    """
    snap = curve.snapshot(step)
    if snap.y == 0:
        raise InvalidConfig("zero token reserve")

    num = wide_multiply(snap.x, curve.total_supply)
    return narrow(num // snap.y)


def final_mc_sats(curve: Curve) -> int:
    """FDV (sats) после продажи всего sell_amount."""
    return mc_sats_at_step(curve, curve.sell_amount)


# =============================================================================
# PROGRESS
# =============================================================================


def progress_at_step(curve: Curve, step: int) -> int:
    """
    Прогресс кривой в процентах.

    Делитель — total_supply, не sell_amount: при sell_amount < total_supply
    значение не достигает 100.
    """
    validate_amount(step, "step")
    return saturating_mul(step, PROGRESS_SCALE) // curve.total_supply


def avg_progess(curve: Curve, steps: Sequence[int]) -> int:
    """
    product(steps) // sum(steps), в 128-битном домене.

    Это не среднее ни в каком обычном смысле; формула сохранена как есть.

    Raises:
        InvalidConfig: Если product или sum переполняет 128 бит
        ZeroInput: Если sum == 0 (пустой список или только нули)
    """
    product = 1
    total = 0
    for value in steps:
        validate_amount(value, "step")
        product = narrow(product * value)
        total = checked_add(total, value)

    if total == 0:
        raise ZeroInput("steps sum to zero")

    return product // total
