"""
Curve Model — CPMM с виртуальным резервом токенов

Инвариант: X * Y = k
Где:
  - X — sats-side (концептуальный) резерв
  - Y — token-side резерв = vt + (sell_amount - step)

X0 выводится из целевой FDV на завершении кривой:
    MC_final_sats ≈ (X0 * Y0 / vt^2) * total_supply
    => X0 ≈ mc_target_sats * vt^2 / (Y0 * total_supply)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. x0 > 0, k <= AMOUNT_MAX, x0 * y0 == k (иначе InvalidConfig)
2. Curve неизменяема после построения
3. Y(step) невозрастающая по step
"""

from dataclasses import dataclass

from src.core.domain.curve_models import CurveConfig, CurveSnapshot
from src.core.errors import InvalidConfig, OutOfRange
from src.core.math.numerical_safeguards import (
    checked_add,
    narrow,
    validate_amount,
    wide_multiply,
)


@dataclass(frozen=True)
class Curve:
    """
    Кривая с производными инвариантами.

    Строится через Curve.from_config; прямой конструктор не проверяет
    согласованность производных полей.
    """

    # Immutable config
    total_supply: int
    sell_amount: int
    vt: int

    # Derived
    y0: int  # Y0 = vt + sell_amount
    x0: int  # X0 (концептуальный sats-side резерв)
    k: int  # k = X0 * Y0

    @classmethod
    def from_config(cls, config: CurveConfig) -> "Curve":
        """
        Построение кривой из целевой FDV.

        Args:
            config: Конфигурация кривой

        Returns:
            Curve с выведенными y0, x0, k

        Raises:
            InvalidConfig: Нулевой параметр, переполнение y0/k,
                нулевой делитель или x0 == 0
        """
        total_supply = config.total_supply
        sell_amount = config.sell_amount
        vt = config.vt
        mc = config.mc_target_sats

        if total_supply == 0 or sell_amount == 0 or vt == 0 or mc == 0:
            raise InvalidConfig("curve config parameters must be non-zero")

        y0 = checked_add(vt, sell_amount)

        # X0 = floor(mc * vt^2 / (Y0 * total_supply)) в 256-битном домене
        vt_sq = wide_multiply(vt, vt)
        num = wide_multiply(mc, vt_sq)
        den = wide_multiply(y0, total_supply)
        if den == 0:
            raise InvalidConfig("zero divisor deriving x0")

        x0 = narrow(num // den)
        if x0 == 0:
            raise InvalidConfig("x0 rounds to zero; raise mc_target_sats or vt")

        k = narrow(wide_multiply(x0, y0))

        return cls(
            total_supply=total_supply,
            sell_amount=sell_amount,
            vt=vt,
            y0=y0,
            x0=x0,
            k=k,
        )

    def max_step(self) -> int:
        """Максимальный step (sell_amount)."""
        return self.sell_amount

    def y_at(self, step: int) -> int:
        """
        Token-side резерв: Y(step) = vt + (sell_amount - step).

        Raises:
            OutOfRange: Если step > sell_amount
            InvalidConfig: Если сумма не помещается в 128 бит
        """
        validate_amount(step, "step")
        if step > self.sell_amount:
            raise OutOfRange(f"step {step} exceeds sell_amount {self.sell_amount}")
        return checked_add(self.vt, self.sell_amount - step)

    def x_from_y(self, y: int) -> int:
        """X = floor(k / Y); y > 0 гарантируется вызывающей стороной."""
        return self.k // y

    def snapshot(self, step: int) -> CurveSnapshot:
        """
        Состояние кривой (step, X, Y) на заданном step.

        Raises:
            OutOfRange: Если step > sell_amount
        """
        y = self.y_at(step)
        x = self.x_from_y(y)
        return CurveSnapshot(step=step, x=x, y=y)


def build_curve(config: CurveConfig) -> Curve:
    """Построение Curve из CurveConfig (эквивалент Curve.from_config)."""
    return Curve.from_config(config)
