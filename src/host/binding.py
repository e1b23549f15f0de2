"""
HostCurve — Decimal-string фасад для встраивающего runtime

Открывает тот же набор операций, что и curve engine (construct, mint,
snapshot, inverse-solve, simulate, analytics), но принимает и возвращает
amount как десятичные строки: хост с 53-битными числами не теряет точность.

Ошибки движка пробрасываются без изменений (CurveError и подклассы);
error_payload отображает их один-к-одному в контракт curve_error.
Невалидный host-ввод (не десятичная строка, лишние поля) — это
jsonschema.ValidationError / ValueError, а не ошибка кривой.
"""

import re
from typing import Any, Dict, List, Sequence

from src.core.contracts import (
    validate_curve_config,
    validate_curve_error,
    validate_curve_snapshot,
    validate_mint_result,
)
from src.core.curve import (
    Curve,
    asset_out_given_quote_in,
    avg_progess,
    cumulative_quote_to_step,
    final_mc_sats,
    mc_sats_at_step,
    mint,
    progress_at_step,
    quote_in_given_asset_out,
    simulate_mints,
    total_raise_sats,
)
from src.core.domain import CurveConfig
from src.core.errors import CurveError
from src.core.math import validate_amount

_DECIMAL_RE = re.compile(r"^(0|[1-9][0-9]*)$")


# =============================================================================
# AMOUNT CODEC
# =============================================================================


def parse_amount(value: str, name: str) -> int:
    """
    Разбор десятичной строки в amount.

    Args:
        value: Десятичная строка без знака и ведущих нулей
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        amount (int в [0, 2**128 - 1])

    Raises:
        TypeError: Если value не str
        ValueError: Если строка не десятичная или вне диапазона
    """
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a decimal string, got {type(value).__name__}")
    if not _DECIMAL_RE.match(value):
        raise ValueError(f"{name} must be a canonical decimal string, got {value!r}")
    return validate_amount(int(value), name)


def format_amount(value: int) -> str:
    """amount -> десятичная строка."""
    return str(value)


def error_payload(exc: CurveError) -> Dict[str, str]:
    """
    Отображение ошибки движка в контракт curve_error.

    Args:
        exc: Ошибка curve engine

    Returns:
        {"kind": ..., "message": ...}
    """
    payload = {"kind": exc.kind.value, "message": str(exc)}
    validate_curve_error(payload)
    return payload


# =============================================================================
# HOST CURVE
# =============================================================================


class HostCurve:
    """
    Кривая для встраивающего хоста.

    Построение валидирует config против curve_config контракта, затем
    строит Curve (InvalidConfig пробрасывается как есть).
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Args:
            config: {"total_supply", "sell_amount", "vt", "mc_target_sats"}
                как десятичные строки
        """
        validate_curve_config(config)
        self.config = CurveConfig(
            **{name: parse_amount(value, name) for name, value in config.items()}
        )
        self.curve = Curve.from_config(self.config)

    # -------------------------------------------------------------------------
    # Model
    # -------------------------------------------------------------------------

    def max_step(self) -> str:
        return format_amount(self.curve.max_step())

    def invariants(self) -> Dict[str, str]:
        """Производные инварианты кривой (y0, x0, k)."""
        return {
            "y0": format_amount(self.curve.y0),
            "x0": format_amount(self.curve.x0),
            "k": format_amount(self.curve.k),
        }

    def snapshot(self, step: str) -> Dict[str, str]:
        snap = self.curve.snapshot(parse_amount(step, "step"))
        payload = {
            "step": format_amount(snap.step),
            "x": format_amount(snap.x),
            "y": format_amount(snap.y),
        }
        validate_curve_snapshot(payload)
        return payload

    # -------------------------------------------------------------------------
    # Fills
    # -------------------------------------------------------------------------

    def mint(self, step: str, quote_in: str) -> Dict[str, str]:
        new_step, asset_out = mint(
            self.curve, parse_amount(step, "step"), parse_amount(quote_in, "quote_in")
        )
        payload = {
            "new_step": format_amount(new_step),
            "asset_out": format_amount(asset_out),
        }
        validate_mint_result(payload)
        return payload

    def asset_out_given_quote_in(self, step: str, quote_in: str) -> str:
        return format_amount(
            asset_out_given_quote_in(
                self.curve, parse_amount(step, "step"), parse_amount(quote_in, "quote_in")
            )
        )

    def quote_in_given_asset_out(self, step: str, asset_out: str) -> str:
        return format_amount(
            quote_in_given_asset_out(
                self.curve, parse_amount(step, "step"), parse_amount(asset_out, "asset_out")
            )
        )

    def simulate_mints(self, mints: Sequence[str]) -> List[Dict[str, str]]:
        """
        Batch-симуляция; каждый элемент — {"step", "asset_out"}.

        Весь batch падает на первой ошибке, частичных результатов нет.
        """
        quotes = [parse_amount(value, f"mints[{i}]") for i, value in enumerate(mints)]
        return [
            {"step": format_amount(fill.step), "asset_out": format_amount(fill.asset_out)}
            for fill in simulate_mints(self.curve, quotes)
        ]

    # -------------------------------------------------------------------------
    # Analytics
    # -------------------------------------------------------------------------

    def cumulative_quote_to_step(self, step: str) -> str:
        return format_amount(cumulative_quote_to_step(self.curve, parse_amount(step, "step")))

    def total_raise_sats(self) -> str:
        return format_amount(total_raise_sats(self.curve))

    def mc_sats_at_step(self, step: str) -> str:
        return format_amount(mc_sats_at_step(self.curve, parse_amount(step, "step")))

    def final_mc_sats(self) -> str:
        return format_amount(final_mc_sats(self.curve))

    def progress_at_step(self, step: str) -> str:
        return format_amount(progress_at_step(self.curve, parse_amount(step, "step")))

    def avg_progess(self, steps: Sequence[str]) -> str:
        values = [parse_amount(value, f"steps[{i}]") for i, value in enumerate(steps)]
        return format_amount(avg_progess(self.curve, values))
