"""
Curve Fills — Forward / Inverse / Batch

Операции покупки по кривой:
- mint: quote_in -> (new_step, asset_out), единственная операция, продвигающая step
- quote_in_given_asset_out: обратное решение бинарным поиском
- simulate_mints: последовательное применение mint с step = 0

Все функции чистые: Curve не изменяется, step хранит вызывающая сторона.
Ошибки пробрасываются без обёртки; при ошибке batch не возвращает
частичных результатов.

ФОРМУЛЫ:
    x' = x + quote_in
    y' = max(floor(k / x'), vt)      (виртуальный пол не пересекается)
    asset_out = y - y'               (насыщение на нуле)
    new_step = min(step + asset_out, sell_amount)
"""

from typing import Iterable, List

from src.core.curve.model import Curve
from src.core.domain.curve_models import MintFill, MintResult
from src.core.errors import ExceedsPool, InvalidConfig, ZeroInput
from src.core.math.numerical_safeguards import (
    checked_add,
    checked_sub,
    saturating_add,
    saturating_sub,
    validate_amount,
)


# =============================================================================
# FORWARD FILL
# =============================================================================


def mint(curve: Curve, step: int, quote_in: int) -> MintResult:
    """
    Покупка токенов за sats на заданном step.

    Args:
        curve: Кривая
        step: Текущий step (0..sell_amount)
        quote_in: Sats, которые платит покупатель

    Returns:
        MintResult(new_step, asset_out)

    Raises:
        ZeroInput: Если quote_in == 0
        OutOfRange: Если step > sell_amount
        InvalidConfig: Если x + quote_in переполняет 128 бит
    """
    validate_amount(quote_in, "quote_in")
    if quote_in == 0:
        raise ZeroInput("quote_in must be non-zero")

    y = curve.y_at(step)
    x = curve.x_from_y(y)

    x2 = checked_add(x, quote_in)

    y_raw = curve.k // x2
    y_prime = max(y_raw, curve.vt)

    asset_out = saturating_sub(y, y_prime)

    new_step = min(saturating_add(step, asset_out), curve.sell_amount)
    return MintResult(new_step=new_step, asset_out=asset_out)


def asset_out_given_quote_in(curve: Curve, step: int, quote_in: int) -> int:
    """Токены, получаемые за quote_in на step (asset_out из mint)."""
    return mint(curve, step, quote_in).asset_out


# =============================================================================
# INVERSE FILL
# =============================================================================


def quote_in_given_asset_out(curve: Curve, step: int, asset_out: int) -> int:
    """
    Минимальный quote_in, при котором mint отдаёт не меньше asset_out.

    Отображение quote_in -> asset_out неубывающее, поэтому lower-bound
    бинарный поиск на [1, max_quote] сходится к минимальному допустимому
    quote_in за O(log(max_quote)) вызовов mint.

    Args:
        curve: Кривая
        step: Текущий step
        asset_out: Желаемое количество токенов

    Returns:
        Минимальный quote_in (0 если asset_out == 0)

    Raises:
        ExceedsPool: asset_out больше остатка до vt, или quote-ёмкость исчерпана
        OutOfRange: Если step > sell_amount
        InvalidConfig: Если floor(k / vt) < x
    """
    validate_amount(asset_out, "asset_out")
    if asset_out == 0:
        return 0

    y = curve.y_at(step)
    max_tokens = saturating_sub(y, curve.vt)
    if asset_out > max_tokens:
        raise ExceedsPool(f"asset_out {asset_out} exceeds remaining {max_tokens}")

    x = curve.x_from_y(y)
    x_final = curve.k // curve.vt
    max_quote = checked_sub(x_final, x, InvalidConfig)
    if max_quote == 0:
        raise ExceedsPool("no quote capacity left on the curve")

    lo = 1
    hi = max_quote

    while lo < hi:
        mid = lo + (hi - lo) // 2
        out = asset_out_given_quote_in(curve, step, mid)
        if out >= asset_out:
            hi = mid
        else:
            lo = mid + 1

    return lo


# =============================================================================
# BATCH SIMULATION
# =============================================================================


def simulate_mints(curve: Curve, mints: Iterable[int]) -> List[MintFill]:
    """
    Последовательная симуляция покупок с step = 0.

    Args:
        curve: Кривая
        mints: quote_in каждой покупки в порядке исполнения

    Returns:
        Список MintFill(step до покупки, asset_out) в порядке входа

    Raises:
        CurveError: Первая ошибка любого mint (fail-fast, без частичных результатов)
    """
    current_step = 0
    results: List[MintFill] = []

    for quote_in in mints:
        new_step, tokens_out = mint(curve, current_step, quote_in)
        results.append(MintFill(step=current_step, asset_out=tokens_out))
        current_step = new_step

    return results
