"""
Numerical Safeguards — Fixed-Width Integer Primitives

Модуль обеспечивает точную целочисленную арифметику для bonding curve:
- Границы amount (uint128) и wide (uint256) значений
- Checked операции (ошибка при выходе за 128 бит)
- Saturating операции (clamp к [0, AMOUNT_MAX])
- Wide-умножение и narrow обратно в amount с явной проверкой

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не переполняется молча (wrap запрещён)
2. Любой результат, сохраняемый как amount, лежит в [0, AMOUNT_MAX]
3. Float не используется нигде
4. Все операции детерминированы и воспроизводимы
"""

from typing import Final, Type

from src.core.errors import CurveError, InvalidConfig

# =============================================================================
# ГРАНИЦЫ РАЗРЯДНОСТИ
# =============================================================================

# Разрядность amount (token base units, sats)
AMOUNT_BITS: Final[int] = 128

# Разрядность промежуточных произведений
WIDE_BITS: Final[int] = 256

# Максимальное значение amount: 2**128 - 1
AMOUNT_MAX: Final[int] = (1 << AMOUNT_BITS) - 1

# Максимальное значение wide: 2**256 - 1
WIDE_MAX: Final[int] = (1 << WIDE_BITS) - 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_amount(value: object) -> bool:
    """
    Проверка, является ли значение допустимым amount.

    bool не считается amount, хотя является подклассом int.

    Args:
        value: Проверяемое значение

    Returns:
        True если value — int в диапазоне [0, AMOUNT_MAX]
    """
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return 0 <= value <= AMOUNT_MAX


def validate_amount(value: object, name: str) -> int:
    """
    Валидация amount на входе публичных операций.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value вне [0, AMOUNT_MAX]
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > AMOUNT_MAX:
        raise ValueError(f"{name} must be <= 2**{AMOUNT_BITS} - 1, got {value}")

    return value


# =============================================================================
# CHECKED / SATURATING ОПЕРАЦИИ
# =============================================================================


def checked_add(a: int, b: int, error: Type[CurveError] = InvalidConfig) -> int:
    """
    Сложение с проверкой переполнения 128 бит.

    Raises:
        error: Если a + b > AMOUNT_MAX (default: InvalidConfig)
    """
    result = a + b
    if result > AMOUNT_MAX:
        raise error(f"amount overflow: {a} + {b} exceeds {AMOUNT_BITS} bits")
    return result


def checked_sub(a: int, b: int, error: Type[CurveError] = InvalidConfig) -> int:
    """
    Вычитание с проверкой underflow.

    Raises:
        error: Если a < b (default: InvalidConfig)
    """
    if b > a:
        raise error(f"amount underflow: {a} - {b}")
    return a - b


def saturating_add(a: int, b: int) -> int:
    """Сложение с насыщением на AMOUNT_MAX."""
    return min(a + b, AMOUNT_MAX)


def saturating_sub(a: int, b: int) -> int:
    """Вычитание с насыщением на нуле."""
    return a - b if a > b else 0


def saturating_mul(a: int, b: int) -> int:
    """Умножение с насыщением на AMOUNT_MAX."""
    return min(a * b, AMOUNT_MAX)


# =============================================================================
# WIDE-АРИФМЕТИКА
# =============================================================================


def wide_multiply(a: int, b: int) -> int:
    """
    Точное произведение двух значений в 256-битном домене.

    Используется для mc_target_sats * vt^2, x0 * y0 и x * total_supply,
    где 128-битное произведение переполнилось бы.

    Для двух amount переполнение 256 бит недостижимо, но проверяется,
    поскольку операнд может сам быть wide (например, vt^2).

    Args:
        a: Первый множитель (amount или wide)
        b: Второй множитель (amount или wide)

    Returns:
        Произведение a * b (wide)

    Raises:
        InvalidConfig: Если произведение превышает WIDE_MAX

    Examples:
        >>> wide_multiply(2**127, 4) == 2**129
        True
    """
    product = a * b
    if product > WIDE_MAX:
        raise InvalidConfig(f"wide overflow: product exceeds {WIDE_BITS} bits")
    return product


def narrow(wide: int) -> int:
    """
    Сужение wide значения обратно в amount.

    Ошибка, если в старших 128 битах есть хотя бы один ненулевой бит.

    Args:
        wide: Значение в 256-битном домене

    Returns:
        То же значение как amount

    Raises:
        InvalidConfig: Если wide > AMOUNT_MAX

    Examples:
        >>> narrow(12345)
        12345
        >>> narrow(2**128)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidConfig: ...
    """
    if wide >> AMOUNT_BITS:
        raise InvalidConfig(f"narrowing overflow: value exceeds {AMOUNT_BITS} bits")
    return wide
