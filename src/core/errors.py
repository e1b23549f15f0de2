"""
Curve Errors — Закрытая таксономия ошибок curve engine

Четыре вида ошибок, без восстановления внутри движка:
- InvalidConfig: нулевой параметр или переполнение разрядности
- OutOfRange: step > sell_amount
- ZeroInput: fill с нулевым входом
- ExceedsPool: запрос больше токенов, чем осталось до виртуального пола

Составные операции пробрасывают ошибку без изменений (без обёртки).
"""

from enum import Enum
from typing import Dict, Type


# =============================================================================
# ENUMS
# =============================================================================


class CurveErrorKind(str, Enum):
    """Вид ошибки curve engine (значение — каноническое имя для host)."""

    INVALID_CONFIG = "InvalidConfig"
    OUT_OF_RANGE = "OutOfRange"
    ZERO_INPUT = "ZeroInput"
    EXCEEDS_POOL = "ExceedsPool"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CurveError(Exception):
    """
    Базовая ошибка curve engine.

    Каждый подкласс фиксирует свой kind; сообщение носит только
    диагностический характер, контракт — это kind.
    """

    kind: CurveErrorKind

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value)

    @staticmethod
    def from_kind(kind: CurveErrorKind, message: str = "") -> "CurveError":
        """
        Построение исключения по виду ошибки.

        Args:
            kind: Вид ошибки
            message: Опциональное сообщение

        Returns:
            Экземпляр соответствующего подкласса
        """
        return _ERRORS_BY_KIND[CurveErrorKind(kind)](message)


class InvalidConfig(CurveError):
    """Нулевой параметр конфигурации или переполнение разрядности."""

    kind = CurveErrorKind.INVALID_CONFIG


class OutOfRange(CurveError):
    """Запрошенный step превышает sell_amount."""

    kind = CurveErrorKind.OUT_OF_RANGE


class ZeroInput(CurveError):
    """Fill-операция вызвана с нулевым входом."""

    kind = CurveErrorKind.ZERO_INPUT


class ExceedsPool(CurveError):
    """Запрос превышает остаток токенов или quote-ёмкость кривой."""

    kind = CurveErrorKind.EXCEEDS_POOL


_ERRORS_BY_KIND: Dict[CurveErrorKind, Type[CurveError]] = {
    CurveErrorKind.INVALID_CONFIG: InvalidConfig,
    CurveErrorKind.OUT_OF_RANGE: OutOfRange,
    CurveErrorKind.ZERO_INPUT: ZeroInput,
    CurveErrorKind.EXCEEDS_POOL: ExceedsPool,
}
