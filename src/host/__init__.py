"""
Host binding для bonding curve engine.

Decimal-string фасад для встраивающих runtime (без собственного I/O).
"""

from src.host.binding import (
    HostCurve,
    error_payload,
    format_amount,
    parse_amount,
)

__all__ = [
    "HostCurve",
    "error_payload",
    "format_amount",
    "parse_amount",
]
