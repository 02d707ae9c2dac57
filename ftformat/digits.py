"""Digit rendering for signed, unsigned and hexadecimal integers.

Signed and unsigned conversions follow 32-bit integer semantics: values
outside that range wrap around exactly as a fixed-width integer would.
"""

from __future__ import annotations

INT_BITS = 32
LOWER_HEX_DIGITS = "0123456789abcdef"
UPPER_HEX_DIGITS = "0123456789ABCDEF"

_UINT_MODULUS = 1 << INT_BITS
_INT_OFFSET = 1 << (INT_BITS - 1)


def _require_int(n: object) -> int:
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return n


def _wrap_signed(n: int) -> int:
    return (n + _INT_OFFSET) % _UINT_MODULUS - _INT_OFFSET


def itoa(n: int) -> str:
    """Return the decimal text of ``n`` taken as a signed 32-bit integer."""
    return str(_wrap_signed(_require_int(n)))


def to_unsigned(n: int) -> int:
    """Wrap ``n`` into the unsigned 32-bit range."""
    return _require_int(n) % _UINT_MODULUS


def to_hex(n: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of a non-negative integer, without prefix."""
    value = _require_int(n)
    if value < 0:
        raise ValueError(f"cannot render negative value {value} in hexadecimal")
    return format(value, "X" if upper else "x")


def to_decimal_unsigned(n: int) -> str:
    """Return the decimal text of ``n`` taken as an unsigned 32-bit integer."""
    return str(to_unsigned(n))