"""Signed 64-bit integer limits and range predicates.

Python integers are unbounded, so the fixed-width behaviour of the
codec is enforced explicitly with the helpers below.
"""

from __future__ import annotations

INT64_MIN: int = -(2**63)
"""Smallest signed 64-bit integer.  Excluded from the encodable range."""

INT64_MAX: int = 2**63 - 1
"""Largest signed 64-bit integer."""

ENCODABLE_MIN: int = INT64_MIN + 1
"""Smallest encodable value; its magnitude still fits in 63 bits."""


def in_encodable_range(value: int) -> bool:
    """Return ``True`` when ``INT64_MIN < value <= INT64_MAX``."""
    return INT64_MIN < value <= INT64_MAX


def fits_signed(value: int, bits: int) -> bool:
    """Return ``True`` when *value* fits a two's complement *bits*-wide int."""
    limit = 1 << (bits - 1)
    return -limit <= value < limit


def truncating_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Integer division rounding toward zero, as fixed-width CPUs do.

    The remainder takes the sign of the dividend, so
    ``q * divisor + r == dividend`` always holds.  *divisor* must be
    non-zero.
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def require_int(value: object) -> int:
    """Return *value* unchanged if it is an ``int``, else raise ``TypeError``.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    return value
