"""Immutable numeric value types backed by a codec.

An :class:`EncodedValue` wraps a single integer in the encodable 64-bit
range.  The digit string is always derived from that integer, never
stored, so the two representations cannot diverge.  Arithmetic returns
new instances and re-validates the range; nothing mutates in place.

Integers convert in easily (operands, :meth:`EncodedValue.coerce`), but
turning a value into its digit string is always an explicit
:meth:`EncodedValue.to_string` call.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar, TypeVar

from crockid.core.codec import BASE32, BASE36, Codec
from crockid.exceptions import DivisionError, NarrowingError, ValueRangeError
from crockid.utils.int64 import (
    ENCODABLE_MIN,
    INT64_MAX,
    fits_signed,
    in_encodable_range,
    require_int,
    truncating_divmod,
)

_V = TypeVar("_V", bound="EncodedValue")


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class EncodedValue:
    """A signed 64-bit integer rendered in Crockford Base32.

    ``INT64_MIN`` itself is excluded: its magnitude has no positive
    64-bit counterpart, so it could not be encoded as ``-`` + digits.
    """

    numeric_value: int
    """The wrapped integer, in ``(INT64_MIN, INT64_MAX]``."""

    codec: ClassVar[Codec] = BASE32

    MIN_VALUE: ClassVar[EncodedValue]
    MAX_VALUE: ClassVar[EncodedValue]

    def __post_init__(self) -> None:
        value = require_int(self.numeric_value)
        if not in_encodable_range(value):
            raise ValueRangeError(value)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_integer(cls: type[_V], value: int) -> _V:
        """Build a value from an integer, validating the range."""
        return cls(value)

    @classmethod
    def from_string(cls: type[_V], text: str) -> _V:
        """Decode *text* with this type's codec.

        Raises
        ------
        DecodeError
            If *text* is not a valid digit string.
        """
        return cls(cls.codec.decode(text))

    @classmethod
    def coerce(cls: type[_V], other: object) -> _V:
        """Return *other* as an instance of this type.

        Accepts an instance of the same type, an ``int``, or a digit
        string.  Anything else raises :class:`TypeError`.
        """
        if type(other) is cls:
            return other  # type: ignore[return-value]
        if isinstance(other, EncodedValue):
            raise TypeError(
                f"Cannot mix {type(other).__name__} with {cls.__name__}",
            )
        if isinstance(other, str):
            return cls.from_string(other)
        return cls(require_int(other))

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Return the canonical digit string."""
        return self.codec.encode(self.numeric_value)

    def to_padded_string(self, min_digits: int) -> str:
        """Return the digit string left-padded with zeros to *min_digits*."""
        return self.codec.encode_padded(self.numeric_value, min_digits)

    def to_int32(self) -> int:
        """Return the value, raising :class:`NarrowingError` if it needs >32 bits."""
        return self._narrow(32)

    def to_int16(self) -> int:
        """Return the value, raising :class:`NarrowingError` if it needs >16 bits."""
        return self._narrow(16)

    def _narrow(self, bits: int) -> int:
        if not fits_signed(self.numeric_value, bits):
            raise NarrowingError(self.numeric_value, bits)
        return self.numeric_value

    def __int__(self) -> int:
        return self.numeric_value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    # ------------------------------------------------------------------
    # Equality and ordering
    # ------------------------------------------------------------------

    def _comparable(self, other: object) -> int | None:
        if type(other) is type(self):
            return other.numeric_value  # type: ignore[attr-defined]
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        value = self._comparable(other)
        if value is None:
            return NotImplemented
        return self.numeric_value == value

    def __lt__(self, other: object) -> bool:
        value = self._comparable(other)
        if value is None:
            return NotImplemented
        return self.numeric_value < value

    def __hash__(self) -> int:
        return hash(self.numeric_value)

    # ------------------------------------------------------------------
    # Arithmetic (named)
    # ------------------------------------------------------------------

    def _combine(self: _V, other: object, op: Callable[[int, int], int]) -> _V:
        rhs = type(self).coerce(other)
        return type(self)(op(self.numeric_value, rhs.numeric_value))

    def add(self: _V, other: EncodedValue | int) -> _V:
        """Return ``self + other``; :class:`ValueRangeError` on overflow."""
        return self._combine(other, lambda a, b: a + b)

    def subtract(self: _V, other: EncodedValue | int) -> _V:
        """Return ``self - other``; :class:`ValueRangeError` on overflow."""
        return self._combine(other, lambda a, b: a - b)

    def multiply(self: _V, other: EncodedValue | int) -> _V:
        """Return ``self * other``; :class:`ValueRangeError` on overflow."""
        return self._combine(other, lambda a, b: a * b)

    def floor_divide(self: _V, other: EncodedValue | int) -> _V:
        """Integer division truncating toward zero.

        Raises
        ------
        DivisionError
            If *other* is zero.
        """
        return self._combine(other, lambda a, b: _divmod(a, b)[0])

    def modulo(self: _V, other: EncodedValue | int) -> _V:
        """Remainder with the sign of the dividend.

        Raises
        ------
        DivisionError
            If *other* is zero.
        """
        return self._combine(other, lambda a, b: _divmod(a, b)[1])

    def next(self: _V) -> _V:
        """Return the value one greater; :class:`ValueRangeError` past the max."""
        return self.add(1)

    def previous(self: _V) -> _V:
        """Return the value one smaller; :class:`ValueRangeError` past the min."""
        return self.subtract(1)

    # ------------------------------------------------------------------
    # Arithmetic (operators)
    # ------------------------------------------------------------------

    def __add__(self: _V, other: object) -> _V:
        return self._binary(other, self.add)

    def __sub__(self: _V, other: object) -> _V:
        return self._binary(other, self.subtract)

    def __mul__(self: _V, other: object) -> _V:
        return self._binary(other, self.multiply)

    def __floordiv__(self: _V, other: object) -> _V:
        return self._binary(other, self.floor_divide)

    def __mod__(self: _V, other: object) -> _V:
        return self._binary(other, self.modulo)

    def __radd__(self: _V, other: object) -> _V:
        return self._reflected(other, EncodedValue.add)

    def __rsub__(self: _V, other: object) -> _V:
        return self._reflected(other, EncodedValue.subtract)

    def __rmul__(self: _V, other: object) -> _V:
        return self._reflected(other, EncodedValue.multiply)

    def __rfloordiv__(self: _V, other: object) -> _V:
        return self._reflected(other, EncodedValue.floor_divide)

    def __rmod__(self: _V, other: object) -> _V:
        return self._reflected(other, EncodedValue.modulo)

    def __neg__(self: _V) -> _V:
        return type(self)(-self.numeric_value)

    def __abs__(self: _V) -> _V:
        return type(self)(abs(self.numeric_value))

    def _binary(self, other: object, method: Callable[[object], _V]) -> _V:
        if self._comparable(other) is None:
            return NotImplemented  # type: ignore[return-value]
        return method(other)

    def _reflected(self, other: object, method: Callable[..., _V]) -> _V:
        if self._comparable(other) is None:
            return NotImplemented  # type: ignore[return-value]
        return method(type(self).coerce(other), self)


def _divmod(dividend: int, divisor: int) -> tuple[int, int]:
    if divisor == 0:
        raise DivisionError("Division by a zero value")
    return truncating_divmod(dividend, divisor)


class Base36Value(EncodedValue):
    """The same value type rendered with the Base36 alphabet."""

    __slots__ = ()

    codec: ClassVar[Codec] = BASE36


for _cls in (EncodedValue, Base36Value):
    _cls.MIN_VALUE = _cls(ENCODABLE_MIN)
    _cls.MAX_VALUE = _cls(INT64_MAX)
del _cls

MIN_VALUE: EncodedValue = EncodedValue.MIN_VALUE
MAX_VALUE: EncodedValue = EncodedValue.MAX_VALUE
