"""Two-way conversion between 64-bit integers and digit strings.

Every function in this module is **pure** — no I/O, no shared mutable
state, fully deterministic.  A :class:`Codec` is bound to one
:class:`~crockid.core.alphabet.Alphabet`; the module-level functions use
the Crockford Base32 codec.

Decoding pipeline (enforced by :meth:`Codec.canonicalize`):

1. **Upper-case** — input is case-insensitive.
2. **Sign** — a single leading ``-`` marks a negative value.
3. **Strip** — grouping and check-symbol characters vanish anywhere.
4. **Fold** — look-alike glyphs become their digit (``O`` -> ``0``).
5. **Parse** — positional accumulation, checked against 64 bits.
"""

from __future__ import annotations

import logging
from typing import NoReturn

from crockid.core.alphabet import BASE36_ALPHABET, CROCKFORD_BASE32, Alphabet
from crockid.exceptions import DecodeError, DecodeOverflowError, ValueRangeError
from crockid.utils.int64 import INT64_MAX, in_encodable_range, require_int

logger = logging.getLogger(__name__)


class Codec:
    """Stateless encoder/decoder for one alphabet.

    Parameters
    ----------
    alphabet:
        The digit table and canonicalization rules to apply.
    """

    __slots__ = ("_alphabet",)

    def __init__(self, alphabet: Alphabet) -> None:
        self._alphabet: Alphabet = alphabet

    def __repr__(self) -> str:
        return f"Codec({self._alphabet.name!r})"

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def base(self) -> int:
        return self._alphabet.base

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encode(self, value: int) -> str:
        """Return the canonical digit string for *value*.

        Negative values are the encoded magnitude prefixed with ``-``.
        Zero encodes as ``"0"``; no other result has a leading zero.

        Raises
        ------
        TypeError
            If *value* is not an ``int``.
        ValueRangeError
            If *value* is not in ``(INT64_MIN, INT64_MAX]``.
        """
        value = require_int(value)
        if not in_encodable_range(value):
            raise ValueRangeError(value)
        if value < 0:
            return "-" + self._encode_magnitude(-value)
        return self._encode_magnitude(value)

    def encode_padded(self, value: int, min_digits: int) -> str:
        """Encode *value*, left-padding the digits with ``0`` to *min_digits*.

        The sign stays in front of the padding (``-0005``).  Results that
        are already long enough are returned unchanged, never truncated.
        """
        min_digits = require_int(min_digits)
        if min_digits < 0:
            raise ValueError(f"min_digits must not be negative, got {min_digits}")
        encoded = self.encode(value)
        sign, digits = ("-", encoded[1:]) if encoded.startswith("-") else ("", encoded)
        return sign + digits.rjust(min_digits, self._alphabet.symbols[0])

    def _encode_magnitude(self, magnitude: int) -> str:
        base = self._alphabet.base
        symbols = self._alphabet.symbols
        if magnitude < base:
            return symbols[magnitude]

        digits: list[str] = []
        while magnitude > 0:
            magnitude, remainder = divmod(magnitude, base)
            digits.append(symbols[remainder])
        return "".join(reversed(digits))

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def canonicalize(self, text: str) -> str:
        """Return the cleaned form of *text*: sign plus canonical digits.

        No numeric parsing happens here, but every remaining character is
        checked against the alphabet. Leading zeros and a "-0" sign are
        kept; ``encode(decode(text))`` gives the canonical encoding.

        Raises
        ------
        TypeError
            If *text* is not a ``str``.
        DecodeError
            If *text* is empty, has no digits left after cleaning, or
            contains a character outside the alphabet.
        """
        negative, digits = self._clean(text)
        for ch in digits:
            if self._alphabet.digit_for(ch) is None:
                self._reject(text, f"unexpected character {ch!r}")
        return ("-" if negative else "") + digits

    def decode(self, text: str) -> int:
        """Parse *text* into an integer, tolerating case and noise.

        Raises
        ------
        TypeError
            If *text* is not a ``str``.
        DecodeError
            If *text* is empty, has no digits left after cleaning, or
            contains a character outside the alphabet.
        DecodeOverflowError
            If the magnitude exceeds ``INT64_MAX``.
        """
        negative, digits = self._clean(text)
        base = self._alphabet.base

        magnitude = 0
        for ch in digits:
            digit = self._alphabet.digit_for(ch)
            if digit is None:
                self._reject(text, f"unexpected character {ch!r}")
            magnitude = magnitude * base + digit
            if magnitude > INT64_MAX:
                logger.debug("Rejected %r: magnitude exceeds 64 bits", text)
                raise DecodeOverflowError(
                    text,
                    "magnitude exceeds 64 bits",
                    hint=f"At most {len(self.encode(INT64_MAX))} significant digits fit.",
                )

        return -magnitude if negative else magnitude

    def is_valid(self, text: str) -> bool:
        """Return ``True`` when :meth:`decode` would accept *text*."""
        if not isinstance(text, str):
            return False
        try:
            self.decode(text)
        except DecodeError:
            return False
        return True

    def _clean(self, text: str) -> tuple[bool, str]:
        """Apply the upper-case / sign / strip / fold steps."""
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        if not text:
            self._reject(text, "empty input")
        # str.upper() maps some non-ASCII letters onto ASCII ones ("ß" -> "SS").
        if not text.isascii():
            self._reject(text, "non-ASCII character")

        cleaned = text.upper()
        negative = cleaned.startswith("-")
        if negative:
            cleaned = cleaned[1:]
        cleaned = self._alphabet.strip_noise(cleaned)
        cleaned = self._alphabet.fold_confusables(cleaned)

        if not cleaned:
            self._reject(text, "no digits after removing separators")
        return negative, cleaned

    @staticmethod
    def _reject(text: str, reason: str) -> NoReturn:
        logger.debug("Rejected %r: %s", text, reason)
        raise DecodeError(text, reason)


# ---------------------------------------------------------------------------
# Shared codecs and Base32 shortcuts
# ---------------------------------------------------------------------------

BASE32 = Codec(CROCKFORD_BASE32)
BASE36 = Codec(BASE36_ALPHABET)

CODECS: dict[int, Codec] = {32: BASE32, 36: BASE36}
"""Codecs keyed by radix, for callers that select one at runtime."""


def encode(value: int) -> str:
    """Encode *value* with Crockford Base32."""
    return BASE32.encode(value)


def encode_padded(value: int, min_digits: int) -> str:
    """Encode *value* with Crockford Base32, zero-padded to *min_digits*."""
    return BASE32.encode_padded(value, min_digits)


def decode(text: str) -> int:
    """Decode a Crockford Base32 string."""
    return BASE32.decode(text)


def is_valid(text: str) -> bool:
    """Return ``True`` when *text* is a decodable Crockford Base32 string."""
    return BASE32.is_valid(text)


def canonicalize(text: str) -> str:
    """Return the canonical Crockford Base32 form of *text*."""
    return BASE32.canonicalize(text)
