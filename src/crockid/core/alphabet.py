"""Digit tables for the codec.

An :class:`Alphabet` is a frozen value object: the ordered digit symbols
(a symbol's position is its digit value), the characters that decoding
ignores, and the look-alike glyphs that decoding folds onto a digit.  The
reverse map is derived once when the alphabet is built and exposed as a
read-only mapping, so the two directions can never drift apart.

Two alphabets ship with the package:

* :data:`CROCKFORD_BASE32` — Douglas Crockford's Base32, which drops
  ``I``, ``L``, ``O`` and ``U``.
* :data:`BASE36_ALPHABET` — digits followed by the full Latin alphabet.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Alphabet:
    """Ordered digit symbols plus the canonicalization rules for input."""

    name: str
    """Short human-readable label (e.g. ``"base32"``)."""

    symbols: str
    """Upper-case digit symbols; position ``i`` encodes digit value ``i``."""

    noise: str = "-"
    """Characters removed wherever they appear in decoder input."""

    confusables: tuple[tuple[str, str], ...] = ()
    """``(glyph, digit)`` pairs folded before digit lookup."""

    reverse: Mapping[str, int] = field(init=False, repr=False, compare=False)
    """Symbol to digit value; the exact inverse of :attr:`symbols`."""

    _translation: Mapping[int, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.symbols) < 2:
            raise ValueError(f"Alphabet {self.name!r} needs at least two symbols")
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError(f"Alphabet {self.name!r} repeats a symbol")
        if self.symbols != self.symbols.upper():
            raise ValueError(f"Alphabet {self.name!r} must be upper-case")

        clashes = set(self.noise) & set(self.symbols)
        for glyph, digit in self.confusables:
            if glyph in self.symbols:
                clashes.add(glyph)
            if digit not in self.symbols:
                raise ValueError(
                    f"Confusable {glyph!r} maps to {digit!r}, "
                    f"which is not a symbol of {self.name!r}",
                )
        if clashes:
            raise ValueError(
                f"Alphabet {self.name!r} uses reserved characters as digits: "
                f"{''.join(sorted(clashes))}",
            )

        # Frozen dataclass: derived fields are set through object.__setattr__.
        object.__setattr__(
            self,
            "reverse",
            MappingProxyType({symbol: value for value, symbol in enumerate(self.symbols)}),
        )
        object.__setattr__(
            self,
            "_translation",
            MappingProxyType(str.maketrans(dict(self.confusables))),
        )

    @property
    def base(self) -> int:
        """Number of digit symbols, i.e. the radix."""
        return len(self.symbols)

    def symbol_for(self, digit: int) -> str:
        """Return the symbol for *digit* (``0 <= digit < base``)."""
        if not 0 <= digit < self.base:
            raise ValueError(f"Digit {digit} is outside 0..{self.base - 1}")
        return self.symbols[digit]

    def digit_for(self, symbol: str) -> int | None:
        """Return the digit value of a canonical *symbol*, or ``None``."""
        return self.reverse.get(symbol)

    def fold_confusables(self, text: str) -> str:
        """Replace look-alike glyphs in upper-cased *text* with their digit."""
        return text.translate(self._translation)

    def strip_noise(self, text: str) -> str:
        """Remove every noise character from *text*."""
        if not self.noise:
            return text
        return text.translate({ord(ch): None for ch in self.noise})


CROCKFORD_BASE32 = Alphabet(
    name="base32",
    symbols="0123456789ABCDEFGHJKMNPQRSTVWXYZ",
    # Hyphens group digits; the rest are check-symbol slots.
    noise="-*~$=U",
    confusables=(("O", "0"), ("I", "1"), ("L", "1")),
)

BASE36_ALPHABET = Alphabet(
    name="base36",
    symbols="0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    noise="-",
)
