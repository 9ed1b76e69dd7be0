"""Tests for the digit tables (core/alphabet.py).

Covers alphabet totality, reverse-map consistency, the canonicalization
helpers, and construction-time validation of custom alphabets.
"""

from __future__ import annotations

import pytest

from crockid.core.alphabet import BASE36_ALPHABET, CROCKFORD_BASE32, Alphabet


# ---------------------------------------------------------------------------
# Crockford Base32
# ---------------------------------------------------------------------------

class TestCrockfordBase32:
    def test_has_32_symbols(self) -> None:
        assert CROCKFORD_BASE32.base == 32

    def test_excludes_ambiguous_letters(self) -> None:
        for letter in "ILOU":
            assert letter not in CROCKFORD_BASE32.symbols

    def test_digits_are_literal(self) -> None:
        assert CROCKFORD_BASE32.symbols[:10] == "0123456789"

    @pytest.mark.parametrize("digit", range(32))
    def test_every_digit_round_trips(self, digit: int) -> None:
        symbol = CROCKFORD_BASE32.symbol_for(digit)
        assert CROCKFORD_BASE32.digit_for(symbol) == digit

    def test_reverse_map_is_exact_inverse(self) -> None:
        assert len(CROCKFORD_BASE32.reverse) == 32
        assert sorted(CROCKFORD_BASE32.reverse.values()) == list(range(32))

    def test_reverse_map_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            CROCKFORD_BASE32.reverse["I"] = 1  # type: ignore[index]

    def test_unknown_symbol_has_no_digit(self) -> None:
        assert CROCKFORD_BASE32.digit_for("U") is None
        assert CROCKFORD_BASE32.digit_for("a") is None

    def test_symbol_for_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            CROCKFORD_BASE32.symbol_for(32)
        with pytest.raises(ValueError):
            CROCKFORD_BASE32.symbol_for(-1)

    def test_fold_confusables(self) -> None:
        assert CROCKFORD_BASE32.fold_confusables("OIL") == "011"

    def test_strip_noise(self) -> None:
        assert CROCKFORD_BASE32.strip_noise("1-2*3~4$5=6U7") == "1234567"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            CROCKFORD_BASE32.symbols = "01"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Base36
# ---------------------------------------------------------------------------

class TestBase36:
    def test_has_36_symbols(self) -> None:
        assert BASE36_ALPHABET.base == 36

    def test_every_letter_is_a_digit(self) -> None:
        assert BASE36_ALPHABET.digit_for("O") == 24
        assert BASE36_ALPHABET.digit_for("U") == 30

    def test_no_confusables(self) -> None:
        assert BASE36_ALPHABET.fold_confusables("OIL") == "OIL"

    def test_only_hyphen_is_noise(self) -> None:
        assert BASE36_ALPHABET.strip_noise("A-B*") == "AB*"


# ---------------------------------------------------------------------------
# Custom alphabets
# ---------------------------------------------------------------------------

class TestAlphabetValidation:
    def test_minimal_alphabet(self) -> None:
        binary = Alphabet(name="binary", symbols="01")
        assert binary.base == 2
        assert binary.reverse == {"0": 0, "1": 1}

    def test_rejects_single_symbol(self) -> None:
        with pytest.raises(ValueError, match="at least two"):
            Alphabet(name="unary", symbols="1")

    def test_rejects_duplicates(self) -> None:
        with pytest.raises(ValueError, match="repeats"):
            Alphabet(name="dup", symbols="0120")

    def test_rejects_lowercase(self) -> None:
        with pytest.raises(ValueError, match="upper-case"):
            Alphabet(name="lower", symbols="01ab")

    def test_rejects_noise_that_is_a_digit(self) -> None:
        with pytest.raises(ValueError, match="reserved"):
            Alphabet(name="clash", symbols="01-", noise="-")

    def test_rejects_confusable_that_is_a_digit(self) -> None:
        with pytest.raises(ValueError, match="reserved"):
            Alphabet(name="clash", symbols="01O", confusables=(("O", "0"),))

    def test_rejects_confusable_target_outside_alphabet(self) -> None:
        with pytest.raises(ValueError, match="not a symbol"):
            Alphabet(name="bad", symbols="01", confusables=(("O", "Q"),))

    def test_equality_ignores_derived_fields(self) -> None:
        a = Alphabet(name="binary", symbols="01")
        b = Alphabet(name="binary", symbols="01")
        assert a == b
        assert hash(a) == hash(b)
