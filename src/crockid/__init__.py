"""crockid — typo-tolerant Crockford Base32 identifiers for 64-bit integers.

Encodes signed 64-bit integers as short, case-insensitive digit strings
and decodes them back exactly, forgiving look-alike glyphs, hyphen
grouping and check-symbol characters.  A Base36 variant shares the same
interface.
"""

from crockid.core import (
    BASE32,
    BASE36,
    BASE36_ALPHABET,
    CROCKFORD_BASE32,
    MAX_VALUE,
    MIN_VALUE,
    Alphabet,
    Base36Value,
    Codec,
    EncodedValue,
    canonicalize,
    decode,
    encode,
    encode_padded,
    is_valid,
)
from crockid.exceptions import (
    CrockidError,
    DecodeError,
    DecodeOverflowError,
    DivisionError,
    NarrowingError,
    ValueRangeError,
)
from crockid.version import __version__

__all__: list[str] = [
    "Alphabet",
    "BASE32",
    "BASE36",
    "BASE36_ALPHABET",
    "Base36Value",
    "CROCKFORD_BASE32",
    "Codec",
    "CrockidError",
    "DecodeError",
    "DecodeOverflowError",
    "DivisionError",
    "EncodedValue",
    "MAX_VALUE",
    "MIN_VALUE",
    "NarrowingError",
    "ValueRangeError",
    "__version__",
    "canonicalize",
    "decode",
    "encode",
    "encode_padded",
    "is_valid",
]
