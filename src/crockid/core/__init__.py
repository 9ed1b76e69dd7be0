"""Core layer — the digit tables, the codec, and the value types.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Module-level tables are built once at import and never mutated.
"""

from crockid.core.alphabet import BASE36_ALPHABET, CROCKFORD_BASE32, Alphabet
from crockid.core.codec import (
    BASE32,
    BASE36,
    CODECS,
    Codec,
    canonicalize,
    decode,
    encode,
    encode_padded,
    is_valid,
)
from crockid.core.models import MAX_VALUE, MIN_VALUE, Base36Value, EncodedValue

__all__: list[str] = [
    "Alphabet",
    "BASE32",
    "BASE36",
    "BASE36_ALPHABET",
    "Base36Value",
    "CODECS",
    "CROCKFORD_BASE32",
    "Codec",
    "EncodedValue",
    "MAX_VALUE",
    "MIN_VALUE",
    "canonicalize",
    "decode",
    "encode",
    "encode_padded",
    "is_valid",
]
