"""Custom exception hierarchy for crockid.

Every error raised by the codec or the value type inherits from
:class:`CrockidError`, so callers can catch one base class or branch on
the specific cause.  Each subclass also derives from the closest builtin
exception so that generic ``except ValueError`` handlers keep working.

Hierarchy
---------
CrockidError
├── ValueRangeError      (ValueError)
├── DecodeError          (ValueError)
│   └── DecodeOverflowError
├── DivisionError        (ZeroDivisionError)
├── NarrowingError       (OverflowError)
└── MissingDependencyError
"""

from __future__ import annotations


class CrockidError(Exception):
    """Base exception for all crockid errors.

    Every failure the library reports maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Range -----------------------------------------------------------------

class ValueRangeError(CrockidError, ValueError):
    """Raised when an integer falls outside the encodable 64-bit range."""

    def __init__(self, value: int, *, hint: str | None = None) -> None:
        super().__init__(
            f"Value out of range: {value}",
            hint=hint or "Values must lie in [-(2**63 - 1), 2**63 - 1].",
        )
        self.value: int = value
        """The rejected integer."""


# --- Decoding --------------------------------------------------------------

class DecodeError(CrockidError, ValueError):
    """Raised when a string cannot be decoded into a value.

    The message is the same for every cause (``Invalid encoded value``
    followed by the original input); :attr:`reason` carries the detail.
    """

    def __init__(self, text: str, reason: str, *, hint: str | None = None) -> None:
        super().__init__(f"Invalid encoded value: {text!r}", hint=hint)
        self.text: str = text
        """The original, uncanonicalized input."""

        self.reason: str = reason
        """Short description of why decoding failed."""


class DecodeOverflowError(DecodeError):
    """Raised when the decoded magnitude does not fit in 64 bits."""


# --- Arithmetic ------------------------------------------------------------

class DivisionError(CrockidError, ZeroDivisionError):
    """Raised on division or modulo by a zero value."""


class NarrowingError(CrockidError, OverflowError):
    """Raised when a value does not fit a narrower integer width."""

    def __init__(self, value: int, bits: int) -> None:
        super().__init__(f"Value {value} does not fit in a signed {bits}-bit integer")
        self.value: int = value
        self.bits: int = bits


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(CrockidError):
    """Raised when an optional runtime dependency is not available."""
