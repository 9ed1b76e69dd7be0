"""``crockid alphabet`` — digit table rendering.

Shows every digit value of a codec next to its canonical symbol and the
extra input glyphs that decode to it, followed by the characters the
decoder ignores.  Renders a Rich table when Rich is importable, else a
plain-text table on stderr.
"""

from __future__ import annotations

import sys

from crockid.cli import exit_codes
from crockid.cli.console import console
from crockid.core.codec import Codec


# ---------------------------------------------------------------------------
# Row collection
# ---------------------------------------------------------------------------

def _accepted_aliases(codec: Codec, symbol: str) -> str:
    """Return the non-canonical glyphs that decode to *symbol*."""
    aliases: list[str] = []
    if symbol.lower() != symbol:
        aliases.append(symbol.lower())
    for glyph, digit in codec.alphabet.confusables:
        if digit == symbol:
            aliases.extend((glyph, glyph.lower()))
    return " ".join(aliases)


def alphabet_rows(codec: Codec) -> list[tuple[str, str, str]]:
    """Return ``(digit, symbol, aliases)`` rows for every digit value."""
    return [
        (str(value), symbol, _accepted_aliases(codec, symbol))
        for value, symbol in enumerate(codec.alphabet.symbols)
    ]


def _describe_noise(codec: Codec) -> str:
    return " ".join(codec.alphabet.noise) or "(none)"


def _print_plain_table(codec: Codec, rows: list[tuple[str, str, str]]) -> None:
    """Render the table without Rich."""
    print(f"\n{codec.alphabet.name} alphabet", file=sys.stderr)
    print("=" * 32, file=sys.stderr)
    print(f"{'Digit':<6} {'Symbol':<8} {'Also accepted':<16}", file=sys.stderr)
    print("-" * 32, file=sys.stderr)
    for digit, symbol, aliases in rows:
        print(f"{digit:<6} {symbol:<8} {aliases:<16}", file=sys.stderr)
    print(f"Ignored when decoding: {_describe_noise(codec)}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def render_alphabet(codec: Codec) -> int:
    """Render the digit table for *codec*.

    Returns
    -------
    int
        Always :data:`exit_codes.SUCCESS`.
    """
    rows = alphabet_rows(codec)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(codec, rows)
        return exit_codes.SUCCESS

    table = Table(
        title=f"{codec.alphabet.name} alphabet",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Digit", justify="right", min_width=5)
    table.add_column("Symbol", style="bold", justify="center", min_width=6)
    table.add_column("Also accepted", min_width=13)

    for digit, symbol, aliases in rows:
        table.add_row(digit, symbol, aliases)

    console.print()
    console.print(table)
    console.print(f"Ignored when decoding: [bold]{_describe_noise(codec)}[/bold]")
    console.print()
    return exit_codes.SUCCESS
