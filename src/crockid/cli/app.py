"""CLI application entry point and command routing for crockid.

This module is the **sole error boundary** for the entire application.
It catches :class:`~crockid.exceptions.CrockidError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No codec logic lives here — all work is delegated to the core layer.
* Results go to stdout; errors, tables and logs go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from crockid.cli import exit_codes
from crockid.cli.console import configure_logging, console, escape, output
from crockid.core.codec import CODECS, Codec
from crockid.exceptions import CrockidError, DecodeError
from crockid.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_base_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-b",
        "--base",
        type=int,
        choices=sorted(CODECS),
        default=32,
        help="Radix of the digit alphabet (default: 32).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``crockid encode <n> [--pad K]``
    * ``crockid decode <text>``
    * ``crockid check <text>``
    * ``crockid alphabet``
    """
    parser = argparse.ArgumentParser(
        prog="crockid",
        description="Crockford Base32 identifiers for signed 64-bit integers.",
        epilog="Use '--' before a negative encoded value: crockid decode -- -ZZ",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging on stderr.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    encode_cmd = commands.add_parser("encode", help="Encode an integer.")
    encode_cmd.add_argument("value", type=int, help="Signed 64-bit integer.")
    encode_cmd.add_argument(
        "-p",
        "--pad",
        type=int,
        default=0,
        metavar="DIGITS",
        help="Left-pad the digits with zeros to at least DIGITS characters.",
    )
    _add_base_option(encode_cmd)

    decode_cmd = commands.add_parser("decode", help="Decode an encoded value.")
    decode_cmd.add_argument("text", help="Encoded value; case and hyphens are ignored.")
    _add_base_option(decode_cmd)

    check_cmd = commands.add_parser(
        "check",
        help="Validate an encoded value and print its canonical form.",
    )
    check_cmd.add_argument("text", help="Encoded value to validate.")
    _add_base_option(check_cmd)

    alphabet_cmd = commands.add_parser("alphabet", help="Show the digit table.")
    _add_base_option(alphabet_cmd)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_encode(codec: Codec, value: int, pad: int) -> int:
    output.print(codec.encode_padded(value, pad))
    return exit_codes.SUCCESS


def _handle_decode(codec: Codec, text: str) -> int:
    output.print(str(codec.decode(text)))
    return exit_codes.SUCCESS


def _handle_check(codec: Codec, text: str) -> int:
    """Print the canonical form (the encoding of the decoded value), or the
    rejection reason.

    An invalid value is an expected outcome here, so it is reported
    without going through the error boundary.
    """
    try:
        canonical = codec.encode(codec.decode(text))
    except DecodeError as exc:
        console.print(f"[bold red]Invalid:[/bold red] {escape(exc.reason)}")
        return exit_codes.GENERAL_ERROR
    output.print(canonical)
    return exit_codes.SUCCESS


def _handle_alphabet(codec: Codec) -> int:
    from crockid.cli.alphabet_table import render_alphabet

    return render_alphabet(codec)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the crockid CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(verbose=True)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "encode" and args.pad < 0:
        parser.error("--pad must not be negative")

    codec = CODECS[args.base]
    logger.debug("Running %s with %r", args.command, codec)

    if args.command == "encode":
        return _handle_encode(codec, args.value, args.pad)
    if args.command == "decode":
        return _handle_decode(codec, args.text)
    if args.command == "check":
        return _handle_check(codec, args.text)
    return _handle_alphabet(codec)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CrockidError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
