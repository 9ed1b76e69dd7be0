"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so
bootstrap paths (``--help``, ``--version``) remain functional even when
it is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from crockid.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console targeting stderr (default) or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False)


def escape(text: str) -> str:
    """Escape Rich markup in user-supplied *text*; identity without Rich."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except MissingDependencyError:
            print(*objects, file=sys.stderr if self._stderr else sys.stdout)
            return
        rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
"""Diagnostics, errors and tables."""

output = _ConsoleProxy(stderr=False)
"""Command results, kept on stdout so they can be piped."""


def configure_logging(verbose: bool) -> None:
    """Route ``crockid`` log records to a Rich handler on stderr.

    Without *verbose* only warnings are shown.
    """
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc

    handler = RichHandler(
        console=get_rich_console(stderr=True),
        show_path=False,
        show_time=False,
    )
    package_logger = logging.getLogger("crockid")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
