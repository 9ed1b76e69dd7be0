"""Allow ``python -m crockid`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m crockid`` behaves identically to the ``crockid``
console script.
"""

from __future__ import annotations

from crockid.cli.app import cli

if __name__ == "__main__":
    cli()
