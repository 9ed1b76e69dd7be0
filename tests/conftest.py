"""Shared pytest fixtures and configuration for the crockid test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests read stdout/stderr through ``capsys`` only.
* Tests must not depend on OS state.
"""

from __future__ import annotations
