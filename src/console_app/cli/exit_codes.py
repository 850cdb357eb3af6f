"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — the user chose Exit, or help/version was displayed."""

GENERAL_ERROR: int = 1
"""A known ConsoleAppError was caught. User-facing message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C or cancelled a prompt.  POSIX 128 + SIGINT."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
