"""Custom exception hierarchy for console-app.

Every error that crosses a layer boundary inherits from
:class:`ConsoleAppError`.  Raw ``OSError`` instances raised while touching
the working directory never leave the infrastructure layer as-is — they
are chained into a :class:`FileOperationError`.

Hierarchy
---------
ConsoleAppError
├── FileOperationError
├── PromptCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class ConsoleAppError(Exception):
    """Base exception for all console-app errors.

    The CLI error boundary renders these as a one-line message plus an
    optional hint instead of a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- File system -----------------------------------------------------------

class FileOperationError(ConsoleAppError):
    """Raised when listing, reading or writing in the working directory fails."""


# --- Interaction -----------------------------------------------------------

class PromptCancelledError(ConsoleAppError):
    """Raised when the user cancels an interactive prompt (Ctrl+C / Esc)."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ConsoleAppError):
    """Raised when a required runtime dependency is not available."""
