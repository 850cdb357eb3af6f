"""Protocols (interfaces) consumed by the navigator.

The navigator depends only on these contracts, so tests can drive it
with scripted fakes instead of a real terminal or working directory.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from console_app.core.models import DirectoryEntry, SystemInfo


class FileSystem(Protocol):
    """Contract for the working-directory adapter.

    Implementations must map ``OSError`` to
    :class:`~console_app.exceptions.FileOperationError`.
    """

    def list_entries(self) -> list[DirectoryEntry]:
        """Return every entry of the directory, in file-system order."""
        ...  # pragma: no cover

    def list_files(self) -> list[str]:
        """Return the names of regular files only, in file-system order."""
        ...  # pragma: no cover

    def write_text(self, filename: str, content: str) -> None:
        """Create or overwrite *filename* with *content*."""
        ...  # pragma: no cover

    def read_text(self, filename: str) -> str:
        """Return the text content of *filename*."""
        ...  # pragma: no cover


class Prompter(Protocol):
    """Contract for interactive input.

    Every method blocks until the user answers and raises
    :class:`~console_app.exceptions.PromptCancelledError` on cancellation.
    """

    def select(self, message: str, choices: Sequence[str]) -> str:
        ...  # pragma: no cover

    def filename(self, message: str) -> str:
        """Ask for a non-empty string, re-prompting on empty input."""
        ...  # pragma: no cover

    def text(self, message: str) -> str:
        ...  # pragma: no cover

    def number(self, message: str) -> float:
        """Ask for a finite number, re-prompting on anything else."""
        ...  # pragma: no cover

    def press_any_key(self, message: str) -> None:
        """Wait for a single raw keypress; which key is irrelevant."""
        ...  # pragma: no cover


class SystemProbe(Protocol):
    """Contract for collecting :class:`SystemInfo`."""

    def collect(self, cwd: Path) -> SystemInfo:
        """Snapshot the running process; *cwd* is reported as-is."""
        ...  # pragma: no cover
