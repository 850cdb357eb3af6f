"""Working-directory implementation of :class:`~console_app.core.protocols.FileSystem`.

Every ``OSError`` raised while listing, reading or writing is chained
into a :class:`~console_app.exceptions.FileOperationError`; nothing is
retried.  Listing and a later read are not atomic — a file removed in
between surfaces as a failed read.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

from console_app.core.models import DirectoryEntry
from console_app.exceptions import FileOperationError

ENCODING: str = "utf-8"


class WorkingDirectory:
    """File access scoped to a single directory.

    Usage::

        fs = WorkingDirectory(Path.cwd())
        fs.write_text("note.txt", "hello")
        fs.read_text("note.txt")  # "hello"
    """

    def __init__(self, root: Path) -> None:
        self._root: Path = root

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def _scan(self) -> list[tuple[str, os.stat_result]]:
        """Return ``(name, stat)`` pairs in the order ``scandir`` yields them."""
        try:
            with os.scandir(self._root) as it:
                return [(entry.name, entry.stat()) for entry in it]
        except OSError as exc:
            raise FileOperationError(
                f"Cannot list directory {self._root}: {exc.strerror or exc}",
                hint="Check that the directory exists and is readable.",
            ) from exc

    def list_entries(self) -> list[DirectoryEntry]:
        return [
            DirectoryEntry(
                name=name,
                is_dir=stat.S_ISDIR(st.st_mode),
                size=st.st_size,
            )
            for name, st in self._scan()
        ]

    def list_files(self) -> list[str]:
        return [name for name, st in self._scan() if stat.S_ISREG(st.st_mode)]

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def write_text(self, filename: str, content: str) -> None:
        path = self._root / filename
        try:
            path.write_text(content, encoding=ENCODING)
        except OSError as exc:
            raise FileOperationError(
                f"Cannot write {filename!r}: {exc.strerror or exc}",
                hint="Check the file name and directory permissions.",
            ) from exc

    def read_text(self, filename: str) -> str:
        path = self._root / filename
        try:
            return path.read_text(encoding=ENCODING)
        except OSError as exc:
            raise FileOperationError(
                f"Cannot read {filename!r}: {exc.strerror or exc}",
                hint="The file may have been moved or deleted after it was listed.",
            ) from exc
        except UnicodeDecodeError as exc:
            raise FileOperationError(
                f"Cannot read {filename!r}: not a {ENCODING} text file",
            ) from exc
