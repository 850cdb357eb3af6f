"""Domain models for console-app.

Menu states, menu descriptors and the value objects produced by the
handlers.  All dataclasses are frozen and carry no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

class MenuState(Enum):
    """States of the navigator; ``EXIT`` is terminal."""

    MAIN = "main"
    FILES = "files"
    CALCULATOR = "calculator"
    SYSTEM_INFO = "system_info"
    EXIT = "exit"


class FileAction(Enum):
    """Handlers reachable from the File menu."""

    LIST = "list"
    CREATE = "create"
    READ = "read"


class Operation(Enum):
    """Binary calculator operations.  The value is the display label."""

    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"


@dataclass(frozen=True, slots=True)
class MenuChoice:
    """A single labelled entry of a :class:`Menu`.

    ``target`` is either a :class:`MenuState` to navigate to, or the
    handler key (:class:`FileAction` / :class:`Operation`) to invoke.
    """

    label: str
    target: MenuState | FileAction | Operation


@dataclass(frozen=True, slots=True)
class Menu:
    """Static description of one screen of the navigator."""

    state: MenuState
    title: str
    description: tuple[str, ...]
    message: str
    choices: tuple[MenuChoice, ...]

    def labels(self) -> list[str]:
        return [choice.label for choice in self.choices]

    def resolve(self, label: str) -> MenuState | FileAction | Operation:
        """Map a selected label back to its target.

        Raises
        ------
        KeyError
            If *label* is not one of this menu's choices.
        """
        for choice in self.choices:
            if choice.label == label:
                return choice.target
        raise KeyError(label)


# ---------------------------------------------------------------------------
# Handler results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One entry of a working-directory listing."""

    name: str
    is_dir: bool
    size: int
    """Size in bytes as reported by ``stat``; platform-defined for directories."""


@dataclass(frozen=True, slots=True)
class Calculation:
    """Outcome of a calculator operation."""

    num1: float
    operation: Operation
    num2: float
    result: float | str
    """Numeric result, or the division-by-zero sentinel text."""


@dataclass(frozen=True, slots=True)
class SystemInfo:
    """Snapshot of the running process and host."""

    python_version: str
    platform: str
    architecture: str
    cwd: str
    memory_mb: int
    """Resident set size, rounded to the nearest megabyte."""

    uptime_seconds: int
    """Process uptime, rounded to the nearest second."""
