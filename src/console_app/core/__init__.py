"""Core layer — menu table, calculator and domain models.

Rules
-----
* No ``print()`` calls.
* No filesystem or process I/O.
* No imports from ``cli`` or ``infra``.
"""

from console_app.core.calculator import DIVISION_BY_ZERO, calculate, format_calculation
from console_app.core.menus import CALCULATOR_MENU, FILE_MENU, MAIN_MENU
from console_app.core.models import (
    Calculation,
    DirectoryEntry,
    FileAction,
    Menu,
    MenuChoice,
    MenuState,
    Operation,
    SystemInfo,
)
from console_app.core.protocols import FileSystem, Prompter, SystemProbe

__all__: list[str] = [
    "CALCULATOR_MENU",
    "Calculation",
    "DIVISION_BY_ZERO",
    "DirectoryEntry",
    "FILE_MENU",
    "FileAction",
    "FileSystem",
    "MAIN_MENU",
    "Menu",
    "MenuChoice",
    "MenuState",
    "Operation",
    "Prompter",
    "SystemInfo",
    "SystemProbe",
    "calculate",
    "format_calculation",
]
