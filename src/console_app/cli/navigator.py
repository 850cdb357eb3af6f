"""Menu navigator — the interactive state machine behind ``console-app``.

The navigator is driven by an explicit loop: every handler returns the
next :class:`~console_app.core.models.MenuState` and :meth:`MenuNavigator.run`
dispatches on it until ``EXIT`` is reached.  No handler calls another
menu directly, so long sessions do not grow the call stack.

Transitions
-----------
* Main → Files / Calculator / System Info / Exit.
* Files → Files after List / Create / Read; Main via "Back".
* Calculator → Calculator after any operation; Main via "Back".
* System Info → Main, unconditionally.

All process-wide inputs (working directory, terminal, system probe) are
carried by :class:`NavigatorContext` rather than read from globals.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from console_app.cli import exit_codes
from console_app.core.calculator import calculate, format_calculation
from console_app.core.menus import CALCULATOR_MENU, FILE_MENU, MAIN_MENU
from console_app.core.models import FileAction, Menu, MenuState, Operation
from console_app.core.protocols import FileSystem, Prompter, SystemProbe

RULE: str = "=" * 50
PRESS_ANY_KEY: str = "Press any key to continue..."
NO_FILES: str = "No files found in current directory."
GOODBYE: str = "Goodbye!"


@dataclass(slots=True)
class NavigatorContext:
    """Everything a handler may touch, passed explicitly."""

    cwd: Path
    filesystem: FileSystem
    prompter: Prompter
    probe: SystemProbe
    console: Any


class MenuNavigator:
    """Interactive menu loop.

    Parameters
    ----------
    context:
        The :class:`NavigatorContext` shared by every handler.
    """

    def __init__(self, context: NavigatorContext) -> None:
        self._ctx: NavigatorContext = context
        self._screens: dict[MenuState, Callable[[], MenuState]] = {
            MenuState.MAIN: self.show_main_menu,
            MenuState.FILES: self.show_file_menu,
            MenuState.CALCULATOR: self.show_calculator_menu,
            MenuState.SYSTEM_INFO: self.show_system_info,
        }
        self.state: MenuState = MenuState.MAIN

    # ------------------------------------------------------------------
    # Driving loop
    # ------------------------------------------------------------------

    def run(self, start: MenuState = MenuState.MAIN) -> int:
        """Enter *start* and dispatch until the user chooses Exit.

        Returns :data:`~console_app.cli.exit_codes.SUCCESS`; errors propagate.
        """
        self.state = start
        while self.state is not MenuState.EXIT:
            self.state = self._screens[self.state]()
        return exit_codes.SUCCESS

    # ------------------------------------------------------------------
    # Shared rendering
    # ------------------------------------------------------------------

    def _choose(self, menu: Menu) -> MenuState | FileAction | Operation:
        """Render *menu* and return the target of the selected choice."""
        console = self._ctx.console
        console.clear()
        console.print(f"[bold cyan]{menu.title}[/bold cyan]")
        for line in menu.description:
            console.print(line)
        console.print()
        label = self._ctx.prompter.select(menu.message, menu.labels())
        return menu.resolve(label)

    def press_any_key(self) -> None:
        """Suspend until a single raw keypress arrives."""
        self._ctx.console.print()
        self._ctx.prompter.press_any_key(PRESS_ANY_KEY)

    # ------------------------------------------------------------------
    # Main menu
    # ------------------------------------------------------------------

    def show_main_menu(self) -> MenuState:
        target = cast(MenuState, self._choose(MAIN_MENU))
        if target is MenuState.EXIT:
            self._ctx.console.print(GOODBYE)
        return target

    # ------------------------------------------------------------------
    # File menu
    # ------------------------------------------------------------------

    def show_file_menu(self) -> MenuState:
        target = self._choose(FILE_MENU)
        if isinstance(target, MenuState):
            return target

        handlers: dict[FileAction, Callable[[], None]] = {
            FileAction.LIST: self.list_directory,
            FileAction.CREATE: self.create_file,
            FileAction.READ: self.read_file,
        }
        handlers[cast(FileAction, target)]()
        self.press_any_key()
        return MenuState.FILES

    def list_directory(self) -> None:
        """Print every entry of the working directory, unsorted."""
        console = self._ctx.console
        entries = self._ctx.filesystem.list_entries()
        console.print()
        console.print("Current directory contents:")
        for entry in entries:
            kind = "DIR" if entry.is_dir else "FILE"
            console.print_plain(f"{entry.name} - {kind} ({entry.size} bytes)")

    def create_file(self) -> None:
        """Prompt for a name and content, then create or overwrite the file."""
        prompter = self._ctx.prompter
        filename = prompter.filename("Enter filename:")
        content = prompter.text("Enter file content:")
        self._ctx.filesystem.write_text(filename, content)
        self._ctx.console.print_plain(f'File "{filename}" created successfully!')

    def read_file(self) -> None:
        """Let the user pick a regular file and print it between rules."""
        console = self._ctx.console
        files = self._ctx.filesystem.list_files()
        if not files:
            console.print(NO_FILES)
            return

        filename = self._ctx.prompter.select("Select file to read:", files)
        content = self._ctx.filesystem.read_text(filename)
        console.print()
        console.print_plain(f'Content of "{filename}":')
        console.print_plain(RULE)
        console.print_plain(content)
        console.print_plain(RULE)

    # ------------------------------------------------------------------
    # Calculator
    # ------------------------------------------------------------------

    def show_calculator_menu(self) -> MenuState:
        target = self._choose(CALCULATOR_MENU)
        if isinstance(target, MenuState):
            return target

        num1 = self._ctx.prompter.number("Enter first number:")
        num2 = self._ctx.prompter.number("Enter second number:")
        calc = calculate(cast(Operation, target), num1, num2)

        self._ctx.console.print()
        self._ctx.console.print_plain(format_calculation(calc))
        self.press_any_key()
        return MenuState.CALCULATOR

    # ------------------------------------------------------------------
    # System info
    # ------------------------------------------------------------------

    def show_system_info(self) -> MenuState:
        """Print a snapshot of the runtime, then go back to the main menu."""
        console = self._ctx.console
        info = self._ctx.probe.collect(self._ctx.cwd)

        console.clear()
        console.print("[bold cyan]=== SYSTEM INFORMATION ===[/bold cyan]")
        console.print("Displaying current system information:")
        console.print()
        console.print_plain(f"Python version: {info.python_version}")
        console.print_plain(f"Platform: {info.platform}")
        console.print_plain(f"Architecture: {info.architecture}")
        console.print_plain(f"Current directory: {info.cwd}")
        console.print_plain(f"Memory usage: {info.memory_mb}MB")
        console.print_plain(f"Uptime: {info.uptime_seconds} seconds")

        self.press_any_key()
        return MenuState.MAIN
