"""CLI application entry point and command routing for console-app.

This module is the **sole error boundary** for the entire application.
It catches :class:`~console_app.exceptions.ConsoleAppError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering a
short message via the Rich console and returning well-defined exit codes.

Architecture notes
------------------
* No menu logic lives here — the interactive loop is
  :class:`~console_app.cli.navigator.MenuNavigator`.
* ``--help`` and ``--version`` never touch the file system or prompts.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from console_app.cli import exit_codes
from console_app.cli.console import console
from console_app.core.models import MenuState
from console_app.exceptions import ConsoleAppError, FileOperationError, PromptCancelledError
from console_app.version import __version__

#: Sub-command name → menu the navigator starts in.
START_STATES: dict[str | None, MenuState] = {
    None: MenuState.MAIN,
    "files": MenuState.FILES,
    "calc": MenuState.CALCULATOR,
    "system": MenuState.SYSTEM_INFO,
}


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``console-app``          — main menu
    * ``console-app files``    — file operations menu
    * ``console-app calc``     — calculator menu
    * ``console-app system``   — system information, then main menu
    * ``console-app --version``
    """
    parser = argparse.ArgumentParser(
        prog="console-app",
        description="A interactive console application with multiple options",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=__version__,
    )
    parser.add_argument(
        "-C",
        "--directory",
        type=Path,
        default=None,
        metavar="PATH",
        help="Working directory for file operations (default: current directory).",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.add_parser("files", help="File operations menu")
    subparsers.add_parser("calc", help="Calculator operations")
    subparsers.add_parser("system", help="System information")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _resolve_directory(directory: Path | None) -> Path:
    cwd = (directory or Path.cwd()).resolve()
    if not cwd.is_dir():
        raise FileOperationError(
            f"Not a directory: {cwd}",
            hint="Pass an existing directory to --directory.",
        )
    return cwd


def _run_navigator(start: MenuState, directory: Path | None) -> int:
    """Build the navigator context and run the interactive loop."""
    from console_app.cli.navigator import MenuNavigator, NavigatorContext
    from console_app.cli.prompts import QuestionaryPrompter
    from console_app.infra.filesystem import WorkingDirectory
    from console_app.infra.system_probe import ProcessSystemProbe

    cwd = _resolve_directory(directory)
    context = NavigatorContext(
        cwd=cwd,
        filesystem=WorkingDirectory(cwd),
        prompter=QuestionaryPrompter(),
        probe=ProcessSystemProbe(),
        console=console,
    )
    return MenuNavigator(context).run(start)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the console-app CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    return _run_navigator(START_STATES[args.command], args.directory)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except PromptCancelledError:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except ConsoleAppError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
