"""Static menu table for the navigator.

Each :class:`~console_app.core.models.Menu` lists its choices in display
order.  Only the Main, Files and Calculator states have a menu; System
Info is a plain screen.
"""

from __future__ import annotations

from console_app.core.models import FileAction, Menu, MenuChoice, MenuState, Operation

BACK_TO_MAIN: str = "Back to main menu"

MAIN_MENU = Menu(
    state=MenuState.MAIN,
    title="=== MAIN MENU ===",
    description=(
        "Welcome to the Interactive Console Application!",
        "This application demonstrates:",
        "1. File operations on the current working directory",
        "2. Mathematical calculations",
        "3. System information display",
        "4. argparse for command parsing",
        "5. questionary for interactive menus",
    ),
    message="Choose an option:",
    choices=(
        MenuChoice("File Operations", MenuState.FILES),
        MenuChoice("Calculator", MenuState.CALCULATOR),
        MenuChoice("System Info", MenuState.SYSTEM_INFO),
        MenuChoice("Exit", MenuState.EXIT),
    ),
)

FILE_MENU = Menu(
    state=MenuState.FILES,
    title="=== FILE OPERATIONS ===",
    description=(
        "This menu allows you to perform file operations on the working directory",
    ),
    message="Choose file operation:",
    choices=(
        MenuChoice("List directory contents", FileAction.LIST),
        MenuChoice("Create new file", FileAction.CREATE),
        MenuChoice("Read file", FileAction.READ),
        MenuChoice(BACK_TO_MAIN, MenuState.MAIN),
    ),
)

CALCULATOR_MENU = Menu(
    state=MenuState.CALCULATOR,
    title="=== CALCULATOR ===",
    description=("Perform mathematical calculations",),
    message="Choose operation:",
    choices=(
        *(MenuChoice(op.value, op) for op in Operation),
        MenuChoice(BACK_TO_MAIN, MenuState.MAIN),
    ),
)
