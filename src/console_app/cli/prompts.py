"""Interactive prompts for the CLI layer, backed by questionary.

Each prompt returns an already-validated, typed value:

* :meth:`QuestionaryPrompter.filename` — non-empty ``str``.
* :meth:`QuestionaryPrompter.number` — finite ``float``.

Invalid input is rejected by questionary's validator, which keeps the
prompt open until the user corrects it.  A cancelled prompt (Ctrl+C /
Esc, reported by questionary as ``None``) raises
:class:`~console_app.exceptions.PromptCancelledError`.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from console_app.exceptions import EnvironmentError, PromptCancelledError

EMPTY_FILENAME_MESSAGE: str = "Filename cannot be empty"
INVALID_NUMBER_MESSAGE: str = "Please enter a valid number"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Validators (pure — questionary calls them on every submit)
# ---------------------------------------------------------------------------

def validate_filename(value: str) -> bool | str:
    """Return ``True`` for a non-empty name, else the error message."""
    return True if value else EMPTY_FILENAME_MESSAGE


def parse_number(value: str) -> float | None:
    """Parse *value* as a finite float, or return ``None``."""
    try:
        number = float(value.strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def validate_number(value: str) -> bool | str:
    return True if parse_number(value) is not None else INVALID_NUMBER_MESSAGE


# ---------------------------------------------------------------------------
# Prompter
# ---------------------------------------------------------------------------

def _answer(result: Any) -> Any:
    if result is None:
        raise PromptCancelledError(
            "Prompt cancelled.",
            hint="Choose 'Exit' from the main menu to quit.",
        )
    return result


class QuestionaryPrompter:
    """Concrete :class:`~console_app.core.protocols.Prompter` using questionary."""

    def select(self, message: str, choices: Sequence[str]) -> str:
        questionary = _import_questionary()
        selected: str | None = questionary.select(
            message,
            choices=list(choices),
            use_arrow_keys=True,
            use_shortcuts=False,
        ).ask()
        return _answer(selected)

    def filename(self, message: str) -> str:
        questionary = _import_questionary()
        return _answer(questionary.text(message, validate=validate_filename).ask())

    def text(self, message: str) -> str:
        questionary = _import_questionary()
        return _answer(questionary.text(message).ask())

    def number(self, message: str) -> float:
        questionary = _import_questionary()
        raw: str = _answer(questionary.text(message, validate=validate_number).ask())
        return float(raw.strip())

    def press_any_key(self, message: str) -> None:
        """Block on a single raw keypress.

        questionary puts the terminal into raw mode for the duration of
        the prompt and restores it afterwards.  ``unsafe_ask`` lets
        Ctrl+C propagate as ``KeyboardInterrupt``.
        """
        questionary = _import_questionary()
        questionary.press_any_key_to_continue(message).unsafe_ask()
