"""Shared pytest fixtures and configuration for the console-app test suite.

Guidelines
----------
* No real terminal interaction — questionary is mocked or replaced by
  :class:`ScriptedPrompter`.
* File-system tests run against ``tmp_path`` only.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from console_app.cli.navigator import MenuNavigator, NavigatorContext
from console_app.core.models import SystemInfo
from console_app.infra.filesystem import WorkingDirectory


class RecordingConsole:
    """Console stand-in that keeps every printed line."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.clears: int = 0

    def print(self, *objects: object, **_kwargs: Any) -> None:
        self.lines.append(" ".join(str(obj) for obj in objects))

    def print_plain(self, *objects: object) -> None:
        self.print(*objects)

    def clear(self) -> None:
        self.clears += 1

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ScriptedPrompter:
    """Prompter that replays a fixed list of answers in order.

    Every call is recorded in :attr:`calls` as ``(kind, message, choices)``.
    """

    def __init__(self, answers: Sequence[object]) -> None:
        self._answers: list[object] = list(answers)
        self.calls: list[tuple[str, str, tuple[str, ...]]] = []
        self.keypresses: int = 0

    def _next(self) -> Any:
        if not self._answers:
            raise AssertionError("ScriptedPrompter ran out of answers")
        return self._answers.pop(0)

    def select(self, message: str, choices: Sequence[str]) -> str:
        self.calls.append(("select", message, tuple(choices)))
        answer = self._next()
        assert answer in choices, f"{answer!r} not offered in {message!r}"
        return answer

    def filename(self, message: str) -> str:
        self.calls.append(("filename", message, ()))
        return self._next()

    def text(self, message: str) -> str:
        self.calls.append(("text", message, ()))
        return self._next()

    def number(self, message: str) -> float:
        self.calls.append(("number", message, ()))
        return float(self._next())

    def press_any_key(self, message: str) -> None:
        self.keypresses += 1

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def selects(self, message: str) -> list[tuple[str, ...]]:
        return [choices for kind, msg, choices in self.calls if kind == "select" and msg == message]


class FixedProbe:
    def collect(self, cwd: Path) -> SystemInfo:
        return SystemInfo(
            python_version="3.12.1",
            platform="linux",
            architecture="x86_64",
            cwd=str(cwd),
            memory_mb=42,
            uptime_seconds=7,
        )


@pytest.fixture()
def recording_console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture()
def make_navigator(tmp_path: Path, recording_console: RecordingConsole):
    """Factory: ``make_navigator(answers)`` → ``(navigator, prompter)``.

    Output goes to :class:`RecordingConsole` unless *console* is given.
    """

    def _factory(
        answers: Sequence[object], console: Any = None,
    ) -> tuple[MenuNavigator, ScriptedPrompter]:
        prompter = ScriptedPrompter(answers)
        context = NavigatorContext(
            cwd=tmp_path,
            filesystem=WorkingDirectory(tmp_path),
            prompter=prompter,
            probe=FixedProbe(),
            console=recording_console if console is None else console,
        )
        return MenuNavigator(context), prompter

    return _factory
