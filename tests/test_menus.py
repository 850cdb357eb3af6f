"""Tests for the static menu table (core/menus.py, core/models.py)."""

from __future__ import annotations

import pytest

from console_app.core.menus import BACK_TO_MAIN, CALCULATOR_MENU, FILE_MENU, MAIN_MENU
from console_app.core.models import FileAction, MenuState, Operation


class TestMainMenu:
    def test_labels_in_order(self) -> None:
        assert MAIN_MENU.labels() == ["File Operations", "Calculator", "System Info", "Exit"]

    @pytest.mark.parametrize(
        ("label", "target"),
        [
            ("File Operations", MenuState.FILES),
            ("Calculator", MenuState.CALCULATOR),
            ("System Info", MenuState.SYSTEM_INFO),
            ("Exit", MenuState.EXIT),
        ],
    )
    def test_resolve(self, label: str, target: MenuState) -> None:
        assert MAIN_MENU.resolve(label) is target


class TestFileMenu:
    def test_labels_in_order(self) -> None:
        assert FILE_MENU.labels() == [
            "List directory contents",
            "Create new file",
            "Read file",
            BACK_TO_MAIN,
        ]

    def test_back_targets_main(self) -> None:
        assert FILE_MENU.resolve(BACK_TO_MAIN) is MenuState.MAIN

    def test_read_is_action(self) -> None:
        assert FILE_MENU.resolve("Read file") is FileAction.READ


class TestCalculatorMenu:
    def test_labels_in_order(self) -> None:
        assert CALCULATOR_MENU.labels() == [
            "Add", "Subtract", "Multiply", "Divide", BACK_TO_MAIN,
        ]

    def test_operations_resolve(self) -> None:
        for op in Operation:
            assert CALCULATOR_MENU.resolve(op.value) is op

    def test_back_targets_main(self) -> None:
        assert CALCULATOR_MENU.resolve(BACK_TO_MAIN) is MenuState.MAIN


class TestMenuTable:
    def test_unknown_label_raises(self) -> None:
        with pytest.raises(KeyError):
            MAIN_MENU.resolve("Nope")
