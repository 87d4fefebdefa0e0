"""Interactive menu loop on top of the filesystem facade.

One iteration: render the menu, read a command, prompt for whatever paths
the command needs, confirm destructive actions, print the outcome. A failed
operation never ends the session; only a confirmed exit (or end of input)
does.
"""
from __future__ import annotations

import os
import sys
from collections.abc import Callable
from enum import Enum
from typing import TextIO

from ..domain.paths import display_path
from ..domain.results import OperationResult
from ..domain.status import StatusCode, describe
from ..logging_conf import get_logger
from ..service.fs_service import FilesystemFacade

__all__ = ["ConsoleController", "ControllerState", "MENU", "clear_screen"]

logger = get_logger("console")

MENU = """
=== File Manager ===
1. Create File
2. Delete File
3. Create Directory
4. Delete Directory
5. List Directory Contents
6. Rename File/Directory
7. Search Files
8. Clear Console
9. Exit"""


class ControllerState(str, Enum):
    menu_display = "menu_display"
    awaiting_command = "awaiting_command"
    awaiting_path_input = "awaiting_path_input"
    awaiting_confirmation = "awaiting_confirmation"
    terminated = "terminated"


class _InputClosed(Exception):
    """Raised internally when stdin is exhausted or the operator hits Ctrl-C."""


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


class ConsoleController:
    def __init__(
        self,
        facade: FilesystemFacade,
        *,
        input_fn: Callable[[], str] | None = None,
        out: TextIO | None = None,
        clear_fn: Callable[[], None] = clear_screen,
    ) -> None:
        self.facade = facade
        self.state = ControllerState.menu_display
        self._input = input_fn if input_fn is not None else input
        self._out = out if out is not None else sys.stdout
        self._clear = clear_fn
        self._commands: dict[int, Callable[[], None]] = {
            1: self.create_file,
            2: self.delete_file,
            3: self.create_directory,
            4: self.delete_directory,
            5: self.list_directory_contents,
            6: self.rename_item,
            7: self.search_files,
            8: self.clear_console,
            9: self.exit,
        }

    # ------------------------
    # Loop
    # ------------------------

    def run(self) -> None:
        """Run until the operator confirms exit or input runs out."""
        logger.info("console.start", extra={"event": "console_start"})
        while self.state is not ControllerState.terminated:
            self.step()
        logger.info("console.stop", extra={"event": "console_stop"})

    def step(self) -> None:
        """Render the menu and handle exactly one command."""
        self.state = ControllerState.menu_display
        self._print(MENU)
        try:
            command = self._read("\nEnter command: ", ControllerState.awaiting_command)
            self.process_command(command)
        except _InputClosed:
            logger.info("console.input_closed", extra={"event": "input_closed"})
            self.state = ControllerState.terminated
            return
        if self.state is not ControllerState.terminated:
            self.state = ControllerState.menu_display

    def process_command(self, command: str) -> None:
        try:
            selector = int(command.strip())
        except ValueError:
            selector = None
        handler = self._commands.get(selector) if selector is not None else None
        if handler is None:
            logger.debug("console.unknown_command", extra={"event": "unknown_command"})
            self._print("\nUnknown command. Please try again.")
            return
        handler()

    # ------------------------
    # Commands
    # ------------------------

    def create_file(self) -> None:
        path = self._ask_path("\nEnter file path: ")
        self.handle_status(self.facade.create_file(path).status)

    def delete_file(self) -> None:
        path = self._ask_path("\nEnter file path: ")
        if self._confirm("Are you sure you want to delete this file?"):
            self.handle_status(self.facade.delete_file(path).status)

    def create_directory(self) -> None:
        path = self._ask_path("\nEnter directory path: ")
        self.handle_status(self.facade.create_directory(path).status)

    def delete_directory(self) -> None:
        path = self._ask_path("\nEnter directory path: ")
        if self._confirm("Are you sure you want to delete this directory?"):
            self.handle_status(self.facade.delete_directory(path).status)

    def list_directory_contents(self) -> None:
        path = self._ask_path("\nEnter directory path: ")
        result = self.facade.list(path)
        self.handle_status(result.status)
        self._print_paths("Directory Contents:", result)

    def rename_item(self) -> None:
        old_path = self._ask_path("\nEnter current file/directory path: ")
        new_path = self._ask_path("Enter new name for the file/directory: ")
        self.handle_status(self.facade.rename(old_path, new_path).status)

    def search_files(self) -> None:
        path = self._ask_path("\nEnter directory path to search: ")
        pattern = self._ask_path("Enter filename pattern to search for: ")
        result = self.facade.search(path, pattern)
        self.handle_status(result.status)
        self._print_paths("Search Results:", result)

    def clear_console(self) -> None:
        if self._confirm("Are you sure you want to clear the console?"):
            self._clear()
            self._print("\nConsole cleared.")

    def exit(self) -> None:
        if self._confirm("Are you sure you want to exit?"):
            self._print("\nGoodbye!")
            self.state = ControllerState.terminated

    def handle_status(self, status: StatusCode | int) -> None:
        self._print(f"\n{describe(status)}")

    # ------------------------
    # I/O helpers
    # ------------------------

    def _print(self, text: str) -> None:
        print(text, file=self._out)

    def _read(self, prompt: str, state: ControllerState) -> str:
        self.state = state
        self._out.write(prompt)
        self._out.flush()
        try:
            return self._input()
        except (EOFError, KeyboardInterrupt) as e:
            raise _InputClosed() from e

    def _ask_path(self, prompt: str) -> str:
        return self._read(prompt, ControllerState.awaiting_path_input)

    def _confirm(self, question: str) -> bool:
        """Single-character y/n prompt; anything but y/Y cancels."""
        answer = self._read(f"\n{question} (y/n): ", ControllerState.awaiting_confirmation)
        if answer.strip() in ("y", "Y"):
            return True
        logger.info("console.canceled", extra={"event": "canceled"})
        self._print("\nOperation canceled.")
        return False

    def _print_paths(self, header: str, result: OperationResult) -> None:
        if not result.ok:
            return
        self._print(f"\n{header}")
        for item in result.paths:
            self._print(f"- {display_path(item)}")
