"""Line-oriented stdin command surface for driving the timer without a UI."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from bus import Command, CompleteRequested, ShowTimerRequested
from server.commands import UICommandError, build_start_command
from tasktimer.messages import SPLIT_SUGGESTION_TEXT
from tasktimer.task_input import parse_whole_number

ConsoleAction = Literal["command", "status", "help", "quit"]

PROMPT = "> "
HELP_TEXT = (
    "Commands:\n"
    "  start <challenge|recharge> <minutes> <task name>\n"
    "  complete\n"
    "  show\n"
    "  status\n"
    "  quit"
)


@dataclass(frozen=True)
class ConsoleRequest:
    action: ConsoleAction
    command: Optional[Command] = None
    suggest_split: bool = False


def parse_console_line(line: str) -> Optional[ConsoleRequest]:
    """Parse one console line; blank lines yield None."""
    parts = line.strip().split(maxsplit=3)
    if not parts:
        return None

    keyword = parts[0].lower()
    if keyword == "start":
        if len(parts) < 4:
            raise UICommandError("Usage: start <challenge|recharge> <minutes> <task name>")
        parsed = build_start_command(parts[3], parts[1], parse_whole_number(parts[2]))
        return ConsoleRequest("command", parsed.command, parsed.suggest_split)
    if keyword in ("complete", "done"):
        return ConsoleRequest("command", CompleteRequested())
    if keyword == "show":
        return ConsoleRequest("command", ShowTimerRequested())
    if keyword == "status":
        return ConsoleRequest("status")
    if keyword in ("help", "?"):
        return ConsoleRequest("help")
    if keyword in ("quit", "exit"):
        return ConsoleRequest("quit")
    raise UICommandError(f"Unknown command: {keyword!r} (try 'help')")


class ConsoleCommandReader:
    """Reads commands from stdin on a daemon thread.

    Commands are handed to ``submit``, which is responsible for moving them
    onto the loop that owns the timer engine.
    """

    def __init__(
        self,
        submit: Callable[[Command], None],
        *,
        status_text: Callable[[], str],
        on_quit: Callable[[], None],
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        logger: Optional[logging.Logger] = None,
    ):
        self._submit = submit
        self._status_text = status_text
        self._on_quit = on_quit
        self._input = input_fn
        self._output = output_fn
        self._logger = logger or logging.getLogger("runtime.console")
        self._thread: Optional[threading.Thread] = None
        self._stopped = threading.Event()

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            self._logger.warning("Console reader is already running")
            return
        self._stopped.clear()
        self._thread = threading.Thread(
            target=self.run,
            daemon=True,
            name="console-reader",
        )
        self._thread.start()

    def stop(self) -> None:
        # The thread may stay blocked in input(); it is a daemon and dies with the process.
        self._stopped.set()

    def run(self) -> None:
        self._logger.info("Console commands enabled (type 'help')")
        while not self._stopped.is_set():
            try:
                line = self._input(PROMPT)
            except EOFError:
                self._logger.info("Console input closed")
                return
            except KeyboardInterrupt:
                self._on_quit()
                return

            if not self.handle_line(line):
                return

    def handle_line(self, line: str) -> bool:
        """Process one line; returns False once the reader should stop."""
        try:
            request = parse_console_line(line)
        except UICommandError as error:
            self._output(f"⚠️  {error}")
            return True

        if request is None:
            return True
        if request.action == "quit":
            self._on_quit()
            return False
        if request.action == "help":
            self._output(HELP_TEXT)
            return True
        if request.action == "status":
            self._output(self._status_text())
            return True

        if request.suggest_split:
            self._output(SPLIT_SUGGESTION_TEXT)
        try:
            self._submit(request.command)
        except Exception as error:
            self._logger.error("Console command failed: %s", error, exc_info=True)
            self._output(f"⚠️  Command failed: {error}")
        return True
