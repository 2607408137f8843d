"""Runtime orchestration: one asyncio loop owning the timer engine."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from app_config import AppConfig
from bus import Command, EventBus
from clock import AsyncioClock
from notifier import FanoutNotifier, Notifier
from server import ParsedCommand, UIServer
from tasktimer import TimerEngine, TimerSettings, TimerState
from tasktimer.messages import task_title, time_text
from ui_state import UIStateStore

from .commands import CommandDispatcher
from .console import ConsoleCommandReader
from .ticks import TickBridge
from .ui import RuntimeUIPublisher, UINotifier

IDLE_STATUS_TEXT = "⏱️ No task running. What should we do next?"


@dataclass(frozen=True)
class RuntimeHooks:
    """Injectable lifecycle hooks used by runtime startup and shutdown flow."""
    install_signal_handlers: Callable[[asyncio.AbstractEventLoop, Callable[[], None]], None]


@dataclass(frozen=True)
class RuntimeBootstrap:
    """Dependency bundle required to construct the runtime engine."""
    logger: logging.Logger
    app_config: AppConfig
    notifiers: Sequence[Notifier]
    ui_server: Optional[UIServer]
    hooks: RuntimeHooks


def status_text(state: TimerState) -> str:
    if state.task is None:
        return IDLE_STATUS_TEXT
    return f"{task_title(state.task)} ({time_text(state)})"


class RuntimeEngine:
    """Wires clock, engine, bus, UI store, notifiers and command surfaces."""

    def __init__(
        self,
        bootstrap: RuntimeBootstrap,
        *,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self._bootstrap = bootstrap
        self._logger = bootstrap.logger
        self._loop = loop or asyncio.new_event_loop()
        self._clock = AsyncioClock(self._loop)
        self._bus = EventBus(logging.getLogger("bus"))
        self._ui = RuntimeUIPublisher(bootstrap.ui_server)

        notifiers = list(bootstrap.notifiers)
        if bootstrap.ui_server is not None:
            notifiers.append(UINotifier(self._ui))
        self._notifier = FanoutNotifier(notifiers, logger=logging.getLogger("notifier"))

        self._engine = TimerEngine(
            self._clock,
            self._notifier,
            settings=TimerSettings.from_settings(bootstrap.app_config.timer),
            logger=logging.getLogger("tasktimer"),
        )
        self._store = UIStateStore(logger=logging.getLogger("ui_state"))
        self._tick_bridge = TickBridge(self._bus, logger=self._logger.getChild("ticks"))
        self._dispatcher = CommandDispatcher(
            self._engine,
            logger=self._logger.getChild("commands"),
        )

        # The store must see a command before the engine reacts to it.
        self._store.attach(self._bus)
        self._bus.subscribe_commands(self._dispatcher.handle_command)
        self._bus.subscribe_events(self._ui.publish_timer_event)
        self._engine.subscribe(self._tick_bridge.handle_state)
        self._store.subscribe(self._ui.publish_ui_state)

        self._console: Optional[ConsoleCommandReader] = None
        if bootstrap.app_config.console.enabled:
            self._console = ConsoleCommandReader(
                self.submit,
                status_text=lambda: status_text(self._engine.get_state()),
                on_quit=self.request_stop,
                logger=self._logger.getChild("console"),
            )

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def bus(self) -> EventBus:
        return self._bus

    @property
    def store(self) -> UIStateStore:
        return self._store

    def submit(self, command: Command) -> None:
        """Hand a command to the loop thread; safe to call from any thread."""
        try:
            self._loop.call_soon_threadsafe(self._bus.send_command, command)
        except RuntimeError:
            self._logger.warning("Runtime loop is closed; dropping %s", command)

    def request_stop(self) -> None:
        try:
            self._loop.call_soon_threadsafe(self._loop.stop)
        except RuntimeError:
            return

    def run(self) -> int:
        try:
            self._start_ui_server()
            self._bootstrap.hooks.install_signal_handlers(self._loop, self.request_stop)

            self._ui.publish_ui_state(self._store.snapshot)
            if self._bootstrap.app_config.timer.start_in_idle_mode:
                self._engine.enter_idle_mode()

            if self._console is not None:
                self._console.start()

            self._logger.info("Ready! What should we do next?")
            self._loop.run_forever()
            return 0
        except KeyboardInterrupt:
            self._logger.info("Shutdown requested by keyboard interrupt.")
            return 0
        except Exception as error:
            self._logger.error("Unexpected error: %s", error, exc_info=True)
            return 1
        finally:
            self._shutdown()

    def _start_ui_server(self) -> None:
        ui_server = self._bootstrap.ui_server
        if ui_server is None:
            return
        ui_server.set_command_sink(self._submit_parsed)
        self._logger.info("Starting UI server...")
        ui_server.start()

    def _submit_parsed(self, parsed: ParsedCommand) -> None:
        self.submit(parsed.command)

    def _shutdown(self) -> None:
        if self._console is not None:
            self._console.stop()

        self._logger.info("Stopping timer engine...")
        try:
            self._engine.shutdown()
        except Exception as error:
            self._logger.error("Error stopping timer engine: %s", error, exc_info=True)

        ui_server = self._bootstrap.ui_server
        if ui_server is not None:
            self._logger.info("Stopping UI server...")
            try:
                ui_server.stop(timeout_seconds=5.0)
            except Exception as error:
                self._logger.error("Error stopping UI server: %s", error, exc_info=True)

        if not self._loop.is_closed():
            self._loop.close()
