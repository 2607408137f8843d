import asyncio
import logging
import signal
import sys
from typing import Callable, Optional

from app_config import (
    AppConfig,
    AppConfigurationError,
    load_app_config,
    resolve_config_path,
)
from notifier import DesktopNotifier, LoggingNotifier, Notifier, NotifierError
from runtime import RuntimeBootstrap, RuntimeEngine, RuntimeHooks
from server import ServerConfigurationError, UIServer, UIServerConfig
from tasktimer import TimerConfigurationError, TimerSettings


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("what_to_do_next")


def install_signal_handlers(
    loop: asyncio.AbstractEventLoop,
    request_stop: Callable[[], None],
) -> None:
    """Set up graceful shutdown on SIGTERM and SIGINT."""

    def signal_handler(signum: int, frame) -> None:
        signal_name = signal.Signals(signum).name
        print(f"\n👋 {signal_name} received, stopping...\n")
        request_stop()

    for signum in (signal.SIGTERM, signal.SIGINT):
        try:
            loop.add_signal_handler(signum, signal_handler, signum, None)
        except (NotImplementedError, RuntimeError):
            # Not available on Windows event loops.
            signal.signal(signum, signal_handler)


def build_notifiers(app_config: AppConfig, logger: logging.Logger) -> list[Notifier]:
    notifiers: list[Notifier] = []
    settings = app_config.notifier
    if settings.log_enabled:
        notifiers.append(LoggingNotifier(logger=logging.getLogger("notifier.log")))

    if settings.desktop_enabled:
        try:
            notifiers.append(
                DesktopNotifier(
                    app_name=settings.app_name,
                    timeout_seconds=settings.push_timeout_seconds,
                    logger=logging.getLogger("notifier.desktop"),
                )
            )
            logger.info("Desktop notifications enabled")
        except NotifierError as error:
            logger.warning("Desktop notifications disabled: %s", error)
    return notifiers


def main(config_path: Optional[str] = None) -> int:
    """Run the task timer until interrupted."""
    logger = setup_logging(level=logging.INFO)

    try:
        resolved_path = resolve_config_path(config_path)
        app_config = load_app_config(config_path)
        logging.getLogger().setLevel(app_config.logging.level)
        if app_config.source_file:
            logger.info("Loaded runtime config: %s", resolved_path)
        else:
            logger.info("No config file at %s; using built-in defaults", resolved_path)
    except AppConfigurationError as error:
        logger.error("App configuration error: %s", error)
        return 1

    try:
        TimerSettings.from_settings(app_config.timer)
        ui_server: Optional[UIServer] = None
        if app_config.ui_server.enabled:
            ui_server = UIServer(
                config=UIServerConfig.from_settings(app_config.ui_server),
                logger=logging.getLogger("ui_server"),
            )
    except (TimerConfigurationError, ServerConfigurationError) as error:
        logger.error("Configuration error: %s", error)
        return 1

    engine = RuntimeEngine(
        RuntimeBootstrap(
            logger=logging.getLogger("runtime"),
            app_config=app_config,
            notifiers=build_notifiers(app_config, logger),
            ui_server=ui_server,
            hooks=RuntimeHooks(install_signal_handlers=install_signal_handlers),
        )
    )
    return engine.run()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
