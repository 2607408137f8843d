import unittest
from unittest.mock import MagicMock, call

from bus import CompleteRequested, ShowTimerRequested, StartCommand
from runtime import CommandDispatcher


class CommandDispatcherTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = MagicMock()
        self.dispatcher = CommandDispatcher(self.engine)

    def test_start_command_starts_engine(self) -> None:
        self.dispatcher.handle_command(
            StartCommand(name="Write report", category="challenge", duration_millis=1_800_000)
        )

        self.engine.start.assert_called_once_with("Write report", "challenge", 1_800_000)

    def test_complete_is_two_steps(self) -> None:
        self.dispatcher.handle_command(CompleteRequested())

        self.assertEqual([call.complete(), call.enter_idle_mode()], self.engine.method_calls)

    def test_show_timer_leaves_engine_alone(self) -> None:
        self.dispatcher.handle_command(ShowTimerRequested())

        self.assertEqual([], self.engine.method_calls)

    def test_unknown_command_is_logged(self) -> None:
        with self.assertLogs("runtime.commands", level="WARNING"):
            self.dispatcher.handle_command(object())

        self.assertEqual([], self.engine.method_calls)


if __name__ == "__main__":
    unittest.main()
