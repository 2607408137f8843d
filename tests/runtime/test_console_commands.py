import unittest

from bus import CompleteRequested, ShowTimerRequested, StartCommand
from runtime import ConsoleCommandReader, parse_console_line
from server import UICommandError


class ParseConsoleLineTests(unittest.TestCase):
    def test_start_line(self) -> None:
        request = parse_console_line("start challenge 90 Write the quarterly report")

        self.assertEqual("command", request.action)
        self.assertEqual(
            StartCommand(
                name="Write the quarterly report",
                category="challenge",
                duration_millis=90 * 60_000,
            ),
            request.command,
        )
        self.assertTrue(request.suggest_split)

    def test_simple_commands(self) -> None:
        self.assertEqual(CompleteRequested(), parse_console_line("complete").command)
        self.assertEqual(ShowTimerRequested(), parse_console_line("SHOW").command)
        self.assertEqual("status", parse_console_line("status").action)
        self.assertEqual("quit", parse_console_line("exit").action)
        self.assertEqual("help", parse_console_line("?").action)
        self.assertIsNone(parse_console_line("   "))

    def test_invalid_lines(self) -> None:
        for line in ("start challenge 30", "start chores 30 Dishes", "start recharge x Nap", "pause"):
            with self.subTest(line=line):
                with self.assertRaises(UICommandError):
                    parse_console_line(line)


class ConsoleCommandReaderTests(unittest.TestCase):
    def _reader(self, lines):
        self.submitted = []
        self.output = []
        self.quits = 0
        remaining = list(lines)

        def fake_input(prompt: str) -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        def on_quit() -> None:
            self.quits += 1

        return ConsoleCommandReader(
            self.submitted.append,
            status_text=lambda: "⏱️ idle",
            on_quit=on_quit,
            input_fn=fake_input,
            output_fn=self.output.append,
        )

    def test_run_submits_commands_until_input_closes(self) -> None:
        reader = self._reader(["start recharge 15 Walk", "", "bogus", "status", "complete"])

        reader.run()

        self.assertEqual(
            [
                StartCommand(name="Walk", category="recharge", duration_millis=900_000),
                CompleteRequested(),
            ],
            self.submitted,
        )
        self.assertIn("⏱️ idle", self.output)
        self.assertTrue(any("Unknown command" in line for line in self.output))
        self.assertEqual(0, self.quits)

    def test_quit_stops_the_reader(self) -> None:
        reader = self._reader(["quit", "complete"])

        reader.run()

        self.assertEqual(1, self.quits)
        self.assertEqual([], self.submitted)

    def test_long_challenge_prints_split_hint(self) -> None:
        reader = self._reader(["start challenge 120 Thesis"])

        reader.run()

        self.assertTrue(any(line.startswith("💡") for line in self.output))
        self.assertEqual(1, len(self.submitted))


if __name__ == "__main__":
    unittest.main()
