import asyncio
import json
import unittest

from bus import CompleteRequested, ShowTimerRequested, StartCommand
from server import UICommandError, UIServer, UIServerConfig, parse_ui_command
from server.commands import build_start_command


class _FakeWebSocket:
    def __init__(self) -> None:
        self.sent: list[str] = []

    async def send(self, message: str) -> None:
        self.sent.append(message)

    def sent_types(self) -> list[str]:
        return [json.loads(item)["type"] for item in self.sent]


class ParseUICommandTests(unittest.TestCase):
    def test_start_with_duration_millis(self) -> None:
        parsed = parse_ui_command(
            json.dumps(
                {
                    "type": "start",
                    "name": "  Write   report ",
                    "category": "Challenge",
                    "duration_millis": 1_800_000,
                }
            )
        )

        self.assertEqual(
            StartCommand(name="Write report", category="challenge", duration_millis=1_800_000),
            parsed.command,
        )
        self.assertFalse(parsed.suggest_split)

    def test_start_with_hours_and_minutes_text(self) -> None:
        parsed = parse_ui_command(
            json.dumps(
                {
                    "type": "start",
                    "name": "Deep work",
                    "category": "challenge",
                    "hours": "1",
                    "minutes": "30",
                }
            )
        )

        self.assertEqual(90 * 60_000, parsed.command.duration_millis)
        self.assertTrue(parsed.suggest_split)

    def test_non_numeric_minutes_count_as_zero(self) -> None:
        with self.assertRaises(UICommandError):
            parse_ui_command(
                json.dumps(
                    {"type": "start", "name": "Nap", "category": "recharge", "minutes": "abc"}
                )
            )

    def test_recharge_never_suggests_split(self) -> None:
        parsed = build_start_command("Walk", "recharge", 120)
        self.assertFalse(parsed.suggest_split)

    def test_exactly_sixty_minutes_does_not_suggest_split(self) -> None:
        parsed = build_start_command("Emails", "challenge", 60)
        self.assertFalse(parsed.suggest_split)

    def test_blank_name_is_rejected(self) -> None:
        with self.assertRaises(UICommandError):
            build_start_command("   ", "challenge", 25)

    def test_unknown_category_is_rejected(self) -> None:
        with self.assertRaises(UICommandError):
            build_start_command("Read", "chores", 25)

    def test_rejects_non_positive_duration_millis(self) -> None:
        for duration in (0, -5, True, "100"):
            with self.subTest(duration=duration):
                with self.assertRaises(UICommandError):
                    parse_ui_command(
                        json.dumps(
                            {
                                "type": "start",
                                "name": "Read",
                                "category": "recharge",
                                "duration_millis": duration,
                            }
                        )
                    )

    def test_complete_and_show_timer(self) -> None:
        self.assertEqual(CompleteRequested(), parse_ui_command('{"type": "complete"}').command)
        self.assertEqual(
            ShowTimerRequested(),
            parse_ui_command(b'{"type": "show_timer"}').command,
        )

    def test_notification_actions_map_to_commands(self) -> None:
        self.assertEqual(
            CompleteRequested(),
            parse_ui_command('{"type": "notification_action", "action": "complete"}').command,
        )
        self.assertEqual(
            ShowTimerRequested(),
            parse_ui_command('{"type": "notification_action", "action": "show_timer"}').command,
        )
        with self.assertRaises(UICommandError):
            parse_ui_command('{"type": "notification_action", "action": "open_app"}')

    def test_rejects_malformed_messages(self) -> None:
        for raw in ("not json", "[1, 2]", '{"type": "pause"}', '{"type": "start", "name": 3}'):
            with self.subTest(raw=raw):
                with self.assertRaises(UICommandError):
                    parse_ui_command(raw)


class UIServerMessageHandlingTests(unittest.TestCase):
    def test_valid_command_reaches_sink(self) -> None:
        received = []
        server = UIServer(UIServerConfig(), command_sink=received.append)
        websocket = _FakeWebSocket()

        asyncio.run(server._handle_message(websocket, '{"type": "complete"}'))

        self.assertEqual([CompleteRequested()], [parsed.command for parsed in received])
        self.assertEqual([], websocket.sent)

    def test_long_challenge_sends_split_suggestion_before_dispatch(self) -> None:
        received = []
        server = UIServer(UIServerConfig(), command_sink=received.append)
        websocket = _FakeWebSocket()
        message = json.dumps(
            {"type": "start", "name": "Thesis", "category": "challenge", "minutes": "90"}
        )

        asyncio.run(server._handle_message(websocket, message))

        self.assertEqual(["split_suggestion"], websocket.sent_types())
        self.assertEqual(1, len(received))

    def test_invalid_command_replies_with_error(self) -> None:
        received = []
        server = UIServer(UIServerConfig(), command_sink=received.append)
        websocket = _FakeWebSocket()

        asyncio.run(server._handle_message(websocket, '{"type": "explode"}'))

        self.assertEqual(["error"], websocket.sent_types())
        self.assertEqual([], received)

    def test_failing_sink_replies_with_error(self) -> None:
        def failing_sink(parsed) -> None:
            raise RuntimeError("loop closed")

        server = UIServer(UIServerConfig(), command_sink=failing_sink)
        websocket = _FakeWebSocket()

        with self.assertLogs("ui_server", level="ERROR"):
            asyncio.run(server._handle_message(websocket, '{"type": "show_timer"}'))

        self.assertEqual(["error"], websocket.sent_types())

    def test_publish_before_start_is_remembered_for_new_clients(self) -> None:
        server = UIServer(UIServerConfig())

        server.publish("tick", remaining_millis=5000, is_overtime=False, overtime_millis=0)
        snapshot = server._sticky_events.snapshot()
        self.assertEqual(["tick"], [json.loads(item)["type"] for item in snapshot])

    def test_completed_forgets_the_remembered_tick(self) -> None:
        server = UIServer(UIServerConfig())

        server.publish("ui_state", screen="timer")
        server.publish("tick", remaining_millis=5000, is_overtime=False, overtime_millis=0)
        server.publish("completed")
        server.publish("ui_state", screen="input")

        snapshot = [json.loads(item) for item in server._sticky_events.snapshot()]
        self.assertEqual(["ui_state"], [item["type"] for item in snapshot])
        self.assertEqual("input", snapshot[0]["screen"])

    def test_push_events_are_not_replayed(self) -> None:
        server = UIServer(UIServerConfig())

        server.publish("notification", kind="ongoing", title="Idle")
        server.publish("push", kind="push", title="Reminder")

        snapshot = [json.loads(item) for item in server._sticky_events.snapshot()]
        self.assertEqual(["notification"], [item["type"] for item in snapshot])
        self.assertEqual("ongoing", snapshot[0]["kind"])


if __name__ == "__main__":
    unittest.main()
