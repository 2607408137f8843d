import unittest

from bus import (
    CompletedEvent,
    CompleteRequested,
    EventBus,
    ShowTimerRequested,
    StartCommand,
    TickEvent,
)
from ui_state import SCREEN_INPUT, SCREEN_TIMER, UIStateStore, UITask


class UIStateStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self.bus = EventBus()
        self.store = UIStateStore()
        self.snapshots = []
        self.store.subscribe(self.snapshots.append)
        self.detach = self.store.attach(self.bus)

    def test_starts_on_input_screen(self) -> None:
        snapshot = self.store.snapshot
        self.assertEqual(SCREEN_INPUT, snapshot.screen)
        self.assertIsNone(snapshot.task)

    def test_start_command_shows_timer_with_full_duration(self) -> None:
        self.bus.send_command(
            StartCommand(name="Write report", category="challenge", duration_millis=1_800_000)
        )

        snapshot = self.store.snapshot
        self.assertEqual(SCREEN_TIMER, snapshot.screen)
        self.assertEqual(UITask("Write report", "challenge", 1_800_000), snapshot.task)
        self.assertEqual(1_800_000, snapshot.remaining_millis)
        self.assertFalse(snapshot.is_overtime)

    def test_ticks_update_the_timer(self) -> None:
        self.bus.send_command(StartCommand(name="Nap", category="recharge", duration_millis=0))
        self.bus.publish_event(
            TickEvent(remaining_millis=0, is_overtime=True, overtime_millis=42_000)
        )

        snapshot = self.store.snapshot
        self.assertTrue(snapshot.is_overtime)
        self.assertEqual(42_000, snapshot.overtime_millis)
        self.assertEqual("Nap", snapshot.task.name)

    def test_completed_event_returns_to_input(self) -> None:
        self.bus.send_command(StartCommand(name="Nap", category="recharge", duration_millis=1))
        self.bus.publish_event(CompletedEvent())

        self.assertEqual(SCREEN_INPUT, self.store.snapshot.screen)
        self.assertIsNone(self.store.snapshot.task)

    def test_complete_request_returns_to_input(self) -> None:
        self.bus.send_command(StartCommand(name="Nap", category="recharge", duration_millis=1))
        self.bus.send_command(CompleteRequested())

        self.assertEqual(SCREEN_INPUT, self.store.snapshot.screen)

    def test_show_timer_without_task_is_ignored(self) -> None:
        self.bus.send_command(ShowTimerRequested())

        self.assertEqual(SCREEN_INPUT, self.store.snapshot.screen)
        self.assertEqual([], self.snapshots)

    def test_duplicate_updates_are_not_republished(self) -> None:
        tick = TickEvent(remaining_millis=1_000, is_overtime=False, overtime_millis=0)
        self.bus.send_command(StartCommand(name="Read", category="recharge", duration_millis=2_000))
        self.bus.publish_event(tick)
        self.bus.publish_event(tick)
        self.bus.send_command(ShowTimerRequested())

        self.assertEqual(2, len(self.snapshots))

    def test_detach_stops_following_the_bus(self) -> None:
        self.detach()
        self.bus.subscribe_commands(lambda command: None)

        self.bus.send_command(StartCommand(name="Read", category="recharge", duration_millis=2_000))

        self.assertEqual(SCREEN_INPUT, self.store.snapshot.screen)


if __name__ == "__main__":
    unittest.main()
