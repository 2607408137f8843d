import unittest

from tasktimer.task_input import (
    can_start,
    parse_duration_millis,
    parse_whole_number,
    should_suggest_split,
    total_minutes,
)


class TaskInputTests(unittest.TestCase):
    def test_parse_whole_number_defaults_to_zero(self) -> None:
        self.assertEqual(0, parse_whole_number(None))
        self.assertEqual(0, parse_whole_number(""))
        self.assertEqual(0, parse_whole_number("abc"))
        self.assertEqual(0, parse_whole_number("-3"))
        self.assertEqual(0, parse_whole_number("1.5"))
        self.assertEqual(45, parse_whole_number(" 45 "))

    def test_total_minutes_combines_hours(self) -> None:
        self.assertEqual(90, total_minutes("1", "30"))
        self.assertEqual(30, total_minutes("", "30"))
        self.assertEqual(120, total_minutes("2", None))

    def test_parse_duration_millis(self) -> None:
        self.assertEqual(1_800_000, parse_duration_millis("0", "30"))
        self.assertEqual(0, parse_duration_millis("x", "y"))

    def test_can_start_needs_name_and_positive_minutes(self) -> None:
        self.assertTrue(can_start("Read", 1))
        self.assertFalse(can_start("Read", 0))
        self.assertFalse(can_start("   ", 25))
        self.assertFalse(can_start("", 25))

    def test_split_suggestion_only_for_long_challenges(self) -> None:
        self.assertTrue(should_suggest_split("challenge", 61))
        self.assertFalse(should_suggest_split("challenge", 60))
        self.assertFalse(should_suggest_split("recharge", 240))


if __name__ == "__main__":
    unittest.main()
