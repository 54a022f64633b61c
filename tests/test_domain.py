import unittest

from pydantic import ValidationError

from dayrules.domain import (
    DayClass,
    DayOfWeek,
    InvalidRule,
    MonthOfYear,
    Ordinal,
    PositionalRule,
    RuleError,
    Settings,
    normalize_day_class,
    normalize_month,
    normalize_ordinal,
)


class PositionalRuleTests(unittest.TestCase):
    def test_nth_rule_normalizes_inputs(self) -> None:
        rule = PositionalRule.nth(3, "Monday")
        self.assertEqual(rule.ordinal, Ordinal.THIRD)
        self.assertEqual(rule.day_class, DayClass.MONDAY)
        self.assertIsNone(rule.day)
        self.assertEqual(rule, PositionalRule(ordinal="third", day_class=DayClass.MONDAY))

    def test_last_rule(self) -> None:
        rule = PositionalRule.last("weekday")
        self.assertTrue(rule.is_last)
        self.assertEqual(rule.day_class, DayClass.WEEKDAY)

    def test_day_of_month_defaults_to_any_day(self) -> None:
        rule = PositionalRule.day_of_month(15)
        self.assertEqual(rule.day, 15)
        self.assertEqual(rule.day_class, DayClass.ANY_DAY)

    def test_day_of_month_with_weekday_class_is_rejected(self) -> None:
        with self.assertRaises(InvalidRule):
            PositionalRule(day=15, day_class=DayClass.MONDAY)
        with self.assertRaises(InvalidRule):
            PositionalRule(day=2, day_class="weekend_day")

    def test_day_out_of_range(self) -> None:
        for day in (0, 32, -1):
            with self.assertRaises(InvalidRule):
                PositionalRule.day_of_month(day)

    def test_ordinal_out_of_range(self) -> None:
        for value in (0, 5, "fifth", "", True):
            with self.assertRaises(InvalidRule):
                PositionalRule.nth(value, DayClass.FRIDAY)

    def test_needs_exactly_one_position(self) -> None:
        with self.assertRaises(InvalidRule):
            PositionalRule()
        with self.assertRaises(InvalidRule):
            PositionalRule(ordinal=Ordinal.LAST, day=3)

    def test_rule_is_immutable_and_hashable(self) -> None:
        rule = PositionalRule.nth(2, DayClass.TUESDAY)
        with self.assertRaises(ValidationError):
            rule.day_class = DayClass.WEDNESDAY
        self.assertEqual(len({rule, PositionalRule.nth(2, "tuesday")}), 1)

    def test_rule_errors_share_a_base(self) -> None:
        self.assertTrue(issubclass(InvalidRule, RuleError))


class NormalizeTests(unittest.TestCase):
    def test_normalize_ordinal(self) -> None:
        self.assertEqual(normalize_ordinal("LAST"), Ordinal.LAST)
        self.assertEqual(normalize_ordinal("4"), Ordinal.FOURTH)
        self.assertEqual(normalize_ordinal(1), Ordinal.FIRST)
        self.assertIsNone(Ordinal.LAST.n)
        self.assertEqual(Ordinal.SECOND.n, 2)

    def test_normalize_day_class(self) -> None:
        self.assertEqual(normalize_day_class("Weekend Day"), DayClass.WEEKEND_DAY)
        self.assertEqual(normalize_day_class("any-day"), DayClass.ANY_DAY)
        self.assertEqual(normalize_day_class(DayOfWeek.SUNDAY), DayClass.SUNDAY)
        with self.assertRaises(InvalidRule):
            normalize_day_class("funday")

    def test_day_class_weekday(self) -> None:
        self.assertEqual(DayClass.THURSDAY.weekday, DayOfWeek.THURSDAY)
        self.assertIsNone(DayClass.WEEKDAY.weekday)
        self.assertTrue(DayClass.SATURDAY.is_specific_weekday)
        self.assertFalse(DayClass.ANY_DAY.is_specific_weekday)

    def test_normalize_month(self) -> None:
        self.assertEqual(normalize_month(11), MonthOfYear.NOVEMBER)
        self.assertEqual(normalize_month("march"), MonthOfYear.MARCH)
        with self.assertRaises(InvalidRule):
            normalize_month(13)


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings()
        self.assertEqual(settings.first_day_of_week, DayOfWeek.MONDAY)
        self.assertEqual(settings.out_of_month, "raise")

    def test_out_of_month_policy_is_checked(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(out_of_month="clamp")


if __name__ == "__main__":
    unittest.main()
