import unittest
from datetime import date, timedelta

from dayrules import classifier
from dayrules.domain import DayClass, DayOfWeek


class ClassifierTests(unittest.TestCase):
    def test_weekend(self) -> None:
        self.assertTrue(classifier.is_weekend(date(2026, 1, 3)))  # Saturday
        self.assertFalse(classifier.is_weekend(date(2026, 1, 5)))  # Monday
        self.assertTrue(classifier.is_weekday(date(2026, 1, 5)))

    def test_specific_weekday(self) -> None:
        thursday = date(2023, 11, 23)
        self.assertTrue(classifier.matches(thursday, DayClass.THURSDAY))
        self.assertFalse(classifier.matches(thursday, DayClass.FRIDAY))

    def test_within(self) -> None:
        friday = date(2024, 6, 7)
        self.assertTrue(classifier.within(friday, [DayOfWeek.FRIDAY, DayOfWeek.SATURDAY]))
        self.assertFalse(classifier.within(friday, [DayOfWeek.MONDAY]))
        self.assertFalse(classifier.within(friday, []))

    def test_any_day_always_matches(self) -> None:
        start = date(2024, 1, 1)
        for offset in range(14):
            self.assertTrue(classifier.matches(start + timedelta(days=offset), DayClass.ANY_DAY))

    def test_weekday_and_weekend_partition(self) -> None:
        start = date(2024, 1, 1)
        for offset in range(366):
            day = start + timedelta(days=offset)
            weekday = classifier.matches(day, DayClass.WEEKDAY)
            weekend = classifier.matches(day, DayClass.WEEKEND_DAY)
            self.assertNotEqual(weekday, weekend)
            self.assertEqual(weekday or weekend, classifier.matches(day, DayClass.ANY_DAY))

    def test_day_classes_of(self) -> None:
        self.assertEqual(
            classifier.day_classes_of(date(2024, 6, 1)),  # Saturday
            frozenset({DayClass.ANY_DAY, DayClass.SATURDAY, DayClass.WEEKEND_DAY}),
        )
        self.assertEqual(
            classifier.day_classes_of(date(2024, 6, 4)),  # Tuesday
            frozenset({DayClass.ANY_DAY, DayClass.TUESDAY, DayClass.WEEKDAY}),
        )


if __name__ == "__main__":
    unittest.main()
