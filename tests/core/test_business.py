"""
Tests for datespine.core.business module.

The business-day walker pushes the result one day for every weekend day on
the path; shift_off_weekend only looks at the landing day.
"""

from datetime import date, datetime

import pytest

from datespine.core.business import (
    DEFAULT_WEEKENDS,
    Weekday,
    adjust_to_business_day,
    is_business_day,
    parse_weekends,
    shift_off_weekend,
    validate_weekends,
)
from datespine.core.errors import ErrorCategory, InvalidWeekendSetError

TUESDAY = date(2017, 5, 30)
FRIDAY = date(2017, 6, 2)
SATURDAY = date(2017, 6, 3)
MONDAY = date(2017, 6, 5)


class TestParseWeekends:
    def test_default(self):
        assert parse_weekends() == DEFAULT_WEEKENDS
        assert parse_weekends([]) == DEFAULT_WEEKENDS
        assert DEFAULT_WEEKENDS == {Weekday.SATURDAY, Weekday.SUNDAY}

    def test_names_case_insensitive(self):
        assert parse_weekends(["friday", "Saturday"]) == {Weekday.FRIDAY, Weekday.SATURDAY}

    def test_single_name(self):
        assert parse_weekends("SUNDAY") == {Weekday.SUNDAY}

    def test_members_accepted(self):
        assert parse_weekends([Weekday.MONDAY]) == {Weekday.MONDAY}

    def test_unknown_name(self):
        with pytest.raises(InvalidWeekendSetError, match="Unknown day of week 'FUNDAY'"):
            parse_weekends(["FUNDAY"])

    def test_all_seven_days_rejected(self):
        with pytest.raises(InvalidWeekendSetError) as exc_info:
            parse_weekends([day.name for day in Weekday])
        assert exc_info.value.category == ErrorCategory.CONFIG

    def test_empty_set_allowed(self):
        assert validate_weekends(frozenset()) == frozenset()


class TestIsBusinessDay:
    def test_default_weekend(self):
        assert is_business_day(TUESDAY)
        assert not is_business_day(SATURDAY)

    def test_custom_weekend(self):
        assert not is_business_day(FRIDAY, parse_weekends(["FRIDAY"]))
        assert is_business_day(SATURDAY, parse_weekends(["FRIDAY"]))


class TestAdjustToBusinessDay:
    """Path walk: one push per weekend day crossed."""

    def test_landing_on_saturday_moves_to_monday(self):
        assert adjust_to_business_day(TUESDAY, date(2017, 6, 3)) == MONDAY

    def test_time_of_day_preserved(self):
        original = datetime(2017, 5, 30, 14, 0, 23)
        modified = datetime(2017, 6, 3, 14, 0, 23)
        assert adjust_to_business_day(original, modified) == datetime(2017, 6, 5, 14, 0, 23)

    def test_two_weekends_gain_four_days(self):
        assert adjust_to_business_day(FRIDAY, date(2017, 6, 12)) == date(2017, 6, 16)

    def test_weekday_path_unchanged(self):
        assert adjust_to_business_day(date(2017, 5, 29), TUESDAY) == TUESDAY

    def test_backwards_walk(self):
        assert adjust_to_business_day(MONDAY, date(2017, 6, 4)) == FRIDAY

    def test_custom_weekend_days(self):
        weekends = parse_weekends(["FRIDAY", "SATURDAY"])
        assert adjust_to_business_day(date(2017, 6, 1), FRIDAY, weekends) == date(2017, 6, 4)

    def test_sunday_only_weekend(self):
        assert adjust_to_business_day(TUESDAY, SATURDAY, parse_weekends("SUNDAY")) == SATURDAY

    def test_empty_weekend_is_identity(self):
        assert adjust_to_business_day(TUESDAY, SATURDAY, frozenset()) == SATURDAY

    def test_all_days_rejected(self):
        with pytest.raises(InvalidWeekendSetError):
            adjust_to_business_day(TUESDAY, SATURDAY, set(Weekday))


class TestShiftOffWeekend:
    """Landing-day rule."""

    def test_saturday_forward(self):
        assert shift_off_weekend(TUESDAY, SATURDAY) == MONDAY

    def test_sunday_backward(self):
        assert shift_off_weekend(MONDAY, date(2017, 6, 4)) == FRIDAY

    def test_crossing_without_landing_unchanged(self):
        assert shift_off_weekend(FRIDAY, MONDAY) == MONDAY

    def test_differs_from_path_walk(self):
        assert adjust_to_business_day(FRIDAY, MONDAY) == date(2017, 6, 7)
