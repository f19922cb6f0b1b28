"""
Tests for datespine.core.patterns module.

Tests cover:
- Tokenizing letter runs, quotes and reserved letters
- Rendering every supported symbol
- Exact-match parsing and conflicting-field detection
"""

from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from datespine.core.errors import (
    InvalidTimeZoneError,
    MalformedPatternError,
    ParseError,
    UnsupportedFieldError,
)
from datespine.core.patterns import (
    FieldRun,
    Literal,
    OptionalSection,
    compile_pattern,
    format_offset,
    format_temporal,
    parse_temporal,
)

VALUE = datetime(2017, 5, 30, 14, 5, 13, 801000)


class TestCompilePattern:
    def test_tokens(self):
        compiled = compile_pattern("yyyy-MM-dd")
        assert compiled.tokens == (
            FieldRun("y", 4),
            Literal("-"),
            FieldRun("M", 2),
            Literal("-"),
            FieldRun("d", 2),
        )
        assert [run for _, run in compiled.groups] == [FieldRun("y", 4), FieldRun("M", 2), FieldRun("d", 2)]

    def test_quoted_text_and_escaped_quote(self):
        compiled = compile_pattern("h 'o''clock'")
        assert compiled.tokens == (FieldRun("h", 1), Literal(" o'clock"))

    def test_optional_section_tokens(self):
        compiled = compile_pattern("yyyy[ HH[:mm]]")
        assert compiled.tokens == (
            FieldRun("y", 4),
            OptionalSection((Literal(" "), FieldRun("H", 2), OptionalSection((Literal(":"), FieldRun("m", 2))))),
        )
        assert len(compiled.groups) == 3

    def test_quoted_brackets_are_literal(self):
        assert compile_pattern("'[x]'").tokens == (Literal("[x]"),)

    @pytest.mark.parametrize("pattern", ["yyyy-bb", "MMMMM", "V", "ZZZZ", "HHH", "'open", "", "GGGGGG", "QQQQQ"])
    def test_malformed(self, pattern):
        with pytest.raises(MalformedPatternError):
            compile_pattern(pattern)

    @pytest.mark.parametrize("pattern, message", [("yyyy]", "Unmatched"), ("yyyy[ HH", "Unclosed")])
    def test_unbalanced_brackets(self, pattern, message):
        with pytest.raises(MalformedPatternError, match=message):
            compile_pattern(pattern)

    @pytest.mark.parametrize("pattern", [["yyyy"], None, 42])
    def test_non_string_rejected(self, pattern):
        with pytest.raises(MalformedPatternError, match="non-empty string"):
            compile_pattern(pattern)


class TestFormatTemporal:
    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("yyyyMMdd-HH:mm:ss", "20170530-14:05:13"),
            ("yyyy-MM-dd HH:mm:ss.SSS", "2017-05-30 14:05:13.801"),
            ("yy/M/d", "17/5/30"),
            ("EEE, dd MMM yyyy", "Tue, 30 May 2017"),
            ("EEEE d MMMM", "Tuesday 30 May"),
            ("DDD", "150"),
            ("hh:mm a", "02:05 PM"),
            ("K k", "2 14"),
            ("SSSSSS", "801000"),
            ("n", "801000000"),
            ("yyyy-MM-dd'T'HH:mm", "2017-05-30T14:05"),
            ("''yy''", "'17'"),
        ],
    )
    def test_symbols(self, pattern, expected):
        assert format_temporal(VALUE, pattern) == expected

    def test_midnight_clock_hours(self):
        midnight = datetime(2017, 5, 30)
        assert format_temporal(midnight, "hh:mm a") == "12:00 AM"
        assert format_temporal(midnight, "kk") == "24"

    def test_date_and_time_values(self):
        assert format_temporal(date(2017, 5, 30), "dd.MM.yyyy") == "30.05.2017"
        assert format_temporal(time(9, 5), "HH:mm") == "09:05"

    def test_hours_of_date_unsupported(self):
        with pytest.raises(UnsupportedFieldError):
            format_temporal(date(2017, 5, 30), "yyyy-MM-dd HH")

    def test_year_of_time_unsupported(self):
        with pytest.raises(UnsupportedFieldError):
            format_temporal(time(9, 5), "yyyy")

    def test_offset_of_naive_unsupported(self):
        with pytest.raises(UnsupportedFieldError, match="needs a zone"):
            format_temporal(VALUE, "HH:mm Z")


class TestFormatExtendedLetters:
    """Era, quarter, ISO week and of-day letters."""

    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("G yyyy", "AD 2017"),
            ("GGGG", "Anno Domini"),
            ("GGGGG", "A"),
            ("Q", "2"),
            ("QQ", "02"),
            ("QQQ yyyy", "Q2 2017"),
            ("QQQQ", "2nd quarter"),
            ("YYYY-'W'ww", "2017-W22"),
            ("A", "50713801"),
            ("N", "50713801000000"),
        ],
    )
    def test_symbols(self, pattern, expected):
        assert format_temporal(VALUE, pattern) == expected

    def test_week_based_year_differs_from_year(self):
        # 2019-12-30 is a Monday in ISO week 1 of 2020
        value = date(2019, 12, 30)
        assert format_temporal(value, "yyyy YYYY ww") == "2019 2020 01"
        assert format_temporal(value, "yy YY") == "19 20"

    def test_of_day_needs_time(self):
        with pytest.raises(UnsupportedFieldError):
            format_temporal(date(2017, 5, 30), "A")


class TestFormatOptionalSections:
    def test_section_omitted_when_field_missing(self):
        assert format_temporal(date(2017, 5, 30), "yyyy-MM-dd[ HH:mm]") == "2017-05-30"

    def test_section_rendered_when_fields_present(self):
        assert format_temporal(VALUE, "yyyy-MM-dd[ HH:mm]") == "2017-05-30 14:05"

    def test_zone_section_omitted_for_naive(self):
        assert format_temporal(VALUE, "HH:mm[ XXX]") == "14:05"
        aware = VALUE.replace(tzinfo=timezone(timedelta(hours=2)))
        assert format_temporal(aware, "HH:mm[ XXX]") == "14:05 +02:00"

    def test_nested_sections(self):
        pattern = "yyyy-MM-dd['T'HH:mm[ XXX]]"
        assert format_temporal(date(2017, 5, 30), pattern) == "2017-05-30"
        assert format_temporal(VALUE, pattern) == "2017-05-30T14:05"


class TestFormatZones:
    def _at(self, **offset):
        return VALUE.replace(tzinfo=timezone(timedelta(**offset)))

    def test_z_letters(self):
        value = self._at(hours=5, minutes=30)
        assert format_temporal(value, "Z") == "+0530"
        assert format_temporal(value, "ZZZZZ") == "+05:30"
        assert format_temporal(VALUE.replace(tzinfo=timezone.utc), "ZZZZZ") == "Z"
        assert format_temporal(VALUE.replace(tzinfo=timezone.utc), "Z") == "+0000"

    def test_x_letters(self):
        value = self._at(hours=-8)
        assert format_temporal(value, "X") == "-08"
        assert format_temporal(value, "XX") == "-0800"
        assert format_temporal(value, "XXX") == "-08:00"
        assert format_temporal(VALUE.replace(tzinfo=timezone.utc), "X") == "Z"
        assert format_temporal(VALUE.replace(tzinfo=timezone.utc), "x") == "+00"

    def test_zone_id(self):
        value = VALUE.replace(tzinfo=ZoneInfo("America/Los_Angeles"))
        assert format_temporal(value, "VV") == "America/Los_Angeles"

    def test_format_offset_seconds(self):
        assert format_offset(timedelta(hours=1, seconds=30), colon=True) == "+01:00:30"


class TestParseTemporal:
    def test_full_timestamp(self):
        parsed = parse_temporal("2017-05-30 14:05:13.801", "yyyy-MM-dd HH:mm:ss.SSS")
        assert parsed.to_datetime() == VALUE

    def test_round_trip(self):
        pattern = "yyyy-MM-dd HH:mm:ss.SSS"
        text = format_temporal(VALUE, pattern)
        assert parse_temporal(text, pattern).to_datetime() == VALUE

    def test_names_case_insensitive(self):
        assert parse_temporal("30 may 2017", "dd MMM yyyy").to_date() == date(2017, 5, 30)
        assert parse_temporal("TUESDAY 30 May 2017", "EEEE d MMMM yyyy").to_date() == date(2017, 5, 30)

    def test_twelve_hour_clock(self):
        assert parse_temporal("02:05 PM", "hh:mm a").to_time() == time(14, 5)
        assert parse_temporal("12:00 AM", "hh:mm a").to_time() == time(0, 0)

    def test_two_digit_year(self):
        assert parse_temporal("17-05-30", "yy-MM-dd").to_date() == date(2017, 5, 30)

    def test_day_of_year(self):
        assert parse_temporal("2017-150", "yyyy-DDD").to_date() == date(2017, 5, 30)

    def test_missing_fields_default_to_minimum(self):
        assert parse_temporal("14:05", "HH:mm").to_datetime() == datetime(1970, 1, 1, 14, 5)
        assert parse_temporal("2017", "yyyy").to_datetime() == datetime(2017, 1, 1)

    def test_offset(self):
        value = parse_temporal("2017-05-30 14:05 +0200", "yyyy-MM-dd HH:mm Z").to_datetime()
        assert value.utcoffset() == timedelta(hours=2)
        assert value.astimezone(timezone.utc).hour == 12

    def test_zone_id(self):
        value = parse_temporal("2017-05-30 14:05 Europe/Paris", "yyyy-MM-dd HH:mm VV").to_datetime()
        assert value.tzinfo == ZoneInfo("Europe/Paris")

    def test_unknown_zone_id(self):
        with pytest.raises(InvalidTimeZoneError):
            parse_temporal("2017-05-30 14:05 Mars/Olympus", "yyyy-MM-dd HH:mm VV")

    def test_mismatch(self):
        with pytest.raises(ParseError, match="could not be parsed"):
            parse_temporal("2017/05/30", "yyyy-MM-dd")

    def test_trailing_text_rejected(self):
        with pytest.raises(ParseError):
            parse_temporal("2017-05-30x", "yyyy-MM-dd")

    def test_invalid_date(self):
        with pytest.raises(ParseError) as exc_info:
            parse_temporal("2017-02-30", "yyyy-MM-dd").to_date()
        assert exc_info.value.context.source == "2017-02-30"

    def test_weekday_conflict(self):
        with pytest.raises(ParseError):
            parse_temporal("2017-05-30 Wed", "yyyy-MM-dd EEE").to_date()

    def test_repeated_field_conflict(self):
        with pytest.raises(ParseError, match="Conflicting"):
            parse_temporal("2017-05 06", "yyyy-MM MM")

    def test_clock_hour_without_marker_rejected(self):
        with pytest.raises(ParseError, match="AM/PM"):
            parse_temporal("12:30", "hh:mm").to_time()

    def test_clock_hour_checked_against_hour_of_day(self):
        assert parse_temporal("14 02", "HH hh").to_time() == time(14, 0)
        with pytest.raises(ParseError):
            parse_temporal("14 03", "HH hh").to_time()

    def test_hour_conflicts_with_marker(self):
        with pytest.raises(ParseError):
            parse_temporal("14 AM", "HH a").to_time()


class TestParseOptionalSections:
    PATTERN = "yyyy-MM-dd[ HH:mm]"

    def test_section_absent(self):
        parsed = parse_temporal("2017-05-30", self.PATTERN)
        assert parsed.hour is None
        assert parsed.to_datetime() == datetime(2017, 5, 30)

    def test_section_present(self):
        assert parse_temporal("2017-05-30 14:05", self.PATTERN).to_datetime() == datetime(2017, 5, 30, 14, 5)

    def test_partial_section_rejected(self):
        with pytest.raises(ParseError):
            parse_temporal("2017-05-30 14", self.PATTERN)

    def test_optional_offset(self):
        pattern = "yyyy-MM-dd'T'HH:mm[XXX]"
        assert parse_temporal("2017-05-30T14:05", pattern).to_datetime().tzinfo is None
        aware = parse_temporal("2017-05-30T14:05+02:00", pattern).to_datetime()
        assert aware.utcoffset() == timedelta(hours=2)


class TestParseExtendedLetters:
    def test_era(self):
        assert parse_temporal("2017 AD", "yyyy G").to_date() == date(2017, 1, 1)
        assert parse_temporal("anno domini 2017", "GGGG yyyy").year == 2017

    def test_before_common_era_rejected(self):
        with pytest.raises(ParseError, match="common era"):
            parse_temporal("2017 BC", "yyyy G").to_date()

    def test_quarter_sets_first_month(self):
        assert parse_temporal("Q3 2017", "QQQ yyyy").to_date() == date(2017, 7, 1)
        assert parse_temporal("2017 3rd quarter", "yyyy QQQQ").quarter == 3

    def test_quarter_mismatch(self):
        with pytest.raises(ParseError, match="quarter"):
            parse_temporal("2017-05-30 Q3", "yyyy-MM-dd QQQ").to_date()

    def test_iso_week(self):
        assert parse_temporal("2017-W22", "YYYY-'W'ww").to_date() == date(2017, 5, 29)
        assert parse_temporal("2020-W01 Tue", "YYYY-'W'ww EEE").to_date() == date(2019, 12, 31)

    def test_week_mismatch(self):
        with pytest.raises(ParseError, match="week"):
            parse_temporal("2017-05-30 w23", "yyyy-MM-dd 'w'ww").to_date()

    def test_milli_of_day(self):
        assert parse_temporal("50713801", "A").to_time() == time(14, 5, 13, 801000)
        assert parse_temporal("2017-05-30 50713801", "yyyy-MM-dd A").to_datetime() == VALUE

    def test_nano_of_day(self):
        assert parse_temporal("50713801000000", "N").to_time() == time(14, 5, 13, 801000)

    def test_of_day_conflicts_with_hour(self):
        with pytest.raises(ParseError):
            parse_temporal("15 50713801", "HH A").to_time()

    def test_of_day_past_midnight(self):
        with pytest.raises(ParseError, match="past midnight"):
            parse_temporal("86400000", "A").to_time()
