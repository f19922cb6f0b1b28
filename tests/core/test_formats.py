"""Tests for datespine.core.formats module."""

from datetime import datetime

import pytest

from datespine.core.errors import ParseError, UnrecognizedFormatError
from datespine.core.formats import AUTO_FORMATS, detect_format, parse_auto


class TestDetectFormat:
    @pytest.mark.parametrize(
        "source, pattern",
        [
            ("2000", "yyyy"),
            ("2000-01", "yyyy-MM"),
            ("2000-01-01", "yyyy-MM-dd"),
            ("2000-01-01 00", "yyyy-MM-dd HH"),
            ("2000-01-01 00:00", "yyyy-MM-dd HH:mm"),
            ("2000-01-01 00:00:00", "yyyy-MM-dd HH:mm:ss"),
            ("2000-01-01 00:00:00.000", "yyyy-MM-dd HH:mm:ss.SSS"),
            ("2000-01-01 00:00:00.000 -0700", "yyyy-MM-dd HH:mm:ss.SSS Z"),
        ],
    )
    def test_known_lengths(self, source, pattern):
        assert detect_format(source) == pattern

    def test_unknown_length(self):
        with pytest.raises(UnrecognizedFormatError, match="length 11"):
            detect_format("2000-01-01 ")

    def test_none(self):
        with pytest.raises(UnrecognizedFormatError):
            detect_format(None)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            AUTO_FORMATS[11] = "yyyy-MM-dd'T'"


class TestParseAuto:
    def test_year_only(self):
        assert parse_auto("2000") == datetime(2000, 1, 1)

    def test_date(self):
        assert parse_auto("2017-05-30") == datetime(2017, 5, 30)

    def test_millis(self):
        assert parse_auto("2017-05-30 14:05:13.801") == datetime(2017, 5, 30, 14, 5, 13, 801000)

    def test_offset_converted_to_utc(self):
        assert parse_auto("2017-05-30 14:05:13.801 -0700") == datetime(2017, 5, 30, 21, 5, 13, 801000)

    def test_invalid_month(self):
        with pytest.raises(ParseError):
            parse_auto("2000-13-01")

    def test_right_length_wrong_shape(self):
        with pytest.raises(ParseError):
            parse_auto("abcd")
