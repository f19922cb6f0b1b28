"""Tests for datespine.core.zones module."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from datespine.core.errors import ErrorCategory, InvalidTimeZoneError
from datespine.core.zones import parse_offset, resolve_zone, to_naive_utc, utc_to_zone, zone_to_utc

LONDON = ZoneInfo("Europe/London")


class TestResolveZone:
    @pytest.mark.parametrize("zone_id", ["Z", "UTC", "gmt", "UT"])
    def test_utc_aliases(self, zone_id):
        assert resolve_zone(zone_id) is timezone.utc

    @pytest.mark.parametrize(
        "zone_id, offset",
        [
            ("+05:30", timedelta(hours=5, minutes=30)),
            ("-0800", timedelta(hours=-8)),
            ("+5", timedelta(hours=5)),
            ("+18:00", timedelta(hours=18)),
            ("-01:02:03", -timedelta(hours=1, minutes=2, seconds=3)),
        ],
    )
    def test_offsets(self, zone_id, offset):
        assert resolve_zone(zone_id).utcoffset(None) == offset

    @pytest.mark.parametrize(
        "zone_id, offset",
        [
            ("GMT+2", timedelta(hours=2)),
            ("UTC+03:00", timedelta(hours=3)),
            ("UT+01", timedelta(hours=1)),
            ("UTC-0130", -timedelta(hours=1, minutes=30)),
        ],
    )
    def test_prefixed_offsets(self, zone_id, offset):
        assert resolve_zone(zone_id).utcoffset(None) == offset

    def test_prefixed_offset_out_of_range(self):
        with pytest.raises(InvalidTimeZoneError) as exc_info:
            resolve_zone("GMT+19")
        assert exc_info.value.context.zone_id == "GMT+19"

    @pytest.mark.parametrize("zone_id", [["UTC"], {"zone": "UTC"}, None, 3])
    def test_non_string_ids(self, zone_id):
        with pytest.raises(InvalidTimeZoneError):
            resolve_zone(zone_id)

    def test_region(self):
        assert resolve_zone("Europe/London") == LONDON

    @pytest.mark.parametrize("zone_id", ["Mars/Olympus", "", "+ab", "+18:01", "+05:60", "+05:3"])
    def test_invalid(self, zone_id):
        with pytest.raises(InvalidTimeZoneError) as exc_info:
            resolve_zone(zone_id)
        assert exc_info.value.category == ErrorCategory.CONFIG

    def test_error_carries_zone_id(self):
        with pytest.raises(InvalidTimeZoneError) as exc_info:
            resolve_zone("Mars/Olympus")
        assert exc_info.value.context.zone_id == "Mars/Olympus"

    def test_parse_offset_direct(self):
        assert parse_offset("-03:30") == timezone(-timedelta(hours=3, minutes=30))


class TestConversions:
    def test_utc_to_zone_summer(self):
        assert utc_to_zone(datetime(2020, 7, 1, 12), LONDON) == datetime(2020, 7, 1, 13)

    def test_zone_to_utc_winter(self):
        assert zone_to_utc(datetime(2020, 1, 1, 12), LONDON) == datetime(2020, 1, 1, 12)

    def test_ambiguous_wall_time_takes_earlier_instant(self):
        assert zone_to_utc(datetime(2020, 10, 25, 1, 30), LONDON) == datetime(2020, 10, 25, 0, 30)

    def test_to_naive_utc(self):
        aware = datetime(2020, 1, 1, 12, tzinfo=timezone(timedelta(hours=2)))
        assert to_naive_utc(aware) == datetime(2020, 1, 1, 10)
        assert to_naive_utc(datetime(2020, 1, 1)) == datetime(2020, 1, 1)
