"""
Unit tests for the HH:mm:ss parser.
"""

import pytest

from berlin_clock.clock_time import ParsedTime, parse_hhmmss


class TestParseHhmmss:
    """Tests for parse_hhmmss."""

    def test_simple_time(self):
        """13:17:01 -> 13, 17, 1"""
        assert parse_hhmmss("13:17:01") == ParsedTime(13, 17, 1, True)

    def test_lower_bound(self):
        assert parse_hhmmss("00:00:00") == ParsedTime(0, 0, 0, True)

    def test_upper_bound(self):
        assert parse_hhmmss("23:59:59") == ParsedTime(23, 59, 59, True)

    @pytest.mark.parametrize("text", ["24:00:00", "24:00"])
    def test_midnight_literals(self, text):
        assert parse_hhmmss(text) == ParsedTime(24, 0, 0, True)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "24:01:00",
            "24:00:01",
            "25:00:00",
            "9:00:00",
            "09:0:00",
            "12:60:00",
            "12:00:60",
            "12:00",
            "12-00-00",
            "12:00:00:00",
            "ab:cd:ef",
            " 12:00:00",
            "12:00:00 ",
            "12:00:00\n",
            "x12:00:00",
            "-1:00:00",
            "24:00:00:00",
        ],
    )
    def test_rejected(self, text):
        assert parse_hhmmss(text).valid is False

    def test_none_is_rejected(self):
        assert parse_hhmmss(None).valid is False

    def test_rejected_fields_default_to_zero(self):
        parsed = parse_hhmmss("12:60:00")
        assert (parsed.hour, parsed.minute, parsed.second) == (0, 0, 0)

    def test_parsed_time_is_frozen(self):
        parsed = parse_hhmmss("01:02:03")
        with pytest.raises(AttributeError):
            parsed.hour = 5

    @pytest.mark.parametrize("value", [b"12:00:00", 120000, ["12", "00", "00"]])
    def test_non_str_is_rejected(self, value):
        """bytes/int/list -> invalid, no exception"""
        assert parse_hhmmss(value).valid is False
