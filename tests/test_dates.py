"""
Unit tests for 2D-DOC date decoding
"""

from datetime import date

import pytest

from twoddoc_sdk.parsing.dates import (
    decode_hex_date,
    hex_date_to_calendar,
    decode_ascii_date,
    decode_ascii_datetime,
)


class TestHexDates:
    """Test cases for header hex day-count dates"""

    def test_decode_hex_date_rendering(self):
        """Test the weekday/zero-based-month rendering of header dates"""
        # 2013-06-20 is a Thursday
        assert decode_hex_date("1337") == "4/5/2013"
        # 2021-04-29 is a Thursday
        assert decode_hex_date("1E6D") == "4/3/2021"

    def test_decode_hex_date_sunday_is_zero(self):
        """Test that Sunday renders as day 0 and January as month 0"""
        # 2000-01-02 is a Sunday
        assert decode_hex_date("0001") == "0/0/2000"

    def test_decode_hex_date_lowercase(self):
        """Test that lowercase hex is accepted"""
        assert decode_hex_date("1e6d") == "4/3/2021"

    @pytest.mark.parametrize("value", ["", "0000", "0"])
    def test_decode_hex_date_sentinel(self, value):
        """Test that empty and zero dates are returned unchanged"""
        assert decode_hex_date(value) == value

    @pytest.mark.parametrize("value", ["ZZZZ", "13G7"])
    def test_decode_hex_date_not_hexadecimal(self, value):
        """Test that non-hexadecimal dates are rejected rather than passed through"""
        with pytest.raises(ValueError):
            decode_hex_date(value)
        with pytest.raises(ValueError):
            hex_date_to_calendar(value)

    def test_calendar_date(self):
        """Test the calendar reading of header dates"""
        assert hex_date_to_calendar("1337") == date(2013, 6, 20)
        assert hex_date_to_calendar("1E6D") == date(2021, 4, 29)
        assert hex_date_to_calendar("0001") == date(2000, 1, 2)

    def test_calendar_date_sentinel(self):
        """Test that empty and zero dates have no calendar date"""
        assert hex_date_to_calendar("") is None
        assert hex_date_to_calendar("0000") is None

    def test_rendering_differs_from_calendar(self):
        """Test that the compatibility rendering is not the calendar date"""
        calendar = hex_date_to_calendar("1337")
        assert decode_hex_date("1337") != f"{calendar.day}/{calendar.month}/{calendar.year}"


class TestAsciiDates:
    """Test cases for DDMMYYYY and DDMMYYYYHHmm body dates"""

    def test_decode_ascii_date(self):
        """Test DDMMYYYY decoding"""
        assert decode_ascii_date("06121965") == "06/12/1965"

    def test_decode_ascii_date_no_calendar_validation(self):
        """Test that impossible dates are accepted as text"""
        assert decode_ascii_date("31022021") == "31/02/2021"

    @pytest.mark.parametrize("value", ["", "0612196", "061219651", "200620131200"])
    def test_decode_ascii_date_wrong_length(self, value):
        """Test that wrong length dates are returned unchanged"""
        assert decode_ascii_date(value) == value

    def test_decode_ascii_datetime(self):
        """Test DDMMYYYYHHmm decoding"""
        assert decode_ascii_datetime("200620131200") == "20/06/2013 12:00"

    @pytest.mark.parametrize("value", ["", "06121965", "2006201312001"])
    def test_decode_ascii_datetime_wrong_length(self, value):
        """Test that wrong length datetimes are returned unchanged"""
        assert decode_ascii_datetime(value) == value
